"""
treasure_hunt.demo_player — Demo player strategy
================================================

A ready-to-use bot that plays Treasure Hunt from the public game
snapshot. It walks greedily toward the treasure, and with probability
`wander` picks a random direction instead, which keeps rounds from
always going to the first player to join.

Usage:
    player = DemoPlayer("0xAlice", random.Random(7))
    direction = player.choose_direction(engine.snapshot())
"""

import random
from typing import List, Optional

from ._engine.enums import Direction
from ._engine.grid import col_of, row_of
from .types import GameSnapshot, PlayerView


class DemoPlayer:
    """
    Snapshot-driven player strategy.

    Attributes:
        address: The player's address on the chain
        wander: Probability of ignoring the treasure for one move
    """

    def __init__(self, address: str, rng: random.Random, wander: float = 0.2):
        self.address = address
        self.wander = wander
        self._rng = rng

    def choose_direction(self, snapshot: GameSnapshot) -> Direction:
        """Pick the next move for this player."""
        me = self._find_self(snapshot)
        if me is None:
            raise ValueError(f"{self.address} is not seated in round {snapshot['round_number']}")

        toward = self._directions_toward(me["position"], snapshot["treasure_position"])
        if not toward or self._rng.random() < self.wander:
            return self._rng.choice(list(Direction))
        return self._rng.choice(toward)

    def _find_self(self, snapshot: GameSnapshot) -> Optional[PlayerView]:
        for player in snapshot["players"]:
            if player["address"] == self.address:
                return player
        return None

    @staticmethod
    def _directions_toward(position: int, target: int) -> List[Direction]:
        """Directions that shorten the Manhattan distance to target."""
        directions: List[Direction] = []
        if row_of(target) < row_of(position):
            directions.append(Direction.UP)
        elif row_of(target) > row_of(position):
            directions.append(Direction.DOWN)
        if col_of(target) < col_of(position):
            directions.append(Direction.LEFT)
        elif col_of(target) > col_of(position):
            directions.append(Direction.RIGHT)
        return directions
