# Area: Engine
"""
treasure_hunt._engine.state — Game state tracker
================================================

Holds everything the engine owns: the round counters, the treasure,
the pot and fee ledger, the player table and the turn order. The
engine mutates one GameState instance and checkpoints it around
every entry operation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging

from .state_machine import RoundStateMachine

logger = logging.getLogger("treasure_hunt.state")


@dataclass
class PlayerState:
    """Tracks one player's seat in a round."""
    address: str
    position: int
    bet: int = 0
    joined_round: int = 1
    is_active: bool = True


@dataclass
class GameState:
    """
    Full state of the deployed game instance.

    Player entries survive the end of a round with is_active cleared,
    so the last known position of a past player stays observable.
    """
    owner: str
    round_number: int = 1
    treasure_position: int = 0
    pot: int = 0
    accrued_fees: int = 0
    players: Dict[str, PlayerState] = field(default_factory=dict)
    turn_order: List[str] = field(default_factory=list)
    current_turn_index: int = 0
    machine: RoundStateMachine = field(default_factory=RoundStateMachine)

    # ── Queries ─────────────────────────────────────────────

    @property
    def active(self) -> bool:
        return self.machine.is_active

    @property
    def total_players(self) -> int:
        return sum(1 for player in self.players.values() if player.is_active)

    def get_player(self, address: str) -> Optional[PlayerState]:
        return self.players.get(address)

    def is_player_active(self, address: str) -> bool:
        player = self.players.get(address)
        return player is not None and player.is_active

    def current_player(self) -> Optional[str]:
        if not self.turn_order:
            return None
        return self.turn_order[self.current_turn_index]

    # ── Mutations ───────────────────────────────────────────

    def add_player(self, address: str, position: int, bet: int) -> PlayerState:
        """Seat a player at the end of the turn order and take their bet."""
        player = PlayerState(
            address=address,
            position=position,
            bet=bet,
            joined_round=self.round_number,
        )
        self.players[address] = player
        self.turn_order.append(address)
        self.pot += bet
        if len(self.turn_order) == 1:
            self.current_turn_index = 0
        return player

    def advance_turn(self) -> Optional[str]:
        """
        Move the turn pointer to the next active player, wrapping to
        the start of the turn order.

        Returns:
            The address now holding the turn, or None if nobody is seated
        """
        count = len(self.turn_order)
        if count == 0:
            return None
        for step in range(1, count + 1):
            index = (self.current_turn_index + step) % count
            if self.is_player_active(self.turn_order[index]):
                self.current_turn_index = index
                return self.turn_order[index]
        return None

    def clear_players(self) -> None:
        """Unseat every player and drop the turn order."""
        for player in self.players.values():
            player.is_active = False
        self.turn_order.clear()
        self.current_turn_index = 0

    def reset_for_new_round(self, treasure_position: int) -> None:
        """Open the next round with an empty table and a fresh treasure."""
        logger.info(f"Resetting state for round {self.round_number}")
        self.clear_players()
        self.pot = 0
        self.treasure_position = treasure_position
