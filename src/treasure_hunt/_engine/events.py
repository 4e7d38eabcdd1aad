# Area: Engine
"""
treasure_hunt._engine.events — Engine Event Dataclasses
=======================================================

Structured records of every observable outcome. The engine returns
the events each operation emitted and appends them to its log only
once the operation has committed.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict

from .enums import Direction


@dataclass(frozen=True)
class GameEvent:
    """
    Base class for engine events.

    Attributes:
        round_number: Round in which the event was emitted
    """

    round_number: int

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready mapping including the event name."""
        data: Dict[str, Any] = {"event": self.name}
        for key, value in asdict(self).items():
            if isinstance(value, Direction):
                value = int(value)
            elif isinstance(value, Enum):
                value = value.value
            data[key] = value
        return data


@dataclass(frozen=True)
class PlayerJoined(GameEvent):
    """A player paid their bet and was placed on the grid."""

    player: str
    position: int
    bet: int


@dataclass(frozen=True)
class NextTurn(GameEvent):
    """The named player now holds the turn."""

    player: str


@dataclass(frozen=True)
class PlayerMoved(GameEvent):
    """A valid move changed a player's position."""

    player: str
    from_position: int
    to_position: int
    direction: Direction


@dataclass(frozen=True)
class InvalidMove(GameEvent):
    """A move would have left the grid; the same player moves again."""

    player: str
    direction: Direction


@dataclass(frozen=True)
class TreasureMoved(GameEvent):
    """
    The treasure was relocated after a landing.

    Attributes:
        old_position: Treasure cell before relocation
        new_position: Treasure cell after relocation
        rule: 'divisible_by_five' or 'prime'
    """

    old_position: int
    new_position: int
    rule: str


@dataclass(frozen=True)
class GameWon(GameEvent):
    """A player landed on the treasure and was paid."""

    winner: str
    reward: int


@dataclass(frozen=True)
class GameStarted(GameEvent):
    """The owner opened a new round."""


@dataclass(frozen=True)
class FeesWithdrawn(GameEvent):
    """The owner collected the accrued fee balance."""

    owner: str
    amount: int
