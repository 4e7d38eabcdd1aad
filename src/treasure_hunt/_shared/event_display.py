# Area: Shared
"""
treasure_hunt._shared.event_display — Colored event feed
========================================================

Prints one line per committed engine event, with the round, the
actor and the outcome. Subscribe it to an engine:

    engine.subscribe(get_event_display().show)
"""

from __future__ import annotations
import sys
from datetime import datetime
from typing import Optional, TextIO

from .._engine.events import (
    FeesWithdrawn,
    GameEvent,
    GameStarted,
    GameWon,
    InvalidMove,
    NextTurn,
    PlayerJoined,
    PlayerMoved,
    TreasureMoved,
)
from ..units import format_ether

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Player actions
ORANGE = "\033[38;5;208m"  # Treasure and payouts
RED = "\033[31m"           # Invalid moves
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# EVENT CLASS → DISPLAY NAME
# ══════════════════════════════════════════════════════════════

DISPLAY_NAMES = {
    "PlayerJoined": "JOINED",
    "NextTurn": "NEXT-TURN",
    "PlayerMoved": "MOVED",
    "InvalidMove": "INVALID-MOVE",
    "TreasureMoved": "TREASURE-MOVED",
    "GameWon": "TREASURE-FOUND",
    "GameStarted": "ROUND-STARTED",
    "FeesWithdrawn": "FEES-WITHDRAWN",
}


class EventDisplay:
    """Formats and prints engine events."""

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True):
        self._stream = stream
        self.color = color

    def _now(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def format(self, event: GameEvent) -> str:
        """Return the display line for an event, without color codes."""
        display = DISPLAY_NAMES.get(event.name, event.name)
        return (
            f"{self._now()} | ROUND: {event.round_number:03d} | "
            f"{display:15} | {self._describe(event)}"
        )

    def show(self, event: GameEvent) -> None:
        """Print an event line to the stream (stdout by default)."""
        line = self.format(event)
        if self.color:
            line = f"{self._color_for(event)}{line}{RESET}"
        print(line, file=self._stream or sys.stdout)

    def _color_for(self, event: GameEvent) -> str:
        if isinstance(event, InvalidMove):
            return RED
        if isinstance(event, (TreasureMoved, GameWon, FeesWithdrawn)):
            return ORANGE
        return GREEN

    def _describe(self, event: GameEvent) -> str:
        if isinstance(event, PlayerJoined):
            return f"{event.player} at {event.position}, bet {format_ether(event.bet)} ETH"
        if isinstance(event, NextTurn):
            return f"{event.player} to move"
        if isinstance(event, PlayerMoved):
            return (
                f"{event.player} {event.direction.name} "
                f"{event.from_position} → {event.to_position}"
            )
        if isinstance(event, InvalidMove):
            return f"{event.player} {event.direction.name} blocked by the edge"
        if isinstance(event, TreasureMoved):
            return f"{event.old_position} → {event.new_position} ({event.rule})"
        if isinstance(event, GameWon):
            return f"{event.winner} wins {format_ether(event.reward)} ETH"
        if isinstance(event, GameStarted):
            return "new round open for players"
        if isinstance(event, FeesWithdrawn):
            return f"{event.owner} collected {format_ether(event.amount)} ETH"
        return str(event.to_dict())


# Global singleton instance
_event_display: Optional[EventDisplay] = None


def get_event_display() -> EventDisplay:
    """Get or create the global event display instance."""
    global _event_display
    if _event_display is None:
        _event_display = EventDisplay()
    return _event_display
