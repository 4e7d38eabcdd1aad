"""
treasure_hunt.errors — Custom exception classes
===============================================

Defines the exception hierarchy for rejected engine operations.
Each exception stores its full context for structured logging.

A rejected operation never leaves a partial state change behind:
the engine restores its checkpoint before the exception reaches
the caller.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import json


class TreasureHuntError(Exception):
    """Base exception for all Treasure Hunt errors."""

    error_type = "ENGINE_ERROR"

    def context(self) -> Dict[str, Any]:
        """Return the attributes that describe this failure."""
        return {}

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            message=str(self),
            context=self.context(),
        )


class InsufficientBet(TreasureHuntError):
    """Raised when the attached value is below the minimum bet."""

    error_type = "INSUFFICIENT_BET"

    def __init__(self, value: int, minimum_bet: int):
        self.value = value
        self.minimum_bet = minimum_bet
        super().__init__(
            f"Insufficient bet amount: {value} wei (minimum {minimum_bet} wei)"
        )

    def context(self) -> Dict[str, Any]:
        return {"value": self.value, "minimum_bet": self.minimum_bet}


class AlreadyJoined(TreasureHuntError):
    """Raised when a player joins a round they are already in."""

    error_type = "ALREADY_JOINED"

    def __init__(self, player: str):
        self.player = player
        super().__init__(f"Already joined: {player}")

    def context(self) -> Dict[str, Any]:
        return {"player": self.player}


class RoundNotActive(TreasureHuntError):
    """Raised when a round-only operation runs between rounds."""

    error_type = "ROUND_NOT_ACTIVE"

    def __init__(self, operation: str, round_number: int):
        self.operation = operation
        self.round_number = round_number
        super().__init__(
            f"Round {round_number} is not active, cannot {operation}"
        )

    def context(self) -> Dict[str, Any]:
        return {"operation": self.operation, "round_number": self.round_number}


class RoundStillActive(TreasureHuntError):
    """Raised when a new round is requested while one is in progress."""

    error_type = "ROUND_STILL_ACTIVE"

    def __init__(self, round_number: int):
        self.round_number = round_number
        super().__init__(f"Round {round_number} is still active")

    def context(self) -> Dict[str, Any]:
        return {"round_number": self.round_number}


class NotYourTurn(TreasureHuntError):
    """Raised when a player moves out of turn."""

    error_type = "NOT_YOUR_TURN"

    def __init__(self, player: str, current_player: Optional[str]):
        self.player = player
        self.current_player = current_player
        super().__init__(
            f"Not your turn: {player} (current turn: {current_player})"
        )

    def context(self) -> Dict[str, Any]:
        return {"player": self.player, "current_player": self.current_player}


class PlayerNotActive(TreasureHuntError):
    """Raised when the player has not joined the current round."""

    error_type = "PLAYER_NOT_ACTIVE"

    def __init__(self, player: str):
        self.player = player
        super().__init__(f"Player not active: {player}")

    def context(self) -> Dict[str, Any]:
        return {"player": self.player}


class Unauthorized(TreasureHuntError):
    """Raised when a non-owner calls an owner-only operation."""

    error_type = "UNAUTHORIZED"

    def __init__(self, operation: str, caller: str):
        self.operation = operation
        self.caller = caller
        super().__init__(f"Only owner can {operation} (caller: {caller})")

    def context(self) -> Dict[str, Any]:
        return {"operation": self.operation, "caller": self.caller}


class InvalidDirection(TreasureHuntError):
    """Raised when a move carries a direction outside 0..3."""

    error_type = "INVALID_DIRECTION"

    def __init__(self, direction: Any):
        self.direction = direction
        super().__init__(f"Invalid direction: {direction!r}")

    def context(self) -> Dict[str, Any]:
        return {"direction": repr(self.direction)}


class InvalidPosition(TreasureHuntError):
    """Raised when a position falls outside the 10x10 grid."""

    error_type = "INVALID_POSITION"

    def __init__(self, position: Any):
        self.position = position
        super().__init__(f"Invalid position: {position!r} (expected 0-99)")

    def context(self) -> Dict[str, Any]:
        return {"position": repr(self.position)}


class TransferFailed(TreasureHuntError):
    """Raised when the host refuses a value transfer."""

    error_type = "TRANSFER_FAILED"

    def __init__(self, recipient: str, amount: int, reason: str):
        self.recipient = recipient
        self.amount = amount
        self.reason = reason
        super().__init__(
            f"Transfer of {amount} wei to {recipient} failed: {reason}"
        )

    def context(self) -> Dict[str, Any]:
        return {
            "recipient": self.recipient,
            "amount": self.amount,
            "reason": self.reason,
        }


class NotPayable(TreasureHuntError):
    """Raised when value is attached to an operation that takes none."""

    error_type = "NOT_PAYABLE"

    def __init__(self, operation: str, value: int):
        self.operation = operation
        self.value = value
        super().__init__(f"{operation} does not accept value (sent {value} wei)")

    def context(self) -> Dict[str, Any]:
        return {"operation": self.operation, "value": self.value}


class InsufficientFunds(TreasureHuntError):
    """Raised when a caller cannot cover the value attached to a call."""

    error_type = "INSUFFICIENT_FUNDS"

    def __init__(self, address: str, balance: int, required: int):
        self.address = address
        self.balance = balance
        self.required = required
        super().__init__(
            f"{address} has {balance} wei, call requires {required} wei"
        )

    def context(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "balance": self.balance,
            "required": self.required,
        }


def _format_error_block(
    error_type: str,
    message: str,
    context: Dict[str, Any],
) -> str:
    """Format a structured error block for terminal output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " TREASURE HUNT ERROR — OPERATION REJECTED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Message:      {message}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(_indent_json(context))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
