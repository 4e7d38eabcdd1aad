"""
treasure_hunt.types — TypedDict schemas for read-only views
===========================================================

Documents the structure returned by TreasureHuntEngine.snapshot()
and consumed by DemoPlayer strategies.

    >>> GameSnapshot.__annotations__["treasure_position"]
    <class 'int'>
"""

from typing import List, Optional, TypedDict


class PlayerView(TypedDict):
    """One seated player as seen from outside the engine."""
    address: str            # e.g., "0xAlice"
    position: int           # 0-99, row-major
    row: int                # position // 10
    col: int                # position % 10
    is_active: bool


class GameSnapshot(TypedDict):
    """Read-only view of the whole game.

    Fields
    ------
    round_number : int
        Current round, starting at 1.
    active : bool
        True while a round is in progress.
    treasure_position : int
        Current treasure cell (public, as on the chain).
    pot : int
        Bets collected this round, in wei.
    accrued_fees : int
        Owner fees not yet withdrawn, in wei.
    total_players : int
        Number of players seated this round.
    current_player : Optional[str]
        Address holding the turn, or None with no players.
    players : List[PlayerView]
        Seated players in turn order.
    """
    round_number: int
    active: bool
    treasure_position: int
    pot: int
    accrued_fees: int
    total_players: int
    current_player: Optional[str]
    players: List[PlayerView]
