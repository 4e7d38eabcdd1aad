# Area: Engine
"""
treasure_hunt._engine.snapshot — Game state snapshot builder
============================================================

Builds the serializable read-only view of the game used by the
runner, the demo players and anything polling the engine.
"""

from .grid import col_of, row_of
from .state import GameState, PlayerState
from ..types import GameSnapshot, PlayerView


def build_state_snapshot(state: GameState) -> GameSnapshot:
    """Build a serializable snapshot of the current round."""
    return {
        "round_number": state.round_number,
        "active": state.active,
        "treasure_position": state.treasure_position,
        "pot": state.pot,
        "accrued_fees": state.accrued_fees,
        "total_players": state.total_players,
        "current_player": state.current_player(),
        "players": [
            _player_view(state.players[address]) for address in state.turn_order
        ],
    }


def _player_view(player: PlayerState) -> PlayerView:
    return {
        "address": player.address,
        "position": player.position,
        "row": row_of(player.position),
        "col": col_of(player.position),
        "is_active": player.is_active,
    }
