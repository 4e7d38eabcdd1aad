# Area: Engine
"""
Game engine for Treasure Hunt.

This package contains:
- The round state machine and its enums
- Pure grid rules (movement, relocation triggers)
- Game state, events and snapshots
- Randomness sources
- TreasureHuntEngine, the single owner of all game state
"""

from .engine import TreasureHuntEngine
from .enums import Direction, RelocationRule, RoundEvent, RoundState
from .events import (
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
from .randomness import (
    ChainStateRandomness,
    FixedSequenceRandomness,
    RandomnessSource,
)
from .state_machine import RoundStateMachine

__all__ = [
    "TreasureHuntEngine",
    "Direction",
    "RelocationRule",
    "RoundEvent",
    "RoundState",
    "RoundStateMachine",
    "GameEvent",
    "PlayerJoined",
    "NextTurn",
    "PlayerMoved",
    "InvalidMove",
    "TreasureMoved",
    "GameWon",
    "GameStarted",
    "FeesWithdrawn",
    "RandomnessSource",
    "ChainStateRandomness",
    "FixedSequenceRandomness",
]
