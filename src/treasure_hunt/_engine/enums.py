# Area: Engine
"""
treasure_hunt._engine.enums — Engine Enums
==========================================

Defines the move directions, the round states, and the events
that drive the round state machine.
"""

from enum import Enum, IntEnum


class Direction(IntEnum):
    """
    Move directions on the grid.

    The integer values are the wire values accepted by move():
    0 = Up, 1 = Down, 2 = Left, 3 = Right.
    """
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class RoundState(Enum):
    """
    States of the round state machine.

    State transitions:
    ROUND_INACTIVE -> ROUND_ACTIVE (on START_NEW_GAME)
    ROUND_ACTIVE -> ROUND_INACTIVE (on TREASURE_FOUND)

    Joins, moves and invalid moves keep the round in ROUND_ACTIVE.
    """
    ROUND_INACTIVE = "ROUND_INACTIVE"
    ROUND_ACTIVE = "ROUND_ACTIVE"


class RoundEvent(Enum):
    """
    Events that trigger state transitions.

    - START_NEW_GAME: owner called start_new_game()
    - TREASURE_FOUND: a valid move landed on the treasure
    """
    START_NEW_GAME = "START_NEW_GAME"
    TREASURE_FOUND = "TREASURE_FOUND"


class RelocationRule(Enum):
    """Which rule, if any, relocates the treasure after a landing."""
    NONE = "none"
    DIVISIBLE_BY_FIVE = "divisible_by_five"
    PRIME = "prime"
