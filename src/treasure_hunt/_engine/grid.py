# Area: Engine
"""
treasure_hunt._engine.grid — Grid rules
=======================================

Pure rules for the 10x10 board: coordinates, move validation and
the landing rules that relocate the treasure. Nothing here touches
game state, randomness or the host.

Positions are row-major: row = pos // 10, col = pos % 10.
"""

from typing import Any, Optional

from .enums import Direction, RelocationRule

GRID_WIDTH = 10
GRID_CELLS = GRID_WIDTH * GRID_WIDTH
MAX_POSITION = GRID_CELLS - 1

DIRECTION_DELTAS = {
    Direction.UP: -GRID_WIDTH,
    Direction.DOWN: GRID_WIDTH,
    Direction.LEFT: -1,
    Direction.RIGHT: 1,
}


def row_of(position: int) -> int:
    """Return the grid row (0-9) of a position."""
    return position // GRID_WIDTH


def col_of(position: int) -> int:
    """Return the grid column (0-9) of a position."""
    return position % GRID_WIDTH


def is_valid_position(position: Any) -> bool:
    """Check that a value is an integer cell index in [0, 99]."""
    if isinstance(position, bool) or not isinstance(position, int):
        return False
    return 0 <= position <= MAX_POSITION


def apply_move(position: int, direction: Direction) -> Optional[int]:
    """
    Return the position after moving one cell, or None if the move
    would leave the grid or wrap across a row boundary.

    Args:
        position: Current cell index
        direction: Direction to move

    Returns:
        New cell index, or None for an invalid move
    """
    row, col = row_of(position), col_of(position)
    if direction == Direction.UP and row == 0:
        return None
    if direction == Direction.DOWN and row == GRID_WIDTH - 1:
        return None
    if direction == Direction.LEFT and col == 0:
        return None
    if direction == Direction.RIGHT and col == GRID_WIDTH - 1:
        return None
    return position + DIRECTION_DELTAS[direction]


def is_prime(number: int) -> bool:
    """Trial-division primality check; 0 and 1 are not prime."""
    if number < 2:
        return False
    if number < 4:
        return True
    if number % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 2
    return True


def relocation_rule(position: int) -> RelocationRule:
    """
    Decide how the treasure reacts to a (non-winning) landing.

    Divisible-by-5 is checked first, so 5 uses that rule rather than
    the prime rule. Position 0 counts as divisible by 5.
    """
    if position % 5 == 0:
        return RelocationRule.DIVISIBLE_BY_FIVE
    if is_prime(position):
        return RelocationRule.PRIME
    return RelocationRule.NONE
