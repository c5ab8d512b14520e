"""
utils.py - Constants and helper functions for the Connect Four engine

This module provides the board defaults, the scan directions used for
four-in-a-row detection and the plain-text board renderer.
"""

from enum import Enum, auto
from typing import Dict, List, Tuple

import numpy as np

# Board defaults
DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 7
CONNECT_N = 4  # Number of pieces in a row to win

DEFAULT_P1_COLOR = "red"
DEFAULT_P2_COLOR = "blue"

# Cell value for an unoccupied cell; player marks start at 1
EMPTY = 0


class Direction(Enum):
    """Directions a winning run can take, read from its starting cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col); row grows toward the bottom of the board
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        height: Number of rows on the board
        width: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < height and 0 <= col < width


def run_cells(row: int, col: int, direction: Direction,
              length: int = CONNECT_N) -> List[Tuple[int, int]]:
    """Cells of a run of the given length starting at (row, col)."""
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + k * dr, col + k * dc) for k in range(length)]


def render_board_ascii(grid: np.ndarray, symbols: Dict[int, str]) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of cell marks, row 0 at the top
        symbols: Mapping from player mark to a single display character

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    height, width = grid.shape
    inner = width * 2 - 1
    border = "|" + "-" * inner + "|"

    lines = [border]
    for row in range(height):
        cells = [symbols.get(int(cell), "?") if cell != EMPTY else " "
                 for cell in grid[row]]
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)

    # Column numbers past 9 only show their last digit
    lines.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(lines)
