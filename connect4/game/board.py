"""
board.py - Grid storage and four-in-a-row detection for Connect Four

This module implements the Board class, which stores cell occupancy for a
board of any size, finds where a dropped piece lands and scans the grid for
a winning run. It knows nothing about turns; the engine in rules.py owns
those.
"""

from typing import Dict, List, Optional, Tuple

import numpy as np

from connect4.debug import debug
from connect4.utils import (CONNECT_N, DIRECTION_VECTORS, EMPTY,
                            is_valid_position, render_board_ascii, run_cells)


class Board:
    """
    A height x width grid of cells, row 0 at the top.

    Each cell holds EMPTY or a positive player mark. Pieces settle at the
    lowest empty row of their column.
    """

    def __init__(self, height: int, width: int):
        """
        Create an empty board.

        Args:
            height: Number of rows
            width: Number of columns
        """
        debug.trace(f"Initializing {height}x{width} board", "board")
        self.height = height
        self.width = width
        self.grid = np.full((height, width), EMPTY, dtype=np.int8)

    def in_bounds(self, row: int, col: int) -> bool:
        return is_valid_position(row, col, self.height, self.width)

    def cell(self, row: int, col: int) -> int:
        """Mark stored at (row, col)."""
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a "
                             f"{self.height}x{self.width} board")
        return int(self.grid[row, col])

    def find_spot_for_col(self, col: int) -> Optional[int]:
        """
        Find the landing row for a piece dropped in a column.

        Args:
            col: Column index, assumed in range

        Returns:
            The lowest empty row, or None if the column is full
        """
        for row in range(self.height - 1, -1, -1):
            if self.grid[row, col] == EMPTY:
                return row
        return None

    def place(self, row: int, col: int, mark: int):
        """Occupy an empty cell with a player mark."""
        debug.trace(f"Placing mark {mark} at ({row}, {col})", "board")
        self.grid[row, col] = mark

    def pieces(self) -> int:
        """Number of occupied cells."""
        return int(np.count_nonzero(self.grid != EMPTY))

    def is_empty(self) -> bool:
        return not np.any(self.grid != EMPTY)

    def is_full(self) -> bool:
        return bool(np.all(self.grid != EMPTY))

    def _is_run(self, cells: List[Tuple[int, int]], mark: int) -> bool:
        return all(self.in_bounds(r, c) and self.grid[r, c] == mark
                   for r, c in cells)

    def find_run(self, mark: int) -> Optional[List[Tuple[int, int]]]:
        """
        Scan the whole grid for a four-in-a-row owned by a mark.

        Every cell is tried as the start of a run in each of the four
        directions; a run counts only when all of its cells are on the
        board and hold the mark.

        Args:
            mark: Player mark to look for

        Returns:
            The cells of the first winning run found, or None
        """
        if self.is_empty():
            return None

        for row in range(self.height):
            for col in range(self.width):
                if self.grid[row, col] != mark:
                    continue
                for direction in DIRECTION_VECTORS:
                    cells = run_cells(row, col, direction, CONNECT_N)
                    if self._is_run(cells, mark):
                        debug.trace(f"{direction.name} run for mark {mark} at {cells}", "board")
                        return cells

        return None

    def get_state(self) -> np.ndarray:
        """Copy of the underlying grid."""
        return self.grid.copy()

    def render(self, symbols: Dict[int, str]) -> str:
        """
        Render the board as a string.

        Args:
            symbols: Mapping from player mark to display character
        """
        return render_board_ascii(self.grid, symbols)
