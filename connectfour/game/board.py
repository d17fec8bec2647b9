"""
board.py - Board representation for Connect Four

This module implements the Board class: a fixed COLS x ROWS grid into which
discs are dropped from the top of a column and stack on previously inserted
discs. The board knows nothing about players or win detection beyond a flag
that the game sets once a winning move has been found.
"""

from typing import Optional

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import (AlreadyCompletedError, ColumnFullError,
                                    InvalidDiscError, InvalidLocationError)
from connectfour.utils import (COLS, ROWS, NO_DISC, describe_disc, is_valid_column,
                               is_valid_disc, is_valid_row, render_board_ascii)


class Board:
    """
    A Connect Four board.

    Columns and rows are 1-based, row 1 being the bottom of the board.
    A cell is written at most once between resets, always at the lowest
    empty row of its column.
    """

    cols = COLS
    rows = ROWS

    def __init__(self):
        debug.debug("Initializing new Board", "board")
        self.reset()

    def reset(self) -> None:
        """Remove every disc and clear the won flag."""
        debug.debug("Resetting board", "board")
        self._grid = np.full((ROWS, COLS), NO_DISC, dtype=np.uint8)
        self._discs_inserted = 0
        self._won = False

    def insert_disc(self, disc: str, col: int) -> int:
        """
        Drop a disc into a column.

        Args:
            disc: The disc marker, a printable ASCII character
            col: The column to drop into (1 to COLS)

        Returns:
            The row the disc landed on (1 is the bottom row)

        Raises:
            AlreadyCompletedError: The board is already won or full
            InvalidLocationError: The column does not exist
            InvalidDiscError: The disc is not a printable ASCII character
            ColumnFullError: The column has no free slot
        """
        if self.is_won() or self.is_full():
            debug.debug(f"Rejected {disc!r} in column {col}: board completed", "board")
            raise AlreadyCompletedError("The board has already been completed.")

        if not is_valid_column(col):
            debug.debug(f"Rejected {disc!r}: column {col!r} out of bounds", "board")
            raise InvalidLocationError(
                f"Invalid column: '{col}'. Column must be between 1 and {COLS}")

        if not is_valid_disc(disc):
            debug.debug(f"Rejected disc {describe_disc(disc)}", "board")
            raise InvalidDiscError(
                f"Invalid disc color: '{describe_disc(disc)}'. "
                "Disc color must be a printable ASCII character")

        column = self._grid[:, col - 1]
        free_rows = np.flatnonzero(column == NO_DISC)
        if free_rows.size == 0:
            debug.debug(f"Rejected {disc!r}: column {col} is full", "board")
            raise ColumnFullError(f"Column: '{col}' already full.")

        row_index = int(free_rows[0])
        column[row_index] = ord(disc)
        self._discs_inserted += 1

        debug.trace(f"Placed {disc!r} at column {col}, row {row_index + 1}", "board")
        return row_index + 1

    def _check_location(self, col: int, row: int) -> None:
        if not is_valid_column(col):
            raise InvalidLocationError(
                f"Invalid column: '{col}'. Column must be between 1 and {COLS}")
        if not is_valid_row(row):
            raise InvalidLocationError(
                f"Invalid row: '{row}'. Row must be between 1 and {ROWS}")

    def get_disc(self, col: int, row: int) -> Optional[str]:
        """
        Get the disc at a location.

        Returns:
            The disc marker, or None for an empty cell

        Raises:
            InvalidLocationError: The location is outside the board
        """
        self._check_location(col, row)
        code = self._grid[row - 1, col - 1]
        return None if code == NO_DISC else chr(int(code))

    def is_populated(self, col: int, row: int) -> bool:
        """Check if a cell holds a disc. Raises InvalidLocationError off the board."""
        self._check_location(col, row)
        return bool(self._grid[row - 1, col - 1] != NO_DISC)

    def get_number_of_discs(self) -> int:
        return self._discs_inserted

    def is_full(self) -> bool:
        return self._discs_inserted == COLS * ROWS

    def is_won(self) -> bool:
        return self._won

    def mark_won(self) -> None:
        """Flag the board as won. Calling it again has no effect."""
        if not self._won:
            debug.debug("Board marked as won", "board")
        self._won = True

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the raw grid.

        Returns:
            (ROWS, COLS) uint8 array of disc code points, row 0 at the bottom
        """
        return self._grid.copy()

    def render(self) -> str:
        return render_board_ascii(self._grid)

    def __str__(self) -> str:
        return self.render()
