"""
utils.py - Constants, enumerations and helpers shared by the rules engine

Board coordinates are 1-based everywhere in the public API: column 1 is the
leftmost column and row 1 the bottom row. The grid itself is a numpy array
of disc code points indexed as ``grid[row - 1, col - 1]``.
"""

from enum import Enum, auto
from typing import Tuple

import numpy as np

# Game constants
COLS = 7
ROWS = 6
DISCS_TO_WIN = 4

# Code point stored in an empty cell. Not a printable character, so it can
# never collide with a disc.
NO_DISC = 0
EMPTY_GLYPH = " "

# Printable ASCII range accepted for discs (space included)
MIN_DISC_CODE = 32
MAX_DISC_CODE = 126

# (column step, row step) pairs walked from a freshly inserted disc.
# Nothing can sit above the newest disc of a column, so the upward
# directions are left out.
SEARCH_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 1),    # up-left
    (-1, 0),    # left
    (-1, -1),   # down-left
    (0, -1),    # down
    (1, -1),    # down-right
    (1, 0),     # right
    (1, 1),     # up-right
)


class GameState(Enum):
    """Lifecycle of a single game."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()


def _is_int(value) -> bool:
    # bool is an int subclass but True is not a column
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def is_valid_column(col) -> bool:
    """Check that col is an integer within [1, COLS]."""
    return _is_int(col) and 1 <= col <= COLS


def is_valid_row(row) -> bool:
    """Check that row is an integer within [1, ROWS]."""
    return _is_int(row) and 1 <= row <= ROWS


def is_valid_disc(disc) -> bool:
    """
    Check if a disc marker can be placed on the board.

    Args:
        disc: Candidate marker, a single character string

    Returns:
        True for printable ASCII characters (code points 32-126)
    """
    return (isinstance(disc, str) and len(disc) == 1
            and MIN_DISC_CODE <= ord(disc) <= MAX_DISC_CODE)


def describe_disc(disc) -> str:
    """Format a disc for error messages, e.g. '\\u0007'."""
    if isinstance(disc, str) and len(disc) == 1:
        return "\\u%04x" % ord(disc)
    return repr(disc)


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as text, top row first.

    Every cell is wrapped in '|', empty cells show as a space and each
    row ends with a newline, for example ``|R| | | | | | |``.

    Args:
        grid: (ROWS, COLS) array of disc code points, row 0 at the bottom

    Returns:
        The rendered board
    """
    lines = []
    for row in range(grid.shape[0] - 1, -1, -1):
        cells = [EMPTY_GLYPH if code == NO_DISC else chr(int(code)) for code in grid[row]]
        lines.append("|" + "|".join(cells) + "|\n")
    return "".join(lines)
