"""
exceptions.py - Errors raised by the Connect Four rules engine

The engine never prints or retries; every rejected operation surfaces as one
of these exceptions and the caller decides what to tell the user.
"""


class ConnectFourError(Exception):
    """Base class for every rule violation."""


class InvalidInsertError(ConnectFourError):
    """A disc cannot be inserted into the board."""


class AlreadyCompletedError(InvalidInsertError):
    """The board is already won or full."""


class ColumnFullError(InvalidInsertError):
    """The target column has no free slot left."""


class InvalidDiscError(InvalidInsertError, ValueError):
    """The disc marker is not a printable ASCII character."""


class InvalidLocationError(ConnectFourError, ValueError):
    """A column or row lies outside the board."""


class InvalidPlayerError(ConnectFourError, ValueError):
    """The player does not take part in the game."""
