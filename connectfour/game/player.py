"""
player.py - Players taking part in a Connect Four game
"""

from dataclasses import dataclass

from connectfour.exceptions import InvalidDiscError
from connectfour.utils import describe_disc, is_valid_disc


@dataclass(frozen=True, eq=False)
class Player:
    """
    A named player and the disc marker they drop.

    Players compare by identity: two players with the same name and disc
    are still different participants.
    """
    name: str
    disc: str

    def __post_init__(self):
        if self.name is None:
            raise TypeError("Name must not be None.")
        if not is_valid_disc(self.disc):
            raise InvalidDiscError(
                f"Invalid disc color: '{describe_disc(self.disc)}'. "
                "Disc color must be a printable ASCII character")

    def __str__(self) -> str:
        return f"{self.name} ({self.disc})"
