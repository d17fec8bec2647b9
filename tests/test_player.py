import dataclasses
import unittest

from connectfour.exceptions import InvalidDiscError
from connectfour.game.player import Player


class TestPlayer(unittest.TestCase):
    def test_name_and_disc(self):
        player = Player("RED", "R")
        self.assertEqual(player.name, "RED")
        self.assertEqual(player.disc, "R")
        self.assertEqual(str(player), "RED (R)")

    def test_player_is_immutable(self):
        player = Player("RED", "R")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            player.disc = "G"

    def test_players_compare_by_identity(self):
        first = Player("RED", "R")
        second = Player("RED", "R")
        self.assertNotEqual(first, second)
        self.assertEqual(first, first)
        self.assertEqual(len({first, second}), 2)

    def test_name_is_required(self):
        with self.assertRaises(TypeError):
            Player(None, "R")

    def test_disc_must_be_printable(self):
        for disc in ("\x1f", "\x7f", "RR", ""):
            with self.subTest(disc=disc):
                with self.assertRaises(InvalidDiscError):
                    Player("RED", disc)


if __name__ == "__main__":
    unittest.main()
