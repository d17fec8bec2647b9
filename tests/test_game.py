import unittest

from connectfour.exceptions import (AlreadyCompletedError, ColumnFullError,
                                    InvalidDiscError, InvalidLocationError,
                                    InvalidPlayerError)
from connectfour.game.player import Player
from connectfour.game.rules import ConnectFourGame
from connectfour.utils import COLS, ROWS, GameState
from tests.helpers import make_game, tie_moves


def play(game, moves):
    """Play (player, column) pairs and return the result of the last move."""
    result = None
    for player, col in moves:
        result = game.insert_disc(player, col)
    return result


class TestWinDetection(unittest.TestCase):
    def setUp(self):
        self.game, self.red, self.green = make_game()

    def test_horizontal_win_on_bottom_row(self):
        for col in (1, 2, 3):
            self.assertFalse(self.game.insert_disc(self.red, col))
        self.assertFalse(self.game.is_won())

        self.assertTrue(self.game.insert_disc(self.red, 4))
        self.assertTrue(self.game.is_won())
        self.assertTrue(self.game.is_finished())
        self.assertEqual(self.game.state, GameState.WON)

        with self.assertRaises(AlreadyCompletedError):
            self.game.insert_disc(self.green, 5)
        with self.assertRaises(AlreadyCompletedError):
            self.game.insert_disc(self.red, 1)

    def test_horizontal_win_connecting_to_the_left(self):
        r, g = self.red, self.green
        self.assertTrue(play(self.game, [(r, 7), (g, 1), (r, 6), (g, 1), (r, 5), (r, 4)]))

    def test_vertical_win(self):
        r, g = self.red, self.green
        moves = [(r, 3), (g, 4), (r, 3), (g, 4), (r, 3), (g, 4), (r, 3)]
        self.assertTrue(play(self.game, moves))
        self.assertTrue(self.game.get_board().is_won())

    def test_vertical_win_on_top_of_other_discs(self):
        r, g = self.red, self.green
        moves = [(g, 6), (g, 6), (r, 6), (r, 6), (r, 6), (r, 6)]
        self.assertTrue(play(self.game, moves))

    def test_diagonal_up_right_win(self):
        r, g = self.red, self.green
        moves = [
            (r, 1),
            (g, 2), (r, 2),
            (g, 3), (g, 3), (r, 3),
            (g, 4), (g, 4), (g, 4),
        ]
        self.assertFalse(play(self.game, moves))
        self.assertTrue(self.game.insert_disc(r, 4))

    def test_diagonal_down_right_win(self):
        r, g = self.red, self.green
        moves = [
            (r, 4),
            (g, 3), (r, 3),
            (g, 2), (g, 2), (r, 2),
            (g, 1), (g, 1), (g, 1),
        ]
        self.assertFalse(play(self.game, moves))
        self.assertTrue(self.game.insert_disc(r, 1))

    def test_diagonal_win_from_the_low_left_end(self):
        r, g = self.red, self.green
        moves = [
            (g, 2), (r, 2),
            (g, 3), (g, 3), (r, 3),
            (g, 4), (g, 4), (g, 4), (r, 4),
        ]
        self.assertFalse(play(self.game, moves))
        self.assertTrue(self.game.insert_disc(r, 1))
        self.assertTrue(self.game.is_won())

    def test_diagonal_win_from_the_low_right_end(self):
        r, g = self.red, self.green
        moves = [
            (g, 6), (r, 6),
            (g, 5), (g, 5), (r, 5),
            (g, 4), (g, 4), (g, 4), (r, 4),
        ]
        self.assertFalse(play(self.game, moves))
        self.assertTrue(self.game.insert_disc(r, 7))
        self.assertTrue(self.game.is_won())

    def test_filling_a_gap_does_not_win(self):
        r = self.red
        self.assertFalse(play(self.game, [(r, 1), (r, 2), (r, 4), (r, 3)]))
        self.assertFalse(self.game.is_won())

    def test_interrupted_row_does_not_win(self):
        r, g = self.red, self.green
        self.assertFalse(play(self.game, [(r, 1), (r, 2), (g, 3), (r, 4), (r, 5)]))
        self.assertFalse(self.game.is_won())

    def test_interrupted_column_does_not_win(self):
        r, g = self.red, self.green
        self.assertFalse(play(self.game, [(r, 2), (r, 2), (g, 2), (r, 2), (r, 2)]))
        self.assertFalse(self.game.is_won())

    def test_three_in_a_row_does_not_win(self):
        r = self.red
        self.assertFalse(play(self.game, [(r, 1), (r, 2), (r, 3)]))
        self.assertEqual(self.game.state, GameState.IN_PROGRESS)

    def test_discs_to_win(self):
        self.assertEqual(self.game.discs_to_win, 4)


class TestTie(unittest.TestCase):
    def test_full_board_without_a_line_is_a_tie(self):
        game, red, green = make_game()
        for player, col in tie_moves(red, green):
            self.assertFalse(game.insert_disc(player, col))

        board = game.get_board()
        self.assertEqual(board.get_number_of_discs(), COLS * ROWS)
        self.assertTrue(board.is_full())
        self.assertFalse(game.is_won())
        self.assertTrue(game.is_tie())
        self.assertTrue(game.is_finished())
        self.assertEqual(game.state, GameState.TIED)

        with self.assertRaises(AlreadyCompletedError):
            game.insert_disc(red, 1)

    def test_won_game_is_not_a_tie(self):
        game, red, _ = make_game()
        play(game, [(red, col) for col in range(1, 5)])
        self.assertFalse(game.is_tie())


class TestPlayers(unittest.TestCase):
    def setUp(self):
        self.game, self.red, self.green = make_game()

    def test_lookalike_player_is_rejected(self):
        impostor = Player(self.red.name, self.red.disc)
        with self.assertRaises(InvalidPlayerError):
            self.game.insert_disc(impostor, 1)
        self.assertEqual(self.game.get_board().get_number_of_discs(), 0)

    def test_none_player_is_rejected(self):
        with self.assertRaises(InvalidPlayerError):
            self.game.insert_disc(None, 1)

    def test_players_are_kept_in_order(self):
        self.assertEqual(self.game.players, (self.red, self.green))

    def test_game_needs_two_players(self):
        with self.assertRaises(TypeError):
            ConnectFourGame(self.red, None)
        with self.assertRaises(InvalidPlayerError):
            ConnectFourGame(self.red, self.red)


class TestErrorPropagation(unittest.TestCase):
    def setUp(self):
        self.game, self.red, self.green = make_game()

    def test_board_errors_reach_the_caller(self):
        with self.assertRaises(InvalidLocationError):
            self.game.insert_disc(self.red, 0)
        with self.assertRaises(InvalidLocationError):
            self.game.insert_disc(self.red, COLS + 1)

        for turn in range(ROWS):
            self.game.insert_disc(self.green if turn % 2 else self.red, 1)
        with self.assertRaises(ColumnFullError):
            self.game.insert_disc(self.red, 1)

    def test_player_check_comes_first(self):
        with self.assertRaises(InvalidPlayerError):
            self.game.insert_disc(Player("X", "X"), 0)

    def test_invalid_disc_is_rejected_on_creation(self):
        with self.assertRaises(InvalidDiscError):
            Player("BELL", "\a")


class TestRestart(unittest.TestCase):
    def test_restart_after_win(self):
        game, red, green = make_game()
        play(game, [(green, col) for col in range(1, 5)])
        self.assertTrue(game.is_won())

        game.restart()

        self.assertEqual(game.state, GameState.IN_PROGRESS)
        self.assertFalse(game.is_finished())
        self.assertEqual(game.get_board().get_number_of_discs(), 0)
        self.assertEqual(game.players, (red, green))
        self.assertFalse(game.insert_disc(red, 1))

    def test_restart_after_tie(self):
        game, red, green = make_game()
        play(game, tie_moves(red, green))
        game.restart()
        self.assertFalse(game.is_tie())
        self.assertFalse(game.get_board().is_full())


if __name__ == "__main__":
    unittest.main()
