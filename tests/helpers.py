"""Shared fixtures for the Connect Four tests."""

from connectfour.game.player import Player
from connectfour.game.rules import ConnectFourGame
from connectfour.utils import COLS, ROWS

# Column offsets that keep a parity-filled board free of four in a row:
# no window of four columns is constant or alternating.
TIE_OFFSETS = (0, 0, 0, 1, 0, 0, 0)


def make_game():
    red = Player("RED", "R")
    green = Player("GREEN", "G")
    return ConnectFourGame(red, green), red, green


def fill_board(board):
    """Fill every cell with a different printable disc."""
    code = 32
    for col in range(1, COLS + 1):
        for _ in range(ROWS):
            board.insert_disc(chr(code), col)
            code += 1


def tie_moves(first, second):
    """(player, column) pairs filling the board without a winner."""
    moves = []
    for col in range(1, COLS + 1):
        for row in range(1, ROWS + 1):
            player = first if (row + TIE_OFFSETS[col - 1]) % 2 else second
            moves.append((player, col))
    return moves
