"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the players and the rules
that decide when a game is won or tied.
"""

from connectfour.game.board import Board
from connectfour.game.player import Player
from connectfour.game.rules import ConnectFourGame, ConnectFourEnv

__all__ = ['Board', 'Player', 'ConnectFourGame', 'ConnectFourEnv']
