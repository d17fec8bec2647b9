"""
rules.py - Game rules and Gymnasium environment for Connect Four

This module provides:
1. ConnectFourGame, which owns a board and two players, validates moves and
   detects wins after every insertion
2. ConnectFourEnv, a gymnasium adapter that lets learning code drive a game
"""

from typing import Any, Dict, List, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.exceptions import ConnectFourError, InvalidPlayerError
from connectfour.game.board import Board
from connectfour.game.player import Player
from connectfour.utils import COLS, ROWS, DISCS_TO_WIN, SEARCH_DIRECTIONS, GameState


class ConnectFourGame:
    """
    A game between two players sharing one board.

    Win and tie status live on the board; the game only knows who may
    play and how to recognise a winning move.
    """

    def __init__(self, player_one: Player, player_two: Player):
        if player_one is None or player_two is None:
            raise TypeError("Players must not be None.")
        if player_one is player_two:
            raise InvalidPlayerError("A game needs two different players.")

        debug.debug(f"Initializing game: {player_one} vs {player_two}", "game")
        self._board = Board()
        self._players = (player_one, player_two)

    @property
    def players(self) -> Tuple[Player, Player]:
        return self._players

    @property
    def discs_to_win(self) -> int:
        return DISCS_TO_WIN

    def get_board(self) -> Board:
        return self._board

    def insert_disc(self, player: Player, col: int) -> bool:
        """
        Drop a player's disc into a column and check whether it wins.

        Args:
            player: One of the two players of this game
            col: The column to drop into (1 to COLS)

        Returns:
            True if this move won the game

        Raises:
            InvalidPlayerError: The player does not take part in this game
            AlreadyCompletedError, InvalidLocationError, InvalidDiscError,
            ColumnFullError: Propagated from Board.insert_disc
        """
        if not any(player is participant for participant in self._players):
            name = player.name if player is not None else None
            debug.debug(f"Rejected move by unknown player {name}", "game")
            raise InvalidPlayerError(f"Player {name} doesn't participate in this game.")

        row = self._board.insert_disc(player.disc, col)

        debug.start_timer("win_check")
        won = self._check_win(col, row)
        debug.end_timer("win_check", "game")

        if won:
            self._board.mark_won()
            debug.info(f"{player} wins with column {col}, row {row}", "game")
        elif self._board.is_full():
            debug.info("Board full without a winner, game tied", "game")

        return won

    def _check_win(self, col: int, row: int) -> bool:
        """
        Check if the disc at (col, row) completes a line of DISCS_TO_WIN.

        Only valid for the disc inserted last: the search never looks
        upwards, since nothing can be stacked on top of it yet.
        """
        board = self._board
        if board.get_number_of_discs() < DISCS_TO_WIN:
            return False

        disc = board.get_disc(col, row)

        for col_step, row_step in SEARCH_DIRECTIONS:
            connected = 1
            c, r = col + col_step, row + row_step
            while (1 <= c <= COLS and 1 <= r <= ROWS and connected < DISCS_TO_WIN
                   and board.get_disc(c, r) == disc):
                connected += 1
                c += col_step
                r += row_step

            if connected == DISCS_TO_WIN:
                debug.trace(f"Found {connected} connected toward ({col_step}, {row_step})", "game")
                return True

        return False

    def is_won(self) -> bool:
        return self._board.is_won()

    def is_tie(self) -> bool:
        return self._board.is_full() and not self._board.is_won()

    def is_finished(self) -> bool:
        return self.is_won() or self.is_tie()

    @property
    def state(self) -> GameState:
        if self.is_won():
            return GameState.WON
        if self.is_tie():
            return GameState.TIED
        return GameState.IN_PROGRESS

    def restart(self) -> None:
        """Clear the board for a new game with the same players."""
        debug.debug("Restarting game", "game")
        self._board.reset()

    def render(self) -> str:
        return self._board.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Actions are 0-based column indices. The two players move alternately;
    observations mark player one's discs with 1, player two's with 2 and
    empty cells with 0, row 0 being the top of the board.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 player_one: Optional[Player] = None,
                 player_two: Optional[Player] = None):
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        player_one = player_one or Player("ONE", "X")
        player_two = player_two or Player("TWO", "O")
        if player_one.disc == player_two.disc:
            raise InvalidPlayerError(
                f"Players must use different discs, both use '{player_one.disc}'")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(low=0, high=2, shape=(ROWS, COLS), dtype=np.int8)

        self.game = ConnectFourGame(player_one, player_two)
        self.render_mode = render_mode
        self.current_index = 0

        self.reward_win = 1.0
        self.reward_draw = 0.0
        self.reward_step = 0.0
        self.reward_invalid_move = -0.5

    @property
    def current_player(self) -> Player:
        return self.game.players[self.current_index]

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.game.restart()
        self.current_index = 0

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop the current player's disc into column ``action + 1``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
            A rejected move leaves the board untouched and is reported as
            truncated with ``info['invalid_move']`` set.
        """
        player = self.current_player
        column = int(action) + 1
        debug.debug(f"Environment step: {player} plays column {column}", "env")

        try:
            won = self.game.insert_disc(player, column)
        except ConnectFourError as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['error'] = str(e)
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        if won:
            reward = self.reward_win
            terminated = True
        elif self.game.is_tie():
            reward = self.reward_draw
            terminated = True
        else:
            self.current_index = 1 - self.current_index

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode == "ascii":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def valid_actions(self) -> List[int]:
        """0-based columns that still accept a disc."""
        if self.game.is_finished():
            return []
        board = self.game.get_board()
        return [col - 1 for col in range(1, COLS + 1) if not board.is_populated(col, ROWS)]

    def _get_observation(self) -> np.ndarray:
        state = self.game.get_board().get_state()
        observation = np.zeros((ROWS, COLS), dtype=np.int8)
        for value, player in enumerate(self.game.players, start=1):
            observation[state == ord(player.disc)] = value
        return np.flipud(observation).copy()

    def _get_info(self) -> Dict[str, Any]:
        valid_actions = self.valid_actions()
        return {
            'valid_actions': valid_actions,
            'num_valid_actions': len(valid_actions),
            'current_player': self.current_index + 1,
            'game_state': self.game.state.name,
            'discs': self.game.get_board().get_number_of_discs(),
        }

    def close(self):
        pass
