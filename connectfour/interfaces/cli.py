"""
cli.py - Console interface for playing Connect Four

Two people share one terminal and take turns typing column numbers. All
reading and writing goes through the streams handed to SimpleCLI, so the
session can be scripted by passing in-memory streams.
"""

import argparse
import re
import sys
from typing import List, Optional, Sequence, TextIO

from connectfour.debug import debug, DebugLevel
from connectfour.exceptions import ConnectFourError
from connectfour.game.player import Player
from connectfour.game.rules import ConnectFourGame
from connectfour.utils import COLS

DEFAULT_PLAYERS = (("RED", "R"), ("GREEN", "G"))

# Optionally signed, ASCII digits only
COLUMN_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_column(text: str) -> int:
    """Parse a typed column number. Raises ValueError for anything but a decimal integer."""
    if not COLUMN_PATTERN.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    return int(text)


class SimpleCLI:
    """Interactive two-player console session."""

    def __init__(self, game: ConnectFourGame,
                 input_stream: Optional[TextIO] = None,
                 output: Optional[TextIO] = None,
                 error: Optional[TextIO] = None):
        self.game = game
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.error = error if error is not None else sys.stderr

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.output)
        self.output.flush()

    def _print_error(self, text: str) -> None:
        print(text, file=self.error)
        self.error.flush()

    def read_line(self, prompt: str) -> Optional[str]:
        """
        Prompt for and read one line of input.

        Returns:
            The stripped line, or None once the input is exhausted or closed
        """
        self._print(prompt, end="")
        try:
            line = self.input_stream.readline()
        except (OSError, ValueError) as e:
            debug.debug(f"Input stream unreadable: {e}", "session")
            return None
        if not line:
            debug.debug("Input stream closed", "session")
            return None
        return line.strip()

    def play_interactive(self) -> None:
        """
        Run games until the players decline a rematch.

        Players alternate, starting with the first player every game. A
        rejected move prints the reason and the same player tries again.
        """
        self._print("Welcome to Connect4!\n")
        players = self.game.players

        while True:
            self._print(self.game.render())

            current_index = -1
            while not self.game.is_finished():
                current_index = (current_index + 1) % len(players)
                player = players[current_index]

                if not self._play_turn(current_index, player):
                    return

                self._print(self.game.render())

                if self.game.is_won():
                    self._print(f"Player {current_index + 1} [{player.name}] wins!")

            if self.game.is_tie():
                self._print("That's a tie!")

            answer = self.read_line("Play again? [y/n] ")
            if answer is None or answer.lower() != "y":
                debug.debug("Session finished", "session")
                return

            self.game.restart()
            self._print("\n-------- NEW GAME --------\n")

    def _play_turn(self, index: int, player: Player) -> bool:
        """Prompt until the player makes a valid move. False if input ran out."""
        prompt = f"Player {index + 1} [{player.name}] - choose column (1-{COLS}): "

        while True:
            text = self.read_line(prompt)
            if text is None:
                return False

            try:
                col = parse_column(text)
            except ValueError:
                self._print_error(f"Invalid column: '{text}'. Column must be an integer.")
                continue

            try:
                self.game.insert_disc(player, col)
            except ConnectFourError as e:
                self._print_error(f"Invalid move: {e}")
                continue

            return True

    def replay(self, moves: Sequence[int]) -> bool:
        """
        Play a fixed list of columns, alternating players, and print the result.

        Returns:
            False if one of the moves was rejected
        """
        players = self.game.players
        for turn, col in enumerate(moves):
            try:
                self.game.insert_disc(players[turn % len(players)], col)
            except ConnectFourError as e:
                self._print_error(f"Invalid move {turn + 1} (column {col}): {e}")
                return False

        self._print(self.game.render())
        self._print(f"State: {self.game.state.name}")
        return True


def parse_moves(text: str) -> List[int]:
    """Parse '1,2,3' into [1, 2, 3]."""
    if not text.strip():
        return []
    try:
        return [parse_column(part.strip()) for part in text.split(',')]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Moves must be comma-separated integers: '{text}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Connect Four for two players',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Play with the default players RED (R) and GREEN (G)
    python run.py play

    # Replay moves and print the board
    python run.py render --moves 4,4,3,3,2,2,1
    """)
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--debug_level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level (default: warning)')
    parser.add_argument('--log_file', type=str, default=None,
                        help='Also write log records to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play an interactive game')
    for number, (name, disc) in enumerate(DEFAULT_PLAYERS, start=1):
        play_parser.add_argument(f'--player{number}', default=name,
                                 help=f'Name of player {number} (default: {name})')
        play_parser.add_argument(f'--disc{number}', default=disc,
                                 help=f'Disc of player {number} (default: {disc})')

    render_parser = subparsers.add_parser('render', help='Replay moves and print the board')
    render_parser.add_argument('--moves', type=parse_moves, default=[],
                               help='Comma-separated columns, e.g. 1,2,1,2')

    return parser


def configure_debug(args: argparse.Namespace) -> None:
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    if args.log_file:
        debug.configure(log_file=args.log_file)


def main(argv: Optional[Sequence[str]] = None,
         input_stream: Optional[TextIO] = None,
         output: Optional[TextIO] = None,
         error: Optional[TextIO] = None) -> int:
    """Command line entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_debug(args)

    error = error if error is not None else sys.stderr

    if args.command == 'play':
        try:
            players = (Player(args.player1, args.disc1), Player(args.player2, args.disc2))
        except ConnectFourError as e:
            print(f"Invalid player: {e}", file=error)
            return 2
        cli = SimpleCLI(ConnectFourGame(*players), input_stream, output, error)
        cli.play_interactive()
        return 0

    if args.command == 'render':
        players = [Player(name, disc) for name, disc in DEFAULT_PLAYERS]
        cli = SimpleCLI(ConnectFourGame(*players), input_stream, output, error)
        return 0 if cli.replay(args.moves) else 1

    parser.print_help(file=output)
    return 1


if __name__ == "__main__":
    sys.exit(main())
