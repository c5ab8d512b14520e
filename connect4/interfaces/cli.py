"""
cli.py - Command-line interface for the Connect Four engine

This module provides a terminal front end: it collects player colours,
turns typed input into column indices for the engine, draws the board and
announces the outcome. It also has a benchmark command that times random
games. All rules live in connect4.game.
"""

import argparse
import random
import sys
from typing import List, Optional, Tuple

from connect4.debug import DebugLevel, debug
from connect4.game.player import Player, validate_players
from connect4.game.rules import (REASON_COLUMN_FULL, REASON_GAME_OVER,
                                 REASON_OUT_OF_RANGE, GameEngine, MoveOutcome)
from connect4.utils import (DEFAULT_HEIGHT, DEFAULT_P1_COLOR, DEFAULT_P2_COLOR,
                            DEFAULT_WIDTH)

# Special command codes returned by parse_move
QUIT = -1
RESTART = -2

REJECTION_MESSAGES = {
    REASON_COLUMN_FULL: "Column full. Pick another column.",
    REASON_OUT_OF_RANGE: "That column is not on the board.",
    REASON_GAME_OVER: "The game is over.",
}


def parse_move(text: str, width: int) -> Optional[int]:
    """
    Translate a line of user input into a move.

    Args:
        text: Raw input line
        width: Number of columns on the board

    Returns:
        A column index, QUIT, RESTART, or None if the input is not usable
    """
    text = text.strip().lower()
    if text == 'q':
        return QUIT
    if text == 'r':
        return RESTART

    try:
        column = int(text)
    except ValueError:
        return None

    if 0 <= column < width:
        return column
    return None


class SimpleCLI:
    """Terminal front end for playing and timing Connect Four games."""

    def __init__(self):
        self.args = None
        self.players: Optional[Tuple[Player, Player]] = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four')

        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', help='Also write log output to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game')
        play_parser.add_argument('--p1-color', default=DEFAULT_P1_COLOR,
                                 help=f'Colour for player 1 (default: {DEFAULT_P1_COLOR})')
        play_parser.add_argument('--p2-color', default=DEFAULT_P2_COLOR,
                                 help=f'Colour for player 2 (default: {DEFAULT_P2_COLOR})')
        play_parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT,
                                 help=f'Number of rows (default: {DEFAULT_HEIGHT})')
        play_parser.add_argument('--width', type=int, default=DEFAULT_WIDTH,
                                 help=f'Number of columns (default: {DEFAULT_WIDTH})')

        benchmark_parser = subparsers.add_parser('benchmark', help='Time random games')
        benchmark_parser.add_argument('--iterations', type=int, default=100,
                                      help='Number of games to play')
        benchmark_parser.add_argument('--seed', type=int, help='Random seed')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self) -> int:
        """Run the selected command and return an exit status."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            return self.play_game()
        if self.args.command == 'benchmark':
            return self.benchmark()

        print("Please specify a command. Use --help for options.")
        return 1

    def setup_players(self, p1_color: str, p2_color: str) -> Optional[Tuple[Player, Player]]:
        """
        Create the two players, asking for a new colour for player 2 until
        the pair is valid.

        Returns:
            The players, or None if input ran out
        """
        while True:
            player1, player2 = Player(p1_color), Player(p2_color)
            problem = validate_players(player1, player2)
            if problem is None:
                return player1, player2

            print(problem)
            try:
                p2_color = input("Enter a colour for Player 2 (different from Player 1): ")
            except (EOFError, KeyboardInterrupt):
                return None
            p2_color = p2_color.strip() or DEFAULT_P2_COLOR

    def new_game(self) -> GameEngine:
        player1, player2 = self.players
        return GameEngine(player1, player2, self.args.height, self.args.width)

    def get_human_move(self, player: Player, width: int) -> Optional[int]:
        """
        Read one move from the terminal.

        Returns:
            Column index, QUIT or RESTART, or None for unusable input
        """
        try:
            text = input(f"Player {player} (columns 0-{width - 1}, q/r): ")
        except (EOFError, KeyboardInterrupt):
            print()
            return QUIT

        move = parse_move(text, width)
        if move is None:
            print(f"Invalid input. Enter a column number 0-{width - 1}, 'q' to quit or 'r' to restart.")
        return move

    def print_board(self, engine: GameEngine) -> None:
        player1, player2 = engine.players
        print(engine.render())
        print(f"X = {player1}, O = {player2}")

    def play_game(self) -> int:
        """Play an interactive two-player game."""
        self.players = self.setup_players(self.args.p1_color, self.args.p2_color)
        if self.players is None:
            print("No players, no game.")
            return 1

        try:
            engine = self.new_game()
        except ValueError as e:
            print(f"Cannot start game: {e}")
            return 1

        print("Starting a new Connect Four game!")
        self.print_board(engine)

        while True:
            move = self.get_human_move(engine.get_current_player(), engine.width)

            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return 0
            if move == RESTART:
                engine = self.new_game()
                print("Game restarted.")
                self.print_board(engine)
                continue

            result = engine.attempt_move(move)
            if result.outcome == MoveOutcome.REJECTED:
                print(REJECTION_MESSAGES.get(result.reason, "Move rejected."))
                continue

            self.print_board(engine)

            if result.outcome == MoveOutcome.WIN:
                print(f"Player {result.player} won!")
                return 0
            if result.outcome == MoveOutcome.TIE:
                print("Tie!")
                return 0

    def benchmark(self) -> int:
        """Play random games and report how long the engine takes."""
        iterations = self.args.iterations
        if iterations <= 0:
            print("--iterations must be positive")
            return 1

        rng = random.Random(self.args.seed)
        player1, player2 = Player(DEFAULT_P1_COLOR), Player(DEFAULT_P2_COLOR)
        outcomes = {MoveOutcome.WIN: 0, MoveOutcome.TIE: 0}
        total_moves = 0

        print(f"Running benchmark with {iterations} games...")
        debug.start_timer("benchmark")
        for _ in range(iterations):
            engine = GameEngine(player1, player2)
            while True:
                result = engine.attempt_move(rng.choice(engine.get_valid_moves()))
                total_moves += 1
                if result.outcome.is_terminal():
                    outcomes[result.outcome] += 1
                    break
        elapsed = debug.end_timer("benchmark", "cli")

        print(f"Played {iterations} games with {total_moves} total moves: "
              f"{elapsed:.6f} seconds total, "
              f"{elapsed / iterations * 1000:.6f} ms per game, "
              f"{elapsed / total_moves * 1000:.6f} ms per move")
        print(f"Wins: {outcomes[MoveOutcome.WIN]}, ties: {outcomes[MoveOutcome.TIE]}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.parse_args(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
