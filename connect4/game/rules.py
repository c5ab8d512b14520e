"""
rules.py - Turn handling and game outcome for Connect Four

This module provides:
1. MoveOutcome and MoveResult, the values reported for every attempted move
2. GameEngine, the state machine that validates moves, places pieces,
   detects wins and ties and alternates turns

The engine does no I/O. A presentation layer turns user input into column
indices, calls attempt_move and draws whatever the returned result describes.
"""

from enum import Enum
from numbers import Integral
from typing import List, NamedTuple, Optional, Tuple

from connect4.debug import debug
from connect4.game.board import Board
from connect4.game.player import Player, validate_players
from connect4.utils import CONNECT_N, DEFAULT_HEIGHT, DEFAULT_WIDTH, EMPTY

REASON_GAME_OVER = "game over"
REASON_OUT_OF_RANGE = "column out of range"
REASON_COLUMN_FULL = "column full"


class MoveOutcome(Enum):
    """What happened to an attempted move."""
    REJECTED = "rejected"
    CONTINUE = "continue"
    WIN = "win"
    TIE = "tie"

    def is_terminal(self) -> bool:
        """True when the move ended the game."""
        return self in (MoveOutcome.WIN, MoveOutcome.TIE)

    def is_accepted(self) -> bool:
        """True when a piece was placed."""
        return self != MoveOutcome.REJECTED


class MoveResult(NamedTuple):
    """
    Result of GameEngine.attempt_move.

    player is the winner for WIN and the player to move next for CONTINUE.
    row and column give the landing cell whenever a piece was placed.
    reason explains a rejection.
    """
    outcome: MoveOutcome
    player: Optional[Player] = None
    row: Optional[int] = None
    column: Optional[int] = None
    reason: Optional[str] = None

    @property
    def landing(self) -> Optional[Tuple[int, int]]:
        if self.row is None or self.column is None:
            return None
        return (self.row, self.column)

    @classmethod
    def rejected(cls, reason: str) -> 'MoveResult':
        return cls(MoveOutcome.REJECTED, reason=reason)


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


class GameEngine:
    """
    Authoritative state for one game of Connect Four.

    The engine owns the grid and the turn state. It is created for a single
    game and discarded afterwards; starting over means building a new engine.
    """

    def __init__(self, player1: Player, player2: Player,
                 height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Start a new game.

        Args:
            player1: Player who moves first
            player2: Player who moves second
            height: Number of rows
            width: Number of columns

        Raises:
            ValueError: If a dimension is not a positive integer or the two
                players cannot share a game
        """
        self._height = _check_dimension("height", height)
        self._width = _check_dimension("width", width)

        problem = validate_players(player1, player2)
        if problem:
            raise ValueError(problem)

        if height < CONNECT_N or width < CONNECT_N:
            debug.warning(f"A {height}x{width} board only allows wins along "
                          f"its longer side", "engine")

        self._players = (player1, player2)
        self._board = Board(height, width)
        self._current_player = player1
        self._game_over = False
        self._winner: Optional[Player] = None
        self._winning_line: List[Tuple[int, int]] = []
        self._last_move: Optional[Tuple[int, int]] = None

        debug.debug(f"New {height}x{width} game: {player1} vs {player2}", "engine")

    @property
    def players(self) -> Tuple[Player, Player]:
        return self._players

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def winning_line(self) -> List[Tuple[int, int]]:
        """Cells of the winning run, empty unless the game was won."""
        return list(self._winning_line)

    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        return self._last_move

    def is_game_over(self) -> bool:
        return self._game_over

    def get_current_player(self) -> Player:
        return self._current_player

    def _mark_of(self, player: Player) -> int:
        return 1 if player is self._players[0] else 2

    def _player_of(self, mark: int) -> Optional[Player]:
        if mark == EMPTY:
            return None
        return self._players[mark - 1]

    def get_cell(self, row: int, column: int) -> Optional[Player]:
        """
        Occupant of a cell.

        Returns:
            The Player in the cell, or None if it is empty

        Raises:
            IndexError: If (row, column) is off the board
        """
        return self._player_of(self._board.cell(row, column))

    def _is_column(self, column) -> bool:
        return (isinstance(column, Integral) and not isinstance(column, bool)
                and 0 <= column < self._width)

    def get_valid_moves(self) -> List[int]:
        """Columns that would currently accept a piece."""
        if self._game_over:
            return []
        return [col for col in range(self._width)
                if self._board.find_spot_for_col(col) is not None]

    def attempt_move(self, column: int) -> MoveResult:
        """
        Drop the current player's piece into a column.

        Rejections (game already over, column off the board, column full)
        are ordinary results: nothing changes and nothing is raised.

        Args:
            column: Zero-based column index

        Returns:
            A MoveResult with outcome REJECTED, WIN, TIE or CONTINUE
        """
        player = self._current_player
        debug.debug(f"Attempting move in column {column!r} for {player}", "engine")

        if self._game_over:
            debug.debug("Move rejected: game is over", "engine")
            return MoveResult.rejected(REASON_GAME_OVER)

        if not self._is_column(column):
            debug.debug(f"Move rejected: column {column!r} out of range", "engine")
            return MoveResult.rejected(REASON_OUT_OF_RANGE)

        column = int(column)
        row = self._board.find_spot_for_col(column)
        if row is None:
            debug.debug(f"Move rejected: column {column} is full", "engine")
            return MoveResult.rejected(REASON_COLUMN_FULL)

        self._board.place(row, column, self._mark_of(player))
        self._last_move = (row, column)

        debug.start_timer("win_check")
        run = self._board.find_run(self._mark_of(player))
        debug.end_timer("win_check", "engine")

        if run:
            self._game_over = True
            self._winner = player
            self._winning_line = run
            debug.info(f"Player {player} won with {run}", "engine")
            return MoveResult(MoveOutcome.WIN, player, row, column)

        if self._board.is_full():
            self._game_over = True
            debug.info("Game ends in a tie", "engine")
            return MoveResult(MoveOutcome.TIE, None, row, column)

        self._current_player = self._players[1] if player is self._players[0] else self._players[0]
        debug.debug(f"Switching to player {self._current_player}", "engine")
        return MoveResult(MoveOutcome.CONTINUE, self._current_player, row, column)

    def get_state(self):
        """Copy of the grid as a numpy array of marks (0 empty, 1 and 2 players)."""
        return self._board.get_state()

    def render(self) -> str:
        """
        Render the game as a string.

        Player 1 is drawn as X and player 2 as O.
        """
        return self._board.render({1: "X", 2: "O"})

    def __str__(self) -> str:
        return self.render()
