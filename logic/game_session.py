"""
Game session for 3D TicTacToe.
The one object the view layer talks to: it owns the board, whose turn it is,
and how the game ended.

Coordinates passed to a GameSession are 1-based, (1, 1, 1) being the first
cell. They are converted to 0-based before reaching the board.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board_state import BoardState, Cell, Mark
from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult
from .win_detector import WinDetector

logger = logging.getLogger(__name__)


class OutcomeStatus(Enum):
    """Where the game is."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Result of the game so far. winner is set only for WIN."""
    status: OutcomeStatus
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(OutcomeStatus.IN_PROGRESS)

    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        return cls(OutcomeStatus.WIN, mark)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeStatus.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.status != OutcomeStatus.IN_PROGRESS


class GameSession:
    """
    A single game of 3D TicTacToe.

    State machine: IN_PROGRESS -> WIN(X) | WIN(O) | DRAW, once. Only
    make_move leaves IN_PROGRESS and only reset() leaves a terminal state.
    Not thread-safe: callers serialize make_move per session.
    """

    def __init__(
        self,
        width: int = GameConfig.DEFAULT_WIDTH,
        height: int = GameConfig.DEFAULT_HEIGHT,
        depth: int = GameConfig.DEFAULT_DEPTH,
        win_length: Optional[int] = None
    ):
        """
        Create a session.

        Args:
            width, height, depth: Board dimensions, all positive.
            win_length: Marks in a row needed to win. Defaults to the smallest dimension.

        Raises:
            ValueError: if the dimensions or win length are invalid.
        """
        self.board = BoardState(width, height, depth)
        self.win_length = GameConfig.resolve_win_length(width, height, depth, win_length)
        self.detector = WinDetector(self.board, self.win_length)
        self.validator = MoveValidator()

        self._current_player = GameConfig.STARTING_MARK
        self._outcome = Outcome.in_progress()
        self._winning_line: Optional[List[Cell]] = None
        self._last_move: Optional[Cell] = None

        logger.info(
            "New game: %dx%dx%d board, %d in a row to win",
            self.width, self.height, self.depth, self.win_length,
        )

    # ==================== READ ACCESS ====================

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def depth(self) -> int:
        return self.board.depth

    @property
    def current_player(self) -> Mark:
        return self._current_player

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def winner(self) -> Optional[Mark]:
        return self._outcome.winner

    @property
    def is_game_over(self) -> bool:
        return self._outcome.is_terminal

    @property
    def is_draw(self) -> bool:
        return self._outcome.status == OutcomeStatus.DRAW

    @property
    def move_count(self) -> int:
        return self.board.move_count

    @property
    def total_cells(self) -> int:
        return self.board.total_cells

    @property
    def uses_fast_path(self) -> bool:
        return self.detector.uses_fast_path

    @property
    def winning_line(self) -> Optional[List[Tuple[int, int, int]]]:
        """1-based cells of the winning run, or None."""
        if self._winning_line is None:
            return None
        return [_to_public(cell) for cell in self._winning_line]

    @property
    def last_move(self) -> Optional[Tuple[int, int, int]]:
        """1-based cell of the last accepted move, or None."""
        if self._last_move is None:
            return None
        return _to_public(self._last_move)

    def get_cell(self, x: int, y: int, z: int) -> Mark:
        """
        Get the mark at a cell.

        Returns Mark.EMPTY for coordinates off the board, so the view
        layer can probe without checking bounds first.
        """
        cx, cy, cz = x - 1, y - 1, z - 1
        if not self.board.in_bounds(cx, cy, cz):
            return Mark.EMPTY
        return self.board.get(cx, cy, cz)

    def validate_move(self, x: int, y: int, z: int) -> ValidationResult:
        """Check a move without making it."""
        return self.validator.validate_move(self, x - 1, y - 1, z - 1)

    def get_valid_moves(self) -> List[Tuple[int, int, int]]:
        """1-based cells the current player may take."""
        return [_to_public(cell) for cell in self.validator.get_valid_moves(self)]

    # ==================== MUTATION ====================

    def make_move(self, x: int, y: int, z: int) -> Outcome:
        """
        Place the current player's mark at (x, y, z).

        Args:
            x, y, z: 1-based cell coordinates.

        Returns:
            The outcome after the call. A rejected move (game over, off the
            board, occupied cell) changes nothing and returns the outcome
            as it already was.
        """
        cx, cy, cz = x - 1, y - 1, z - 1

        result = self.validator.validate_move(self, cx, cy, cz)
        if not result.is_valid:
            logger.debug("Rejected move by %s: %s", self._current_player.name, result.error_message)
            return self._outcome

        player = self._current_player
        self.board.set(cx, cy, cz, player)
        self._last_move = (cx, cy, cz)
        logger.debug("%s plays (%d, %d, %d), move %d", player.name, x, y, z, self.board.move_count)

        winner = self.detector.check_win(cx, cy, cz)
        if winner is not None:
            self._outcome = Outcome.win(winner)
            self._winning_line = self.detector.get_winning_line(cx, cy, cz)
            logger.info("%s wins after %d moves", winner.name, self.board.move_count)
        elif self.board.is_full():
            self._outcome = Outcome.draw()
            logger.info("Draw after %d moves", self.board.move_count)
        else:
            self._current_player = player.opposite()

        return self._outcome

    def reset(self):
        """Start a new game on the same board shape."""
        self.board.clear()
        self._current_player = GameConfig.STARTING_MARK
        self._outcome = Outcome.in_progress()
        self._winning_line = None
        self._last_move = None
        logger.info("Game reset")

    # ==================== DISPLAY ====================

    def format_status(self) -> str:
        """One line describing whose turn it is or how the game ended."""
        if self._outcome.status == OutcomeStatus.WIN:
            return f"{GameConfig.MARK_SYMBOLS[self._outcome.winner]} WINS!"
        if self._outcome.status == OutcomeStatus.DRAW:
            return "It's a DRAW!"
        return f"Current turn: {GameConfig.MARK_SYMBOLS[self._current_player]} (move {self.move_count + 1} of {self.total_cells})"

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.board.format_layers(GameConfig.MARK_SYMBOLS))
        print()
        print(self.format_status())


def _to_public(cell: Cell) -> Tuple[int, int, int]:
    return (cell[0] + 1, cell[1] + 1, cell[2] + 1)
