"""
Move validator for 3D TicTacToe.
Validates that moves follow the rules.
"""

from typing import TYPE_CHECKING, List, Optional
from dataclasses import dataclass

from .board_state import Cell

if TYPE_CHECKING:
    from .game_session import GameSession


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates 3D TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Coordinates must be on the board
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        session: "GameSession",
        x: int,
        y: int,
        z: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            session: Current game session.
            x, y, z: 0-based cell coordinates.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        board = session.board

        if session.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not board.in_bounds(x, y, z):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid position ({x + 1}, {y + 1}, {z + 1}). "
                    f"Must be within 1-{board.width}, 1-{board.height}, 1-{board.depth}."
                )
            )

        if not board.is_empty(x, y, z):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({x + 1}, {y + 1}, {z + 1}) is already occupied by {board.get(x, y, z).name}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, session: "GameSession") -> List[Cell]:
        """
        Get all valid moves for the current player.

        Returns:
            List of 0-based (x, y, z) positions, empty once the game is over.
        """
        if session.is_game_over:
            return []
        return session.board.get_empty_cells()
