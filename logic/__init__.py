"""
Logic module for 3D TicTacToe.
Handles the board, win detection, and the game session.

X moves first. A win is win_length marks in a straight line along any
of the 13 axes of the board; win_length defaults to the smallest dimension.
"""

from .board_state import BoardState, Mark, OutOfBoundsError
from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult
from .win_detector import WinDetector, DIRECTIONS, STANDARD_WIN_LINES
from .game_session import GameSession, Outcome, OutcomeStatus

__version__ = "1.0.0"
