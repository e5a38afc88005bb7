"""
Game configuration for 3D TicTacToe.
Default board shape, starting player, and how marks are displayed.
"""

import numpy as np

from .board_state import Mark


class GameConfig:
    """
    Configuration class for game settings.
    The console front-end overrides the board settings from the command line.
    """

    # ==================== BOARD SETTINGS ====================
    DEFAULT_WIDTH = 3
    DEFAULT_HEIGHT = 3
    DEFAULT_DEPTH = 3

    # None means "smallest dimension"
    DEFAULT_WIN_LENGTH = None

    # ==================== TURN SETTINGS ====================
    STARTING_MARK = Mark.X

    # ==================== DISPLAY SETTINGS ====================
    MARK_SYMBOLS = {
        Mark.EMPTY: ".",
        Mark.X: "X",
        Mark.O: "O",
    }

    @classmethod
    def resolve_win_length(cls, width: int, height: int, depth: int, win_length=None) -> int:
        """
        Pick the win length for a board.

        Args:
            width, height, depth: Board dimensions.
            win_length: Requested win length, or None for the default.

        Returns:
            The win length to use.

        Raises:
            ValueError: if the requested length cannot fit on the board.
        """
        if win_length is None:
            win_length = cls.DEFAULT_WIN_LENGTH
        longest = min(width, height, depth)
        if win_length is None:
            return int(longest)

        if isinstance(win_length, bool) or not isinstance(win_length, (int, np.integer)):
            raise ValueError(f"win_length must be an integer, got {win_length!r}")
        if not 1 <= win_length <= longest:
            raise ValueError(f"win_length must be between 1 and {longest}, got {win_length}")
        return int(win_length)
