"""
Win detection for 3D TicTacToe.
Decides whether the move just played completes a line.

Two paths:
- generic: scan the 13 axes through the last move, works for any board and win length
- standard: check the 49 fixed lines of a 3x3x3 board with win length 3
"""

import logging
from itertools import product
from typing import List, Optional, Tuple

from .board_state import BoardState, Cell, Mark

logger = logging.getLogger(__name__)


def _build_directions() -> List[Tuple[int, int, int]]:
    """One vector per axis: the 26 neighbours, keeping those whose first non-zero component is positive."""
    directions = []
    for d in product((-1, 0, 1), repeat=3):
        first = next((c for c in d if c != 0), 0)
        if first > 0:
            directions.append(d)
    return directions


# 3 axis-aligned, 6 face-diagonal, 4 space-diagonal
DIRECTIONS = _build_directions()


def _build_standard_lines() -> List[Tuple[Cell, Cell, Cell]]:
    """All winning lines of a 3x3x3 cube, grouped by family."""
    r = range(3)
    lines = []

    # Axis-aligned: vary x, vary y, vary z (9 each)
    for a, b in product(r, r):
        lines.append(tuple((i, a, b) for i in r))
        lines.append(tuple((a, i, b) for i in r))
        lines.append(tuple((a, b, i) for i in r))

    # Face diagonals: XY planes (fix z), XZ planes (fix y), YZ planes (fix x)
    for k in r:
        lines.append(tuple((i, i, k) for i in r))
        lines.append(tuple((2 - i, i, k) for i in r))
        lines.append(tuple((i, k, i) for i in r))
        lines.append(tuple((2 - i, k, i) for i in r))
        lines.append(tuple((k, i, i) for i in r))
        lines.append(tuple((k, 2 - i, i) for i in r))

    # Space diagonals, corner to corner
    lines.append(tuple((i, i, i) for i in r))
    lines.append(tuple((2 - i, i, i) for i in r))
    lines.append(tuple((i, 2 - i, i) for i in r))
    lines.append(tuple((2 - i, 2 - i, i) for i in r))

    return lines


STANDARD_WIN_LINES = _build_standard_lines()

STANDARD_SHAPE = (3, 3, 3)
STANDARD_WIN_LENGTH = 3


class WinDetector:
    """
    Checks whether the last move won the game.

    Only reads the board. Which path to use is decided once, here,
    from the board shape and win length.
    """

    def __init__(self, board: BoardState, win_length: int):
        self.board = board
        self.win_length = win_length
        self.uses_fast_path = board.shape == STANDARD_SHAPE and win_length == STANDARD_WIN_LENGTH
        logger.debug(
            "WinDetector for %s board, win length %d, fast path %s",
            "x".join(str(d) for d in board.shape), win_length, self.uses_fast_path,
        )

    def check_win(self, x: int, y: int, z: int) -> Optional[Mark]:
        """
        Check if the move at (x, y, z) completed a line.

        Args:
            x, y, z: 0-based coordinates of the cell just filled.

        Returns:
            The winning Mark, or None.
        """
        if self.uses_fast_path:
            return self.check_win_standard()
        return self.check_win_generic(x, y, z)

    def check_win_generic(self, x: int, y: int, z: int) -> Optional[Mark]:
        """Scan each axis through the pivot cell in both directions."""
        mark = self.board.get(x, y, z)
        if mark == Mark.EMPTY:
            return None

        for d in DIRECTIONS:
            count = 1 + self._run_length(x, y, z, d, mark) + self._run_length(x, y, z, _negate(d), mark)
            if count >= self.win_length:
                return mark
        return None

    def check_win_standard(self) -> Optional[Mark]:
        """Check the 49 lines of the 3x3x3 board."""
        grid = self.board.grid
        for a, b, c in STANDARD_WIN_LINES:
            va = grid[a]
            if va != Mark.EMPTY.value and va == grid[b] and va == grid[c]:
                return Mark(int(va))
        return None

    def get_winning_line(self, x: int, y: int, z: int) -> Optional[List[Cell]]:
        """
        Get the winning run through (x, y, z), if there is one.

        Returns:
            The full run of matching cells in order along its axis
            (can be longer than win_length), or None.
        """
        mark = self.board.get(x, y, z)
        if mark == Mark.EMPTY:
            return None

        for d in DIRECTIONS:
            back = self._walk(x, y, z, _negate(d), mark)
            forward = self._walk(x, y, z, d, mark)
            if 1 + len(back) + len(forward) >= self.win_length:
                return list(reversed(back)) + [(x, y, z)] + forward
        return None

    def _run_length(self, x: int, y: int, z: int, d: Tuple[int, int, int], mark: Mark) -> int:
        """Count matching cells after the pivot, stopping early once a win is already certain."""
        dx, dy, dz = d
        count = 0
        # A run longer than win_length - 1 on one side cannot change the verdict
        for step in range(1, self.win_length):
            cx, cy, cz = x + dx * step, y + dy * step, z + dz * step
            if not self.board.in_bounds(cx, cy, cz) or self.board.grid[cx, cy, cz] != mark.value:
                break
            count += 1
        return count

    def _walk(self, x: int, y: int, z: int, d: Tuple[int, int, int], mark: Mark) -> List[Cell]:
        """Collect every matching cell after the pivot until the run ends."""
        dx, dy, dz = d
        cells = []
        cx, cy, cz = x + dx, y + dy, z + dz
        while self.board.in_bounds(cx, cy, cz) and self.board.grid[cx, cy, cz] == mark.value:
            cells.append((cx, cy, cz))
            cx, cy, cz = cx + dx, cy + dy, cz + dz
        return cells


def _negate(d: Tuple[int, int, int]) -> Tuple[int, int, int]:
    return (-d[0], -d[1], -d[2])
