"""
Board state for 3D TicTacToe.
Holds the grid of marks and the move count.

Coordinates here are 0-based: 0 <= x < width, 0 <= y < height, 0 <= z < depth.
"""

import operator
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np

Cell = Tuple[int, int, int]


class Mark(Enum):
    """What a cell can hold."""
    EMPTY = 0
    X = 1
    O = 2

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.O if self == Mark.X else Mark.X


class OutOfBoundsError(IndexError):
    """Raised when a coordinate falls outside the board."""


class BoardState:
    """
    The N x M x K grid of marks.

    The grid is a numpy int8 array indexed [x, y, z], holding Mark values.
    move_count always equals the number of non-empty cells.
    """

    def __init__(self, width: int = 3, height: int = 3, depth: int = 3):
        for name, value in (("width", width), ("height", height), ("depth", depth)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")

        self.width = int(width)
        self.height = int(height)
        self.depth = int(depth)
        self.grid = np.zeros((self.width, self.height, self.depth), dtype=np.int8)
        self._move_count = 0

    @property
    def shape(self) -> Tuple[int, int, int]:
        return (self.width, self.height, self.depth)

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def total_cells(self) -> int:
        return self.width * self.height * self.depth

    def in_bounds(self, x: int, y: int, z: int) -> bool:
        """True if (x, y, z) is a cell of this board. Non-integral coordinates are never in bounds."""
        try:
            x, y, z = operator.index(x), operator.index(y), operator.index(z)
        except TypeError:
            return False
        return 0 <= x < self.width and 0 <= y < self.height and 0 <= z < self.depth

    def get(self, x: int, y: int, z: int) -> Mark:
        """
        Get the mark at a cell.

        Raises:
            OutOfBoundsError: if any coordinate is outside the board.
        """
        if not self.in_bounds(x, y, z):
            raise OutOfBoundsError(f"Cell ({x}, {y}, {z}) is outside a {self.width}x{self.height}x{self.depth} board")
        return Mark(int(self.grid[x, y, z]))

    def is_empty(self, x: int, y: int, z: int) -> bool:
        """True if the cell exists and holds no mark."""
        return self.in_bounds(x, y, z) and bool(self.grid[x, y, z] == Mark.EMPTY.value)

    def set(self, x: int, y: int, z: int, mark: Mark):
        """
        Place a mark on an empty cell.

        The caller validates moves first; breaking the precondition raises.
        """
        if mark == Mark.EMPTY:
            raise ValueError("Cannot place EMPTY; use clear() to reset the board")
        if not self.in_bounds(x, y, z):
            raise OutOfBoundsError(f"Cell ({x}, {y}, {z}) is outside the board")
        if self.grid[x, y, z] != Mark.EMPTY.value:
            raise ValueError(f"Cell ({x}, {y}, {z}) is already occupied by {self.get(x, y, z).name}")

        self.grid[x, y, z] = mark.value
        self._move_count += 1

    def is_full(self) -> bool:
        return self._move_count == self.total_cells

    def clear(self):
        """Empty every cell and reset the move count."""
        self.grid.fill(Mark.EMPTY.value)
        self._move_count = 0

    def get_empty_cells(self) -> List[Cell]:
        """
        Get all empty cells on the board.

        Returns:
            List of (x, y, z) tuples, in x-major order.
        """
        return [tuple(int(i) for i in idx) for idx in np.argwhere(self.grid == Mark.EMPTY.value)]

    def count(self, mark: Mark) -> int:
        """Number of cells holding the given mark."""
        return int(np.count_nonzero(self.grid == mark.value))

    def copy(self) -> "BoardState":
        """Create a deep copy of the board."""
        new_board = BoardState(self.width, self.height, self.depth)
        new_board.grid = self.grid.copy()
        new_board._move_count = self._move_count
        return new_board

    def format_layers(self, symbols: Optional[Dict[Mark, str]] = None) -> str:
        """
        Render the board as text, one block per z layer.

        Rows are y, columns are x, both labelled 1-based.
        """
        symbols = symbols or {Mark.EMPTY: ".", Mark.X: "X", Mark.O: "O"}
        lines = []
        for z in range(self.depth):
            lines.append(f"z={z + 1}")
            lines.append("    " + " ".join(f"{x + 1:>2}" for x in range(self.width)))
            for y in range(self.height):
                row = " ".join(f"{symbols[Mark(int(self.grid[x, y, z]))]:>2}" for x in range(self.width))
                lines.append(f"{y + 1:>2}  {row}")
            lines.append("")
        return "\n".join(lines).rstrip("\n")
