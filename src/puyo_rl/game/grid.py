from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

import numpy as np


Coordinate = Tuple[int, int]

ROWS = 12
COLS = 6


class Color(IntEnum):
    EMPTY = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    YELLOW = 4


PALETTE: Tuple[Color, ...] = (Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW)

_LETTERS = {
    Color.EMPTY: ".",
    Color.RED: "R",
    Color.GREEN: "G",
    Color.BLUE: "B",
    Color.YELLOW: "Y",
}
_FROM_LETTER = {letter: color for color, letter in _LETTERS.items()}


class GameGrid:
    """Fixed-size cell matrix holding puyo colors.

    Cells are addressed as (x, y) with x the column and y the row, row 0 at
    the top. The underlying array is indexed ``grid[y, x]`` and uses 0 for
    empty cells. Dimensions are set once at construction.
    """

    def __init__(self, width: int = COLS, height: int = ROWS) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "GameGrid":
        """Build a grid from text rows such as ``"RRG..."`` (top row first)."""
        if not rows:
            raise ValueError("at least one row is required")
        width = len(rows[0])
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has width {len(row)}, expected {width}")
            for x, letter in enumerate(row):
                try:
                    grid.grid[y, x] = _FROM_LETTER[letter.upper()]
                except KeyError:
                    raise ValueError(f"unknown color letter {letter!r}") from None
        return grid

    def to_rows(self) -> List[str]:
        return ["".join(_LETTERS[Color(int(v))] for v in row) for row in self.grid]

    def reset(self) -> None:
        self.grid.fill(Color.EMPTY)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_empty(self, x: int, y: int) -> bool:
        return self.grid[y, x] == Color.EMPTY

    def get(self, x: int, y: int) -> Color:
        return Color(int(self.grid[y, x]))

    def set(self, x: int, y: int, color: Color) -> None:
        self.grid[y, x] = color

    def clear_cells(self, cells: Iterable[Coordinate]) -> None:
        for x, y in cells:
            self.grid[y, x] = Color.EMPTY

    def row_occupied(self, y: int) -> bool:
        return bool(np.any(self.grid[y, :] != Color.EMPTY))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def copy(self) -> "GameGrid":
        new_grid = GameGrid(self.width, self.height)
        new_grid.grid = self.grid.copy()
        return new_grid

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameGrid):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        return "\n".join(self.to_rows())


def create_empty_grid(width: int = COLS, height: int = ROWS) -> GameGrid:
    return GameGrid(width, height)


def apply_gravity(grid: GameGrid) -> GameGrid:
    """Return a copy with every column compacted towards the bottom.

    Remaining cells keep their relative vertical order.
    """
    settled = GameGrid(grid.width, grid.height)
    for x in range(grid.width):
        column = grid.grid[:, x]
        stack = column[column != Color.EMPTY]
        if stack.size:
            settled.grid[grid.height - stack.size :, x] = stack
    return settled
