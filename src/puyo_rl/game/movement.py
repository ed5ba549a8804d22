from __future__ import annotations

from .grid import GameGrid
from .pieces import PuyoPair


def is_valid_move(grid: GameGrid, pair: PuyoPair) -> bool:
    """True iff both cells of ``pair`` are inside ``grid`` and empty.

    Lateral moves, drops and rotations all go through this check.
    """
    for x, y in pair.positions():
        if not grid.is_inside(x, y):
            return False
        if not grid.is_empty(x, y):
            return False
    return True
