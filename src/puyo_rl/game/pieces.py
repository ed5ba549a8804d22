from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .grid import PALETTE, Color, Coordinate


# Offset of the second puyo relative to the anchor, indexed by orientation:
# 0 up, 1 right, 2 down, 3 left.
ORIENTATION_OFFSETS: Tuple[Coordinate, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))

SPAWN_X = 2
SPAWN_Y = 0


def _check_orientation(orientation: int) -> None:
    if orientation not in (0, 1, 2, 3):
        raise ValueError(f"orientation must be 0..3, got {orientation!r}")


def second_cell_position(x: int, y: int, orientation: int) -> Coordinate:
    _check_orientation(orientation)
    dx, dy = ORIENTATION_OFFSETS[orientation]
    return x + dx, y + dy


@dataclass(frozen=True)
class PuyoPair:
    """Falling pair: ``color1`` sits on the anchor, ``color2`` orbits it."""

    color1: Color
    color2: Color
    x: int = SPAWN_X
    y: int = SPAWN_Y
    orientation: int = 0

    def __post_init__(self) -> None:
        _check_orientation(self.orientation)

    def second_position(self) -> Coordinate:
        return second_cell_position(self.x, self.y, self.orientation)

    def cells(self) -> List[Tuple[int, int, Color]]:
        x2, y2 = self.second_position()
        return [(self.x, self.y, self.color1), (x2, y2, self.color2)]

    def positions(self) -> List[Coordinate]:
        return [(self.x, self.y), self.second_position()]

    def moved(self, dx: int, dy: int) -> "PuyoPair":
        return PuyoPair(self.color1, self.color2, self.x + dx, self.y + dy, self.orientation)

    def rotated(self, delta: int) -> "PuyoPair":
        return PuyoPair(self.color1, self.color2, self.x, self.y, (self.orientation + delta) % 4)


class PairGenerator:
    """Seedable source of new pairs, colors drawn uniformly per cell."""

    def __init__(self, seed: Optional[int] = None, spawn_x: int = SPAWN_X, spawn_y: int = SPAWN_Y) -> None:
        self.rng = random.Random(seed)
        self.spawn_x = spawn_x
        self.spawn_y = spawn_y

    def reseed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def random_color(self) -> Color:
        return self.rng.choice(PALETTE)

    def next_pair(self) -> PuyoPair:
        color1 = self.random_color()
        color2 = self.random_color()
        return PuyoPair(color1, color2, self.spawn_x, self.spawn_y, 0)
