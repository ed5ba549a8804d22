from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .grid import Color, Coordinate, GameGrid, apply_gravity
from .rules import ScoringRules


logger = logging.getLogger(__name__)

Group = List[Coordinate]

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class ChainStep:
    chain: int
    cleared: int
    points: int
    groups: List[Group]


@dataclass
class ChainResult:
    grid: GameGrid
    score_delta: int = 0
    chain_depth: int = 0
    steps: List[ChainStep] = field(default_factory=list)

    @property
    def cleared_total(self) -> int:
        return sum(step.cleared for step in self.steps)


def find_groups(grid: GameGrid) -> List[Group]:
    """Connected same-color components, discovered in row-major order.

    Uses an explicit stack; only orthogonal neighbours connect.
    """
    visited = set()
    groups: List[Group] = []
    for y in range(grid.height):
        for x in range(grid.width):
            if (x, y) in visited:
                continue
            color = grid.grid[y, x]
            if color == Color.EMPTY:
                continue
            group: Group = []
            stack = [(x, y)]
            visited.add((x, y))
            while stack:
                cx, cy = stack.pop()
                group.append((cx, cy))
                for dx, dy in _NEIGHBOURS:
                    nx, ny = cx + dx, cy + dy
                    if (nx, ny) in visited or not grid.is_inside(nx, ny):
                        continue
                    if grid.grid[ny, nx] != color:
                        continue
                    visited.add((nx, ny))
                    stack.append((nx, ny))
            groups.append(group)
    return groups


def resolve_chains(
    grid: GameGrid,
    rules: Optional[ScoringRules] = None,
    on_pass: Optional[Callable[[ChainStep], None]] = None,
) -> ChainResult:
    """Clear qualifying groups, drop what remains, and repeat until stable.

    ``grid`` is left untouched; the stabilised board is returned in the
    result. ``on_pass`` is invoked after every pass that cleared something.
    """
    rules = rules or ScoringRules()
    board = grid.copy()
    result = ChainResult(grid=board)
    chain = 0
    while True:
        matched = [group for group in find_groups(board) if rules.qualifies(group)]
        if not matched:
            break
        chain += 1
        cleared = 0
        for group in matched:
            board.clear_cells(group)
            cleared += len(group)
        points = rules.score_for_pass(cleared, chain)
        step = ChainStep(chain=chain, cleared=cleared, points=points, groups=matched)
        result.steps.append(step)
        result.score_delta += points
        logger.debug("chain %d cleared %d puyos in %d groups for %d points", chain, cleared, len(matched), points)
        board = apply_gravity(board)
        if on_pass is not None:
            on_pass(step)
    result.grid = board
    result.chain_depth = chain
    return result
