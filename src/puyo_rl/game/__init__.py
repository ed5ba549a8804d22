"""Game module for Puyo RL.

Exports the core game engine and supporting classes:
- GameGrid: Fixed 6x12 color grid and column gravity
- PuyoPair: Falling pair with orientation mechanics
- is_valid_move: Bounds/occupancy check shared by moves and rotations
- resolve_chains: Group matching, clearing and cascading chains
- ScoringRules: Chain scoring configuration and helpers
- PuyoGame: Game session, state machine and fall timer
"""

from .grid import COLS, PALETTE, ROWS, Color, GameGrid, apply_gravity, create_empty_grid
from .pieces import PairGenerator, PuyoPair, second_cell_position
from .movement import is_valid_move
from .rules import ScoringRules
from .resolver import ChainResult, ChainStep, find_groups, resolve_chains
from .events import EventBus
from .timer import FallTimer
from .core import PLAY_ACTIONS, Action, GameConfig, GameState, PuyoGame

__all__ = [
    "COLS",
    "ROWS",
    "PALETTE",
    "Color",
    "GameGrid",
    "apply_gravity",
    "create_empty_grid",
    "PairGenerator",
    "PuyoPair",
    "second_cell_position",
    "is_valid_move",
    "ScoringRules",
    "ChainResult",
    "ChainStep",
    "find_groups",
    "resolve_chains",
    "EventBus",
    "FallTimer",
    "PLAY_ACTIONS",
    "Action",
    "GameConfig",
    "GameState",
    "PuyoGame",
]
