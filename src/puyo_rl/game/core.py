from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Optional

import numpy as np

from .events import (
    EVENT_CHAIN_COMPLETE,
    EVENT_CHAIN_STEP,
    EVENT_HIGH_SCORE,
    EVENT_PIECE_LANDED,
    EVENT_PIECE_MOVED,
    EVENT_PIECE_ROTATED,
    EVENT_SCORE_CHANGED,
    EVENT_STATE_CHANGED,
    EventBus,
)
from .grid import COLS, ROWS, apply_gravity, create_empty_grid
from .movement import is_valid_move
from .pieces import SPAWN_X, SPAWN_Y, PairGenerator, PuyoPair
from .resolver import ChainResult, ChainStep, resolve_chains
from .rules import ScoringRules
from .timer import FallTimer


logger = logging.getLogger(__name__)


class GameState(Enum):
    TITLE = "title"
    ACTIVE = "active"
    OVER = "over"


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    DOWN = 2
    ROTATE_LEFT = 3
    ROTATE_RIGHT = 4
    NONE = 5
    PAUSE = 6
    START = 7


# Actions an agent may take during play; PAUSE and START are UI commands.
PLAY_ACTIONS = (Action.LEFT, Action.RIGHT, Action.DOWN, Action.ROTATE_LEFT, Action.ROTATE_RIGHT, Action.NONE)


@dataclass
class GameConfig:
    width: int = COLS
    height: int = ROWS
    spawn_x: int = SPAWN_X
    spawn_y: int = SPAWN_Y
    fall_interval_ms: int = 1000
    game_over_row: int = 1
    random_seed: Optional[int] = None
    high_score: int = 0
    # Drop the half of a horizontal pair that lands over a gap before matching.
    settle_split_pairs: bool = False


class PuyoGame:
    """Game session: owns the grid, the falling and next pairs, and the score.

    Every command runs to completion before the next one; collaborators
    observe progress through ``events``.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        events: Optional[EventBus] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.events = events or EventBus()
        self.generator = PairGenerator(self.config.random_seed, self.config.spawn_x, self.config.spawn_y)
        self.timer = FallTimer(self.config.fall_interval_ms)
        self.grid = create_empty_grid(self.config.width, self.config.height)
        self.state = GameState.TITLE
        self.paused = False
        self.score = 0
        self.chain = 0
        self.high_score = max(0, int(self.config.high_score))
        self.current: Optional[PuyoPair] = None
        self.next_piece: Optional[PuyoPair] = None
        self.last_chain: Optional[ChainResult] = None
        self.pieces_landed = 0

    @property
    def is_live(self) -> bool:
        return self.state is GameState.ACTIVE and not self.paused

    @property
    def game_over(self) -> bool:
        return self.state is GameState.OVER

    def start_game(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.generator.reseed(seed)
        self.grid = create_empty_grid(self.config.width, self.config.height)
        self.score = 0
        self.chain = 0
        self.last_chain = None
        self.pieces_landed = 0
        self.current = self.generator.next_pair()
        self.next_piece = self.generator.next_pair()
        self.state = GameState.ACTIVE
        self.paused = False
        self.timer.stop()
        logger.info("new game started (high score %d)", self.high_score)
        self._state_changed()

    def restart(self, seed: Optional[int] = None) -> None:
        self.start_game(seed)

    def toggle_pause(self) -> None:
        if self.state is not GameState.ACTIVE:
            return
        self.paused = not self.paused
        self._state_changed()

    def _state_changed(self) -> None:
        if self.is_live:
            self.timer.start()
        else:
            self.timer.stop()
        self.events.emit(EVENT_STATE_CHANGED, state=self.state, paused=self.paused)

    def _try_move(self, dx: int, dy: int, direction: str) -> bool:
        if not self.is_live or self.current is None:
            return False
        candidate = self.current.moved(dx, dy)
        if not is_valid_move(self.grid, candidate):
            return False
        self.current = candidate
        self.events.emit(EVENT_PIECE_MOVED, piece=candidate, direction=direction)
        return True

    def _try_rotate(self, delta: int, direction: str) -> bool:
        if not self.is_live or self.current is None:
            return False
        candidate = self.current.rotated(delta)
        if not is_valid_move(self.grid, candidate):
            return False
        self.current = candidate
        self.events.emit(EVENT_PIECE_ROTATED, piece=candidate, direction=direction)
        return True

    def move_left(self) -> bool:
        return self._try_move(-1, 0, "left")

    def move_right(self) -> bool:
        return self._try_move(1, 0, "right")

    def move_down(self) -> bool:
        """Drop one row; if the row below is blocked the pair lands instead."""
        if not self.is_live or self.current is None:
            return False
        if self._try_move(0, 1, "down"):
            return True
        self._land()
        return False

    def rotate_left(self) -> bool:
        return self._try_rotate(-1, "left")

    def rotate_right(self) -> bool:
        return self._try_rotate(1, "right")

    def fall_tick(self) -> None:
        if self.is_live:
            self.move_down()

    def update(self, elapsed_ms: int) -> None:
        """Advance the fall timer and apply every tick that fell due."""
        for _ in range(self.timer.advance(elapsed_ms)):
            if not self.is_live:
                break
            self.move_down()

    def step(self, action: Action) -> Dict[str, Any]:
        action = Action(action)
        if action == Action.LEFT:
            self.move_left()
        elif action == Action.RIGHT:
            self.move_right()
        elif action == Action.DOWN:
            self.move_down()
        elif action == Action.ROTATE_LEFT:
            self.rotate_left()
        elif action == Action.ROTATE_RIGHT:
            self.rotate_right()
        elif action == Action.PAUSE:
            self.toggle_pause()
        elif action == Action.START:
            if self.state is not GameState.ACTIVE:
                self.start_game()
        elif action == Action.NONE:
            pass
        return self.get_state()

    def _land(self) -> None:
        piece = self.current
        assert piece is not None
        board = self.grid.copy()
        for x, y, color in piece.cells():
            if board.is_inside(x, y):
                board.set(x, y, color)
            else:
                logger.debug("dropping out-of-bounds cell (%d, %d) on landing", x, y)
        self.current = None
        self.pieces_landed += 1
        self.events.emit(EVENT_PIECE_LANDED, piece=piece)
        logger.debug("pair %s/%s landed at (%d, %d) orientation %d",
                     piece.color1.name, piece.color2.name, piece.x, piece.y, piece.orientation)

        if self.config.settle_split_pairs:
            board = apply_gravity(board)
        result = resolve_chains(board, self.rules, on_pass=self._on_chain_step)
        self.grid = result.grid
        self.last_chain = result
        if result.score_delta:
            self._add_score(result.score_delta)
        self.events.emit(EVENT_CHAIN_COMPLETE, chain_depth=result.chain_depth, score_delta=result.score_delta)

        self.current = self.next_piece
        self.next_piece = self.generator.next_pair()
        self.chain = 0

        if self.grid.row_occupied(self.config.game_over_row):
            self.state = GameState.OVER
            logger.info("game over with score %d", self.score)
            self._state_changed()

    def _on_chain_step(self, step: ChainStep) -> None:
        self.chain = step.chain
        self.events.emit(EVENT_CHAIN_STEP, chain=step.chain, cleared=step.cleared, points=step.points)

    def _add_score(self, delta: int) -> None:
        self.score += delta
        self.events.emit(EVENT_SCORE_CHANGED, score=self.score, delta=delta)
        if self.score > self.high_score:
            self.high_score = self.score
            logger.info("new high score %d", self.high_score)
            self.events.emit(EVENT_HIGH_SCORE, value=self.high_score)

    def board_with_piece(self) -> np.ndarray:
        # Overlay the falling pair on a copy of the grid
        state = self.grid.clone_state()
        if self.current is not None and not self.game_over:
            for x, y, color in self.current.cells():
                if self.grid.is_inside(x, y):
                    state[y, x] = int(color)
        return state

    def get_state(self) -> Dict[str, Any]:
        return {
            "grid": self.grid.clone_state(),
            "current": self.current,
            "next": self.next_piece,
            "score": self.score,
            "chain": self.chain,
            "high_score": self.high_score,
            "state": self.state,
            "paused": self.paused,
        }
