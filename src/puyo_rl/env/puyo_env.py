from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from puyo_rl.game import PLAY_ACTIONS, GameConfig, PuyoGame, ScoringRules
from puyo_rl.game.grid import PALETTE


def _piece_vector(game: PuyoGame) -> np.ndarray:
    piece = game.current
    if piece is None:
        return np.full((5,), -1, dtype=np.int8)
    return np.array(
        [int(piece.color1), int(piece.color2), piece.x, piece.y, piece.orientation],
        dtype=np.int8,
    )


def _next_vector(game: PuyoGame) -> np.ndarray:
    piece = game.next_piece
    if piece is None:
        return np.full((2,), -1, dtype=np.int8)
    return np.array([int(piece.color1), int(piece.color2)], dtype=np.int8)


class PuyoEnv(gym.Env):
    """Single-player puyo environment.

    Each step applies one play action; every ``steps_per_fall`` steps the
    fall tick pulls the pair down one row. The reward is the score gained.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 rules: Optional[ScoringRules] = None,
                 steps_per_fall: int = 4,
                 max_episode_steps: int = 10000,
                 terminal_penalty: float = 0.0) -> None:
        super().__init__()
        self.game = PuyoGame(config, rules)
        self.render_mode = render_mode
        self.steps_per_fall = max(1, int(steps_per_fall))
        self.max_episode_steps = int(max_episode_steps)
        self.terminal_penalty = float(terminal_penalty)

        width = self.game.config.width
        height = self.game.config.height
        top = len(PALETTE)
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=top, shape=(height, width), dtype=np.int8),
                "piece": spaces.Box(low=-1, high=max(width, height), shape=(5,), dtype=np.int8),
                "next": spaces.Box(low=-1, high=top, shape=(2,), dtype=np.int8),
            }
        )
        self.action_space = spaces.Discrete(len(PLAY_ACTIONS))
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "grid": self.game.grid.clone_state().astype(np.int8),
            "piece": _piece_vector(self.game),
            "next": _next_vector(self.game),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "chain": self.game.last_chain.chain_depth if self.game.last_chain else 0,
            "pieces_landed": self.game.pieces_landed,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.start_game(seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        score_before = self.game.score
        self.game.step(PLAY_ACTIONS[int(action)])
        self._steps += 1
        if self._steps % self.steps_per_fall == 0:
            self.game.fall_tick()

        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        reward = float(self.game.score - score_before)
        if terminated:
            reward += self.terminal_penalty
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        from puyo_rl.visualization.renderer import color_for_value

        board = self.game.board_with_piece()
        cell = 12
        h, w = board.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(board[y, x]))
        return img

    def close(self) -> None:
        pass
