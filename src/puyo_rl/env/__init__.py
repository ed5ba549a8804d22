"""Gymnasium environment for Puyo RL."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="Puyo-6x12-v0",
    entry_point="puyo_rl.env.puyo_env:PuyoEnv",
)

__all__ = ["Puyo-6x12-v0"]
