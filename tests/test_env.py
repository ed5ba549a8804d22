import gymnasium as gym
import numpy as np

import puyo_rl.env  # noqa: F401
from puyo_rl.env.puyo_env import PuyoEnv
from puyo_rl.game import Action, PLAY_ACTIONS, PuyoGame


def test_registered_env():
    env = gym.make("Puyo-6x12-v0")
    assert isinstance(env.unwrapped.game, PuyoGame)
    env.close()


def test_reset_observation():
    env = PuyoEnv()
    obs, info = env.reset(seed=3)
    assert env.observation_space.contains(obs)
    assert obs["grid"].shape == (12, 6)
    assert not obs["grid"].any()
    assert list(obs["piece"][2:]) == [2, 0, 0]
    assert info["score"] == 0
    assert env.action_space.n == len(PLAY_ACTIONS)


def test_same_seed_same_episode():
    a, b = PuyoEnv(), PuyoEnv()
    obs_a, _ = a.reset(seed=9)
    obs_b, _ = b.reset(seed=9)
    for _ in range(30):
        obs_a, *_ = a.step(PLAY_ACTIONS.index(Action.DOWN))
        obs_b, *_ = b.step(PLAY_ACTIONS.index(Action.DOWN))
    assert np.array_equal(obs_a["grid"], obs_b["grid"])
    assert np.array_equal(obs_a["next"], obs_b["next"])


def test_fall_tick_every_n_steps():
    env = PuyoEnv(steps_per_fall=3)
    env.reset(seed=1)
    noop = PLAY_ACTIONS.index(Action.NONE)
    env.step(noop)
    env.step(noop)
    assert env.game.current.y == 0
    env.step(noop)
    assert env.game.current.y == 1


def test_dropping_in_one_column_terminates():
    env = PuyoEnv(terminal_penalty=-5.0)
    env.reset(seed=0)
    down = PLAY_ACTIONS.index(Action.DOWN)
    terminated = False
    for _ in range(2000):
        obs, reward, terminated, truncated, info = env.step(down)
        if terminated:
            break
    assert terminated
    assert env.observation_space.contains(obs)


def test_rgb_render():
    env = PuyoEnv(render_mode="rgb_array")
    env.reset(seed=2)
    img = env.render()
    assert img.shape == (12 * 12, 6 * 12, 3)
    assert img.dtype == np.uint8
