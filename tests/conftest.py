import sys, os

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import pytest

from puyo_rl.game import GameConfig, PuyoGame


@pytest.fixture
def game():
    g = PuyoGame(GameConfig(random_seed=7))
    g.start_game()
    return g
