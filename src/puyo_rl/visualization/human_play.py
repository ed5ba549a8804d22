from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

import pygame

from puyo_rl.game import Action, GameConfig, GameState, PuyoGame
from puyo_rl.storage import HighScoreStore
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_a: Action.LEFT,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_d: Action.RIGHT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_s: Action.DOWN,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_o: Action.ROTATE_LEFT,
    pygame.K_z: Action.ROTATE_LEFT,
    pygame.K_p: Action.ROTATE_RIGHT,
    pygame.K_UP: Action.ROTATE_RIGHT,
    pygame.K_ESCAPE: Action.PAUSE,
    pygame.K_RETURN: Action.START,
    pygame.K_SPACE: Action.START,
}


def run(seed: Optional[int] = None, fall_ms: int = 1000, high_score_file: Optional[str] = None) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = PuyoGame(GameConfig(random_seed=seed, fall_interval_ms=fall_ms))
        HighScoreStore(high_score_file).attach(game)
        renderer = Renderer()

        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Puyo Puyo")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_q:
                        running = False
                        continue
                    action = KEY_TO_ACTION.get(event.key)
                    if action is None:
                        continue
                    if action == Action.START and game.state is GameState.ACTIVE:
                        continue
                    game.step(action)

            # Fall timer only runs while the game is live
            game.update(clock.get_time())

            renderer.draw(screen, game)
            clock.tick(60)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Puyo Puyo with the keyboard")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fall-ms", type=int, default=1000, help="Milliseconds between automatic drops")
    p.add_argument("--high-score-file", type=str, default=None)
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run(seed=args.seed, fall_ms=args.fall_ms, high_score_file=args.high_score_file)


if __name__ == "__main__":  # pragma: no cover
    main()
