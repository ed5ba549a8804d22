from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame

from puyo_rl.game import GameState, PuyoGame


def color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (30, 30, 36),
        1: (230, 60, 60),    # red
        2: (70, 200, 90),    # green
        3: (70, 110, 235),   # blue
        4: (240, 210, 60),   # yellow
    }
    return palette.get(abs(v), (200, 200, 200))


class Renderer:
    """Draws a game session; it only reads from the game."""

    def __init__(self, cell_size: int = 32, margin: int = 20, panel_width: int = 160) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self.font = pygame.font.SysFont(None, 26)
        self.big_font = pygame.font.SysFont(None, 44)

    def window_size(self, game: PuyoGame) -> Tuple[int, int]:
        width = self.margin * 3 + game.config.width * self.cell_size + self.panel_width
        height = self.margin * 2 + game.config.height * self.cell_size
        return width, height

    def _draw_cell(self, surf: pygame.Surface, x: int, y: int, value: int) -> None:
        rect = pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size - 1, self.cell_size - 1)
        if value:
            pygame.draw.ellipse(surf, color_for_value(value), rect)
        else:
            pygame.draw.rect(surf, color_for_value(0), rect)

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((18, 18, 24))
        for y in range(h):
            for x in range(w):
                self._draw_cell(surf, x, y, int(state[y, x]))
        return surf

    def _text(self, screen: pygame.Surface, text: str, pos: Tuple[int, int], big: bool = False) -> None:
        font = self.big_font if big else self.font
        screen.blit(font.render(text, True, (230, 230, 230)), pos)

    def _draw_panel(self, screen: pygame.Surface, game: PuyoGame) -> None:
        x0 = self.margin * 2 + game.config.width * self.cell_size
        y0 = self.margin
        self._text(screen, "Next", (x0, y0))
        if game.next_piece is not None:
            # Shown upright: color2 above color1, as it spawns
            for i, color in enumerate((game.next_piece.color2, game.next_piece.color1)):
                rect = pygame.Rect(x0, y0 + 30 + i * self.cell_size, self.cell_size - 1, self.cell_size - 1)
                pygame.draw.ellipse(screen, color_for_value(int(color)), rect)
        lines = [
            f"Score: {game.score}",
            f"Chain: {game.last_chain.chain_depth if game.last_chain else 0}",
            f"High: {game.high_score}",
        ]
        for i, line in enumerate(lines):
            self._text(screen, line, (x0, y0 + 120 + i * 28))

    def _draw_overlay(self, screen: pygame.Surface, game: PuyoGame) -> None:
        if game.state is GameState.TITLE:
            messages = ["Puyo Puyo", "Enter to start", f"High Score: {game.high_score}"]
        elif game.state is GameState.OVER:
            messages = ["Game Over", f"Final Score: {game.score}", "Enter to play again"]
        elif game.paused:
            messages = ["Paused", "Esc to resume"]
        else:
            return
        shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        screen.blit(shade, (0, 0))
        cx = screen.get_width() // 2
        cy = screen.get_height() // 2 - 40
        for i, message in enumerate(messages):
            font = self.big_font if i == 0 else self.font
            img = font.render(message, True, (255, 255, 255))
            screen.blit(img, img.get_rect(center=(cx, cy + i * 40)))

    def draw(self, screen: pygame.Surface, game: PuyoGame) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(game.board_with_piece()), (self.margin, self.margin))
        self._draw_panel(screen, game)
        self._draw_overlay(screen, game)
        pygame.display.flip()
