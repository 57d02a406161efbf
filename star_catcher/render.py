"""Scene rendering onto the fixed-size logical field and scaling to the window."""

from __future__ import annotations

import pygame

from .config import (
    BUTTON_COLOR,
    BUTTON_HEIGHT,
    BUTTON_HOVER,
    BUTTON_WIDTH,
    COL_BG_BOTTOM,
    COL_BG_TOP,
    COL_NEBULA,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    HUD_COLOR,
    HUD_DIM,
    LETTERBOX_COLOR,
    OVERLAY_ALPHA,
)
from .session import Scene, State
from .utils import nebula_surface, vertical_gradient_surface


class Renderer:
    """Draws a Scene; owns precomputed backgrounds, fonts and the window transform."""

    def __init__(self) -> None:
        self.field = pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT), 0, 32)
        self.font_big = pygame.font.SysFont(None, 64)
        self.font_mid = pygame.font.SysFont(None, 36)
        self.font_small = pygame.font.SysFont(None, 28)

        # Precompute gradient background and haze
        self.bg_gradient = vertical_gradient_surface(FIELD_WIDTH, FIELD_HEIGHT, COL_BG_TOP, COL_BG_BOTTOM)
        self.nebula = nebula_surface(FIELD_WIDTH, FIELD_HEIGHT, COL_NEBULA)

        self.overlay = pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT), pygame.SRCALPHA)
        self.overlay.fill((0, 0, 0, OVERLAY_ALPHA))

        self.restart_button = pygame.Rect(0, 0, BUTTON_WIDTH, BUTTON_HEIGHT)
        self.restart_button.center = (FIELD_WIDTH // 2, int(FIELD_HEIGHT * 0.6))

        # Presentation transform (window pixels = field * scale + offset)
        self.scale = 1.0
        self.offset = (0, 0)

    def resize(self, window_size: tuple[int, int]) -> None:
        """Fit the field into the window, preserving aspect ratio."""
        ww, wh = window_size
        self.scale = max(0.01, min(ww / FIELD_WIDTH, wh / FIELD_HEIGHT))
        sw, sh = int(FIELD_WIDTH * self.scale), int(FIELD_HEIGHT * self.scale)
        self.offset = ((ww - sw) // 2, (wh - sh) // 2)

    def window_to_field(self, pos: tuple[float, float]) -> tuple[float, float]:
        ox, oy = self.offset
        return (pos[0] - ox) / self.scale, (pos[1] - oy) / self.scale

    def draw_background(self, surf: pygame.Surface, scene: Scene) -> None:
        surf.blit(self.bg_gradient, (0, 0))
        surf.blit(self.nebula, (0, 0))
        t = scene.elapsed_ms / 1000.0
        for speck in scene.specks:
            speck.draw(surf, t)

    def draw(self, scene: Scene, pointer: tuple[float, float] | None = None) -> pygame.Surface:
        surf = self.field
        self.draw_background(surf, scene)
        for star in scene.stars:
            star.draw(surf)
        scene.basket.draw(surf)
        for p in scene.particles:
            p.draw(surf)
        self._draw_hud(surf, scene)
        if scene.state is State.ENDED:
            self._draw_end_overlay(surf, scene, pointer)
        return surf

    def _draw_hud(self, surf: pygame.Surface, scene: Scene) -> None:
        score = self.font_mid.render(f"Score: {scene.score}", True, HUD_COLOR)
        surf.blit(score, (16, 12))
        best = self.font_mid.render(f"High Score: {scene.best}", True, HUD_COLOR)
        surf.blit(best, best.get_rect(topright=(FIELD_WIDTH - 16, 12)))
        level = self.font_small.render(f"Level {scene.level}", True, HUD_DIM)
        surf.blit(level, (16, 44))

    def _draw_end_overlay(
        self, surf: pygame.Surface, scene: Scene, pointer: tuple[float, float] | None
    ) -> None:
        surf.blit(self.overlay, (0, 0))
        cx, cy = FIELD_WIDTH // 2, FIELD_HEIGHT // 2
        if scene.won:
            title = self.font_big.render("You Win!", True, (255, 255, 255))
            surf.blit(title, title.get_rect(center=(cx, cy - 50)))
        final = self.font_mid.render(f"Final Score: {scene.score}", True, (255, 255, 255))
        surf.blit(final, final.get_rect(center=(cx, cy)))

        hover = pointer is not None and self.restart_button.collidepoint(int(pointer[0]), int(pointer[1]))
        pygame.draw.rect(surf, BUTTON_HOVER if hover else BUTTON_COLOR, self.restart_button, border_radius=8)
        label = self.font_small.render("Restart Game", True, (255, 255, 255))
        surf.blit(label, label.get_rect(center=self.restart_button.center))

    def present(self, window: pygame.Surface) -> None:
        """Scale the field onto the window with letterboxing."""
        window.fill(LETTERBOX_COLOR)
        size = (int(FIELD_WIDTH * self.scale), int(FIELD_HEIGHT * self.scale))
        if size == (FIELD_WIDTH, FIELD_HEIGHT):
            window.blit(self.field, self.offset)
        else:
            window.blit(pygame.transform.smoothscale(self.field, size), self.offset)
