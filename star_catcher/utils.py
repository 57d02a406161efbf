"""Geometry and color utility functions used across the game."""

from __future__ import annotations

import colorsys
import math
from typing import Callable

import numpy as np
import pygame


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def intervals_overlap(a0: float, a1: float, b0: float, b1: float) -> bool:
    """True if the closed intervals [a0, a1] and [b0, b1] share at least one point."""
    return a1 >= b0 and a0 <= b1


def approach_zero(value: float, step: float) -> float:
    """Move value toward zero by step without crossing it."""
    if value > 0:
        return max(0.0, value - step)
    if value < 0:
        return min(0.0, value + step)
    return value


def lerp_color(
    a: tuple[int, int, int], b: tuple[int, int, int], t: float
) -> tuple[int, int, int]:
    t = clamp(t, 0.0, 1.0)
    return (
        int(a[0] + (b[0] - a[0]) * t),
        int(a[1] + (b[1] - a[1]) * t),
        int(a[2] + (b[2] - a[2]) * t),
    )


def hsl_color(hue_deg: float, saturation: float = 1.0, lightness: float = 0.5) -> tuple[int, int, int]:
    """RGB tuple for a CSS-style hsl() colour (hue in degrees, s/l in [0,1])."""
    r, g, b = colorsys.hls_to_rgb((hue_deg % 360.0) / 360.0, lightness, saturation)
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


def star_outline(cx: float, cy: float, outer: float, inner: float) -> list[tuple[float, float]]:
    """Ten-vertex star outline alternating outer and inner radius.

    pygame fills polygons with the even-odd rule, which would punch a hole in the
    pentagram centre, so the filled shape is drawn from this outline instead.
    """
    pts: list[tuple[float, float]] = []
    for i in range(10):
        r = outer if i % 2 == 0 else inner
        angle = (i * math.pi) / 5 - math.pi / 2
        pts.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
    return pts


def procedural_noise_surface(
    w: int, h: int, noise_func: Callable[[np.ndarray, np.ndarray], np.ndarray]
) -> np.ndarray:
    """Generate a noise array using NumPy meshgrid and a custom noise function.

    Args:
        w, h: Dimensions.
        noise_func: Function taking X, Y meshgrids in [0, 1] and returning values in [0, 1].

    Returns:
        uint8 array shaped (w, h) ready for pygame.surfarray.
    """
    x = np.linspace(0, 1, w, dtype=np.float32)
    y = np.linspace(0, 1, h, dtype=np.float32)
    X, Y = np.meshgrid(x, y, indexing="ij")
    v = noise_func(X, Y)
    return np.clip(v * 255, 0, 255).astype(np.uint8)


def vertical_gradient_surface(
    w: int, h: int, top: tuple[int, int, int], bottom: tuple[int, int, int]
) -> pygame.Surface:
    """Precompute a top-to-bottom gradient surface."""
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)
    top_arr = np.array(top, dtype=np.float32)
    bottom_arr = np.array(bottom, dtype=np.float32)
    column = top_arr[None, :] * (1.0 - t[:, None]) + bottom_arr[None, :] * t[:, None]
    pixels = np.broadcast_to(column[None, :, :], (w, h, 3)).astype(np.uint8)
    return pygame.surfarray.make_surface(pixels)


def nebula_surface(w: int, h: int, color: tuple[int, int, int], max_alpha: int = 60) -> pygame.Surface:
    """Soft trigonometric haze used behind the falling stars."""

    def haze(X: np.ndarray, Y: np.ndarray) -> np.ndarray:
        v = np.sin(X * 5.0 + np.sin(Y * 3.0)) * 0.6
        v += np.sin(Y * 4.0 + np.sin(X * 2.5 + 1.3)) * 0.4
        return (v + 1.0) / 2.0

    alpha = procedural_noise_surface(w, h, haze).astype(np.float32) * (max_alpha / 255.0)
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    surf.fill((*color, 0))
    view = pygame.surfarray.pixels_alpha(surf)
    view[:, :] = alpha.astype(np.uint8)
    del view  # unlocks the surface
    return surf
