"""Game entities and rendering helpers.

Contains the player-controlled basket, falling stars, catch particles and the
twinkling background specks.
"""

from __future__ import annotations

import math
import random
from collections import deque

import pygame

from .config import (
    ACCELERATION,
    BASKET_BOTTOM,
    BASKET_HEIGHT,
    BASKET_RIM,
    BASKET_TOP,
    BASKET_WIDTH,
    BASKET_Y,
    BOUNCE,
    CATCH_ANIMATION_MS,
    CATCH_ANIMATION_STEP,
    COL_SPECK,
    DECELERATION,
    DRAG_MOMENTUM,
    EASING,
    EASING_SNAP,
    EASING_SNAP_DISTANCE,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    MAX_SPEED,
    PARTICLE_DECAY,
    PARTICLE_GRAVITY,
    PARTICLE_RADIUS,
    STAR_COLOR,
    STAR_GLOW,
    STAR_SIZE,
    TRAIL_COLOR,
    TRAIL_LENGTH,
)
from .utils import approach_zero, clamp, intervals_overlap, lerp_color, star_outline


class Basket:
    """The player's basket: eased target tracking plus keyboard momentum."""

    def __init__(self, x: float | None = None) -> None:
        if x is None:
            x = (FIELD_WIDTH - BASKET_WIDTH) / 2
        self.x = float(x)
        self.y = float(BASKET_Y)
        self.target_x = self.x
        self.velocity = 0.0
        self.catch_timer = 0
        self.trail: deque[tuple[float, float]] = deque(maxlen=TRAIL_LENGTH)
        self.dragging = False
        self.drag_offset = 0.0

    @property
    def max_x(self) -> float:
        return float(FIELD_WIDTH - BASKET_WIDTH)

    @property
    def center(self) -> tuple[float, float]:
        return self.x + BASKET_WIDTH / 2, self.y + BASKET_HEIGHT / 2

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + BASKET_WIDTH and self.y <= py <= self.y + BASKET_HEIGHT

    def grab(self, px: float, py: float) -> bool:
        """Start dragging if the pointer went down on the basket."""
        if not self.contains(px, py):
            return False
        self.dragging = True
        self.drag_offset = px - self.x
        return True

    def release(self) -> None:
        self.dragging = False

    def drag_to(self, px: float) -> None:
        """Move the drag target under the pointer and give the motion some momentum."""
        if not self.dragging:
            return
        target = px - self.drag_offset
        self.target_x = clamp(target, 0.0, self.max_x)
        self.velocity = (target - self.x) * DRAG_MOMENTUM

    def trigger_catch(self) -> None:
        self.catch_timer = CATCH_ANIMATION_MS

    def update(self, left: bool = False, right: bool = False) -> None:
        dx = self.target_x - self.x
        easing = EASING_SNAP if abs(dx) > EASING_SNAP_DISTANCE else EASING
        self.x += dx * easing

        if left:
            self.velocity = max(-MAX_SPEED, self.velocity - ACCELERATION)
        elif right:
            self.velocity = min(MAX_SPEED, self.velocity + ACCELERATION)
        else:
            self.velocity = approach_zero(self.velocity, DECELERATION)

        self.x += self.velocity

        # Bounce off the field edges
        if self.x < 0.0:
            self.x = 0.0
            self.velocity *= BOUNCE
        elif self.x > self.max_x:
            self.x = self.max_x
            self.velocity *= BOUNCE

        # Keyboard wins over a stale drag target
        if left or right:
            self.target_x = self.x

        if self.catch_timer > 0:
            self.catch_timer = max(0, self.catch_timer - CATCH_ANIMATION_STEP)

        self.trail.append(self.center)

    def catch_scale(self) -> float:
        """Horizontal scale of the catch pulse; vertical scale is 2 - this."""
        if self.catch_timer <= 0:
            return 1.0
        progress = self.catch_timer / CATCH_ANIMATION_MS
        return 1.0 + math.sin(progress * math.pi) * 0.2

    def tilt(self) -> float:
        """Lean in radians, proportional to horizontal velocity."""
        return self.velocity * 0.02

    def _body_surface(self) -> pygame.Surface:
        pad = 30
        w, h = BASKET_WIDTH, BASKET_HEIGHT
        s = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        # Trapezoid body filled row by row with a vertical gradient
        for row in range(h):
            t = row / max(1, h - 1)
            inset = 10.0 * (row / h)
            color = lerp_color(BASKET_TOP, BASKET_BOTTOM, t)
            pygame.draw.line(s, color, (pad + inset, pad + row), (pad + w - inset, pad + row))
        pygame.draw.line(s, BASKET_RIM, (pad, pad), (pad + w, pad), 3)
        # Handle arc with a soft drop shadow
        handle = pygame.Rect(0, 0, 30, 30)
        handle.center = (pad + w // 2, pad - 10)
        pygame.draw.arc(s, (0, 0, 0, 110), handle.move(0, 2), 0.0, math.pi, 4)
        pygame.draw.arc(s, BASKET_RIM, handle, 0.0, math.pi, 3)
        return s

    def draw(self, surf: pygame.Surface) -> None:
        if len(self.trail) >= 2:
            pygame.draw.aalines(surf, TRAIL_COLOR, False, list(self.trail))

        img = self._body_surface()
        scale = self.catch_scale()
        if scale != 1.0:
            w, h = img.get_size()
            img = pygame.transform.smoothscale(img, (max(1, int(w * scale)), max(1, int(h * (2.0 - scale)))))
        tilt = self.tilt()
        if tilt:
            img = pygame.transform.rotozoom(img, -math.degrees(tilt), 1.0)
        cx, cy = self.center
        surf.blit(img, img.get_rect(center=(int(cx), int(cy))))


class Star:
    """A falling star; top-left anchored square of side ``size``."""

    _glow_cache: dict[int, pygame.Surface] = {}

    def __init__(self, x: float, y: float | None = None, size: int = STAR_SIZE) -> None:
        self.x = float(x)
        self.y = float(-size if y is None else y)
        self.size = size

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.size / 2, self.y + self.size / 2

    def update(self, fall_speed: float) -> None:
        self.y += fall_speed

    def caught_by(self, basket: Basket) -> bool:
        """Axis-aligned overlap with the basket; no lower bound, as with the rim test."""
        return self.y + self.size >= basket.y and intervals_overlap(
            self.x, self.x + self.size, basket.x, basket.x + BASKET_WIDTH
        )

    def offscreen(self) -> bool:
        return self.y > FIELD_HEIGHT

    @classmethod
    def _glow(cls, size: int) -> pygame.Surface:
        glow = cls._glow_cache.get(size)
        if glow is None:
            glow = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
            # Radial falloff from 30% alpha at the centre to transparent at the edge
            for r in range(size, 0, -1):
                a = int(0.3 * 255 * (1.0 - r / size))
                pygame.draw.circle(glow, (*STAR_GLOW, a), (size, size), r)
            cls._glow_cache[size] = glow
        return glow

    def draw(self, surf: pygame.Surface) -> None:
        cx, cy = self.center
        glow = self._glow(self.size)
        surf.blit(glow, glow.get_rect(center=(int(cx), int(cy))))
        half = self.size / 2
        pygame.draw.polygon(surf, STAR_COLOR, star_outline(cx, cy, half, half * 0.382))


class Particle:
    """A short-lived spark from a catch burst; alpha follows ``life``."""

    def __init__(
        self,
        x: float,
        y: float,
        vx: float,
        vy: float,
        color: tuple[int, int, int],
        radius: float = PARTICLE_RADIUS,
    ) -> None:
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = 1.0
        self.color = color
        self.radius = radius

    @property
    def alive(self) -> bool:
        return self.life > 0.0

    def update(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.vy += PARTICLE_GRAVITY
        self.life -= PARTICLE_DECAY

    def draw(self, surf: pygame.Surface) -> None:
        if not self.alive:
            return
        d = int(self.radius * 2) + 2
        s = pygame.Surface((d, d), pygame.SRCALPHA)
        a = int(255 * clamp(self.life, 0.0, 1.0))
        pygame.draw.circle(s, (*self.color, a), (d // 2, d // 2), int(self.radius))
        surf.blit(s, (int(self.x) - d // 2, int(self.y) - d // 2))


class SkySpeck:
    """Background decoration: a faint star that twinkles in place."""

    def __init__(self, rng: random.Random) -> None:
        self.x = rng.uniform(0, FIELD_WIDTH)
        self.y = rng.uniform(0, FIELD_HEIGHT * 0.85)
        self.radius = rng.choice((1, 1, 1, 2))
        self.speed = rng.uniform(0.5, 2.0)
        self.phase = rng.uniform(0.0, math.tau)

    def brightness(self, t: float) -> float:
        return 0.55 + 0.45 * math.sin(t * self.speed + self.phase)

    def draw(self, surf: pygame.Surface, t: float) -> None:
        color = lerp_color((40, 40, 70), COL_SPECK, self.brightness(t))
        pygame.draw.circle(surf, color, (int(self.x), int(self.y)), self.radius)
