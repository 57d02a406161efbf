"""Per-tick systems: difficulty progression, star spawning/collisions, particles."""

from __future__ import annotations

import logging
import math
import random

from .config import (
    FIELD_WIDTH,
    INITIAL_FALL_SPEED,
    LEVEL_INTERVAL_MS,
    LEVEL_UP_BURST,
    PARTICLE_COUNT,
    PARTICLE_HUE_MIN,
    PARTICLE_HUE_SPAN,
    PARTICLE_SPEED_MAX,
    PARTICLE_SPEED_MIN,
    SPAWN_CHANCE,
    STAR_SIZE,
)
from .entities import Basket, Particle, Star
from .utils import hsl_color

logger = logging.getLogger(__name__)


class DifficultyController:
    """Wall-clock driven level counter; fall speed grows by one per level."""

    def __init__(
        self,
        interval_ms: int = LEVEL_INTERVAL_MS,
        initial_speed: float = INITIAL_FALL_SPEED,
    ) -> None:
        self.interval_ms = interval_ms
        self.initial_speed = initial_speed
        self.level = 1
        self.fall_speed = initial_speed

    def reset(self) -> None:
        self.level = 1
        self.fall_speed = self.initial_speed

    def update(self, elapsed_ms: float) -> int:
        """Advance to the level implied by elapsed time.

        Returns the number of levels gained this call (0 if unchanged). After a long
        pause several levels can be gained at once.
        """
        new_level = int(max(0.0, elapsed_ms) // self.interval_ms) + 1
        if new_level <= self.level:
            return 0
        gained = new_level - self.level
        self.level = new_level
        self.fall_speed = self.initial_speed + (self.level - 1)
        logger.info("Difficulty level %d (fall speed %s)", self.level, self.fall_speed)
        return gained


class StarSpawner:
    """Spawns stars, advances their fall and sorts out catches and misses."""

    def __init__(
        self,
        rng: random.Random,
        chance: float = SPAWN_CHANCE,
        star_size: int = STAR_SIZE,
    ) -> None:
        self.rng = rng
        self.chance = chance
        self.star_size = star_size

    def spawn(self, stars: list[Star]) -> Star:
        star = Star(self.rng.uniform(0, FIELD_WIDTH - self.star_size), size=self.star_size)
        stars.append(star)
        return star

    def maybe_spawn(self, stars: list[Star]) -> Star | None:
        if self.rng.random() < self.chance:
            return self.spawn(stars)
        return None

    def burst(self, stars: list[Star], count: int = LEVEL_UP_BURST) -> None:
        for _ in range(count):
            self.spawn(stars)

    @staticmethod
    def advance(
        stars: list[Star], basket: Basket, fall_speed: float
    ) -> tuple[list[Star], list[Star]]:
        """Move every star down and split them into (survivors, caught).

        The catch test runs before the off-screen test, so a star is never both
        caught and dropped in the same tick. Missed stars are simply left out.
        """
        survivors: list[Star] = []
        caught: list[Star] = []
        for star in stars:
            star.update(fall_speed)
            if star.caught_by(basket):
                caught.append(star)
            elif not star.offscreen():
                survivors.append(star)
        return survivors, caught


class ParticleSystem:
    """Radial spark bursts that fall, fade and disappear."""

    def __init__(self, rng: random.Random, count: int = PARTICLE_COUNT) -> None:
        self.rng = rng
        self.count = count

    def burst(self, particles: list[Particle], x: float, y: float) -> None:
        for i in range(self.count):
            angle = (math.pi * 2 * i) / self.count
            speed = self.rng.uniform(PARTICLE_SPEED_MIN, PARTICLE_SPEED_MAX)
            color = hsl_color(PARTICLE_HUE_MIN + self.rng.random() * PARTICLE_HUE_SPAN)
            particles.append(
                Particle(x, y, math.cos(angle) * speed, math.sin(angle) * speed, color)
            )

    @staticmethod
    def update(particles: list[Particle]) -> list[Particle]:
        """Advance all particles and return the ones still alive."""
        alive: list[Particle] = []
        for p in particles:
            p.update()
            if p.alive:
                alive.append(p)
        return alive
