"""Round state machine: owns the entities and runs one tick at a time."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, field

from .config import SKY_SEED, SKY_SPECK_COUNT, WINNING_SCORE
from .controls import Controls
from .entities import Basket, Particle, SkySpeck, Star
from .systems import DifficultyController, ParticleSystem, StarSpawner

logger = logging.getLogger(__name__)


class State(enum.Enum):
    IDLE = "idle"
    ACTIVE = "active"
    ENDED = "ended"


@dataclass
class EntityStore:
    """Everything that lives on the playfield during one round."""

    basket: Basket = field(default_factory=Basket)
    stars: list[Star] = field(default_factory=list)
    particles: list[Particle] = field(default_factory=list)
    specks: list[SkySpeck] = field(default_factory=list)

    @classmethod
    def fresh(cls, speck_count: int = SKY_SPECK_COUNT, seed: int = SKY_SEED) -> EntityStore:
        rng = random.Random(seed)
        return cls(specks=[SkySpeck(rng) for _ in range(speck_count)])


@dataclass
class TickReport:
    """What happened during a tick, for the shell (persistence, logging)."""

    caught: int = 0
    levels_gained: int = 0
    new_best: bool = False
    ended: bool = False


@dataclass(frozen=True)
class Scene:
    """Read-only view of a session handed to the renderer."""

    basket: Basket
    stars: tuple[Star, ...]
    particles: tuple[Particle, ...]
    specks: tuple[SkySpeck, ...]
    score: int
    best: int
    level: int
    state: State
    won: bool
    elapsed_ms: float


class Session:
    """Idle -> Active -> Ended, with restart going back to Active."""

    def __init__(
        self,
        best: int = 0,
        rng: random.Random | None = None,
        winning_score: int = WINNING_SCORE,
        difficulty: DifficultyController | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.winning_score = winning_score
        self.difficulty = difficulty if difficulty is not None else DifficultyController()
        self.spawner = StarSpawner(self.rng)
        self.effects = ParticleSystem(self.rng)
        self.entities = EntityStore.fresh()
        self.state = State.IDLE
        self.score = 0
        self.best = max(0, int(best))
        self.best_improved = False
        self.won = False
        self.start_ms = 0.0
        self.elapsed_ms = 0.0

    @property
    def active(self) -> bool:
        return self.state is State.ACTIVE

    @property
    def level(self) -> int:
        return self.difficulty.level

    @property
    def fall_speed(self) -> float:
        return self.difficulty.fall_speed

    def start(self, now_ms: float) -> None:
        """Begin a round. Restarting from Ended behaves exactly like the first start."""
        self.entities = EntityStore.fresh()
        self.difficulty.reset()
        self.score = 0
        self.won = False
        self.best_improved = False
        self.start_ms = now_ms
        self.elapsed_ms = 0.0
        self.state = State.ACTIVE
        logger.info("Round started (best so far: %d)", self.best)

    restart = start

    def _apply_controls(self, controls: Controls) -> None:
        basket = self.entities.basket
        if controls.press is not None:
            basket.grab(*controls.press)
        if controls.pointer_x is not None:
            basket.drag_to(controls.pointer_x)
        if controls.release:
            basket.release()

    def _score_catch(self, star: Star, report: TickReport) -> None:
        self.score += 1
        report.caught += 1
        cx, cy = star.center
        self.effects.burst(self.entities.particles, cx, cy)
        self.entities.basket.trigger_catch()
        if self.score > self.best:
            self.best = self.score
            self.best_improved = True
            report.new_best = True
            logger.debug("New best score %d", self.best)

    def tick(self, now_ms: float, controls: Controls | None = None) -> TickReport:
        report = TickReport()
        if self.state is not State.ACTIVE:
            return report
        if controls is None:
            controls = Controls()
        ent = self.entities

        self._apply_controls(controls)

        self.elapsed_ms = now_ms - self.start_ms
        report.levels_gained = self.difficulty.update(self.elapsed_ms)
        if report.levels_gained:
            self.spawner.burst(ent.stars)

        ent.basket.update(controls.left, controls.right)

        self.spawner.maybe_spawn(ent.stars)
        ent.stars, caught = self.spawner.advance(ent.stars, ent.basket, self.difficulty.fall_speed)
        for star in caught:
            self._score_catch(star, report)

        ent.particles = self.effects.update(ent.particles)

        if self.score >= self.winning_score:
            self.state = State.ENDED
            self.won = True
            report.ended = True
            logger.info(
                "Round won with %d points%s", self.score, " (new best)" if self.best_improved else ""
            )
        return report

    def scene(self) -> Scene:
        ent = self.entities
        return Scene(
            basket=ent.basket,
            stars=tuple(ent.stars),
            particles=tuple(ent.particles),
            specks=tuple(ent.specks),
            score=self.score,
            best=self.best,
            level=self.difficulty.level,
            state=self.state,
            won=self.won,
            elapsed_ms=self.elapsed_ms,
        )
