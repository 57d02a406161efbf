"""Window, event pump and frame loop around a Session."""

from __future__ import annotations

import argparse
import logging
import random
import sys

import pygame

from .config import FIELD_HEIGHT, FIELD_WIDTH, FPS, HIGH_SCORE_FILE, WINDOW_TITLE
from .controls import InputState
from .highscore import HighScoreStore
from .render import Renderer
from .session import Session, State

logger = logging.getLogger(__name__)

RESTART_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure root logging once (stream handler)."""
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    return logging.getLogger("star_catcher")


class Game:
    """Top-level controller: owns the window, clock, input adapter and session."""

    def __init__(
        self,
        fps: int = FPS,
        store: HighScoreStore | None = None,
        seed: int | None = None,
    ) -> None:
        pygame.init()
        self.window = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.store = store if store is not None else HighScoreStore(HIGH_SCORE_FILE)
        self.renderer = Renderer()
        self.renderer.resize(self.window.get_size())
        self.input = InputState(self.renderer.window_to_field)
        self.session = Session(best=self.store.load(), rng=random.Random(seed))
        self.pointer: tuple[float, float] | None = None
        self.running = True
        self.session.start(pygame.time.get_ticks())

    def restart(self) -> None:
        self.input.snapshot()  # drop input gathered during the previous round
        self.session.restart(pygame.time.get_ticks())

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
            self.renderer.resize(self.window.get_size())
            return
        if event.type == pygame.MOUSEMOTION:
            self.pointer = self.renderer.window_to_field(event.pos)

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
                return
            if event.key == pygame.K_r or (event.key in RESTART_KEYS and self.session.state is State.ENDED):
                self.restart()
                return
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.session.state is State.ENDED:
                fx, fy = self.renderer.window_to_field(event.pos)
                if self.renderer.restart_button.collidepoint(int(fx), int(fy)):
                    self.restart()
                return

        self.input.handle_event(event, self.window.get_size())

    def update(self, now_ms: float) -> None:
        report = self.session.tick(now_ms, self.input.snapshot())
        if report.new_best:
            self.store.save(self.session.best)
        if report.ended:
            logger.info("Final score %d, best %d", self.session.score, self.session.best)

    def draw(self) -> None:
        self.renderer.draw(self.session.scene(), self.pointer)
        self.renderer.present(self.window)
        pygame.display.flip()

    def run(self) -> None:
        try:
            while self.running:
                self.clock.tick(self.fps)
                for event in pygame.event.get():
                    self.handle_input(event)
                if not self.running:
                    break
                self.update(pygame.time.get_ticks())
                self.draw()
        finally:
            pygame.quit()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Catch the falling stars with your basket.")
    parser.add_argument("--fps", type=int, default=FPS, help="frame rate cap (default: %(default)s)")
    parser.add_argument(
        "--highscore-file",
        default=HIGH_SCORE_FILE,
        help="where the best score is kept (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for star placement")
    parser.add_argument("--log-level", default="INFO", help="logging level (default: %(default)s)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    Game(fps=args.fps, store=HighScoreStore(args.highscore_file), seed=args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
