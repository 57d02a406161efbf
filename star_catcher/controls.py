"""Input adapter: turns pygame events into one control snapshot per tick."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)

Point = tuple[float, float]


@dataclass(frozen=True)
class Controls:
    """What the player is doing at the start of a tick."""

    left: bool = False
    right: bool = False
    press: Point | None = None  # pointer went down here (field coordinates)
    pointer_x: float | None = None  # latest pointer x while held
    release: bool = False


def _identity(pos: Point) -> Point:
    return pos


class InputState:
    """Records keyboard, mouse and touch events between ticks.

    Only the latest value per channel is kept; ``snapshot`` hands it to the
    session and clears the one-shot fields.
    """

    def __init__(self, to_field: Callable[[Point], Point] = _identity) -> None:
        self.to_field = to_field
        self.held: set[int] = set()
        self.pointer_down = False
        self._press: Point | None = None
        self._pointer_x: float | None = None
        self._release = False

    @property
    def left(self) -> bool:
        return any(k in self.held for k in LEFT_KEYS)

    @property
    def right(self) -> bool:
        return any(k in self.held for k in RIGHT_KEYS)

    def _pointer_down(self, pos: Point) -> None:
        fx, fy = self.to_field(pos)
        self.pointer_down = True
        self._press = (fx, fy)
        self._pointer_x = fx

    def _pointer_move(self, pos: Point) -> None:
        if self.pointer_down:
            self._pointer_x = self.to_field(pos)[0]

    def _pointer_up(self) -> None:
        if self.pointer_down:
            self.pointer_down = False
            self._release = True

    def handle_event(self, event: pygame.event.Event, window_size: tuple[int, int] = (1, 1)) -> None:
        if event.type == pygame.KEYDOWN:
            self.held.add(event.key)
        elif event.type == pygame.KEYUP:
            self.held.discard(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._pointer_down(event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self._pointer_move(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._pointer_up()
        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            # Touch coordinates are normalised to the window
            pos = (event.x * window_size[0], event.y * window_size[1])
            if event.type == pygame.FINGERDOWN:
                self._pointer_down(pos)
            else:
                self._pointer_move(pos)
        elif event.type == pygame.FINGERUP:
            self._pointer_up()
        elif event.type in (pygame.WINDOWLEAVE, pygame.WINDOWFOCUSLOST):
            self._pointer_up()
            if event.type == pygame.WINDOWFOCUSLOST:
                self.held.clear()

    def snapshot(self) -> Controls:
        controls = Controls(
            left=self.left,
            right=self.right,
            press=self._press,
            pointer_x=self._pointer_x,
            release=self._release,
        )
        self._press = None
        self._pointer_x = None
        self._release = False
        return controls
