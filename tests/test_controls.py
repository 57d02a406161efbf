import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from star_catcher.controls import Controls, InputState


def setup_module(module: object) -> None:
    pygame.init()


def teardown_module(module: object) -> None:
    pygame.quit()


def key(kind: int, k: int) -> pygame.event.Event:
    return pygame.event.Event(kind, key=k)


def test_keys_map_to_directions() -> None:
    state = InputState()
    state.handle_event(key(pygame.KEYDOWN, pygame.K_a))
    snap = state.snapshot()
    assert snap.left and not snap.right
    state.handle_event(key(pygame.KEYUP, pygame.K_a))
    state.handle_event(key(pygame.KEYDOWN, pygame.K_RIGHT))
    snap = state.snapshot()
    assert snap.right and not snap.left
    # Held keys persist across snapshots
    assert state.snapshot().right
    state.handle_event(key(pygame.KEYDOWN, pygame.K_d))
    state.handle_event(key(pygame.KEYUP, pygame.K_RIGHT))
    assert state.snapshot().right


def test_unrelated_keys_ignored() -> None:
    state = InputState()
    state.handle_event(key(pygame.KEYDOWN, pygame.K_w))
    assert state.snapshot() == Controls()


def test_pointer_events_are_one_shot_and_last_writer_wins() -> None:
    state = InputState(lambda pos: (pos[0] / 2, pos[1] / 2))
    state.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(50, 50), rel=(0, 0), buttons=(0, 0, 0)))
    assert state.snapshot().pointer_x is None  # not held
    state.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(720, 1140), button=1))
    state.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(740, 1140), rel=(20, 0), buttons=(1, 0, 0)))
    state.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(760, 1140), rel=(20, 0), buttons=(1, 0, 0)))
    snap = state.snapshot()
    assert snap.press == (360, 570)
    assert snap.pointer_x == 380
    assert not snap.release
    empty = state.snapshot()
    assert empty.press is None and empty.pointer_x is None
    state.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(760, 1140), button=1))
    assert state.snapshot().release
    assert not state.snapshot().release


def test_right_button_ignored() -> None:
    state = InputState()
    state.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=3))
    assert state.snapshot().press is None


def test_touch_uses_window_size() -> None:
    state = InputState()
    state.handle_event(
        pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, dx=0, dy=0, finger_id=0, touch_id=0),
        window_size=(800, 600),
    )
    snap = state.snapshot()
    assert snap.press == (400, 300)
    state.handle_event(pygame.event.Event(pygame.FINGERUP, x=0.5, y=0.5, dx=0, dy=0, finger_id=0, touch_id=0))
    assert state.snapshot().release


def test_focus_loss_releases_everything() -> None:
    state = InputState()
    state.handle_event(key(pygame.KEYDOWN, pygame.K_LEFT))
    state.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1))
    state.snapshot()
    state.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
    snap = state.snapshot()
    assert not snap.left
    assert snap.release
