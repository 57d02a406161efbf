import os
import random

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from star_catcher.config import FIELD_HEIGHT, FIELD_WIDTH
from star_catcher.entities import Star
from star_catcher.game import Game, parse_args
from star_catcher.highscore import HighScoreStore
from star_catcher.render import Renderer
from star_catcher.session import Session, State


def setup_module(module: object) -> None:
    pygame.init()


def teardown_module(module: object) -> None:
    pygame.quit()


def make_game(tmp_path, best: int = 0) -> Game:
    store = HighScoreStore(str(tmp_path / "highscore.json"))
    if best:
        store.save(best)
    g = Game(store=store, seed=1)
    g.session.spawner.chance = 0.0
    return g


def test_renderer_transform() -> None:
    r = Renderer()
    r.resize((1600, 1200))
    assert r.scale == 2.0 and r.offset == (0, 0)
    r.resize((1000, 600))
    assert r.scale == 1.0 and r.offset == (100, 0)
    assert r.window_to_field((100, 0)) == (0.0, 0.0)
    assert r.window_to_field((900, 600)) == (FIELD_WIDTH, FIELD_HEIGHT)
    r.resize((400, 600))
    assert r.scale == 0.5 and r.offset == (0, 150)


def test_renderer_draws_active_and_ended_scenes() -> None:
    r = Renderer()
    session = Session(rng=random.Random(2))
    session.start(0)
    session.entities.stars = [Star(100, 100), Star(400, 540)]
    session.score = 199
    session.tick(16)
    assert session.state is State.ENDED
    surf = r.draw(session.scene(), pointer=r.restart_button.center)
    assert surf.get_size() == (FIELD_WIDTH, FIELD_HEIGHT)
    window = pygame.Surface((1000, 600), 0, 32)
    r.resize(window.get_size())
    r.present(window)
    assert window.get_at((50, 300))[:3] == (0, 0, 0)  # letterbox
    r.resize((1600, 1200))
    r.present(pygame.Surface((1600, 1200), 0, 32))


def test_game_init(tmp_path) -> None:
    g = make_game(tmp_path, best=12)
    assert g.session.state is State.ACTIVE
    assert g.session.best == 12
    assert g.running


def test_game_persists_new_best(tmp_path) -> None:
    g = make_game(tmp_path)
    g.session.entities.stars = [Star(400, 545)]
    g.update(g.session.start_ms)
    assert g.session.score == 1
    assert g.store.load() == 1
    g.draw()


def test_quit_and_escape(tmp_path) -> None:
    g = make_game(tmp_path)
    g.handle_input(pygame.event.Event(pygame.QUIT))
    assert not g.running
    g = make_game(tmp_path)
    g.handle_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert not g.running


def test_restart_button_and_keys(tmp_path) -> None:
    g = make_game(tmp_path)
    g.session.score = 199
    g.session.entities.stars = [Star(400, 545)]
    g.update(g.session.start_ms + 16)
    assert g.session.state is State.ENDED
    # Space only restarts once the round is over; a click elsewhere does nothing
    g.handle_input(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(5, 5), button=1))
    assert g.session.state is State.ENDED
    bx, by = g.renderer.restart_button.center
    g.handle_input(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(bx, by), button=1))
    assert g.session.state is State.ACTIVE
    assert g.session.score == 0
    assert g.session.best == 200
    g.handle_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert g.session.state is State.ACTIVE


def test_keyboard_moves_basket(tmp_path) -> None:
    g = make_game(tmp_path)
    x0 = g.session.entities.basket.x
    g.handle_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    g.update(g.session.start_ms)
    assert g.session.entities.basket.x < x0


def test_parse_args() -> None:
    args = parse_args(["--fps", "30", "--seed", "4", "--highscore-file", "hs.json", "--log-level", "debug"])
    assert args.fps == 30
    assert args.seed == 4
    assert args.highscore_file == "hs.json"
    assert args.log_level == "debug"
    with pytest.raises(SystemExit):
        parse_args(["--fps", "fast"])
