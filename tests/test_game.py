import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from shotter.game import LEADER_BOARD_SIZE, Game  # noqa: E402
from shotter.scene import Scene  # noqa: E402


class Recorder(Scene):
    def __init__(self, game):
        super().__init__(game)
        self.log = []
        self.updates = []
        self.events = []
        self.renders = 0

    def init(self):
        self.log.append("init")

    def clean(self):
        self.log.append("clean")

    def render(self):
        self.renders += 1

    def update(self, delta_time):
        self.updates.append(delta_time)

    def handle_event(self, event):
        self.events.append(event.type)


def make_assets(root):
    image_dir = root / "image"
    image_dir.mkdir(parents=True)
    surface = pygame.Surface((64, 48))
    surface.fill((10, 20, 30))
    pygame.image.save(surface, str(image_dir / "Stars-A.png"))
    pygame.image.save(surface, str(image_dir / "Stars-B.png"))


@pytest.fixture
def game(tmp_path):
    make_assets(tmp_path)
    g = Game(save_path=tmp_path / "save.dat")
    g.init()
    yield g
    g.clean()


def test_fps_must_be_positive():
    with pytest.raises(ValueError):
        Game(fps=0)


def test_assets_live_beside_save_file(tmp_path):
    g = Game(save_path=tmp_path / "save.dat")
    assert g.assets == tmp_path


def test_insert_leader_board_keeps_best_scores():
    g = Game()
    for score in range(12):
        g.insert_leader_board(score, f"p{score}")
    scores = [entry.score for entry in g.leader_board]
    assert len(scores) == LEADER_BOARD_SIZE
    assert scores == sorted(scores, reverse=True)
    assert scores[0] == 11


def test_leader_board_round_trips_through_save(tmp_path):
    first = Game(save_path=tmp_path / "save.dat")
    first.insert_leader_board(30, "amy")
    first.insert_leader_board(90, "bob")
    first.clean()
    second = Game(save_path=tmp_path / "save.dat")
    second.init()
    try:
        assert [(e.score, e.name) for e in second.leader_board] == [(90, "bob"), (30, "amy")]
    finally:
        second.clean()


def test_change_scene_cleans_old_and_inits_new():
    g = Game()
    first, second = Recorder(g), Recorder(g)
    g.change_scene(first)
    g.change_scene(second)
    assert first.log == ["init", "clean"]
    assert second.log == ["init"]
    assert g.current_scene is second


def test_background_layers_are_half_size(game):
    assert game.near_stars.width * 2 == 64
    assert game.near_stars.height * 2 == 48
    assert game.far_stars.speed < game.near_stars.speed


def test_update_scrolls_background_and_scene(game):
    recorder = Recorder(game)
    game.change_scene(recorder)
    game.update(0.1)
    assert recorder.updates == [0.1]
    for layer in (game.near_stars, game.far_stars):
        assert -layer.height <= layer.offset < 0


def test_render_text_centered_returns_right_edge(game):
    end_x, top = game.render_text_centered("hello", 0.0, False)
    assert top == 0
    assert game.width // 2 < end_x <= game.width
    _, bottom_top = game.render_text_centered("hello", 1.0, True)
    assert 0 < bottom_top < game.height


def test_render_text_at_left_and_right(game):
    left = game.render_text_at("abc", 100, 40, True)
    right = game.render_text_at("abc", 100, 40, False)
    assert left.x == 100
    assert right.right == game.width - 100
    assert left.y == right.y == 40


def test_render_text_needs_init():
    with pytest.raises(RuntimeError):
        Game().render_text_centered("x", 0.5, False)


def test_handle_events_stops_on_quit(game):
    recorder = Recorder(game)
    game.change_scene(recorder)
    game.is_running = True
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.handle_events()
    assert game.is_running is False
    assert pygame.QUIT in recorder.events


def test_run_performs_one_frame_then_stops(game):
    recorder = Recorder(game)
    game.change_scene(recorder)
    game.is_running = True
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()
    assert len(recorder.updates) == 1
    assert recorder.renders == 1
    assert game.delta_time > 0