import pygame
import pytest

from shotter.scene_main import SceneMain
from shotter.scene_title import INSTRUCTIONS, TITLE, SceneTitle


class FakeGame:
    def __init__(self, assets):
        self.width = 600
        self.height = 800
        self.screen = pygame.Surface((self.width, self.height))
        self.assets = assets
        self.final_score = 0
        self.scenes = []
        self.texts = []

    def change_scene(self, scene):
        self.scenes.append(scene)

    def render_text_centered(self, text, pos_y, title):
        self.texts.append((text, pos_y, title))
        return (0, 0)


@pytest.fixture
def scene(tmp_path):
    title = SceneTitle(FakeGame(tmp_path))
    title.init()
    return title


def test_render_shows_title_and_prompt_at_start(scene):
    scene.render()
    assert scene.game.texts == [(TITLE, 0.4, True), (INSTRUCTIONS, 0.8, False)]


def test_prompt_hidden_in_second_half_of_blink(scene):
    scene.update(0.7)
    scene.render()
    assert scene.game.texts == [(TITLE, 0.4, True)]


def test_timer_wraps_after_one_second(scene):
    scene.update(0.7)
    scene.update(0.7)
    assert scene.timer == pytest.approx(0.4)


def test_timer_stays_within_one_second(scene):
    for _ in range(50):
        scene.update(0.13)
        assert 0.0 <= scene.timer <= 1.0


def test_j_starts_game(scene):
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_j))
    assert len(scene.game.scenes) == 1
    assert isinstance(scene.game.scenes[0], SceneMain)
    assert scene.game.scenes[0].game is scene.game


def test_other_keys_ignored(scene):
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    scene.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_j))
    assert scene.game.scenes == []


def test_clean_then_render_still_works(scene):
    scene.clean()
    scene.render()
    assert scene.game.texts[0] == (TITLE, 0.4, True)