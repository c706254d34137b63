"""The title screen shown before a round starts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pygame

from shotter.scene import Scene
from shotter.scene_main import SceneMain

log = logging.getLogger(__name__)

MUSIC = "music/06_Battle_in_Space_Intro.ogg"
TITLE = "SDL太空射击"
INSTRUCTIONS = "按J开始游戏"


class SceneTitle(Scene):
    """Shows the title and a blinking prompt; J starts the game."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.timer = 0.0
        self._music_playing = False

    def init(self) -> None:
        path = Path(self.game.assets) / MUSIC
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(-1)
        except (pygame.error, OSError) as exc:
            log.error("Failed to load music %s: %s", path, exc)
            return
        self._music_playing = True

    def clean(self) -> None:
        if self._music_playing and pygame.mixer.get_init():
            pygame.mixer.music.stop()
            pygame.mixer.music.unload()
        self._music_playing = False

    def render(self) -> None:
        self.game.render_text_centered(TITLE, 0.4, True)
        if self.timer < 0.5:
            self.game.render_text_centered(INSTRUCTIONS, 0.8, False)

    def update(self, delta_time: float) -> None:
        self.timer += delta_time
        if self.timer > 1.0:
            self.timer -= 1.0

    def handle_event(self, event: Any) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_j:
            self.game.change_scene(SceneMain(self.game))