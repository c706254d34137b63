"""The end screen: name entry after a lost round, then the high-score table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame

from shotter.scene import Scene
from shotter.scene_main import SceneMain

log = logging.getLogger(__name__)

MUSIC = "music/06_Battle_in_Space_Intro.ogg"
ANONYMOUS = "匿名玩家"
SCORE_LABEL = "最终得分"
GAME_OVER = "GAME OVER"
INSTRUCTIONS = "请输入你的名字，按回车键确认"
BOARD_TITLE = "得分榜"
RESTART = "按J键重新开始游戏"
CURSOR = "_"
BOARD_MARGIN = 100
BOARD_LINE_GAP = 45


@dataclass
class NameEntry:
    """The player's name as it is being typed."""

    text: str = ""

    def type(self, text: str) -> None:
        """Append typed text."""
        self.text += text

    def backspace(self) -> None:
        """Remove the last character, if any."""
        self.text = self.text[:-1]

    def submit(self) -> str:
        """Return the final name, standing in a default for an empty one."""
        if not self.text:
            self.text = ANONYMOUS
        return self.text


def _text_input(start: bool) -> None:
    try:
        if start:
            pygame.key.start_text_input()
        else:
            pygame.key.stop_text_input()
    except pygame.error as exc:
        log.error("Failed to %s text input: %s", "start" if start else "stop", exc)


class SceneEnd(Scene):
    """Asks for the player's name, then shows the leader board."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.blink = 1.0
        self.typing = True
        self.entry = NameEntry()
        self._music_playing = False

    def init(self) -> None:
        path = Path(self.game.assets) / MUSIC
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(-1)
            self._music_playing = True
        except (pygame.error, OSError) as exc:
            log.error("Failed to load music %s: %s", path, exc)
        _text_input(True)

    def clean(self) -> None:
        if self._music_playing and pygame.mixer.get_init():
            pygame.mixer.music.stop()
            pygame.mixer.music.unload()
        self._music_playing = False

    def update(self, delta_time: float) -> None:
        self.blink -= delta_time
        if self.blink <= 0:
            self.blink += 1.0

    def handle_event(self, event: Any) -> None:
        if self.typing:
            if event.type == pygame.TEXTINPUT:
                self.entry.type(event.text)
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_BACKSPACE:
                    self.entry.backspace()
                if event.key in (pygame.K_RETURN, pygame.K_ESCAPE):
                    self.typing = False
                    name = self.entry.submit()
                    self.game.insert_leader_board(self.game.final_score, name)
                    _text_input(False)
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_j, pygame.K_ESCAPE):
            self.game.change_scene(SceneMain(self.game))

    def render(self) -> None:
        if self.typing:
            self._render_name_entry()
        else:
            self._render_leader_board()

    def _render_name_entry(self) -> None:
        game = self.game
        game.render_text_centered(f"{SCORE_LABEL}{game.final_score}", 0.1, False)
        game.render_text_centered(GAME_OVER, 0.4, True)
        game.render_text_centered(INSTRUCTIONS, 0.6, False)
        show_cursor = self.blink < 0.5
        if self.entry.text:
            end_x, end_y = game.render_text_centered(self.entry.text, 0.8, False)
            if show_cursor:
                game.render_text_at(CURSOR, end_x, end_y, True)
        elif show_cursor:
            game.render_text_centered(CURSOR, 0.8, False)

    def _render_leader_board(self) -> None:
        game = self.game
        game.render_text_centered(BOARD_TITLE, 0.07, True)
        pos_y = int(0.25 * game.height)
        for rank, entry in enumerate(game.leader_board, start=1):
            game.render_text_at(f"{rank}. {entry.name}", BOARD_MARGIN, pos_y, True)
            game.render_text_at(str(entry.score), BOARD_MARGIN, pos_y, False)
            pos_y += BOARD_LINE_GAP
        if self.blink < 0.5:
            game.render_text_centered(RESTART, 0.85, False)