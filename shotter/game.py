"""The game object: window, main loop, shared resources and the leader board."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pygame

from shotter.leaderboard import LeaderBoard
from shotter.objects import Background
from shotter.scene import Scene

log = logging.getLogger(__name__)

TITLE = "game"
FONT = "font/VonwaonBitmap-16px.ttf"
TITLE_FONT_SIZE = 64
TEXT_FONT_SIZE = 32
NEAR_STARS = "image/Stars-A.png"
FAR_STARS = "image/Stars-B.png"
NEAR_STARS_SPEED = 30
FAR_STARS_SPEED = 10
MIXER_CHANNELS = 32
MUSIC_VOLUME = 1 / 20
SOUND_VOLUME = 1 / 10
LEADER_BOARD_SIZE = 8
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


class Game:
    """Owns the window and runs the scenes.

    Assets are looked up in the directory holding the save file.
    """

    def __init__(
        self,
        width: int = 600,
        height: int = 800,
        fps: int = 60,
        save_path: str | Path = "assets/save.dat",
    ) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self.width = width
        self.height = height
        self.fps = fps
        self.frame_time = 1000 // fps
        self.delta_time = self.frame_time / 1000
        self.save_path = Path(save_path)
        self.assets = self.save_path.parent
        self.final_score = 0
        self.leader_board = LeaderBoard(LEADER_BOARD_SIZE)
        self.is_running = True
        self.is_fullscreen = False
        self.current_scene: Scene | None = None
        self.screen: pygame.Surface | None = None
        self.title_font: pygame.font.Font | None = None
        self.text_font: pygame.font.Font | None = None
        self.near_stars = Background(speed=NEAR_STARS_SPEED)
        self.far_stars = Background(speed=FAR_STARS_SPEED)

    def _fail(self, message: str, exc: Exception) -> None:
        log.error("%s: %s", message, exc)
        self.is_running = False

    def _init_mixer(self) -> None:
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            self._fail("Could not open audio device", exc)
            return
        pygame.mixer.set_num_channels(MIXER_CHANNELS)
        pygame.mixer.music.set_volume(MUSIC_VOLUME)
        for channel in range(MIXER_CHANNELS):
            pygame.mixer.Channel(channel).set_volume(SOUND_VOLUME)

    def _load_layer(self, relative: str, speed: int) -> Background:
        path = self.assets / relative
        try:
            image = pygame.image.load(str(path)).convert_alpha()
        except (pygame.error, OSError) as exc:
            self._fail(f"Could not load {path}", exc)
            return Background(speed=speed)
        width, height = image.get_width() // 2, image.get_height() // 2
        texture = pygame.transform.scale(image, (width, height))
        return Background(texture=texture, width=width, height=height, speed=speed)

    def _open_font(self, size: int) -> pygame.font.Font:
        path = self.assets / FONT
        try:
            return pygame.font.Font(str(path), size)
        except (pygame.error, OSError) as exc:
            self._fail(f"Could not load font {path}", exc)
            return pygame.font.Font(None, size)

    def init(self) -> None:
        """Open the window, audio and fonts, load the data and show the title."""
        from shotter.scene_title import SceneTitle

        pygame.init()
        try:
            self.screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(TITLE)
        except pygame.error as exc:
            self._fail("Window could not be created", exc)
            return
        self._init_mixer()
        pygame.font.init()
        self.near_stars = self._load_layer(NEAR_STARS, NEAR_STARS_SPEED)
        self.far_stars = self._load_layer(FAR_STARS, FAR_STARS_SPEED)
        self.title_font = self._open_font(TITLE_FONT_SIZE)
        self.text_font = self._open_font(TEXT_FONT_SIZE)
        try:
            self.leader_board.load(self.save_path)
        except OSError as exc:
            log.info("Could not open save file %s: %s", self.save_path, exc)
        self.change_scene(SceneTitle(self))

    def run(self) -> None:
        """Run frames until the game is asked to stop."""
        while self.is_running:
            frame_start = pygame.time.get_ticks()
            self.handle_events()
            self.update(self.delta_time)
            self.render()
            elapsed = pygame.time.get_ticks() - frame_start
            if elapsed < self.frame_time:
                pygame.time.delay(self.frame_time - elapsed)
                self.delta_time = self.frame_time / 1000
            else:
                self.delta_time = elapsed / 1000

    def clean(self) -> None:
        """Save the leader board and release every resource."""
        try:
            self.leader_board.save(self.save_path)
        except OSError as exc:
            log.error("Failed to open save file %s: %s", self.save_path, exc)
        if self.current_scene is not None:
            self.current_scene.clean()
            self.current_scene = None
        self.near_stars.texture = None
        self.far_stars.texture = None
        self.title_font = None
        self.text_font = None
        self.screen = None
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.quit()

    def change_scene(self, scene: Scene) -> None:
        """Close the current scene and start the given one."""
        if self.current_scene is not None:
            self.current_scene.clean()
        self.current_scene = scene
        scene.init()

    def _toggle_fullscreen(self) -> None:
        self.is_fullscreen = not self.is_fullscreen
        flags = pygame.FULLSCREEN if self.is_fullscreen else 0
        try:
            self.screen = pygame.display.set_mode((self.width, self.height), flags)
        except pygame.error as exc:
            log.error("Could not change window mode: %s", exc)

    def handle_events(self) -> None:
        """Dispatch every pending event to the game and the current scene."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_F4:
                self._toggle_fullscreen()
            if self.current_scene is not None:
                self.current_scene.handle_event(event)

    def update(self, delta_time: float) -> None:
        """Scroll the background and advance the current scene."""
        self.near_stars.update(delta_time)
        self.far_stars.update(delta_time)
        if self.current_scene is not None:
            self.current_scene.update(delta_time)

    def _render_layer(self, layer: Background) -> None:
        if layer.texture is None or self.screen is None:
            return
        for x, y in layer.tile_positions(self.width, self.height):
            self.screen.blit(layer.texture, (x, y))

    def render(self) -> None:
        """Draw the background and the current scene, then show the frame."""
        if self.screen is None:
            return
        self.screen.fill(BLACK)
        self._render_layer(self.far_stars)
        self._render_layer(self.near_stars)
        if self.current_scene is not None:
            self.current_scene.render()
        pygame.display.flip()

    def _draw_text(self, text: str, font: pygame.font.Font | None) -> pygame.Surface:
        if font is None or self.screen is None:
            raise RuntimeError("the game has not been initialised")
        return font.render(text, False, WHITE)

    def render_text_at(self, text: str, x: int, y: int, left: bool = True) -> pygame.Rect:
        """Draw text at x from the left edge, or from the right edge if not left."""
        surface = self._draw_text(text, self.text_font)
        pos_x = x if left else self.width - surface.get_width() - x
        rect = surface.get_rect(topleft=(pos_x, y))
        self.screen.blit(surface, rect)
        return rect

    def render_text_centered(self, text: str, pos_y: float, title: bool) -> tuple[int, int]:
        """Draw text centred horizontally at a fraction of the free height.

        Returns the point just right of the text's top edge.
        """
        font = self.title_font if title else self.text_font
        surface = self._draw_text(text, font)
        width, height = surface.get_size()
        rect = pygame.Rect(
            self.width // 2 - width // 2,
            int(pos_y * (self.height - height)),
            width,
            height,
        )
        self.screen.blit(surface, rect)
        return rect.x + rect.width, rect.y

    def insert_leader_board(self, score: int, name: str) -> None:
        """Record a score on the leader board."""
        self.leader_board.insert(score, name)