"""The playing screen: draws and drives one round of the game.

The scene expects its game object to provide ``width``, ``height``,
``screen`` (the surface drawn on), ``assets`` (the asset directory),
a writable ``final_score`` and ``change_scene(scene)``.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any

import pygame

from shotter.objects import (
    Enemy,
    Explosion,
    Item,
    Player,
    ProjectileEnemy,
    ProjectilePlayer,
    bounds,
)
from shotter.scene import Scene
from shotter.world import Controls, Templates, World

log = logging.getLogger(__name__)

MUSIC = "music/03_Racing_Through_Asteroids_Loop.ogg"
SCORE_FONT = "font/VonwaonBitmap-12px.ttf"
SCORE_FONT_SIZE = 24
HEALTH_ICON = "image/Health UI Black.png"
HEALTH_ICON_SIZE = 32
HEALTH_ICON_GAP = 40
UI_MARGIN = 10
DIMMED = (100, 100, 100)
WHITE = (255, 255, 255)

SOUND_FILES = {
    "player_shott": "sound/laser_shoot4.wav",
    "enemy_shott": "sound/xs_laser.wav",
    "player_explode": "sound/explosion1.wav",
    "enemy_explode": "sound/explosion3.wav",
    "hit": "sound/eff11.wav",
    "get_item": "sound/eff5.wav",
}


def _load_image(path: Path) -> pygame.Surface | None:
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        log.error("Failed to load image %s: %s", path, exc)
        return None
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def _start_music(path: Path) -> bool:
    try:
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(-1)
    except (pygame.error, OSError) as exc:
        log.error("Failed to load music %s: %s", path, exc)
        return False
    return True


def _stop_music() -> None:
    if pygame.mixer.get_init():
        pygame.mixer.music.stop()
        pygame.mixer.music.unload()


class SceneMain(Scene):
    """The round being played: ship, enemies, shots, pick-ups and score."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.world = World(game.width, game.height, Templates(), play_sound=self._play_sound)
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._health_icon: pygame.Surface | None = None
        self._health_icon_dim: pygame.Surface | None = None
        self._score_font: pygame.font.Font | None = None
        self._music_playing = False

    def _asset(self, relative: str) -> Path:
        return Path(self.game.assets) / relative

    def _load_scaled(self, relative: str, divisor: int) -> tuple[pygame.Surface | None, int, int]:
        image = _load_image(self._asset(relative))
        if image is None:
            return None, 0, 0
        width, height = image.get_width() // divisor, image.get_height() // divisor
        return pygame.transform.scale(image, (width, height)), width, height

    def _load_sound(self, relative: str) -> pygame.mixer.Sound | None:
        try:
            return pygame.mixer.Sound(str(self._asset(relative)))
        except (pygame.error, OSError) as exc:
            log.error("Failed to load sound %s: %s", relative, exc)
            return None

    def _load_font(self) -> pygame.font.Font | None:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            return pygame.font.Font(str(self._asset(SCORE_FONT)), SCORE_FONT_SIZE)
        except (pygame.error, OSError) as exc:
            log.error("Failed to load font: %s", exc)
        try:
            return pygame.font.Font(None, SCORE_FONT_SIZE)
        except (pygame.error, OSError) as exc:
            log.error("Failed to load default font: %s", exc)
            return None

    def _explosion_template(self) -> Explosion:
        sheet = _load_image(self._asset("effect/explosion.png"))
        if sheet is None:
            return Explosion()
        width, height = sheet.get_size()
        total = width // height if height else 0
        return Explosion(texture=sheet, width=height * 2, height=height * 2, total_frame=total)

    def init(self) -> None:
        self._music_playing = _start_music(self._asset(MUSIC))

        icon = _load_image(self._asset(HEALTH_ICON))
        if icon is not None:
            icon = pygame.transform.scale(icon, (HEALTH_ICON_SIZE, HEALTH_ICON_SIZE))
            dim = icon.copy()
            dim.fill(DIMMED, special_flags=pygame.BLEND_RGB_MULT)
            self._health_icon, self._health_icon_dim = icon, dim

        self._score_font = self._load_font()

        self._sounds = {
            name: sound
            for name, relative in SOUND_FILES.items()
            if (sound := self._load_sound(relative)) is not None
        }

        player_img, pw, ph = self._load_scaled("image/SpaceShip.png", 5)
        shot_img, sw, sh = self._load_scaled("image/laser-1.png", 4)
        enemy_img, ew, eh = self._load_scaled("image/insect-1.png", 4)
        bullet_img, bw, bh = self._load_scaled("image/bullet-1.png", 2)
        item_img, iw, ih = self._load_scaled("image/bonus_life.png", 4)

        templates = Templates(
            player=Player(texture=player_img, width=pw, height=ph),
            projectile_player=ProjectilePlayer(texture=shot_img, width=sw, height=sh),
            enemy=Enemy(texture=enemy_img, width=ew, height=eh),
            projectile_enemy=ProjectileEnemy(texture=bullet_img, width=bw, height=bh),
            explosion=self._explosion_template(),
            item=Item(texture=item_img, width=iw, height=ih),
        )
        self.world = World(
            self.game.width, self.game.height, templates, play_sound=self._play_sound
        )

    def clean(self) -> None:
        self._sounds.clear()
        world = self.world
        world.projectiles_player.clear()
        world.enemies.clear()
        world.projectiles_enemy.clear()
        world.explosions.clear()
        world.items.clear()
        self._health_icon = None
        self._health_icon_dim = None
        self._score_font = None
        if self._music_playing:
            _stop_music()
            self._music_playing = False

    def _play_sound(self, name: str, channel: int) -> None:
        sound = self._sounds.get(name)
        if sound is None:
            return
        try:
            if channel >= 0:
                pygame.mixer.Channel(channel).play(sound)
            else:
                sound.play()
        except pygame.error as exc:
            log.error("Failed to play sound %s: %s", name, exc)

    @staticmethod
    def _read_controls() -> Controls:
        try:
            keys = pygame.key.get_pressed()
        except pygame.error:
            return Controls()
        return Controls(
            left=bool(keys[pygame.K_LEFT] or keys[pygame.K_a]),
            right=bool(keys[pygame.K_RIGHT] or keys[pygame.K_d]),
            up=bool(keys[pygame.K_UP] or keys[pygame.K_w]),
            down=bool(keys[pygame.K_DOWN] or keys[pygame.K_s]),
            shoot=bool(keys[pygame.K_j]),
        )

    def update(self, delta_time: float) -> None:
        world = self.world
        world.update(delta_time, pygame.time.get_ticks(), self._read_controls())
        if world.is_dead:
            self.game.final_score = world.score
        if world.finished():
            from shotter.scene_end import SceneEnd

            self.game.change_scene(SceneEnd(self.game))

    def handle_event(self, event: Any) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            from shotter.scene_title import SceneTitle

            self.game.change_scene(SceneTitle(self.game))

    def render(self) -> None:
        screen = self.game.screen
        world = self.world
        for shot in world.projectiles_player:
            self._blit(screen, shot.texture, shot)
        for bullet in world.projectiles_enemy:
            self._blit_rotated(screen, bullet)
        if not world.is_dead:
            self._blit(screen, world.player.texture, world.player)
        for enemy in world.enemies:
            self._blit(screen, enemy.texture, enemy)
        for item in world.items:
            self._blit(screen, item.texture, item)
        for explosion in world.explosions:
            self._blit_explosion(screen, explosion)
        self._render_ui(screen)

    @staticmethod
    def _blit(screen: pygame.Surface, texture: pygame.Surface | None, entity: Any) -> None:
        if texture is not None:
            x, y, _, _ = bounds(entity)
            screen.blit(texture, (x, y))

    @staticmethod
    def _blit_rotated(screen: pygame.Surface, bullet: ProjectileEnemy) -> None:
        if bullet.texture is None:
            return
        dx, dy = bullet.direction
        angle = math.degrees(math.atan2(dy, dx)) - 90
        rotated = pygame.transform.rotate(bullet.texture, -angle)
        x, y, w, h = bounds(bullet)
        screen.blit(rotated, rotated.get_rect(center=(x + w // 2, y + h // 2)))

    @staticmethod
    def _blit_explosion(screen: pygame.Surface, explosion: Explosion) -> None:
        sheet = explosion.texture
        if sheet is None:
            return
        area = pygame.Rect(
            explosion.current_frame * explosion.width,
            0,
            explosion.width // 2,
            explosion.height // 2,
        ).clip(sheet.get_rect())
        if area.width == 0 or area.height == 0:
            return
        frame = pygame.transform.scale(
            sheet.subsurface(area), (explosion.width, explosion.height)
        )
        x, y, _, _ = bounds(explosion)
        screen.blit(frame, (x, y))

    @staticmethod
    def _health_slot(index: int, per_line: int) -> tuple[int, int]:
        return (
            UI_MARGIN + (index % per_line) * HEALTH_ICON_GAP,
            UI_MARGIN + index // per_line * HEALTH_ICON_GAP,
        )

    def _render_ui(self, screen: pygame.Surface) -> None:
        player = self.world.player
        if self._health_icon is not None and self._health_icon_dim is not None:
            for index in range(player.max_health):
                screen.blit(self._health_icon_dim, self._health_slot(index, player.line_life))
            for index in range(max(player.current_health, 0)):
                screen.blit(self._health_icon, self._health_slot(index, player.line_life))
        if self._score_font is not None:
            text = self._score_font.render(f"SCORE: {self.world.score}", False, WHITE)
            screen.blit(text, (self.game.width - UI_MARGIN - text.get_width(), UI_MARGIN))