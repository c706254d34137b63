"""The playing field: the player, enemies, shots, explosions and pick-ups."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace
from typing import Callable, Protocol

from shotter.objects import (
    Enemy,
    Explosion,
    Item,
    ItemType,
    Player,
    ProjectileEnemy,
    ProjectilePlayer,
    Vector,
    bounds,
    rects_intersect,
)

SPAWN_CHANCE = 1.0 / 60.0
DROP_CHANCE = 0.5
END_DELAY = 2.0
PROJECTILE_MARGIN = 32

SoundPlayer = Callable[[str, int], None]


class _Random(Protocol):
    def random(self) -> float: ...


@dataclass
class Controls:
    """The keys held down during one frame."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    shoot: bool = False


@dataclass
class Templates:
    """Prototypes copied whenever a new entity enters the field."""

    player: Player = field(default_factory=Player)
    projectile_player: ProjectilePlayer = field(default_factory=ProjectilePlayer)
    enemy: Enemy = field(default_factory=Enemy)
    projectile_enemy: ProjectileEnemy = field(default_factory=ProjectileEnemy)
    explosion: Explosion = field(default_factory=Explosion)
    item: Item = field(default_factory=Item)


class World:
    """All moving things of one round and the rules that drive them."""

    def __init__(
        self,
        width: int,
        height: int,
        templates: Templates | None = None,
        rng: _Random | None = None,
        play_sound: SoundPlayer | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.templates = templates if templates is not None else Templates()
        self.rng = rng if rng is not None else random.Random()
        self.play_sound = play_sound

        self.player = replace(self.templates.player)
        self.player.x = float(width // 2 - self.player.width // 2)
        self.player.y = float(height - self.player.height)

        self.score = 0
        self.timer_end = 0.0
        self.is_dead = False

        self.projectiles_player: list[ProjectilePlayer] = []
        self.enemies: list[Enemy] = []
        self.projectiles_enemy: list[ProjectileEnemy] = []
        self.explosions: list[Explosion] = []
        self.items: list[Item] = []

    def _sound(self, name: str, channel: int) -> None:
        if self.play_sound is not None:
            self.play_sound(name, channel)

    def update(self, delta_time: float, now: int, controls: Controls) -> None:
        """Advance the whole field by one frame."""
        if not self.is_dead:
            self.move_player(controls, delta_time)
            if controls.shoot:
                self.try_shoot(now)
        self.update_player_projectiles(delta_time)
        self.update_enemy_projectiles(delta_time)
        self.spawn_enemy()
        self.update_enemies(delta_time, now)
        self.update_player(now)
        self.update_explosions(now)
        self.update_items(delta_time)
        if self.is_dead:
            self.timer_end += delta_time

    def move_player(self, controls: Controls, delta_time: float) -> None:
        """Move the player by the held keys and keep it inside the field."""
        if self.is_dead:
            return
        player = self.player
        step = delta_time * player.speed
        if controls.left:
            player.x -= step
        if controls.right:
            player.x += step
        if controls.up:
            player.y -= step
        if controls.down:
            player.y += step
        player.x = min(max(player.x, 0.0), float(self.width - player.width))
        player.y = min(max(player.y, 0.0), float(self.height - player.height))

    def try_shoot(self, now: int) -> bool:
        """Fire a shot if the cool-down has passed; tell whether one was fired."""
        if self.is_dead:
            return False
        if now - self.player.last_shoot_time < self.player.cool_down:
            return False
        self.shoot_player()
        self.player.last_shoot_time = now
        return True

    def shoot_player(self) -> ProjectilePlayer:
        """Launch a shot from the top centre of the player."""
        projectile = replace(self.templates.projectile_player)
        projectile.x = self.player.x + self.player.width // 2 - projectile.width // 2
        projectile.y = self.player.y
        self.projectiles_player.append(projectile)
        self._sound("player_shott", 0)
        return projectile

    def spawn_enemy(self) -> Enemy | None:
        """Now and then put a new enemy just above the field."""
        if self.rng.random() > SPAWN_CHANCE:
            return None
        enemy = replace(self.templates.enemy)
        enemy.x = self.rng.random() * (self.width - enemy.width)
        enemy.y = float(-enemy.height)
        self.enemies.append(enemy)
        return enemy

    def update_player_projectiles(self, delta_time: float) -> None:
        """Move the player's shots up and apply their hits on enemies."""
        remaining: list[ProjectilePlayer] = []
        for projectile in self.projectiles_player:
            projectile.y -= delta_time * projectile.speed
            if projectile.y + PROJECTILE_MARGIN < 0:
                continue
            shot_rect = bounds(projectile)
            target = next(
                (enemy for enemy in self.enemies if rects_intersect(shot_rect, bounds(enemy))),
                None,
            )
            if target is None:
                remaining.append(projectile)
                continue
            target.current_health -= projectile.damage
            self._sound("hit", 0)
        self.projectiles_player = remaining

    def _outside(self, x: float, y: float) -> bool:
        margin = PROJECTILE_MARGIN
        return (
            y > self.height + margin
            or y < -margin
            or x > self.width + margin
            or x < -margin
        )

    def update_enemy_projectiles(self, delta_time: float) -> None:
        """Move enemy shots along their direction and apply hits on the player."""
        remaining: list[ProjectileEnemy] = []
        for projectile in self.projectiles_enemy:
            dx, dy = projectile.direction
            projectile.y += delta_time * projectile.speed * dy
            projectile.x += delta_time * projectile.speed * dx
            if self._outside(projectile.x, projectile.y):
                continue
            player_rect = bounds(self.player)
            if not self.is_dead and rects_intersect(bounds(projectile), player_rect):
                self.player.current_health -= projectile.damage
                self._sound("hit", -1)
                continue
            remaining.append(projectile)
        self.projectiles_enemy = remaining

    def update_enemies(self, delta_time: float, now: int) -> None:
        """Move enemies down, blow up the destroyed ones and let the rest fire."""
        remaining: list[Enemy] = []
        for enemy in self.enemies:
            enemy.y += delta_time * enemy.speed
            if enemy.y > self.height:
                continue
            if enemy.current_health <= 0:
                self.enemy_explode(enemy, now)
                self._sound("enemy_explode", -1)
                continue
            if now - enemy.last_shoot_time >= enemy.cool_down and not self.is_dead:
                self.shoot_enemy(enemy)
                enemy.last_shoot_time = now
            remaining.append(enemy)
        self.enemies = remaining

    def update_player(self, now: int) -> None:
        """Kill the player when out of health, else check for ramming enemies."""
        if self.is_dead:
            return
        player = self.player
        if player.current_health <= 0:
            self.is_dead = True
            explosion = replace(self.templates.explosion)
            explosion.x = player.x + player.width // 2 - explosion.width // 2
            explosion.y = player.y + player.height // 2 - explosion.height // 2
            explosion.start_time = now
            self.explosions.append(explosion)
            self._sound("player_explode", 0)
            return
        player_rect = bounds(player)
        for enemy in self.enemies:
            if rects_intersect(bounds(enemy), player_rect):
                player.current_health -= 1
                enemy.current_health = 0

    def update_explosions(self, now: int) -> None:
        """Advance explosion animations and drop the finished ones."""
        remaining: list[Explosion] = []
        for explosion in self.explosions:
            explosion.current_frame = (now - explosion.start_time) * explosion.fps // 1000
            if explosion.current_frame < explosion.total_frame:
                remaining.append(explosion)
        self.explosions = remaining

    def update_items(self, delta_time: float) -> None:
        """Move pick-ups, bounce them off the edges and collect touched ones."""
        remaining: list[Item] = []
        pending = iter(self.items)
        for item in pending:
            dx, dy = item.direction
            item.x += dx * item.speed * delta_time
            item.y += dy * item.speed * delta_time
            if item.bounce > 0:
                if item.x <= 0 or item.x + item.width >= self.width:
                    dx = -dx
                    item.bounce -= 1
                if item.y <= 0 or item.y + item.height >= self.height:
                    dy = -dy
                    item.bounce -= 1
                item.direction = (dx, dy)
            if (
                item.x + item.width < 0
                or item.x > self.width
                or item.y + item.height < 0
                or item.y > self.height
            ):
                continue
            if self.is_dead:
                remaining.append(item)
                remaining.extend(pending)
                break
            if rects_intersect(bounds(item), bounds(self.player)):
                self.player_get_item(item)
                continue
            remaining.append(item)
        self.items = remaining

    def shoot_enemy(self, enemy: Enemy) -> ProjectileEnemy:
        """Fire a shot from an enemy's centre towards the player."""
        projectile = replace(self.templates.projectile_enemy)
        projectile.x = enemy.x + enemy.width // 2 - projectile.width // 2
        projectile.y = enemy.y + enemy.height // 2 - projectile.height // 2
        projectile.direction = self.direction_to_player(enemy)
        self.projectiles_enemy.append(projectile)
        self._sound("enemy_shott", -1)
        return projectile

    def direction_to_player(self, enemy: Enemy) -> Vector:
        """Return the unit vector from an enemy's centre to the player's."""
        player = self.player
        x = (player.x + player.width // 2) - (enemy.x + enemy.width // 2)
        y = (player.y + player.height // 2) - (enemy.y + enemy.height // 2)
        length = math.hypot(x, y)
        if length == 0:
            return (1.0, 1.0)
        return (x / length, y / length)

    def enemy_explode(self, enemy: Enemy, now: int) -> Explosion:
        """Replace an enemy by an explosion, maybe drop an item, and score it."""
        explosion = replace(self.templates.explosion)
        explosion.x = enemy.x + enemy.width // 2 - explosion.width // 2
        explosion.y = enemy.y + enemy.height // 2 - explosion.height // 2
        explosion.start_time = now
        self.explosions.append(explosion)
        if self.rng.random() < DROP_CHANCE:
            self.drop_item(enemy)
        self.score += enemy.score
        return explosion

    def drop_item(self, enemy: Enemy) -> Item:
        """Release a pick-up from an enemy's centre in a random direction."""
        item = replace(self.templates.item)
        item.x = enemy.x + enemy.width // 2 - item.width // 2
        item.y = enemy.y + enemy.height // 2 - item.height // 2
        angle = self.rng.random() * 2 * math.pi
        item.direction = (math.cos(angle), math.sin(angle))
        self.items.append(item)
        return item

    def player_get_item(self, item: Item) -> None:
        """Apply a collected pick-up to the player and the score."""
        self.score += item.score
        if item.type is ItemType.LIFE:
            player = self.player
            player.current_health = min(player.current_health + 1, player.max_health)
        self._sound("get_item", 0)

    def finished(self) -> bool:
        """Tell whether the round is over and the end screen is due."""
        return self.is_dead and self.timer_end >= END_DELAY