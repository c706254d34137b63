"""Game entities and the geometry helpers shared by the scenes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterator, Protocol

Vector = tuple[float, float]
Rect = tuple[int, int, int, int]


class ItemType(enum.Enum):
    """Kinds of pick-up an enemy can drop."""

    LIFE = enum.auto()
    SHIELD = enum.auto()
    TIME = enum.auto()


class _Placed(Protocol):
    x: float
    y: float
    width: int
    height: int


@dataclass
class Player:
    """The player's ship."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0
    max_health: int = 3
    current_health: int | None = None
    speed: int = 400
    cool_down: int = 100
    last_shoot_time: int = 0
    line_life: int = 10

    def __post_init__(self) -> None:
        if self.current_health is None:
            self.current_health = self.max_health


@dataclass
class ProjectilePlayer:
    """A shot fired upwards by the player."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0
    damage: int = 1
    speed: int = 800


@dataclass
class Enemy:
    """An enemy ship moving down the screen."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0
    speed: int = 200
    current_health: int = 2
    score: int = 10
    cool_down: int = 2000
    last_shoot_time: int = 0


@dataclass
class ProjectileEnemy:
    """A shot fired by an enemy towards the player."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    direction: Vector = (0.0, 0.0)
    width: int = 0
    height: int = 0
    speed: int = 400
    damage: int = 1


@dataclass
class Explosion:
    """An animated explosion drawn from a horizontal sprite sheet."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0
    current_frame: int = 0
    total_frame: int = 0
    start_time: int = 0
    fps: int = 10


@dataclass
class Item:
    """A bouncing pick-up dropped by a destroyed enemy."""

    texture: Any = None
    x: float = 0.0
    y: float = 0.0
    direction: Vector = (0.0, 0.0)
    width: int = 0
    height: int = 0
    speed: int = 100
    bounce: int = 3
    score: int = 5
    type: ItemType = ItemType.LIFE


@dataclass
class Background:
    """A vertically scrolling, tiled star layer."""

    texture: Any = None
    offset: float = 0.0
    width: int = 0
    height: int = 0
    speed: int = 30

    def update(self, delta_time: float) -> None:
        """Scroll the layer down, wrapping the offset back by one tile."""
        self.offset += self.speed * delta_time
        if self.offset >= 0:
            self.offset -= self.height

    def tile_positions(self, view_width: int, view_height: int) -> Iterator[tuple[int, int]]:
        """Yield the top-left corner of every tile needed to cover the view."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("background tiles must have a positive size")
        for pos_y in range(int(self.offset), view_height, self.height):
            for pos_x in range(0, view_width, self.width):
                yield pos_x, pos_y


def bounds(entity: _Placed) -> Rect:
    """Return the integer rectangle an entity occupies."""
    return int(entity.x), int(entity.y), entity.width, entity.height


def rects_intersect(a: Rect, b: Rect) -> bool:
    """Tell whether two rectangles overlap; empty rectangles never do."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    if aw <= 0 or ah <= 0 or bw <= 0 or bh <= 0:
        return False
    overlap_x = max(ax, bx) < min(ax + aw, bx + bw)
    overlap_y = max(ay, by) < min(ay + ah, by + bh)
    return overlap_x and overlap_y