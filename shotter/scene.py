"""Base class for the screens the game switches between."""

from __future__ import annotations

import abc
from typing import Any


class Scene(abc.ABC):
    """A screen of the game, driven by the game loop."""

    def __init__(self, game: Any) -> None:
        self.game = game

    @abc.abstractmethod
    def init(self) -> None:
        """Load the resources the scene needs and start it."""

    @abc.abstractmethod
    def clean(self) -> None:
        """Release the resources acquired by init."""

    @abc.abstractmethod
    def render(self) -> None:
        """Draw the scene for the current frame."""

    @abc.abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the scene by delta_time seconds."""

    @abc.abstractmethod
    def handle_event(self, event: Any) -> None:
        """React to one input event."""