"""Base class for everything that lives on the playfield."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection

import pygame

Vector = tuple[float, float]


class GameObject(ABC):
    """An object that is updated and drawn once per frame."""

    def __init__(self, cell_size: int) -> None:
        self.cell_size = cell_size
        self.last_update_time = 0.0
        self._position: Vector = (0, 0)

    @property
    def position(self) -> Vector:
        """Position of the object, in cells or pixels depending on the object."""
        return self._position

    @abstractmethod
    def update(self, delta_time: float, pressed: Collection[int]) -> None:
        """Advance the object by ``delta_time`` seconds given the keys pressed."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the object onto ``surface``."""


def rounded_radius(roundness: float, width: float, height: float) -> int:
    """Corner radius for a rectangle drawn with the given roundness (0..1)."""
    return max(0, int(roundness * min(width, height) / 2))