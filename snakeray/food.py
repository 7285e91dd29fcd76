"""The food the snake eats."""

from __future__ import annotations

import random
from collections.abc import Collection

import pygame

from snakeray.objects import GameObject, rounded_radius

FOOD_COLOR = (238, 78, 78)
MIN_CELL = 4
MAX_CELL = 51
ROUNDNESS = 0.4


class Food(GameObject):
    """A single piece of food placed on a random cell."""

    def __init__(self, cell_size: int, rng: random.Random | None = None) -> None:
        super().__init__(cell_size)
        self._rng = rng if rng is not None else random.Random()
        self._rect: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
        self.reset()

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """Pixel rectangle covered by the food as (x, y, width, height)."""
        return self._rect

    def reset(self) -> None:
        """Move the food to a new random cell."""
        x = self._rng.randint(MIN_CELL, MAX_CELL)
        y = self._rng.randint(MIN_CELL, MAX_CELL)
        self._position = (x, y)
        size = self.cell_size
        self._rect = (x * size, y * size, size, size)

    def update(self, delta_time: float, pressed: Collection[int]) -> None:
        """Food is static; nothing changes between frames."""

    def draw(self, surface: pygame.Surface) -> None:
        _, _, width, height = self._rect
        pygame.draw.rect(
            surface,
            FOOD_COLOR,
            pygame.Rect(self._rect),
            border_radius=rounded_radius(ROUNDNESS, width, height),
        )