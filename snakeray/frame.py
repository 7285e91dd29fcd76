"""The border drawn around the playfield."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

import pygame

from snakeray.objects import GameObject

FRAME_COLOR = (246, 238, 201)


@dataclass(frozen=True)
class PlaygroundProperty:
    """Inner area of the playfield and the thickness of its border."""

    x: float
    y: float
    width: float
    height: float
    line_thick: int


class PlaygroundFrame(GameObject):
    """A rectangular border enclosing the playfield."""

    def __init__(self, properties: PlaygroundProperty, cell_size: int) -> None:
        super().__init__(cell_size)
        thick = properties.line_thick
        self._position = (properties.x - thick, properties.y - thick)
        self.line_thick = thick
        self.color = FRAME_COLOR
        self._rect = (
            self._position[0],
            self._position[1],
            properties.width + 2 * thick,
            properties.height + 2 * thick,
        )

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """Outer rectangle of the border as (x, y, width, height)."""
        return self._rect

    @property
    def width(self) -> float:
        """Inner width of the playfield."""
        return self._rect[2] - 2 * self.line_thick

    @property
    def height(self) -> float:
        """Inner height of the playfield."""
        return self._rect[3] - 2 * self.line_thick

    def update(self, delta_time: float, pressed: Collection[int]) -> None:
        """The frame never changes."""

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(
            surface, self.color, pygame.Rect(self._rect), width=int(self.line_thick)
        )