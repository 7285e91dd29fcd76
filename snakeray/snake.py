"""The player-controlled snake."""

from __future__ import annotations

from collections import deque
from collections.abc import Collection
from typing import TYPE_CHECKING

import pygame

from snakeray.objects import GameObject, Vector, rounded_radius

if TYPE_CHECKING:
    from snakeray.food import Food
    from snakeray.frame import PlaygroundFrame

SNAKE_COLOR = (121, 147, 81)
STEP_INTERVAL = 0.12
ROUNDNESS = 0.4
START_BODY = ((7, 5), (6, 5), (5, 5))
START_DIRECTION = (1, 0)

_RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
_LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
_UP_KEYS = (pygame.K_w, pygame.K_UP)
_DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)


def _any_pressed(pressed: Collection[int], keys: tuple[int, ...]) -> bool:
    return any(key in pressed for key in keys)


class Snake(GameObject):
    """A snake moving one cell per step on a grid."""

    def __init__(self, cell_size: int) -> None:
        super().__init__(cell_size)
        self._body: deque[Vector] = deque()
        self._direction: Vector = START_DIRECTION
        self.reset()

    @property
    def body(self) -> tuple[Vector, ...]:
        """Cells occupied by the snake, head first."""
        return tuple(self._body)

    @property
    def direction(self) -> Vector:
        return self._direction

    @property
    def head(self) -> Vector:
        return self._body[0]

    @property
    def tail(self) -> Vector:
        return self._body[-1]

    @property
    def position(self) -> Vector:
        return self.head

    def reset(self) -> None:
        """Return the snake to its starting body and direction."""
        self._body = deque(START_BODY)
        self._direction = START_DIRECTION

    def _next_cell(self) -> Vector:
        hx, hy = self.head
        dx, dy = self._direction
        return (hx + dx, hy + dy)

    def grow(self) -> None:
        """Add a segment in front of the head."""
        self._body.appendleft(self._next_cell())

    def is_colliding_with_food(self, food: Food) -> bool:
        return self.head == food.position

    def is_colliding_with_frame(self, frame: PlaygroundFrame) -> bool:
        hx, hy = self.head
        head_x = hx * self.cell_size
        head_y = hy * self.cell_size
        fx, fy = frame.position
        return (
            head_x <= fx
            or head_y <= fy
            or head_x >= fx + frame.width
            or head_y >= fy + frame.height
        )

    def _steer(self, pressed: Collection[int]) -> None:
        if _any_pressed(pressed, _RIGHT_KEYS) and self._direction[0] != -1:
            self._direction = (1, 0)
        if _any_pressed(pressed, _LEFT_KEYS) and self._direction[0] != 1:
            self._direction = (-1, 0)
        if _any_pressed(pressed, _UP_KEYS) and self._direction[1] != 1:
            self._direction = (0, -1)
        if _any_pressed(pressed, _DOWN_KEYS) and self._direction[1] != -1:
            self._direction = (0, 1)

    def update(self, delta_time: float, pressed: Collection[int]) -> None:
        self.last_update_time += delta_time
        self._steer(pressed)

        if self.last_update_time < STEP_INTERVAL:
            return
        self.last_update_time = 0.0

        target = self._next_cell()
        if target in self._body:
            self.reset()
        else:
            self._body.pop()
            self._body.appendleft(target)

    def draw(self, surface: pygame.Surface) -> None:
        size = self.cell_size
        radius = rounded_radius(ROUNDNESS, size, size)
        for x, y in self._body:
            pygame.draw.rect(
                surface,
                SNAKE_COLOR,
                pygame.Rect(x * size, y * size, size, size),
                border_radius=radius,
            )