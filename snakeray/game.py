"""The game window and its main loop."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

import pygame

from snakeray.scenes import GameScene, MainMenuScene

TARGET_FPS = 60


@dataclass
class GameOptions:
    """Size of the playfield, window title and grid settings."""

    screen_width: int = 768
    screen_height: int = 768
    title: str = "SnakeRay"
    cell_size: int = 16
    frame_offset: float = 64.0

    @property
    def window_size(self) -> tuple[int, int]:
        """Size of the window: the playfield plus the frame offset on each side."""
        return (
            int(self.screen_width + 2 * self.frame_offset),
            int(self.screen_height + 2 * self.frame_offset),
        )


class Game:
    """Owns the window, the audio device and the current scene."""

    def __init__(self, options: GameOptions | None = None) -> None:
        self.options = options if options is not None else GameOptions()
        self.rng = random.Random()

        pygame.init()
        self.surface = pygame.display.set_mode(self.options.window_size)
        pygame.display.set_caption(self.options.title)
        try:
            pygame.mixer.init()
        except pygame.error:
            pass
        self._clock = pygame.time.Clock()

        self.scene: GameScene = MainMenuScene(self)

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the audio device and close the window."""
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.quit()

    def run(self) -> None:
        """Update and draw the current scene until the window is closed."""
        while True:
            pressed: set[int] = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return
                    pressed.add(event.key)

            delta_time = self._clock.tick(TARGET_FPS) / 1000.0
            self.scene.update(delta_time, pressed)
            self.scene.draw(self.surface)
            pygame.display.flip()

    def change_scene(self, new_scene: GameScene) -> None:
        """Make ``new_scene`` the scene that is updated and drawn."""
        self.scene = new_scene


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    with Game() as game:
        game.run()
    return 0