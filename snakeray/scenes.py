"""Scenes: the main menu and the playfield."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

import pygame

from snakeray.food import Food
from snakeray.frame import PlaygroundFrame, PlaygroundProperty
from snakeray.objects import GameObject, Vector
from snakeray.snake import Snake

if TYPE_CHECKING:
    from snakeray.game import Game

BACKGROUND_COLOR = (161, 221, 112)
TEXT_COLOR = (246, 238, 201)
FONT_SIZE = 40
FRAME_LINE_THICK = 5

SCORE_SOUND = "assets/sfx/click_04.wav"
DEATH_SOUND = "assets/sfx/down_02.wav"
BACKGROUND_MUSIC = "assets/Music_Loop_5_Melody.wav"

MENU_TITLE_Y = 64
MENU_FIRST_Y = 128
MENU_SPACING = 40
SELECTOR_OFFSET_X = 40


class _Sound:
    """A sound that stays silent when audio or the file is unavailable."""

    def __init__(self, path: str) -> None:
        self._sound: pygame.mixer.Sound | None = None
        if pygame.mixer.get_init():
            try:
                self._sound = pygame.mixer.Sound(path)
            except (pygame.error, FileNotFoundError):
                self._sound = None

    @property
    def is_playing(self) -> bool:
        return self._sound is not None and self._sound.get_num_channels() > 0

    def play(self) -> None:
        if self._sound is not None:
            self._sound.play()


class GameScene(ABC):
    """A screen of the game holding the objects it updates and draws."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.objects: list[GameObject] = []
        self._font_cache: pygame.font.Font | None = None

    def add_object(self, game_object: GameObject) -> None:
        """Register an object to be updated and drawn with the scene."""
        self.objects.append(game_object)

    @property
    def _font(self) -> pygame.font.Font:
        if self._font_cache is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font_cache = pygame.font.Font(None, FONT_SIZE)
        return self._font_cache

    def _draw_text(self, surface: pygame.Surface, text: str, x: float, y: float) -> None:
        rendered = self._font.render(text, True, TEXT_COLOR)
        surface.blit(rendered, (int(x), int(y)))

    @abstractmethod
    def update(self, delta_time: float, pressed: Collection[int]) -> None:
        """Advance the scene by ``delta_time`` seconds given the keys pressed."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the scene onto ``surface``."""


class GamePlayScene(GameScene):
    """The playfield with the snake, the food and the border."""

    def __init__(self, game: Game) -> None:
        super().__init__(game)
        self.options = game.options
        self._score_sound = _Sound(SCORE_SOUND)
        self._death_sound = _Sound(DEATH_SOUND)
        self._background_music = _Sound(BACKGROUND_MUSIC)

        cell_size = self.options.cell_size
        offset = self.options.frame_offset
        self.snake = Snake(cell_size)
        self.food = Food(cell_size, game.rng)
        self.frame = PlaygroundFrame(
            PlaygroundProperty(
                offset,
                offset,
                float(self.options.screen_width),
                float(self.options.screen_height),
                FRAME_LINE_THICK,
            ),
            cell_size,
        )
        self.score = 0

        self.add_object(self.snake)
        self.add_object(self.food)
        self.add_object(self.frame)

    def update(self, delta_time: float, pressed: Collection[int]) -> None:
        if not self._background_music.is_playing:
            self._background_music.play()

        if self.snake.is_colliding_with_food(self.food):
            self._score_sound.play()
            self.food.reset()
            self.snake.grow()
            self.score += 1

        if self.snake.is_colliding_with_frame(self.frame):
            self._death_sound.play()
            self.snake.reset()
            self.food.reset()
            self.score = 0

        for game_object in self.objects:
            game_object.update(delta_time, pressed)

    def draw(self, surface: pygame.Surface) -> None:
        options = self.options
        window_width = int(options.screen_width + 2 * options.frame_offset)

        surface.fill(BACKGROUND_COLOR)
        for game_object in self.objects:
            game_object.draw(surface)

        self._draw_text(
            surface, f"Score: {self.score}", options.frame_offset, options.frame_offset - 50
        )
        self._draw_text(
            surface,
            "SnakeRay",
            window_width // 2 - 30 * 4,
            options.screen_height + options.frame_offset + 10,
        )


class MenuItem(IntEnum):
    """Entries of the main menu, in display order."""

    PLAY = 0
    SCOREBOARD = 1
    OPTIONS = 2
    EXIT = 3


@dataclass(frozen=True)
class MenuOption:
    """Label of a menu entry and where it is drawn."""

    name: str
    position: Vector


_MENU_NAMES = {
    MenuItem.PLAY: "Play",
    MenuItem.SCOREBOARD: "Scoreboard",
    MenuItem.OPTIONS: "Options",
    MenuItem.EXIT: "Exit",
}


class MainMenuScene(GameScene):
    """The title screen with a selectable list of entries."""

    def __init__(self, game: Game) -> None:
        super().__init__(game)
        self.options = game.options
        center_x = self.options.screen_width / 2
        self.menu_options: dict[MenuItem, MenuOption] = {
            item: MenuOption(name, (center_x, MENU_FIRST_Y + MENU_SPACING * item))
            for item, name in _MENU_NAMES.items()
        }
        self._selected_index = int(MenuItem.PLAY)

    @property
    def selected(self) -> MenuItem:
        """The menu entry the selector points at."""
        return MenuItem(self._selected_index)

    def update(self, delta_time: float, pressed: Collection[int]) -> None:
        if pygame.K_w in pressed:
            self._selected_index -= 1
        elif pygame.K_s in pressed:
            self._selected_index += 1
        elif pygame.K_RETURN in pressed:
            self.game.change_scene(GamePlayScene(self.game))
            return

        if self._selected_index < MenuItem.PLAY:
            self._selected_index = int(MenuItem.EXIT)
        elif self._selected_index > MenuItem.EXIT:
            self._selected_index = int(MenuItem.PLAY)

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND_COLOR)
        self._draw_text(surface, "SnakeRay", self.options.screen_width / 2, MENU_TITLE_Y)

        for option in self.menu_options.values():
            x, y = option.position
            self._draw_text(surface, option.name, x, y)

        x, y = self.menu_options[self.selected].position
        self._draw_text(surface, ">", x - SELECTOR_OFFSET_X, y)