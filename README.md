# snakeray

A small snake arcade game played on a grid, built on pygame.

## Installation

```
pip install .
```

## Playing

```
snakeray
```

The game opens on a main menu listing Play, Scoreboard, Options and Exit. Move the `>` selector with `W` and `S`. The selector wraps around at both ends. Press `Enter` to start a game.

In the game:

- Steer the snake with `W`/`A`/`S`/`D` or the arrow keys. The snake cannot reverse straight back onto itself. It moves one cell every 0.12 seconds.
- Eat the red food to grow by one segment and score one point. The food then moves to a new random cell.
- If the snake's head reaches the frame, a sound plays, the snake returns to its starting place, the food moves and the score goes back to zero.
- If the snake runs into its own body, it returns to its starting place. The score is kept.

Close the window or press `Escape` to quit.

The default playfield is 768×768 pixels made of 16-pixel cells. A 64-pixel margin around it holds the score and the title.

Sound effects and background music are loaded from `assets/sfx/click_04.wav`, `assets/sfx/down_02.wav` and `assets/Music_Loop_5_Melody.wav`. These paths are relative to the working directory. If a file is missing, or no audio device is available, the game runs silently.

## What it does not do

- Every menu entry starts the game. There is no scoreboard screen and no options screen, and Exit does not quit.
- Scores are not saved between games.
- The `snakeray` command takes no command-line options.

## Using it from Python

```python
from snakeray.game import Game, GameOptions

options = GameOptions(screen_width=512, screen_height=512, title="My Snake")
with Game(options) as game:
    game.run()
```

`GameOptions` has the fields `screen_width`, `screen_height`, `title`, `cell_size` and `frame_offset`. Its `window_size` property gives the playfield size plus the margin on each side. `Game.change_scene` replaces the scene that is updated and drawn. `Game.close` shuts down audio and closes the window. Leaving the `with` block calls it for you.

The game objects in `snakeray.snake`, `snakeray.food` and `snakeray.frame` can be used without opening a window. Their `update` method takes the time since the last frame and the collection of keys pressed in that frame:

```python
from snakeray.snake import Snake

snake = Snake(cell_size=16)
snake.update(0.12, set())   # moves one cell to the right
print(snake.head)           # (8, 5)
```

`Food` accepts a `random.Random` instance, so you can choose where food is placed:

```python
import random
from snakeray.food import Food

food = Food(16, random.Random(1))
print(food.position)        # a cell between 4 and 51 on each axis
```

## Running the tests

```
pip install .[test]
pytest
```