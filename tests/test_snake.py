import pygame

from snakeray.food import Food
from snakeray.frame import PlaygroundFrame, PlaygroundProperty
from snakeray.snake import SNAKE_COLOR, START_BODY, START_DIRECTION, Snake


class _FixedRng:
    def __init__(self, x, y):
        self._values = [x, y]

    def randint(self, low, high):
        return self._values.pop(0)


def _step(snake, *keys):
    snake.update(0.2, set(keys))


def _source_frame():
    return PlaygroundFrame(PlaygroundProperty(64, 64, 768, 768, 5), 16)


def test_initial_state():
    snake = Snake(16)
    assert snake.body == ((7, 5), (6, 5), (5, 5))
    assert snake.direction == (1, 0)
    assert snake.head == (7, 5)
    assert snake.tail == (5, 5)
    assert snake.position == snake.head


def test_no_move_before_interval():
    snake = Snake(16)
    snake.update(0.05, set())
    assert snake.body == START_BODY


def test_time_accumulates_until_step():
    snake = Snake(16)
    snake.update(0.1, set())
    snake.update(0.05, set())
    assert snake.head == (8, 5)
    assert len(snake.body) == len(START_BODY)
    assert snake.last_update_time == 0


def test_move_keeps_length_and_drops_tail():
    snake = Snake(16)
    before = snake.body
    _step(snake)
    assert snake.body[1:] == before[:-1]
    assert len(snake.body) == len(before)


def test_cannot_reverse_direction():
    snake = Snake(16)
    _step(snake, pygame.K_a)
    assert snake.direction == START_DIRECTION
    _step(snake, pygame.K_LEFT)
    assert snake.direction == START_DIRECTION


def test_turn_up_and_down():
    snake = Snake(16)
    head = snake.head
    _step(snake, pygame.K_w)
    assert snake.direction == (0, -1)
    assert snake.head == (head[0], head[1] - 1)
    _step(snake, pygame.K_DOWN)
    assert snake.direction == (0, -1)
    _step(snake, pygame.K_RIGHT)
    assert snake.direction == (1, 0)


def test_direction_changes_even_without_step():
    snake = Snake(16)
    snake.update(0.01, {pygame.K_s})
    assert snake.direction == (0, 1)
    assert snake.body == START_BODY


def test_grow_adds_segment_in_front():
    snake = Snake(16)
    snake.grow()
    assert len(snake.body) == len(START_BODY) + 1
    assert snake.body[1:] == START_BODY
    assert snake.head == (8, 5)


def test_running_into_self_resets():
    snake = Snake(16)
    snake.grow()
    snake.grow()
    _step(snake, pygame.K_s)
    _step(snake, pygame.K_a)
    _step(snake, pygame.K_w)
    assert snake.body == START_BODY
    assert snake.direction == START_DIRECTION


def test_reset_restores_start():
    snake = Snake(16)
    snake.grow()
    _step(snake, pygame.K_s)
    snake.reset()
    assert snake.body == START_BODY
    assert snake.direction == START_DIRECTION


def test_food_collision():
    snake = Snake(16)
    food = Food(16, _FixedRng(8, 5))
    assert not snake.is_colliding_with_food(food)
    _step(snake)
    assert snake.is_colliding_with_food(food)


def test_frame_collision_at_top_edge():
    snake = Snake(16)
    frame = _source_frame()
    assert not snake.is_colliding_with_frame(frame)
    _step(snake, pygame.K_w)
    assert not snake.is_colliding_with_frame(frame)
    _step(snake, pygame.K_w)
    assert snake.is_colliding_with_frame(frame)


def test_frame_collision_at_right_edge():
    snake = Snake(16)
    frame = _source_frame()
    for _ in range(60):
        if snake.is_colliding_with_frame(frame):
            break
        _step(snake)
    head_x = snake.head[0] * 16
    assert snake.is_colliding_with_frame(frame)
    assert head_x >= frame.position[0] + frame.width


def test_draw_paints_every_segment():
    snake = Snake(4)
    surface = pygame.Surface((48, 48))
    snake.draw(surface)
    for x, y in snake.body:
        assert tuple(surface.get_at((x * 4 + 2, y * 4 + 2)))[:3] == SNAKE_COLOR
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)