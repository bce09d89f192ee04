"""The snake game: input handling, rules and drawing of one frame."""

from __future__ import annotations

import random

import pygame

from .segment import MoveDirection, Segment
from .snake import Snake

START_FPS = 5
MAX_FPS = 60
FRUIT_START = (400, 300)
FRUIT_SIZE = 10
CLEAR_COLOR = (0, 0, 128)
FRUIT_COLOR = (128, 128, 0)
SNAKE_COLOR = (255, 255, 255)
SCORE_COLOR = (0, 255, 0)
SCORE_POSITION = (10, 10)

_ARROW_DIRECTIONS = {
    pygame.K_LEFT: MoveDirection.LEFT,
    pygame.K_RIGHT: MoveDirection.RIGHT,
    pygame.K_UP: MoveDirection.UP,
    pygame.K_DOWN: MoveDirection.DOWN,
}


class Game:
    """Rules of the snake game, driven by a core's frame and input callbacks.

    Each fruit eaten adds a point, grows the snake and raises the frame rate
    by one, up to 60. The game ends when the head runs into the body.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.core = None
        self.snake: Snake | None = None
        self.fruit = Segment()
        self.is_game_over = False
        self.score = 0
        self.score_text = ""
        self.desired_fps = START_FPS
        self.ww = 0
        self.wh = 0

    def init(self, core) -> None:
        """Attach the game to a core and start a new round."""
        self.core = core
        self.desired_fps = START_FPS
        canvas = core.canvas
        canvas.clear_color = CLEAR_COLOR
        if self.snake is None:
            self.snake = Snake(canvas.width, canvas.height)
        self.ww = canvas.width
        self.wh = canvas.height
        self.restart()

    def _require_snake(self) -> Snake:
        if self.snake is None:
            raise RuntimeError("the game has not been initialised")
        return self.snake

    def handle_input(self, event) -> None:
        """F5 restarts; the arrow keys turn the snake's head."""
        if event.type != pygame.KEYDOWN:
            return
        key = getattr(event, "key", None)
        if key == pygame.K_F5:
            self.restart()
        elif key in _ARROW_DIRECTIONS:
            self._require_snake().change_head_direction(_ARROW_DIRECTIONS[key])

    def restart(self) -> None:
        """Put the fruit and snake back in place and reset score and speed."""
        snake = self._require_snake()
        self.fruit.set(*FRUIT_START, FRUIT_SIZE, FRUIT_SIZE, self.ww, self.wh)
        self.is_game_over = False
        self.desired_fps = START_FPS
        self.core.set_target_fps(self.desired_fps)
        snake.restart()
        self.score = 0
        self.update_score_text()

    def update_and_render(self, canvas) -> None:
        """Advance the game one step and draw it; does nothing once it is over."""
        if self.is_game_over:
            return
        snake = self._require_snake()
        snake.update()
        if snake.collides_with_self():
            self.is_game_over = True
            self.update_score_text()
        if snake.collides_with_fruit(self.fruit):
            fruit = self.fruit
            avail_width = fruit.ww - 1 - fruit.w
            avail_height = fruit.wh - 1 - fruit.h
            fruit.set_pos(
                self.rng.randrange(avail_width), self.rng.randrange(avail_height)
            )
            snake.grow()
            self.desired_fps = min(self.desired_fps + 1, MAX_FPS)
            self.core.set_target_fps(self.desired_fps)
            self.score += 1
            self.update_score_text()

        canvas.clear()
        canvas.primary_color = FRUIT_COLOR
        self.fruit.render(canvas)
        canvas.primary_color = SNAKE_COLOR
        snake.render(canvas)
        canvas.primary_color = SCORE_COLOR
        canvas.draw_text(self.score_text, *SCORE_POSITION)

    def update_score_text(self) -> None:
        """Refresh the text shown in the corner from the score and state."""
        if self.is_game_over:
            self.score_text = f"Game Over! Score: {self.score}"
        else:
            self.score_text = f"Score: {self.score}"