"""Rectangular pieces that move step by step across a wrapping world."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class MoveDirection(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()

    @property
    def is_horizontal(self) -> bool:
        return self in (MoveDirection.LEFT, MoveDirection.RIGHT)


@dataclass
class Segment:
    """A ``w`` x ``h`` block at (x, y) in a world of ``ww`` x ``wh``."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    ww: int = 0
    wh: int = 0
    move_dir: MoveDirection = MoveDirection.RIGHT

    def set(self, x: int, y: int, w: int, h: int, ww: int, wh: int) -> None:
        """Set position, size and world size; the direction is kept."""
        self.x, self.y, self.w, self.h, self.ww, self.wh = x, y, w, h, ww, wh

    def set_pos(self, x: int, y: int) -> None:
        self.x, self.y = x, y

    def move(self) -> None:
        """Advance one step in ``move_dir``, wrapping at the world edges."""
        if self.move_dir is MoveDirection.UP:
            self.y -= self.h
            if self.y < 0:
                self.y = self.wh
        elif self.move_dir is MoveDirection.DOWN:
            self.y = (self.y + self.h) % self.wh
        elif self.move_dir is MoveDirection.RIGHT:
            self.x = (self.x + self.w) % self.ww
        else:
            self.x -= self.w
            if self.x < 0:
                self.x = self.ww

    def render(self, canvas) -> None:
        """Fill the segment's area on the canvas in its primary color."""
        canvas.draw_filled_rect(self.x, self.y, self.x + self.w, self.y + self.h)

    def collides_with(self, other: Segment) -> bool:
        """Return whether the two blocks overlap; shared edges count."""
        if self.y + self.h < other.y or self.y > other.y + other.h:
            return False
        return max(self.x, other.x) <= min(self.x + self.w, other.x + other.w)