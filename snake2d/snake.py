"""The snake: a chain of segments that follow the head."""

from __future__ import annotations

from .segment import MoveDirection, Segment

SEGMENT_SIZE = 10
INITIAL_LENGTH = 4


class Snake:
    """A snake in a world of ``world_width`` x ``world_height`` pixels.

    ``segments[0]`` is the head; each later segment takes over the direction
    of the one ahead of it after every step.
    """

    def __init__(self, world_width: int, world_height: int) -> None:
        self.world_width = world_width
        self.world_height = world_height
        self.segments: list[Segment] = []
        self.restart()

    def _segment(self, x: int, y: int, direction: MoveDirection) -> Segment:
        return Segment(
            x,
            y,
            SEGMENT_SIZE,
            SEGMENT_SIZE,
            self.world_width - 1,
            self.world_height - 1,
            direction,
        )

    def restart(self) -> None:
        """Lay the snake out horizontally in the middle, heading right."""
        y = self.world_height // 2
        self.segments = [
            self._segment(
                int(self.world_width / 2.0 - i * SEGMENT_SIZE), y, MoveDirection.RIGHT
            )
            for i in range(1, INITIAL_LENGTH + 1)
        ]

    @property
    def head(self) -> Segment:
        return self.segments[0]

    def update(self) -> None:
        """Move every segment one step, tail first, then the head."""
        pairs = list(zip(self.segments[1:], self.segments))
        for follower, leader in reversed(pairs):
            follower.move()
            follower.move_dir = leader.move_dir
        self.head.move()

    def render(self, canvas) -> None:
        for segment in reversed(self.segments):
            segment.render(canvas)

    def grow(self) -> None:
        """Add a segment behind the tail, in line with the last two segments."""
        tail = self.segments[-1]
        vec_x = tail.x - self.segments[-2].x
        vec_y = tail.y - self.segments[-2].y
        x, y = tail.x, tail.y
        direction = MoveDirection.UP
        if vec_x == 0:
            if vec_y > 0:
                direction = MoveDirection.UP
                y += tail.h
            elif vec_y < 0:
                direction = MoveDirection.DOWN
                y -= tail.h
        elif vec_y == 0:
            if vec_x > 0:
                direction = MoveDirection.LEFT
                x += tail.w
            else:
                direction = MoveDirection.RIGHT
                x -= tail.w
        self.segments.append(self._segment(x, y, direction))

    def change_head_direction(self, direction: MoveDirection) -> None:
        """Turn the head, unless the new direction lies on its current axis."""
        if self.head.move_dir.is_horizontal == direction.is_horizontal:
            return
        self.head.move_dir = direction

    def collides_with_fruit(self, fruit: Segment) -> bool:
        return fruit.collides_with(self.head)

    def collides_with_self(self) -> bool:
        """Return whether the head touches the body from the fourth segment on."""
        head = self.head
        return any(head.collides_with(body) for body in self.segments[3:])