from snake2d.canvas import Canvas
from snake2d.segment import MoveDirection, Segment
from snake2d.snake import Snake


def positions(snake):
    return [(s.x, s.y) for s in snake.segments]


def test_initial_layout():
    snake = Snake(640, 480)
    assert len(snake.segments) == 4
    assert all(s.move_dir is MoveDirection.RIGHT for s in snake.segments)
    assert len({s.y for s in snake.segments}) == 1
    for ahead, behind in zip(snake.segments, snake.segments[1:]):
        assert ahead.x - behind.x == 10
    assert all((s.ww, s.wh) == (639, 479) for s in snake.segments)


def test_update_moves_all_right():
    snake = Snake(640, 480)
    before = positions(snake)
    snake.update()
    assert positions(snake) == [(x + 10, y) for x, y in before]


def test_change_direction_rejects_same_axis():
    snake = Snake(640, 480)
    snake.change_head_direction(MoveDirection.LEFT)
    assert snake.head.move_dir is MoveDirection.RIGHT
    snake.change_head_direction(MoveDirection.UP)
    assert snake.head.move_dir is MoveDirection.UP
    snake.change_head_direction(MoveDirection.DOWN)
    assert snake.head.move_dir is MoveDirection.UP


def test_turn_propagates_down_the_body():
    snake = Snake(640, 480)
    snake.change_head_direction(MoveDirection.UP)
    snake.update()
    assert snake.segments[1].move_dir is MoveDirection.UP
    assert snake.segments[2].move_dir is MoveDirection.RIGHT
    snake.update()
    snake.update()
    assert all(s.move_dir is MoveDirection.UP for s in snake.segments)
    assert len({s.x for s in snake.segments}) == 1


def test_grow_behind_tail_moving_right():
    snake = Snake(640, 480)
    tail = snake.segments[-1]
    snake.grow()
    new = snake.segments[-1]
    assert len(snake.segments) == 5
    assert (new.x, new.y) == (tail.x - tail.w, tail.y)
    assert new.move_dir is MoveDirection.RIGHT


def test_grow_behind_tail_moving_up():
    snake = Snake(640, 480)
    snake.change_head_direction(MoveDirection.UP)
    for _ in range(3):
        snake.update()
    tail = snake.segments[-1]
    assert tail.x == snake.segments[-2].x
    snake.grow()
    new = snake.segments[-1]
    assert (new.x, new.y) == (tail.x, tail.y + tail.h)
    assert new.move_dir is MoveDirection.UP


def test_collides_with_fruit():
    snake = Snake(640, 480)
    head = snake.head
    near = Segment(head.x + 5, head.y + 5, 10, 10, 639, 479)
    far = Segment(0, 0, 10, 10, 639, 479)
    assert snake.collides_with_fruit(near) is True
    assert snake.collides_with_fruit(far) is False


def test_self_collision_ignores_first_segments():
    snake = Snake(640, 480)
    assert snake.collides_with_self() is False
    snake.segments[2].set_pos(snake.head.x, snake.head.y)
    assert snake.collides_with_self() is False
    snake.segments[3].set_pos(snake.head.x, snake.head.y)
    assert snake.collides_with_self() is True


def test_restart_restores_layout():
    snake = Snake(640, 480)
    snake.change_head_direction(MoveDirection.DOWN)
    snake.update()
    snake.grow()
    snake.restart()
    assert snake.segments == Snake(640, 480).segments


def test_render_draws_every_segment():
    snake = Snake(640, 480)
    canvas = Canvas(640, 480)
    snake.render(canvas)
    for segment in snake.segments:
        assert canvas.get_pixel(segment.x, segment.y) == (255, 255, 255, 255)
    assert canvas.get_pixel(0, 0) == (0, 0, 0, 0)