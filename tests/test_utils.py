from datetime import datetime

import pytest

from snake2d.utils import Rect, intersect_rects, screenshot_file_name


def test_rect_edges():
    r = Rect(3, 4, 10, 20)
    assert (r.right, r.bottom) == (13, 24)


def test_intersection_of_overlapping_rects():
    r1 = Rect(0, 0, 10, 10)
    r2 = Rect(5, 5, 10, 10)
    assert intersect_rects(r1, r2) == Rect(5, 5, 5, 5)


def test_intersection_of_contained_rect_is_inner_rect():
    outer = Rect(0, 0, 640, 480)
    inner = Rect(100, 50, 20, 30)
    assert intersect_rects(outer, inner) == inner
    assert intersect_rects(inner, outer) == inner


@pytest.mark.parametrize(
    "r1, r2",
    [
        (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)),
        (Rect(-5, -5, 10, 10), Rect(0, 0, 640, 480)),
        (Rect(630, 470, 20, 20), Rect(0, 0, 640, 480)),
    ],
)
def test_intersection_is_symmetric(r1, r2):
    assert intersect_rects(r1, r2) == intersect_rects(r2, r1)


def test_intersection_clips_to_screen():
    screen = Rect(0, 0, 640, 480)
    result = intersect_rects(Rect(-5, -5, 10, 10), screen)
    assert result.left == 0
    assert result.top == 0
    assert result.right == 5
    assert result.bottom == 5


def test_disjoint_rects_give_gap_size():
    result = intersect_rects(Rect(0, 0, 10, 10), Rect(20, 20, 5, 5))
    assert (result.left, result.top) == (20, 20)
    assert (result.width, result.height) == (10, 10)


def test_screenshot_name_from_given_time():
    name = screenshot_file_name(datetime(2024, 1, 2, 3, 4, 5))
    assert name == "20240102_030405.png"


def test_screenshot_name_defaults_to_now():
    before = datetime.now().replace(microsecond=0)
    name = screenshot_file_name()
    after = datetime.now()
    assert screenshot_file_name(before) <= name <= screenshot_file_name(after)
    assert name.endswith(".png")