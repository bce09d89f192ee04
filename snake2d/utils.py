"""Small geometry and naming helpers shared by the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

SCREENSHOT_NAME_FORMAT = "%Y%m%d_%H%M%S.png"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height


def intersect_rects(r1: Rect, r2: Rect) -> Rect:
    """Return the overlap of two rectangles.

    The corners of the result are the inner edges of both rectangles; the
    size is the absolute distance between them, so rectangles that do not
    overlap yield the gap between them rather than an empty rectangle.
    """
    left = max(r1.left, r2.left)
    top = max(r1.top, r2.top)
    right = min(r1.right, r2.right)
    bottom = min(r1.bottom, r2.bottom)
    return Rect(left, top, abs(left - right), abs(top - bottom))


def screenshot_file_name(now: datetime | None = None) -> str:
    """Return a PNG file name built from the given (or current local) time."""
    if now is None:
        now = datetime.now()
    return now.strftime(SCREENSHOT_NAME_FORMAT)