"""Bitmap fonts made of a glyph atlas image and a CSV of metrics."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

from .image import Image, ImageError

GLYPH_COUNT = 256

_SKIPPED_LINES = {1, 2, 6}
_HEADER_END = 9
_NUMBER = re.compile(r"\s*([+-]?\d+)")


class FontError(Exception):
    """Raised when a font cannot be loaded."""


def _atoi(text: str) -> int:
    match = _NUMBER.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class FontMetrics:
    """Cell size, first character and per-character advance widths."""

    cell_width: int
    cell_height: int
    base_char: int = 0
    font_height: int = 0
    widths: tuple[int, ...] = field(default=(0,) * GLYPH_COUNT)


def parse_font_metrics(lines: Iterable[str]) -> FontMetrics:
    """Parse the lines of a font CSV.

    Lines 1, 2 and 6 are ignored. Lines 3 to 8 are ``key,value`` pairs, of
    which "Cell Width", "Cell Height", "Base Char" and "Font Height" are used.
    From line 9 on each line gives the width of the next character, up to 256.
    """
    settings: dict[str, int] = {}
    widths = [0] * GLYPH_COUNT
    char_index = 0
    for line_num, raw in enumerate(lines, start=1):
        if line_num in _SKIPPED_LINES:
            continue
        line = raw.rstrip("\n")
        if line_num >= _HEADER_END and char_index >= GLYPH_COUNT:
            continue
        key, sep, value = line.partition(",")
        if not sep:
            raise FontError(f"line {line_num} of font data has no comma")
        if line_num < _HEADER_END:
            settings[key] = _atoi(value)
        else:
            widths[char_index] = _atoi(value)
            char_index += 1
    for required in ("Cell Width", "Cell Height"):
        if settings.get(required, 0) <= 0:
            raise FontError(f"font data lacks a positive {required!r}")
    return FontMetrics(
        cell_width=settings["Cell Width"],
        cell_height=settings["Cell Height"],
        base_char=settings.get("Base Char", 0) & 0xFF,
        font_height=settings.get("Font Height", 0),
        widths=tuple(widths),
    )


class RFont:
    """A raster font: glyphs laid out in a grid of cells on an atlas image."""

    def __init__(self, image: Image, metrics: FontMetrics) -> None:
        self.image = image
        self.metrics = metrics

    @classmethod
    def load(cls, image_path: str | PathLike, csv_path: str | PathLike) -> RFont:
        """Load the atlas from a binary PPM file and the metrics from a CSV file."""
        try:
            image = Image.from_ppm_raw(image_path)
        except ImageError as exc:
            raise FontError(f"cannot load font atlas: {exc}") from exc
        try:
            with open(csv_path, encoding="latin-1") as handle:
                metrics = parse_font_metrics(handle)
        except OSError as exc:
            raise FontError(f"cannot read font data {csv_path}: {exc}") from exc
        return cls(image, metrics)

    @property
    def canvas(self):
        return self.image.canvas if self.image is not None else None

    @property
    def cell_width(self) -> int:
        return self.metrics.cell_width

    @property
    def cell_height(self) -> int:
        return self.metrics.cell_height

    @property
    def base_char(self) -> int:
        return self.metrics.base_char

    @property
    def char_height(self) -> int:
        return self.metrics.font_height

    def char_width(self, char: int | str) -> int:
        """Return the advance width of a character given as a code or a string."""
        code = ord(char) if isinstance(char, str) else char
        return self.metrics.widths[code & 0xFF]

    def clone(self) -> RFont:
        """Return a font with the same metrics and a copy of the atlas."""
        image = self.image.clone() if self.image is not None else None
        return RFont(image, self.metrics)