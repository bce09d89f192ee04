"""An in-memory 32-bit BGRA drawing surface."""

from __future__ import annotations

from collections.abc import Sequence

from .blit import CHANNELS, bit_block_transfer

Color = Sequence[int]

_TEXT_CHROMA = (0, 0, 0)


def _bgra(r: int, g: int, b: int) -> bytes:
    return bytes((b & 0xFF, g & 0xFF, r & 0xFF, 255))


class Canvas:
    """A width x height block of BGRA pixels with simple drawing operations.

    ``primary_color`` is used for shapes and text, ``clear_color`` by
    :meth:`clear`. Both are RGB triples. ``font`` is an optional bitmap font
    used by :meth:`draw_text`.
    """

    channels = CHANNELS

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height * CHANNELS)
        self.primary_color: tuple[int, int, int] = (255, 255, 255)
        self.clear_color: tuple[int, int, int] = (0, 0, 0)
        self.font = None
        self.last_frame_time = 0.0
        self.alpha_blending = False

    @property
    def pitch(self) -> int:
        return self.width * CHANNELS

    @property
    def num_pixels(self) -> int:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def clone(self) -> Canvas:
        """Return a canvas of the same size with copied pixels and font."""
        copy = Canvas(self.width, self.height)
        copy.pixels[:] = self.pixels
        if self.font is not None:
            copy.font = self.font.clone()
        return copy

    def fill_anything(self) -> None:
        """Fill the first half of the pixels dark blue and the rest green."""
        first = (self.num_pixels + 1) // 2
        rest = self.num_pixels - first
        self.pixels[:] = bytes((128, 0, 0, 255)) * first + bytes((0, 255, 0, 255)) * rest

    def clear(self) -> None:
        """Set every pixel to the opaque clear color."""
        self.pixels[:] = _bgra(*self.clear_color) * self.num_pixels

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside {self.width}x{self.height}")
        return self.pitch * y + x * CHANNELS

    def set_pixel(self, x: int, y: int, r: int, g: int, b: int) -> None:
        """Set one pixel to an opaque RGB color."""
        offset = self._offset(x, y)
        self.pixels[offset:offset + CHANNELS] = _bgra(r, g, b)

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return one pixel as an (r, g, b, a) tuple."""
        offset = self._offset(x, y)
        b, g, r, a = self.pixels[offset:offset + CHANNELS]
        return (r, g, b, a)

    def draw_filled_rect(self, left: int, top: int, right: int, bottom: int) -> None:
        """Fill the inclusive rectangle, clamping its corners to the canvas."""
        left = min(max(left, 0), self.width - 1)
        right = min(max(right, 0), self.width - 1)
        top = min(max(top, 0), self.height - 1)
        bottom = min(max(bottom, 0), self.height - 1)
        if left > right:
            return
        span = _bgra(*self.primary_color) * (right - left + 1)
        for y in range(top, bottom + 1):
            start = self.pitch * y + left * CHANNELS
            self.pixels[start:start + len(span)] = span

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Draw a line from (x0, y0) towards (x1, y1), excluding the end point.

        Points that fall outside the canvas are skipped.
        """
        dx = x1 - x0
        dy = y1 - y0
        steps = max(abs(dx), abs(dy))
        if steps == 0:
            return
        x_step = dx / steps
        y_step = dy / steps
        color = _bgra(*self.primary_color)
        x, y = float(x0), float(y0)
        for _ in range(steps):
            ix = int(x + 0.5)
            iy = int(y + 0.5)
            if 0 <= ix < self.width and 0 <= iy < self.height:
                offset = self.pitch * iy + ix * CHANNELS
                self.pixels[offset:offset + CHANNELS] = color
            x += x_step
            y += y_step

    def _blit(self, source: Canvas, x: int, y: int, **options) -> None:
        bit_block_transfer(
            self.pixels,
            self.width,
            self.height,
            source.pixels,
            source.width,
            source.height,
            x,
            y,
            alpha_blending=self.alpha_blending,
            **options,
        )

    def draw_image(self, image, x: int, y: int) -> None:
        """Copy a whole image onto the canvas at (x, y)."""
        self._blit(image.canvas, x, y)

    def draw_image_chroma_keyed(self, image, x: int, y: int, chroma: Color) -> None:
        """Copy a whole image, skipping pixels whose RGB equals ``chroma``."""
        self._blit(image.canvas, x, y, chroma=chroma)

    def draw_sub_image_chroma_keyed(
        self,
        image,
        x: int,
        y: int,
        tile_x: int,
        tile_y: int,
        tile_width: int,
        tile_height: int,
        chroma: Color,
    ) -> None:
        """Copy one tile of an image, skipping pixels whose RGB is ``chroma``."""
        self._blit(
            image.canvas,
            x,
            y,
            src_x=tile_x,
            src_y=tile_y,
            src_w=tile_width,
            src_h=tile_height,
            chroma=chroma,
        )

    def draw_text(self, text: str, x: int, y: int) -> None:
        """Draw text with the canvas font in the primary color.

        Does nothing when no font is set. Black atlas pixels are transparent.
        """
        font = self.font
        if font is None:
            return
        atlas = font.canvas
        if atlas is None:
            return
        cell_width = font.cell_width
        cell_height = font.cell_height
        max_cols = atlas.width // cell_width
        base = font.base_char & 0xFF
        x_pos = x
        for ch in text:
            code = ord(ch) & 0xFF
            if code != ord(" "):
                index = (code - base) & 0xFF
                row, col = divmod(index, max_cols)
                self._blit(
                    atlas,
                    x_pos,
                    y,
                    src_x=col * cell_width,
                    src_y=row * cell_height,
                    src_w=cell_width,
                    src_h=cell_height,
                    chroma=_TEXT_CHROMA,
                    new_color=self.primary_color,
                )
            x_pos += font.char_width(code)

    def flip_horizontally(self) -> None:
        """Mirror the canvas left to right."""
        pitch = self.pitch
        for y in range(self.height):
            start = pitch * y
            row = bytes(self.pixels[start:start + pitch])
            pixels = [row[i:i + CHANNELS] for i in range(0, pitch, CHANNELS)]
            self.pixels[start:start + pitch] = b"".join(reversed(pixels))

    def flip_vertically(self) -> None:
        """Mirror the canvas top to bottom."""
        pitch = self.pitch
        rows = [bytes(self.pixels[i:i + pitch]) for i in range(0, len(self.pixels), pitch)]
        self.pixels[:] = b"".join(reversed(rows))