"""Images backed by a canvas, with PNG and binary PPM loading."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from PIL import Image as PILImage

from .canvas import Canvas

_WHITESPACE = b" \t\n\r\x0b\x0c"


class ImageError(Exception):
    """Raised when an image cannot be loaded or saved."""


def _read_int(data: bytes, pos: int) -> tuple[int, int]:
    """Read a decimal integer after optional whitespace; return it and the new offset."""
    while pos < len(data) and data[pos] in _WHITESPACE:
        pos += 1
    start = pos
    if pos < len(data) and data[pos] in b"+-":
        pos += 1
    digits_start = pos
    while pos < len(data) and 0x30 <= data[pos] <= 0x39:
        pos += 1
    if pos == digits_start:
        raise ImageError(f"expected a number in PPM header at byte {start}")
    return int(data[start:pos]), pos


class Image:
    """A picture held in a :class:`Canvas` of BGRA pixels."""

    def __init__(self, canvas: Canvas | None = None) -> None:
        self.canvas = canvas

    @classmethod
    def blank(cls, width: int, height: int) -> Image:
        """Return an image of the given size with all bytes zero."""
        return cls(Canvas(width, height))

    @classmethod
    def solid_color_block(
        cls, width: int, height: int, color: Sequence[int], alpha: float
    ) -> Image:
        """Return an image filled with one RGB color at the given alpha (0..1)."""
        r, g, b = color
        a = int(alpha * 255.0)
        canvas = Canvas(width, height)
        canvas.pixels[:] = bytes((b & 0xFF, g & 0xFF, r & 0xFF, a & 0xFF)) * canvas.num_pixels
        return cls(canvas)

    @classmethod
    def checker(
        cls,
        width: int,
        height: int,
        tile_size: int,
        color1: Sequence[int],
        color2: Sequence[int],
    ) -> Image:
        """Return an opaque checkerboard with square tiles of ``tile_size`` pixels.

        The tile at the top-left corner has ``color1``.
        """
        if tile_size <= 0:
            raise ValueError(f"tile size must be positive, got {tile_size}")
        r1, g1, b1 = color1
        r2, g2, b2 = color2
        first = bytes((b1 & 0xFF, g1 & 0xFF, r1 & 0xFF, 255))
        second = bytes((b2 & 0xFF, g2 & 0xFF, r2 & 0xFF, 255))
        canvas = Canvas(width, height)
        rows = {}
        for parity in (0, 1):
            rows[parity] = b"".join(
                first if ((x // tile_size) & 1) == parity else second
                for x in range(width)
            )
        canvas.pixels[:] = b"".join(rows[(y // tile_size) & 1] for y in range(height))
        return cls(canvas)

    @classmethod
    def from_png(cls, path: str | PathLike) -> Image:
        """Load an image file readable by Pillow (PNG and the like)."""
        try:
            with PILImage.open(path) as picture:
                rgba = picture.convert("RGBA")
                width, height = rgba.size
                data = rgba.tobytes()
        except (OSError, ValueError) as exc:
            raise ImageError(f"cannot load image {path}: {exc}") from exc
        canvas = Canvas(width, height)
        pixels = canvas.pixels
        pixels[0::4] = data[2::4]
        pixels[1::4] = data[1::4]
        pixels[2::4] = data[0::4]
        pixels[3::4] = data[3::4]
        return cls(canvas)

    @classmethod
    def from_ppm_raw(cls, path: str | PathLike) -> Image:
        """Load a binary (P6) PPM file.

        The three bytes of each pixel are stored in file order in the first
        three channels, and every pixel is made opaque. A single comment line
        is allowed directly after the magic number.
        """
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise ImageError(f"cannot read {path}: {exc}") from exc
        if len(data) < 3:
            raise ImageError(f"{path} is too short to be a PPM file")
        if data[:2] != b"P6":
            raise ImageError(f"{path} is not a binary PPM file")
        pos = 3
        if pos < len(data) and data[pos] == ord("#"):
            newline = data.find(b"\n", pos)
            if newline < 0:
                raise ImageError(f"{path} has an unterminated comment")
            pos = newline + 1
        width, pos = _read_int(data, pos)
        height, pos = _read_int(data, pos)
        _depth, pos = _read_int(data, pos)
        pos += 1
        if width <= 0 or height <= 0:
            raise ImageError(f"{path} has invalid size {width}x{height}")
        count = width * height
        raw = data[pos:pos + count * 3]
        if len(raw) < count * 3:
            raise ImageError(f"{path} holds fewer pixels than its header states")
        canvas = Canvas(width, height)
        pixels = canvas.pixels
        pixels[0::4] = raw[0::3]
        pixels[1::4] = raw[1::3]
        pixels[2::4] = raw[2::3]
        pixels[3::4] = b"\xff" * count
        return cls(canvas)

    def save_as_png(self, path: str | PathLike) -> None:
        """Write the image to ``path`` as an RGBA PNG."""
        canvas = self.canvas
        if canvas is None:
            raise ImageError("image has no canvas to save")
        src = canvas.pixels
        data = bytearray(len(src))
        data[0::4] = src[2::4]
        data[1::4] = src[1::4]
        data[2::4] = src[0::4]
        data[3::4] = src[3::4]
        picture = PILImage.frombytes("RGBA", (canvas.width, canvas.height), bytes(data))
        try:
            picture.save(path, format="PNG")
        except OSError as exc:
            raise ImageError(f"cannot write {path}: {exc}") from exc

    def clone(self) -> Image:
        """Return an image with a copy of this image's canvas."""
        return Image(self.canvas.clone() if self.canvas is not None else None)