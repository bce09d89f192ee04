"""Copying rectangular blocks of 32-bit BGRA pixels between buffers."""

from __future__ import annotations

from collections.abc import Sequence

from .utils import Rect, intersect_rects

CHANNELS = 4
ONE_OVER_255 = 0.00392156862745098

Color = Sequence[int]


def _as_bgr(color: Color | None) -> tuple[int, int, int] | None:
    """Return an RGB color as a BGR tuple, or None when it is off."""
    if color is None:
        return None
    r, g, b = color
    if min(r, g, b) < 0:
        return None
    return (b, g, r)


def _check_buffer(buf, width: int, height: int, what: str) -> None:
    expected = width * height * CHANNELS
    if len(buf) != expected:
        raise ValueError(
            f"{what} buffer holds {len(buf)} bytes, expected {expected} "
            f"for {width}x{height} pixels"
        )


def bit_block_transfer(
    dst: bytearray,
    dst_width: int,
    dst_height: int,
    src,
    src_width: int,
    src_height: int,
    dst_x: int,
    dst_y: int,
    src_x: int = 0,
    src_y: int = 0,
    src_w: int = -1,
    src_h: int = -1,
    chroma: Color | None = None,
    new_color: Color | None = None,
    alpha_blending: bool = False,
) -> Rect | None:
    """Copy a block of ``src`` into ``dst`` at ``(dst_x, dst_y)``.

    Both buffers hold BGRA pixels row after row. Unless ``src_w`` and
    ``src_h`` are both positive the whole source is copied. Source pixels
    whose RGB equals ``chroma`` are skipped; ``new_color`` replaces the RGB of
    every copied pixel. With ``alpha_blending`` the source is blended over the
    destination by its alpha and the result is made opaque.

    Returns the destination area that was covered, or None when the block
    lies wholly off the destination.
    """
    _check_buffer(dst, dst_width, dst_height, "destination")
    _check_buffer(src, src_width, src_height, "source")

    if not (src_w > 0 and src_h > 0):
        src_w, src_h = src_width, src_height

    if (
        dst_x + src_w < 0
        or dst_x >= dst_width
        or dst_y + src_h < 0
        or dst_y >= dst_height
    ):
        return None

    area = intersect_rects(
        Rect(dst_x, dst_y, src_w, src_h), Rect(0, 0, dst_width, dst_height)
    )
    first_x = src_x + area.left - dst_x
    first_y = src_y + area.top - dst_y
    src_pitch = src_width * CHANNELS
    dst_pitch = dst_width * CHANNELS
    row_bytes = area.width * CHANNELS

    if area.width and area.height:
        start = src_pitch * first_y + first_x * CHANNELS
        end = src_pitch * (first_y + area.height - 1) + first_x * CHANNELS + row_bytes
        if first_x < 0 or first_y < 0 or end > len(src):
            raise ValueError("source region lies outside the source buffer")
        del start

    chroma_bgr = _as_bgr(chroma)
    replace_bgr = _as_bgr(new_color)
    plain_copy = chroma_bgr is None and replace_bgr is None and not alpha_blending

    for row in range(area.height):
        s_row = src_pitch * (first_y + row) + first_x * CHANNELS
        d_row = dst_pitch * (area.top + row) + area.left * CHANNELS
        if plain_copy:
            dst[d_row:d_row + row_bytes] = src[s_row:s_row + row_bytes]
            continue
        for col in range(area.width):
            s = s_row + col * CHANNELS
            d = d_row + col * CHANNELS
            sb, sg, sr, sa = src[s:s + CHANNELS]
            if chroma_bgr is not None and (sb, sg, sr) == chroma_bgr:
                continue
            if replace_bgr is not None:
                sb, sg, sr = replace_bgr
            if not alpha_blending:
                dst[d:d + CHANNELS] = bytes((sb, sg, sr, sa))
            else:
                alpha = sa * ONE_OVER_255
                rest = 1.0 - alpha
                dst[d] = int(alpha * sb + rest * dst[d])
                dst[d + 1] = int(alpha * sg + rest * dst[d + 1])
                dst[d + 2] = int(alpha * sr + rest * dst[d + 2])
                dst[d + 3] = 255

    return area