"""In-memory 32-bit pixel images and colour conversion for low-depth displays."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Sequence

_TYPECODE = "I" if array("I").itemsize == 4 else "L"
_MASK32 = 0xFFFFFFFF


class Image:
    """A width x height image of 32-bit pixels, stored row by row.

    Pixels hold 0xAARRGGBB values; the byte layout produced by
    :meth:`to_bytes` is little endian, four bytes per pixel.
    """

    bpp = 32
    endian = 0

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.line_len = width * (self.bpp // 8)
        self.pixels = array(_TYPECODE, bytes(4 * width * height))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, colour: int) -> None:
        """Store a colour at (x, y); the value is truncated to 32 bits."""
        self.pixels[self._index(x, y)] = colour & _MASK32

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned 32-bit value stored at (x, y)."""
        return self.pixels[self._index(x, y)]

    def fill(self, colour: int) -> None:
        """Set every pixel to one colour."""
        value = colour & _MASK32
        self.pixels = array(_TYPECODE, [value]) * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Return the pixel data as little-endian 32-bit words, row by row."""
        if sys.byteorder == "little":
            return self.pixels.tobytes()
        swapped = array(_TYPECODE, self.pixels)
        swapped.byteswap()
        return swapped.tobytes()


def mask_shifts(mask: int) -> tuple[int, int]:
    """Return (shift, bits) of a contiguous colour channel mask.

    shift counts the zero bits below the channel, bits its width.
    """
    if mask <= 0:
        raise ValueError("colour mask must be a positive integer")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def good_color(color: int, depth: int, decrgb: Sequence[int]) -> int:
    """Convert 0xRRGGBB to the pixel value of a display of the given depth.

    decrgb holds (red shift, red bits, green shift, green bits,
    blue shift, blue bits). Depths of 24 and more use the colour as is.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - decrgb[1])) << decrgb[0])
        + ((green >> (16 - decrgb[3])) << decrgb[2])
        + ((blue >> (16 - decrgb[5])) << decrgb[4])
    )