"""Reading of XPM images into :class:`~cubcaster.image.Image` objects."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from .colornames import lookup
from .image import Image

_TRANSPARENT = 0xFF000000
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9A-Fa-f]*)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def find(text: str, needle: str) -> int:
    """Return the position of needle in text, or -1."""
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of needle outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split text on runs of spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank(text: str, start: int, length: int) -> str:
    end = min(len(text), start + length)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside strings by spaces, keeping the length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Return the colour named by an XPM colour value.

    "#rrggbb" values are read as hexadecimal; other names are looked up,
    joined with the following word when there is one. Unknown names give 0
    and "none" gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        digits = match.group(2) if match else ""
        if not digits:
            return 0
        value = int(digits, 16)
        return _to_int32(-value if match.group(1) == "-" else value)
    if end is not None:
        name = f"{name} {end}"[:63]
    try:
        return lookup(name)
    except KeyError:
        return 0


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError("XPM data ends too early") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and characters per pixel")
    values = tuple(_atoi(word) for word in words[:4])
    if not all(values):
        raise XpmError("XPM header values must be non-zero")
    return values  # type: ignore[return-value]


def _read_colour(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour entry without 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour entry without value: {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[index], end)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM document, header first."""
    source = iter(lines)
    width, height, ncolours, cpp = _read_header(_next_line(source))
    colours: dict[str, int] = {}
    for _ in range(ncolours):
        key, rgb = _read_colour(_next_line(source), cpp)
        if cpp <= 2:
            colours[key] = rgb
        else:
            colours.setdefault(key, rgb)
    image = Image(width, height)
    for y in range(height):
        row = _next_line(source)
        for x in range(width):
            colour = colours.get(row[cpp * x:cpp * (x + 1)], 0)
            if colour == -1:
                colour = _TRANSPARENT
            image.put_pixel(x, y, colour)
    return image


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in text."""
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def xpm_to_image(data: Sequence[str]) -> Image:
    """Build an image from XPM data given as a list of strings."""
    return parse_xpm(data)


def xpm_file_to_image(path: str | Path) -> Image:
    """Read an XPM file and return its image."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))