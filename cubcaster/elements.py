"""Scene elements of a .cub file: textures, colours and map lines."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from .errors import CubError

ERR_CHAR_RGB = "invalid char in RGB values, use only numbers and comas"

_PATH_FIELD = re.compile(r" *([^ \n]*)")
_RGB_FIELD = re.compile(r",*([^,\n]*)")
_DIGITS = frozenset("0123456789")


class Element(Enum):
    """The identifiers that may start a scene line."""

    NO = "NO"
    SO = "SO"
    EA = "EA"
    WE = "WE"
    F = "F"
    C = "C"

    @property
    def is_texture(self) -> bool:
        return self in (Element.NO, Element.SO, Element.EA, Element.WE)


class Facing(IntEnum):
    """The direction the player starts in; the value counts quarter turns."""

    UNKNOWN = 0
    EAST = 1
    NORTH = 2
    WEST = 3
    SOUTH = 4


def head_path(arg_path: str) -> str:
    """Return the directory part of a path, with its trailing slash."""
    return arg_path[: arg_path.rfind("/") + 1]


def check_xpm_extension(path: str) -> str:
    """Return the path if it names a .xpm file, otherwise raise CubError."""
    if not path.endswith(".xpm"):
        raise CubError("invalid image extension, the texture must be a .xpm")
    return path


def parse_rgb(text: str) -> tuple[int, int, int]:
    """Read "R,G,B" with values from 0 to 255; leading spaces are skipped."""
    text = text.lstrip(" ")
    pos = 0
    values = []
    for _ in range(3):
        match = _RGB_FIELD.match(text, pos)
        value = match.group(1)
        if not set(value) <= _DIGITS:
            raise CubError(ERR_CHAR_RGB)
        if not value:
            raise CubError("you forgot to declare a RGB value")
        number = int(value)
        if not 0 <= number <= 255:
            raise CubError("an introduced RGB value its out range. Range: 0 to 255")
        values.append(number)
        pos = match.end() + 1
    return values[0], values[1], values[2]


@dataclass
class SceneData:
    """Everything read from a scene file so far."""

    arg_path: str = ""
    textures: dict[Element, str] = field(default_factory=dict)
    floor: tuple[int, int, int] | None = None
    ceiling: tuple[int, int, int] | None = None
    grid: list[str] = field(default_factory=list)
    map_found: bool = False
    player_found: bool = False
    player_x: float = 0.0
    player_y: float = 0.0
    facing: Facing = Facing.UNKNOWN

    def add_texture(self, element: Element, text: str) -> str:
        """Record the texture path that follows a NO/SO/EA/WE identifier.

        The path is taken relative to the scene file's directory; it must
        be a readable .xpm file and must not have been declared before.
        """
        if not element.is_texture:
            raise ValueError(f"{element.name} is not a texture element")
        path = head_path(self.arg_path) + _PATH_FIELD.match(text).group(1)
        if element in self.textures:
            raise CubError("duplicate texture parameter")
        check_xpm_extension(path)
        try:
            fd = os.open(path, os.O_RDONLY)
        except OSError:
            raise CubError("texture dont exists") from None
        os.close(fd)
        self.textures[element] = path
        return path

    def add_rgb(self, element: Element, text: str) -> tuple[int, int, int]:
        """Record the colour that follows an F or C identifier."""
        if element not in (Element.F, Element.C):
            raise ValueError(f"{element.name} is not a colour element")
        current = self.floor if element is Element.F else self.ceiling
        if current is not None:
            raise CubError("duplicate RGB parameter")
        rgb = parse_rgb(text)
        if element is Element.F:
            self.floor = rgb
        else:
            self.ceiling = rgb
        return rgb

    def add_map_line(self, line: str) -> None:
        """Append a map row, dropping the line break and what follows it."""
        self.map_found = True
        self.grid.append(line.split("\n", 1)[0])