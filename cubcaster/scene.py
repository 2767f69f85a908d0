"""Reading and checking of .cub scene files."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .elements import Element, SceneData
from .errors import CubError
from .mapcheck import check_parsed_content

_EXTENSION = ".cub"
_PARAMETERS: tuple[tuple[str, Element], ...] = (
    ("NO ", Element.NO),
    ("SO ", Element.SO),
    ("EA ", Element.EA),
    ("WE ", Element.WE),
    ("F ", Element.F),
    ("C ", Element.C),
)
_LINE = re.compile(r"[^\n]*\n|[^\n]+")


def check_arg(arg: str) -> str:
    """Trim spaces from a scene path and check its name and extension.

    Returns the trimmed path; raises CubError when the file name is too
    short or does not end in ".cub".
    """
    path = arg.strip(" ")
    name_length = len(path) - 1 - path.rfind("/")
    if name_length < len(_EXTENSION):
        raise CubError("file name its too short to be a '.cub'")
    if not path.endswith(_EXTENSION):
        raise CubError("invalid file extension, the map must be a .cub")
    return path


def process_line(scene: SceneData, line: str) -> None:
    """Apply one line of a scene file, line break included, to the scene."""
    stripped = line.lstrip(" ")
    indent = len(line) - len(stripped)
    if not scene.map_found:
        for prefix, element in _PARAMETERS:
            if stripped.startswith(prefix):
                rest = line[indent + len(prefix) - 1:]
                if element.is_texture:
                    scene.add_texture(element, rest)
                else:
                    scene.add_rgb(element, rest)
                return
        if stripped.startswith("\n"):
            return
    if stripped.startswith("1"):
        scene.add_map_line(line)
        return
    raise CubError("invalid parameter or empty line inside/after map section")


def read_lines(scene: SceneData, lines: Iterable[str]) -> SceneData:
    """Apply every line to the scene and return it."""
    for line in lines:
        process_line(scene, line)
    return scene


def parse(arg: str) -> SceneData:
    """Read the scene file named by arg and return its checked content."""
    path = check_arg(arg)
    scene = SceneData(arg_path=path)
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except IsADirectoryError:
        raw = b""
    except OSError:
        raise CubError("introduced map dont exist") from None
    text = raw.decode("utf-8", errors="surrogateescape")
    read_lines(scene, _LINE.findall(text))
    check_parsed_content(scene)
    return scene