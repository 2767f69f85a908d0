"""Validation of a fully read scene and of its map."""

from __future__ import annotations

from .elements import Element, Facing, SceneData
from .errors import CubError

_VALID_CHARS = frozenset("10 NSEW")
_PLAYER_FACING = {
    "N": Facing.NORTH,
    "S": Facing.SOUTH,
    "E": Facing.EAST,
    "W": Facing.WEST,
}
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def is_valid_map_char(c: str) -> bool:
    """Tell whether a character may appear in the map."""
    return c in _VALID_CHARS and len(c) == 1


def _is_open(grid: list[str], row: int, col: int) -> bool:
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return True
    return grid[row][col] == " "


def _enclosed(grid: list[str], row: int, col: int) -> bool:
    return not any(_is_open(grid, row + dr, col + dc) for dr, dc in _NEIGHBOURS)


def check_map(scene: SceneData) -> None:
    """Check the map characters, that it is closed and has one player.

    The player's position (cell centre) and facing are stored in the scene.
    """
    grid = scene.grid
    if any(not is_valid_map_char(c) for row in grid for c in row):
        raise CubError("invalid map, use only 0, 1, N, S, E, W or spaces")
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "0":
                if not _enclosed(grid, i, j):
                    raise CubError(
                        "open map, all floor tiles must be sorrounded by walls"
                    )
            elif cell in _PLAYER_FACING:
                if scene.player_found:
                    raise CubError("multiple player positions finded")
                scene.player_found = True
                if not _enclosed(grid, i, j):
                    raise CubError(
                        "open map, player tile must be sorrounded by walls"
                    )
                scene.player_y = i + 0.5
                scene.player_x = j + 0.5
                scene.facing = _PLAYER_FACING[cell]
    if not scene.player_found:
        raise CubError("player position not declared, use N, S, E or W")


def check_parsed_content(scene: SceneData) -> None:
    """Check that every element was declared, then check the map."""
    if any(e.is_texture and e not in scene.textures for e in Element):
        raise CubError("you forgot to declare a texture")
    if scene.floor is None or scene.ceiling is None:
        raise CubError("you forgot to declare a RGB value")
    if not scene.map_found:
        raise CubError("no map finded in the cub file")
    check_map(scene)