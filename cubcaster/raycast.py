"""Ray casting of a grid map into textured wall columns."""

from __future__ import annotations

import math
import struct
from array import array
from collections.abc import Sequence
from dataclasses import dataclass

from .image import Image

WIN_WID = 1200
WIN_HEI = 900
SCALE = 1
PLN_WID = 0.66

NORTH = 0
EAST = 1
SOUTH = 2
WEST = 3

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_MASK32 = 0xFFFFFFFF


def _div(a: float, b: float) -> float:
    """Divide as IEEE floats do, giving infinities or NaN for a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        negative = (a < 0) != (math.copysign(1.0, b) < 0)
        return -math.inf if negative else math.inf
    return a / b


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_c_int(value: float) -> int:
    if math.isnan(value):
        return 0
    if value >= _INT_MAX:
        return _INT_MAX
    if value <= _INT_MIN:
        return _INT_MIN
    return int(value)


def _trunc_half(value: int) -> int:
    half = abs(value) // 2
    return half if value >= 0 else -half


def _is_wall(grid: Sequence[str], row: int, col: int) -> bool:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col] == "1"
    return True


@dataclass(frozen=True)
class RayHit:
    """Where one screen column's ray meets a wall, and how to draw it."""

    side: int
    ray_x: float
    ray_y: float
    cell_x: int
    cell_y: int
    distance: float
    height: int
    draw_start: int
    draw_end: int
    wall_x: float
    direction: int


def cast_ray(
    grid: Sequence[str], pos_x: float, pos_y: float, angle: float, column: int
) -> RayHit:
    """Cast the ray of one screen column from (pos_x, pos_y).

    pos_x indexes grid rows and pos_y columns; cells outside the grid
    count as walls.
    """
    dir_x = math.cos(angle)
    dir_y = math.sin(angle)
    pln_x = -dir_y * PLN_WID
    pln_y = dir_x * PLN_WID
    camera = 2 * column / WIN_WID - 1
    ray_x = dir_x + pln_x * camera
    ray_y = dir_y + pln_y * camera
    delta_x = abs(_div(1.0, ray_x))
    delta_y = abs(_div(1.0, ray_y))
    cell_x = int(pos_x)
    cell_y = int(pos_y)

    if ray_x < 0:
        step_x = -1
        side_x = (pos_x - cell_x) * delta_x
    else:
        step_x = 1
        side_x = (1 + cell_x - pos_x) * delta_x
    if ray_y < 0:
        step_y = -1
        side_y = (pos_y - cell_y) * delta_y
    else:
        step_y = 1
        side_y = (1 + cell_y - pos_y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            cell_x += step_x
            side = 0
        else:
            side_y += delta_y
            cell_y += step_y
            side = 1
        if _is_wall(grid, cell_x, cell_y):
            break

    if side == 0:
        raw = _div(cell_x - pos_x + (1 - step_x) // 2, ray_x)
    else:
        raw = _div(cell_y - pos_y + (1 - step_y) // 2, ray_y)
    distance = _to_float32(raw)
    height = _to_c_int(_div(WIN_HEI, distance))
    half = _trunc_half(height * SCALE)
    draw_start = max(0, -half + WIN_HEI // 2)
    draw_end = min(WIN_HEI - 1, half + WIN_HEI // 2)

    if side == 0:
        wall_x = pos_y + distance * ray_y
    else:
        wall_x = pos_x + distance * ray_x
    wall_x = wall_x - math.floor(wall_x) if math.isfinite(wall_x) else math.nan
    if (side == 1 and ray_y < 0) or (side == 0 and ray_x > 0):
        wall_x = 1 - wall_x

    if side == 0:
        direction = SOUTH if ray_x > 0 else NORTH
    else:
        direction = EAST if ray_y > 0 else WEST

    return RayHit(
        side=side,
        ray_x=ray_x,
        ray_y=ray_y,
        cell_x=cell_x,
        cell_y=cell_y,
        distance=distance,
        height=height,
        draw_start=draw_start,
        draw_end=draw_end,
        wall_x=wall_x,
        direction=direction,
    )


def texture_colour(texture: Image, hit: RayHit, y: int) -> int:
    """Return the texture pixel shown at screen row y of the hit's column.

    Reads falling past the end of the texture use its last pixel.
    """
    width = texture.width
    tex_height = texture.height
    hor = _to_c_int(hit.wall_x * width)
    along = _div(y - hit.draw_start, hit.height)
    if hit.height < WIN_HEI:
        fraction = along
    else:
        fraction = _div(hit.height - WIN_HEI, hit.height * 2.0) + along
    ver = width * _to_c_int(tex_height * fraction)
    index = min(max(hor + ver, 0), len(texture.pixels) - 1)
    return texture.pixels[index]


class Renderer:
    """Draws the view from a position into WIN_WID x WIN_HEI images."""

    def __init__(
        self,
        grid: Sequence[str],
        textures: Sequence[Image],
        ceiling: int,
        floor: int,
    ) -> None:
        if len(textures) != 4:
            raise ValueError("four wall textures are needed: north, east, south, west")
        self.grid = list(grid)
        self.textures = list(textures)
        self.ceiling = ceiling
        self.floor = floor

    def draw_column(
        self, image: Image, pos_x: float, pos_y: float, angle: float, column: int
    ) -> RayHit:
        """Draw the wall slice of one column, mirrored horizontally."""
        hit = cast_ray(self.grid, pos_x, pos_y, angle, column)
        texture = self.textures[hit.direction]
        x = WIN_WID - column - 1
        for y in range(hit.draw_start, hit.draw_end + 1):
            image.put_pixel(x, y, texture_colour(texture, hit, y))
        return hit

    def render(self, pos_x: float, pos_y: float, angle: float) -> Image:
        """Return a new frame: ceiling, floor, then every wall column."""
        image = Image(WIN_WID, WIN_HEI)
        image.fill(self.floor)
        upper = WIN_WID * (WIN_HEI // 2)
        image.pixels[:upper] = array(
            image.pixels.typecode, [self.ceiling & _MASK32]
        ) * upper
        for column in range(WIN_WID):
            self.draw_column(image, pos_x, pos_y, angle, column)
        return image