"""The interactive first-person view of a scene, and the program's entry point."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum

from .elements import Element, SceneData
from .errors import CubError, report
from .image import Image
from .raycast import WIN_HEI, WIN_WID, Renderer
from .scene import parse
from .xpm import XpmError, xpm_file_to_image

TITLE = "cub3D"
SPEED = 0.3
DANGER = 0.02
TURN = 0.1

# Texture slots of the renderer, in its north, east, south, west order.
_TEXTURE_ORDER = (Element.NO, Element.EA, Element.SO, Element.WE)


class Move(IntEnum):
    """Walking directions, counted in quarter turns from the view direction."""

    FORWARD = 0
    LEFT = 1
    BACKWARD = 2
    RIGHT = 3


class Key(Enum):
    """The keys the game reacts to."""

    ESCAPE = "escape"
    LEFT = "left"
    RIGHT = "right"
    W = "w"
    A = "a"
    S = "s"
    D = "d"


_KEY_MOVES = {
    Key.W: Move.FORWARD,
    Key.S: Move.BACKWARD,
    Key.A: Move.LEFT,
    Key.D: Move.RIGHT,
}


def _rgb(colour: tuple[int, int, int]) -> int:
    red, green, blue = colour
    return red << 16 | green << 8 | blue


def _blocked(grid: Sequence[str], row: float, col: float) -> bool:
    r, c = int(row), int(col)
    if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
        return grid[r][c] == "1"
    return True


@dataclass
class Game:
    """A player standing in a grid map, and the renderer that shows the view.

    pos_x indexes grid rows and pos_y columns, as in the renderer.
    """

    renderer: Renderer
    pos_x: float
    pos_y: float
    angle: float
    running: bool = True

    @property
    def grid(self) -> list[str]:
        return self.renderer.grid

    @classmethod
    def from_scene(cls, scene: SceneData) -> Game:
        """Load the scene's textures and place the player as the map says."""
        if scene.floor is None or scene.ceiling is None:
            raise CubError("you forgot to declare a RGB value")
        textures: list[Image] = []
        for element in _TEXTURE_ORDER:
            path = scene.textures.get(element)
            if path is None:
                raise CubError("you forgot to declare a texture")
            try:
                textures.append(xpm_file_to_image(path))
            except XpmError as exc:
                raise CubError(f"cannot load texture {path}: {exc}") from exc
        renderer = Renderer(
            list(scene.grid), textures, _rgb(scene.ceiling), _rgb(scene.floor)
        )
        return cls(
            renderer=renderer,
            pos_x=scene.player_y,
            pos_y=scene.player_x,
            angle=int(scene.facing) * math.pi / 2 + DANGER,
        )

    def move(self, direction: int) -> None:
        """Step SPEED units in a direction; each axis stops at walls on its own."""
        turn = int(direction) * math.pi * 0.5
        dir_x = math.cos(self.angle)
        dir_y = math.sin(self.angle)
        move_x = (dir_x * math.cos(turn) - dir_y * math.sin(turn)) * SPEED
        move_y = (dir_x * math.sin(turn) + dir_y * math.cos(turn)) * SPEED
        if not _blocked(self.grid, self.pos_x + move_x, self.pos_y):
            self.pos_x += move_x
        if not _blocked(self.grid, self.pos_x, self.pos_y + move_y):
            self.pos_y += move_y

    def handle_key(self, key: Key) -> bool:
        """Apply a key press; return whether the game keeps running."""
        if key is Key.ESCAPE:
            self.running = False
            return False
        if key is Key.LEFT:
            self.angle += TURN
        elif key is Key.RIGHT:
            self.angle -= TURN
        elif key in _KEY_MOVES:
            self.move(_KEY_MOVES[key])
        return self.running

    def frame(self) -> Image:
        """Render the current view."""
        return self.renderer.render(self.pos_x, self.pos_y, self.angle)

    def run(self) -> None:
        """Open a window and show the view until it is closed or Escape is hit."""
        import pygame

        key_map = {
            pygame.K_ESCAPE: Key.ESCAPE,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_w: Key.W,
            pygame.K_a: Key.A,
            pygame.K_s: Key.S,
            pygame.K_d: Key.D,
        }
        pygame.init()
        try:
            screen = pygame.display.set_mode((WIN_WID, WIN_HEI))
            pygame.display.set_caption(TITLE)
            self._show(pygame, screen)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN and event.key in key_map:
                        if self.handle_key(key_map[event.key]):
                            self._show(pygame, screen)
                    if not self.running:
                        break
                clock.tick(60)
        finally:
            pygame.quit()

    def _show(self, pygame, screen) -> None:
        data = bytearray(self.frame().to_bytes())
        data[3::4] = b"\xff" * (len(data) // 4)
        surface = pygame.image.frombuffer(bytes(data), (WIN_WID, WIN_HEI), "BGRA")
        screen.blit(surface, (0, 0))
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Read the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) < 1:
            raise CubError("you must introduce a map as an argument")
        if len(args) > 1:
            raise CubError("you cant introduce more arguments than a single map")
        game = Game.from_scene(parse(args[0]))
    except CubError as error:
        return report(error)
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())