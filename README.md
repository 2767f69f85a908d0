# cubcaster

cubcaster opens a `.cub` scene file and shows it as a textured first-person
view. It is a grid ray caster: every screen column sends out one ray, steps
through the map's cells until it reaches a wall, and draws a strip of that
wall's texture at a height set by the distance. The window is 1200 x 900
pixels and is drawn with pygame.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
cubcaster path/to/level.cub
```

Give exactly one scene file. If there are no arguments or more than one, or if
the scene or one of its textures cannot be accepted, the program prints
`cub3D: error: <reason>` to standard error and exits with status 1.

The scene file name must end in `.cub` and be at least four characters long;
spaces around the argument are ignored.

### Controls

| Key               | Action              |
|-------------------|---------------------|
| W / S             | move forward / back |
| A / D             | move sideways       |
| Left / Right      | turn                |
| Esc, window close | quit                |

Each step moves 0.3 cells; movement along each axis stops on its own at a
wall, so the player slides along walls.

## The `.cub` format

A scene starts with six element lines. They may come in any order, may be
indented with spaces, and may have blank lines between them:

```
NO textures/north.xpm
SO textures/south.xpm
WE textures/west.xpm
EA textures/east.xpm
F 220,100,0
C 225,30,0
```

* `NO`, `SO`, `WE`, `EA` name the XPM texture for each wall face. A path is
  read relative to the directory of the `.cub` file, must end in `.xpm`, and
  the file must be readable. Each of the four may be given only once.
* `F` sets the floor colour and `C` the ceiling colour. Each takes three
  values from 0 to 255 separated by commas, digits only. Each may be given
  only once.

The map comes after the elements. It is made of these characters:

* `1` for a wall, `0` for floor, space for empty space outside the map;
* exactly one of `N`, `S`, `E`, `W` for the player's start and facing.

Every map line must begin with `1` (leading spaces are allowed). Every floor
cell and the player's cell must be closed in by non-space cells on all four
sides. No element or blank line may follow the map.

## Using it as a library

* `cubcaster.scene.parse(path)` reads and checks a scene and returns a
  `cubcaster.elements.SceneData`. It raises `cubcaster.errors.CubError` when
  the scene is invalid; `cubcaster.errors.report(error)` writes such an error
  in the program's format and returns the exit status 1.
* `cubcaster.mapcheck.check_parsed_content(scene)` and
  `cubcaster.mapcheck.check_map(scene)` run the checks on a scene built by
  hand.
* `cubcaster.xpm.xpm_file_to_image(path)` loads an XPM texture into a
  `cubcaster.image.Image`; `cubcaster.xpm.xpm_to_image(lines)` does the same
  from a list of strings. Malformed data raises `cubcaster.xpm.XpmError`.
* `cubcaster.raycast.Renderer(grid, textures, ceiling, floor).render(x, y, angle)`
  draws one frame into an `Image`. The four textures are given in north, east,
  south, west order. `cubcaster.raycast.cast_ray` returns the `RayHit` for a
  single column; cells outside the grid count as walls.
* `cubcaster.game.Game.from_scene(scene)` builds the interactive view.
  `Game.handle_key(key)` and `Game.frame()` work without a display;
  `Game.run()` opens the window and handles input.
* `cubcaster.colornames.lookup(name)` gives the RGB value of an X11 colour
  name, the same names XPM colour tables use.

## What it does not do

Textures are read from XPM files only, and only colour (`c`) entries of an
XPM colour table are used. There are no sprites, doors, minimap or mouse
controls, and the window size is fixed.