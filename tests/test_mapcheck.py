import pytest

from cubcaster.elements import Element, Facing, SceneData
from cubcaster.errors import CubError
from cubcaster.mapcheck import check_map, check_parsed_content, is_valid_map_char


def scene_with(grid):
    scene = SceneData(grid=list(grid), map_found=True)
    scene.textures = {e: f"{e.value}.xpm" for e in Element if e.is_texture}
    scene.floor = (1, 2, 3)
    scene.ceiling = (4, 5, 6)
    return scene


@pytest.mark.parametrize("c", list("10 NSEW"))
def test_valid_chars(c):
    assert is_valid_map_char(c) is True


@pytest.mark.parametrize("c", ["2", "X", "n", "\t", ""])
def test_invalid_chars(c):
    assert is_valid_map_char(c) is False


def test_player_position_and_facing():
    scene = scene_with(["111", "1N1", "111"])
    check_map(scene)
    assert scene.player_found is True
    assert (scene.player_x, scene.player_y) == (1.5, 1.5)
    assert scene.facing is Facing.NORTH


@pytest.mark.parametrize(
    "letter, facing",
    [("S", Facing.SOUTH), ("E", Facing.EAST), ("W", Facing.WEST)],
)
def test_player_facings(letter, facing):
    scene = scene_with(["1111", f"10{letter}1", "1111"])
    check_map(scene)
    assert scene.facing is facing


def test_invalid_char_in_map():
    with pytest.raises(CubError, match="invalid map"):
        check_map(scene_with(["111", "1X1", "111"]))


@pytest.mark.parametrize(
    "grid",
    [
        ["111", "101", "1 1"],
        ["111", "10", "111"],
        ["101", "1N1", "111"],
        ["111", "0N1", "111"],
    ],
)
def test_open_floor(grid):
    with pytest.raises(CubError, match="all floor tiles must be sorrounded"):
        check_map(scene_with(grid))


def test_open_player():
    with pytest.raises(CubError, match="player tile must be sorrounded"):
        check_map(scene_with(["111", "1N", "111"]))


def test_multiple_players():
    with pytest.raises(CubError, match="multiple player positions finded"):
        check_map(scene_with(["1111", "1NS1", "1111"]))


def test_no_player():
    with pytest.raises(CubError, match="player position not declared"):
        check_map(scene_with(["111", "101", "111"]))


def test_parsed_content_ok():
    scene = scene_with(["11111", "10W01", "11111"])
    check_parsed_content(scene)
    assert scene.facing is Facing.WEST


def test_parsed_content_missing_texture():
    scene = scene_with(["111", "1N1", "111"])
    del scene.textures[Element.EA]
    with pytest.raises(CubError, match="you forgot to declare a texture"):
        check_parsed_content(scene)


def test_parsed_content_missing_rgb():
    scene = scene_with(["111", "1N1", "111"])
    scene.ceiling = None
    with pytest.raises(CubError, match="you forgot to declare a RGB value"):
        check_parsed_content(scene)


def test_parsed_content_missing_map():
    scene = scene_with([])
    scene.map_found = False
    with pytest.raises(CubError, match="no map finded in the cub file"):
        check_parsed_content(scene)