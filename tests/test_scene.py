import pytest

from cubcaster.elements import Element, Facing, SceneData
from cubcaster.errors import CubError
from cubcaster.scene import check_arg, parse, process_line, read_lines

SCENE = (
    "NO north.xpm\n"
    "SO south.xpm\n"
    "WE west.xpm\n"
    "EA east.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
    "111111\n"
    "100101\n"
    "101001\n"
    "1100N1\n"
    "111111"
)


def _textures(tmp_path):
    for name in ("north", "south", "east", "west"):
        (tmp_path / f"{name}.xpm").write_text("xpm")


def _write_scene(tmp_path, body, name="scene.cub"):
    _textures(tmp_path)
    path = tmp_path / name
    path.write_text(body)
    return path


def _scene(tmp_path):
    _textures(tmp_path)
    return SceneData(arg_path=str(tmp_path / "scene.cub"))


def test_parse_full_scene(tmp_path):
    path = _write_scene(tmp_path, SCENE)
    scene = parse(str(path))
    assert scene.textures[Element.NO] == str(tmp_path / "north.xpm")
    assert scene.textures[Element.WE] == str(tmp_path / "west.xpm")
    assert scene.floor == (220, 100, 0)
    assert scene.ceiling == (225, 30, 0)
    assert scene.grid[-1] == "111111"
    assert len(scene.grid) == 5
    assert scene.facing is Facing.NORTH
    assert scene.player_y == 3.5
    assert scene.player_x == 4.5


def test_check_arg_trims_spaces():
    assert check_arg("  maps/room.cub ") == "maps/room.cub"


@pytest.mark.parametrize("arg", ["a.c", "dir/abc", "dir/"])
def test_check_arg_too_short(arg):
    with pytest.raises(CubError, match="too short"):
        check_arg(arg)


@pytest.mark.parametrize("arg", ["map.txt", "maps/room.cubx"])
def test_check_arg_bad_extension(arg):
    with pytest.raises(CubError, match="invalid file extension"):
        check_arg(arg)


def test_check_arg_accepts_bare_extension_name():
    assert check_arg("maps/.cub") == "maps/.cub"


def test_parse_missing_file(tmp_path):
    with pytest.raises(CubError, match="introduced map dont exist"):
        parse(str(tmp_path / "missing.cub"))


def test_parse_directory_has_no_content(tmp_path):
    folder = tmp_path / "room.cub"
    folder.mkdir()
    with pytest.raises(CubError, match="forgot to declare a texture"):
        parse(str(folder))


def test_parse_reports_missing_map(tmp_path):
    body = SCENE.split("111111\n", 1)[0]
    path = _write_scene(tmp_path, body)
    with pytest.raises(CubError, match="no map finded"):
        parse(str(path))


def test_blank_lines_before_map_are_ignored(tmp_path):
    scene = _scene(tmp_path)
    read_lines(scene, ["\n", "   \n"])
    assert scene.grid == []
    assert scene.map_found is False


def test_indented_parameter_is_read(tmp_path):
    scene = _scene(tmp_path)
    process_line(scene, "   F   1,2,3\n")
    assert scene.floor == (1, 2, 3)


def test_indented_map_line_keeps_indent(tmp_path):
    scene = _scene(tmp_path)
    process_line(scene, "  111\n")
    assert scene.grid == ["  111"]
    assert scene.map_found is True


def test_empty_line_after_map_is_rejected(tmp_path):
    scene = _scene(tmp_path)
    process_line(scene, "111\n")
    with pytest.raises(CubError, match="invalid parameter"):
        process_line(scene, "\n")


def test_parameter_after_map_is_rejected(tmp_path):
    scene = _scene(tmp_path)
    process_line(scene, "111\n")
    with pytest.raises(CubError, match="invalid parameter"):
        process_line(scene, "C 1,2,3\n")


def test_unknown_identifier_is_rejected(tmp_path):
    scene = _scene(tmp_path)
    with pytest.raises(CubError, match="invalid parameter"):
        process_line(scene, "X something\n")


def test_duplicate_colour_is_rejected(tmp_path):
    scene = _scene(tmp_path)
    with pytest.raises(CubError, match="duplicate RGB parameter"):
        read_lines(scene, ["F 1,2,3\n", "F 4,5,6\n"])


def test_texture_path_is_relative_to_scene(tmp_path):
    scene = _scene(tmp_path)
    process_line(scene, "SO   south.xpm\n")
    assert scene.textures[Element.SO] == str(tmp_path / "south.xpm")