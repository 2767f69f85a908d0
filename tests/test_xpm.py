import pytest

from cubcaster.colornames import lookup
from cubcaster.xpm import (
    XpmError,
    find,
    find_unquoted,
    parse_xpm,
    quoted_lines,
    split_words,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE_FILE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 3 1",
"a c #FF0000",
"b c blue",
". c None",
// pixels
"ab",
"b."
};
"""


def test_find_matches_position():
    text = "hello world"
    pos = find(text, "wor")
    assert text[pos:pos + 3] == "wor"
    assert find(text, "xyz") == -1


def test_find_unquoted_skips_strings():
    text = '"/* x" /* y'
    pos = find_unquoted(text, "/*")
    assert pos > text.index('"', 1)
    assert text.startswith("/*", pos)
    assert find_unquoted('"/*"', "/*") == -1


def test_split_words():
    assert split_words("  a\tb   c \t") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_strings():
    text = 'a /* gone */ "/* kept */" // line\nb'
    out = strip_comments(text)
    assert len(out) == len(text)
    assert '"/* kept */"' in out
    assert "gone" not in out and "line" not in out
    assert out.endswith("b")


def test_text_to_rgb():
    assert text_to_rgb("#00FF00", None) == 0x00FF00
    assert text_to_rgb("Blue", None) == lookup("blue")
    assert text_to_rgb("dark", "red") == lookup("dark red")
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_quoted_lines():
    assert list(quoted_lines('x "one", "two" "unterminated')) == ["one", "two"]


def test_parse_sample():
    img = xpm_to_image(["2 2 3 1", "a c #FF0000", "b c blue", ". c None", "ab", "b."])
    assert (img.width, img.height) == (2, 2)
    assert img.get_pixel(0, 0) == 0xFF0000
    assert img.get_pixel(1, 0) == lookup("blue")
    assert img.get_pixel(0, 1) == lookup("blue")
    assert img.get_pixel(1, 1) == 0xFF000000


def test_file_matches_data(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_FILE)
    from_file = xpm_file_to_image(path)
    from_data = xpm_to_image(["2 2 3 1", "a c #FF0000", "b c blue", ". c None", "ab", "b."])
    assert from_file.to_bytes() == from_data.to_bytes()


def test_missing_file(tmp_path):
    with pytest.raises(XpmError):
        xpm_file_to_image(tmp_path / "absent.xpm")


def test_two_chars_per_pixel():
    img = parse_xpm(["3 1 2 2", "aa c #000010", "bb c #000020", "aabbaa"])
    assert [img.get_pixel(x, 0) for x in range(3)] == [0x10, 0x20, 0x10]


def test_duplicate_key_short_codes_last_wins():
    img = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert img.get_pixel(0, 0) == lookup("blue")


def test_duplicate_key_long_codes_first_wins():
    img = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert img.get_pixel(0, 0) == lookup("red")


def test_unknown_pixel_key_is_black():
    img = parse_xpm(["2 1 1 1", "a c white", "az"])
    assert img.get_pixel(0, 0) == lookup("white")
    assert img.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["x y z w"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["2 2 1 1", "a c red", "aa"],
        [],
    ],
)
def test_malformed(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)