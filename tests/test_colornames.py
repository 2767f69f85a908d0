import pytest

from cubcaster.colornames import lookup


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("gray50", 0x7F7F7F),
        ("navy", 0x80),
        ("lightgoldenrodyellow", 0xFAFAD2),
    ],
)
def test_known_names(name, expected):
    assert lookup(name) == expected


def test_none_is_transparent():
    assert lookup("none") == -1


def test_lookup_ignores_case():
    assert lookup("SNOW") == lookup("snow")
    assert lookup("Dark Red") == lookup("dark red")
    assert lookup("NoNe") == -1


def test_first_duplicate_wins():
    assert lookup("dark slate") == 0x2F4F4F
    assert lookup("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(0, 101))
def test_gray_and_grey_agree(level):
    assert lookup(f"gray{level}") == lookup(f"grey{level}")


@pytest.mark.parametrize("level", range(0, 100))
def test_gray_scale_is_monotonic_and_neutral(level):
    low = lookup(f"gray{level}")
    high = lookup(f"gray{level + 1}")
    assert low < high
    channel = high & 0xFF
    assert high == (channel << 16) | (channel << 8) | channel


def test_spaced_and_joined_names_agree():
    assert lookup("ghost white") == lookup("ghostwhite")
    assert lookup("misty rose") == lookup("mistyrose")
    assert lookup("dark magenta") == lookup("darkmagenta")


@pytest.mark.parametrize("name", ["", "not a colour", "gray101", "#ff0000"])
def test_unknown_name_raises(name):
    with pytest.raises(KeyError):
        lookup(name)