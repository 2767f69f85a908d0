import io

import pytest

from cubcaster.errors import CubError, report


def test_str_is_message():
    assert str(CubError("no map finded in the cub file")) == "no map finded in the cub file"


def test_message_attribute():
    error = CubError("duplicate RGB parameter")
    assert error.message == "duplicate RGB parameter"


def test_report_format_and_status():
    out = io.StringIO()
    status = report(CubError("texture dont exists"), out)
    assert out.getvalue() == "cub3D: error: texture dont exists\n"
    assert status == 1


def test_report_defaults_to_stderr(capsys):
    report(CubError("introduced map dont exist"))
    captured = capsys.readouterr()
    assert captured.err == "cub3D: error: introduced map dont exist\n"
    assert captured.out == ""


def test_raised_error_is_caught_as_exception_and_reported():
    with pytest.raises(Exception) as info:
        raise CubError("duplicate texture parameter")
    assert info.value.message == "duplicate texture parameter"
    out = io.StringIO()
    assert report(info.value, out) == 1
    assert out.getvalue() == "cub3D: error: duplicate texture parameter\n"