import io

import pytest

from solong.colors import Color
from solong.errors import (
    MapError,
    SoLongError,
    check_map_counts,
    file_error,
    report_error,
    usage_error,
)

HEADER = Color.RED.value + "Error\n" + Color.RESET.value


def test_report_error_layout():
    out = io.StringIO()
    report_error("No exit in map\n", out)
    assert out.getvalue() == (
        HEADER + Color.WHITE.value + "No exit in map\n" + Color.RESET.value
    )


def test_report_error_defaults_to_stderr(capsys):
    report_error("boom")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith(HEADER)
    assert "boom" in captured.err


def test_file_error_layout():
    out = io.StringIO()
    file_error("maps/missing.ber", out)
    assert out.getvalue() == (
        HEADER
        + Color.WHITE.value
        + "File does not exist "
        + Color.RED.value
        + "maps/missing.ber"
        + Color.RESET.value
        + "\n"
    )


def test_usage_error_layout():
    out = io.StringIO()
    usage_error(out)
    assert out.getvalue() == (
        HEADER
        + "usage : ./so_long ["
        + Color.CYAN.value
        + "file"
        + Color.RESET.value
        + Color.WHITE.value
        + "."
        + Color.RESET.value
        + Color.RED.value
        + "ber"
        + Color.RESET.value
        + "]\n"
    )


def test_map_error_is_package_error():
    with pytest.raises(SoLongError):
        check_map_counts(1, 1, 0)


@pytest.mark.parametrize(
    "players, exits, collectibles, message",
    [
        (1, 1, 0, "No collectible in map"),
        (1, 0, 3, "No exit in map"),
        (0, 1, 3, "No player position in map"),
        (2, 1, 3, "Too much player position in map"),
    ],
)
def test_check_map_counts_messages(players, exits, collectibles, message):
    with pytest.raises(MapError) as info:
        check_map_counts(players, exits, collectibles)
    assert str(info.value) == message


def test_check_map_counts_collectibles_checked_first():
    with pytest.raises(MapError) as info:
        check_map_counts(0, 0, 0)
    assert str(info.value) == "No collectible in map"


def test_check_map_counts_exit_before_player():
    with pytest.raises(MapError) as info:
        check_map_counts(5, 0, 1)
    assert str(info.value) == "No exit in map"