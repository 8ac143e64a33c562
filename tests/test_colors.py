import io

import pytest

from solong import colors
from solong.colors import Color


@pytest.mark.parametrize(
    "func, color",
    [
        (colors.black, Color.BLACK),
        (colors.blue, Color.BLUE),
        (colors.cyan, Color.CYAN),
        (colors.green, Color.GREEN),
        (colors.purple, Color.PURPLE),
        (colors.red, Color.RED),
        (colors.white, Color.WHITE),
        (colors.yellow, Color.YELLOW),
        (colors.reset, Color.RESET),
    ],
)
def test_function_writes_its_escape(func, color):
    out = io.StringIO()
    func(out)
    assert out.getvalue() == color.value


def test_red_escape_value():
    out = io.StringIO()
    colors.red(out)
    assert out.getvalue() == "\033[0;31m"


def test_reset_escape_value():
    out = io.StringIO()
    colors.reset(out)
    assert out.getvalue() == "\033[0m"


def test_default_stream_is_stdout(capsys):
    colors.cyan()
    assert capsys.readouterr().out == "\033[0;36m"


def test_writes_accumulate():
    out = io.StringIO()
    colors.green(out)
    colors.reset(out)
    assert out.getvalue() == Color.GREEN.value + Color.RESET.value


def test_demo_lines_and_order():
    out = io.StringIO()
    colors.demo(out)
    text = out.getvalue()
    assert text.startswith("\033[0;30mBlack \n\033[0m")
    assert text.endswith("\033[0;33mYellow \n\033[0m")
    assert text.count(Color.RESET.value) == 8
    assert text.count("\n") == 8


def test_demo_names_in_source_order():
    out = io.StringIO()
    colors.demo(out)
    text = out.getvalue()
    names = ["Black", "Blue", "Cyan", "Green", "Purple", "Red", "White", "Yellow"]
    positions = [text.index(name + " \n") for name in names]
    assert positions == sorted(positions)