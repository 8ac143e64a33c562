import io

import pytest

from solong.put import putchar, putendl, putnbr, putstr


def test_putchar_writes_character():
    out = io.StringIO()
    putchar("Z", out)
    assert out.getvalue() == "Z"


def test_putchar_rejects_longer_text():
    with pytest.raises(ValueError):
        putchar("ab", io.StringIO())


def test_putstr_writes_text():
    out = io.StringIO()
    putstr("so long", out)
    putstr("", out)
    assert out.getvalue() == "so long"


def test_putendl_appends_newline():
    out = io.StringIO()
    putendl("line", out)
    assert out.getvalue() == "line\n"


def test_putnbr_positive_and_zero():
    out = io.StringIO()
    putnbr(42, out)
    putnbr(0, out)
    assert out.getvalue() == "42" + "0"


def test_putnbr_int_min():
    out = io.StringIO()
    putnbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_putnbr_negative_round_trip():
    out = io.StringIO()
    putnbr(-123, out)
    assert int(out.getvalue()) == -123


def test_putnbr_out_of_range():
    with pytest.raises(OverflowError):
        putnbr(2147483648, io.StringIO())


def test_default_stream_is_stdout(capsys):
    putendl("hello")
    assert capsys.readouterr().out == "hello\n"