import io

import pytest

from solong.linereader import LineReader, read_lines


@pytest.mark.parametrize("size", [1, 2, 3, 7, 100])
def test_lines_without_trailing_newline(size):
    assert read_lines(io.StringIO("ab\ncd\nef"), size) == ["ab", "cd", "ef"]


@pytest.mark.parametrize("size", [1, 2, 5])
def test_trailing_newline_gives_no_empty_line(size):
    assert read_lines(io.StringIO("ab\ncd\n"), size) == ["ab", "cd"]


def test_empty_lines_in_the_middle_are_kept():
    assert read_lines(io.StringIO("a\n\nb\n")) == ["a", "", "b"]


def test_leading_newline_gives_empty_first_line():
    assert read_lines(io.StringIO("\nx")) == ["", "x"]


def test_empty_stream():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_end_of_stream_stays_ended():
    reader = LineReader(io.StringIO("only"))
    assert reader.read_line() == "only"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_binary_stream_gives_bytes():
    assert read_lines(io.BytesIO(b"11111\n10001\n11111\n"), 3) == [
        b"11111",
        b"10001",
        b"11111",
    ]


def test_long_line_with_small_buffer():
    text = "1" * 50 + "\n" + "0" * 33
    assert read_lines(io.StringIO(text), 2) == ["1" * 50, "0" * 33]


def test_iteration_matches_read_lines():
    text = "P0C\nE01\n"
    assert list(LineReader(io.StringIO(text), 4)) == read_lines(io.StringIO(text), 1)


def test_reset_drops_pending_data():
    reader = LineReader(io.StringIO("ab\ncd\n"), 4)
    assert reader.read_line() == "ab"
    reader.reset()
    assert reader.read_line() == "d"
    assert reader.read_line() is None


@pytest.mark.parametrize("size", [0, -1])
def test_buffer_size_must_be_positive(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)