import io
import sys

import pytest

from pocketkit.wordcount import count_bytes, count_chars, count_lines, count_words, main

ROWS = [["alpha", "beta"], ["gamma"], ["delta", "epsilon", "zeta"]]
DATA = ("\n".join(" ".join(row) for row in ROWS) + "\n").encode()


def test_count_bytes_of_memory_stream():
    assert count_bytes(io.BytesIO(DATA)) == len(DATA)


def test_count_bytes_of_real_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_bytes(DATA)
    with open(path, "rb") as stream:
        assert count_bytes(stream) == len(DATA)


def test_count_lines_with_trailing_newline():
    assert count_lines(io.BytesIO(DATA)) == len(ROWS)


def test_count_lines_without_trailing_newline():
    assert count_lines(io.BytesIO(DATA.rstrip(b"\n"))) == len(ROWS)


def test_count_lines_empty():
    assert count_lines(io.BytesIO(b"")) == 0


def test_count_words():
    assert count_words(io.BytesIO(DATA)) == sum(len(row) for row in ROWS)


def test_count_words_ignores_extra_whitespace():
    spaced = b"  one \t two\n\n   three   \n"
    assert count_words(io.BytesIO(spaced)) == count_words(io.BytesIO(b"one two\nthree\n"))


def test_count_chars_multibyte():
    text = "h\u00e9llo w\u00f6rld"
    data = (text + "\n").encode("utf-8")
    assert count_chars(io.BytesIO(data)) == len(text)
    assert count_bytes(io.BytesIO(data)) == len(data)


def test_count_chars_drops_carriage_return():
    text = "ab"
    assert count_chars(io.BytesIO((text + "\r\n").encode())) == len(text)


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "Usage: ccwc [options] [filename]" in capsys.readouterr().out


def test_main_default_mode(tmp_path, capsys):
    path = tmp_path / "sample.txt"
    path.write_bytes(DATA)
    assert main([str(path)]) == 0
    lines = len(ROWS)
    words = sum(len(row) for row in ROWS)
    expected = f"{lines:8d} {words:8d} {len(DATA):8d} {path}\n"
    assert capsys.readouterr().out == expected


@pytest.mark.parametrize(
    "option, expected",
    [
        ("-c", len(DATA)),
        ("-l", len(ROWS)),
        ("-w", sum(len(row) for row in ROWS)),
        ("-m", len(DATA.decode()) - len(ROWS)),
    ],
)
def test_main_single_option(tmp_path, capsys, option, expected):
    path = tmp_path / "sample.txt"
    path.write_bytes(DATA)
    assert main([option, str(path)]) == 0
    assert capsys.readouterr().out == f"{expected:8d} {path}\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(DATA)))
    assert main(["-l"]) == 0
    assert capsys.readouterr().out == f"{len(ROWS):8d}\n"


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main(["-l", str(missing)]) == 1
    assert f"Error: Unable to open file '{missing}'." in capsys.readouterr().out