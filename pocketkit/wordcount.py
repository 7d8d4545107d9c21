"""Count bytes, lines, words and characters in a file or standard input."""

from __future__ import annotations

import os
import stat
import sys
from typing import BinaryIO, Iterator

_OPTIONS = ("-c", "-l", "-w", "-m")

_USAGE = """\
Usage: ccwc [options] [filename]
Options:
  -c    Print byte count
  -l    Print line count
  -w    Print word count
  -m    Print character count (locale-dependent)

If no options are provided, the default behavior will print:
  line count, word count, and byte count."""


def _lines(stream: BinaryIO) -> Iterator[bytes]:
    """Yield each line without its newline or a trailing carriage return."""
    for raw in stream:
        line = raw[:-1] if raw.endswith(b"\n") else raw
        if line.endswith(b"\r"):
            line = line[:-1]
        yield line


def count_bytes(stream: BinaryIO) -> int:
    """Return the size in bytes of a regular file, or of what remains in the stream."""
    try:
        info = os.fstat(stream.fileno())
    except (OSError, ValueError, AttributeError):
        info = None
    if info is not None and stat.S_ISREG(info.st_mode):
        return info.st_size
    return len(stream.read())


def count_lines(stream: BinaryIO) -> int:
    """Return the number of lines; a last line without a newline still counts."""
    return sum(1 for _ in _lines(stream))


def count_words(stream: BinaryIO) -> int:
    """Return the number of whitespace-separated words."""
    return sum(
        len(line.decode("utf-8", errors="replace").split()) for line in _lines(stream)
    )


def count_chars(stream: BinaryIO) -> int:
    """Return the number of characters, not counting line endings."""
    return sum(
        len(line.decode("utf-8", errors="replace")) for line in _lines(stream)
    )


def _rewind(stream: BinaryIO) -> None:
    try:
        stream.seek(0)
    except (OSError, ValueError):
        pass


def _print_count(count: int, filename: str) -> None:
    if filename:
        print(f"{count:8d} {filename}")
    else:
        print(f"{count:8d}")


def _report(stream: BinaryIO, option: str, filename: str) -> None:
    if option not in _OPTIONS:
        lines = count_lines(stream)
        _rewind(stream)
        words = count_words(stream)
        _rewind(stream)
        size = count_bytes(stream)
        if filename:
            print(f"{lines:8d} {words:8d} {size:8d} {filename}")
        else:
            print(f"{lines:8d} {words:8d} {size:8d}")
        return

    counters = {
        "-c": count_bytes,
        "-l": count_lines,
        "-w": count_words,
        "-m": count_chars,
    }
    _print_count(counters[option](stream), filename)


def main(argv: list[str] | None = None) -> int:
    """Run the counter with command-line arguments."""
    args = sys.argv[1:] if argv is None else list(argv)

    if not args:
        print(_USAGE)
        return 0

    if len(args) == 1:
        if args[0].startswith("-"):
            option, filename = args[0], ""
        else:
            option, filename = "", args[0]
    else:
        option, filename = args[0], args[1]

    try:
        if filename:
            try:
                stream = open(filename, "rb")
            except OSError as exc:
                print(f"Error: Unable to open file '{filename}'. {exc}")
                return 1
            with stream:
                _report(stream, option, filename)
        else:
            _report(sys.stdin.buffer, option, filename)
    except OSError as exc:
        print("Error:", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())