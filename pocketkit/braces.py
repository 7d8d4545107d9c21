"""A minimal checker that accepts only an empty JSON object."""

from __future__ import annotations

import sys


def tokenize(text: str) -> list[str]:
    """Return the curly braces found in the text, in order."""
    return [char for char in text.strip() if char in "{}"]


def parse(tokens: list[str]) -> bool:
    """Return True when the tokens are exactly one opening and one closing brace."""
    return list(tokens) == ["{", "}"]


def main(argv: list[str] | None = None) -> int:
    """Check the file named on the command line and report whether it is valid."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: JSON Parsing file!")
        return 1

    try:
        with open(args[0], encoding="utf-8", errors="replace") as handle:
            data = handle.read()
    except OSError:
        data = ""

    if parse(tokenize(data)):
        print("Valid JSON")
        return 0
    print("Invalid JSON")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())