"""Small tools: word counter, brace checker, unit converter, to-do list, URL shortener and puzzle helpers."""

__version__ = "0.1.0"