"""Small text, timing and error helpers shared by the scheduler tools."""

from __future__ import annotations

import re
import string
import sys
import time
from typing import Iterable, TextIO

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")
_ALNUM = frozenset(string.ascii_letters + string.digits)


def split(line: str) -> list[str]:
    """Split a line into words separated by runs of whitespace."""
    return [word for word in _WHITESPACE.split(line) if word]


def join(tokens: Iterable[str], sep: str = " ") -> str:
    """Join tokens into a single string using ``sep``."""
    return sep.join(tokens)


def simplify(text: str) -> str:
    """Trim surrounding whitespace and collapse inner runs into single spaces."""
    return join(split(text))


def is_alnum(text: str) -> bool:
    """Return True if every character is an ASCII letter or digit."""
    return all(ch in _ALNUM for ch in text)


def read_line(stream: TextIO | None = None) -> str:
    """Read one line, keeping its trailing newline; return '' at end of input."""
    return (sys.stdin if stream is None else stream).readline()


class Word2Int:
    """Map words to consecutive integers, starting at 0, in order of first use."""

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}

    def get(self, word: str) -> int:
        return self._ids.setdefault(word, len(self._ids))


class Timer:
    """Measure elapsed wall time in seconds with microsecond resolution."""

    def __init__(self) -> None:
        self._start = 0.0
        self.reset()

    def elapsed(self, reset: bool = False) -> float:
        micros = int((time.monotonic() - self._start) * 1_000_000)
        if reset:
            self.reset()
        return micros * 1e-6

    def reset(self) -> None:
        self._start = time.monotonic()


class FatalError(Exception):
    """An unrecoverable error carrying a human-readable message."""


class Colors:
    """ANSI terminal colour escape sequences."""

    reset = "\033[0m"
    yellow = "\033[0;33m"
    byellow = "\033[0;93m"
    red = "\033[0;31m"
    bred = "\033[0;91m"
    green = "\033[0;32m"
    bgreen = "\033[0;92m"