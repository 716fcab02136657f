"""
Formatting callbacks.

Each callback takes one string, prints a transformed copy of it on its own
line and returns nothing. The pure transforms are exposed separately.
"""

import sys
from typing import Callable

FormatCallback = Callable[[str], None]


def uppercase(text: str) -> str:
    return text.upper()


def lowercase(text: str) -> str:
    return text.lower()


def spaced(text: str) -> str:
    """Insert one space after every character, trailing one included."""
    return "".join(f"{character} " for character in text)


def _emit(line: str) -> None:
    # sys.stdout is looked up per call so redirected streams are honoured
    print(line, file=sys.stdout, flush=True)


def to_uppercase(text: str) -> None:
    """Print ``text`` in uppercase."""
    _emit(uppercase(text))


def to_lowercase(text: str) -> None:
    """Print ``text`` in lowercase."""
    _emit(lowercase(text))


def with_spaces(text: str) -> None:
    """Print ``text`` with a space after every character."""
    _emit(spaced(text))


DEFAULT_CALLBACKS: tuple[FormatCallback, ...] = (to_uppercase, to_lowercase, with_spaces)
