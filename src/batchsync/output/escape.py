"""ANSI escape-code formatting for the diff report.

Codes are written unconditionally; the report is meant for ``less -R``.
See https://en.wikipedia.org/wiki/ANSI_escape_code#SGR for the numbers.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

ESCAPE_CODES: Mapping[str, int] = MappingProxyType({
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "bright_blue": 94,
    "bright_magenta": 95,
    "bright_cyan": 96,
    "bold": 1,
    "italic": 3,
    "underline": 4,
    "crossed_out": 9,
})

DIR_COLORS: Tuple[str, ...] = (
    "blue",
    "magenta",
    "cyan",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
)

_RESET = "\x1b[0m"


def fmt(text: str, *styles: str) -> str:
    """Wrap *text* in the escape sequence for *styles*.

    With no styles, or if any style is unknown, *text* is returned as is.
    """
    if not styles or not all(s in ESCAPE_CODES for s in styles):
        return text
    codes = ";".join(str(ESCAPE_CODES[s]) for s in styles)
    return f"\x1b[{codes}m{text}{_RESET}"


def fmt_error(text: str) -> str:
    return fmt(text, "red")


def fmt_delete(text: str) -> str:
    return fmt(text, "red", "crossed_out")


def fmt_modified(text: str) -> str:
    return fmt(text, "yellow", "italic")


def fmt_add(text: str) -> str:
    return fmt(text, "green")


def fmt_dir(text: str, level: int) -> str:
    """Colour *text* with the directory palette entry for nesting *level*."""
    return fmt(text, DIR_COLORS[level % len(DIR_COLORS)])
