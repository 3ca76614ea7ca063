"""
Text measurement helpers for styled terminal strings.

Width is counted in characters after removing escape directives.
"""

import re
from typing import Iterable

# CSI sequence (ESC [ params letter) or the ESC ( B reset from `tput sgr0`
ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*[A-Za-z]|\x1b\(B')


def strip_ansi(text: str) -> str:
    """
    Remove ANSI escape codes from text.

    Repeats until nothing matches, so removing one directive can't leave
    the pieces of another behind.
    """
    while True:
        stripped = ANSI_PATTERN.sub('', text)
        if stripped == text:
            return stripped
        text = stripped


def visible_width(text: str) -> int:
    """Number of characters that occupy a terminal column."""
    return len(strip_ansi(text))


def max_visible_width(lines: Iterable[str]) -> int:
    return max((visible_width(line) for line in lines), default=0)
