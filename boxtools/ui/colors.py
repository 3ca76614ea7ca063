"""
Shared color definitions for terminal output.

Color selectors are either a palette name ("red") or a raw color code
("1", "208") that is passed through unchanged. Anything else draws
in the default color.
"""

import re
from types import MappingProxyType
from typing import Optional


class Colors:
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"


# Basic 8-color palette, same codes as `tput setaf`
PALETTE = MappingProxyType({
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
})


def resolve_color(selector: Optional[str]) -> Optional[str]:
    """Map a selector to its color code. Unknown names pass through as-is."""
    if selector is None:
        return None
    if selector in PALETTE:
        return str(PALETTE[selector])
    return selector


def fg(code: str) -> str:
    """Foreground color directive for a color code, "" if it isn't numeric."""
    if not re.fullmatch(r"[0-9]+", code):
        return ""
    if int(code) < 8:
        return f"\x1b[3{int(code)}m"
    return f"\x1b[38;5;{code}m"


def color_start(selector: Optional[str]) -> str:
    code = resolve_color(selector)
    if code is None:
        return ""
    return fg(code)


def color_reset(selector: Optional[str]) -> str:
    return Colors.RESET if color_start(selector) else ""
