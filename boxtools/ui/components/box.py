"""
Box drawing primitives.

Unicode box-drawing characters and the renderer that wraps styled lines
in a bordered rectangle.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..colors import color_reset, color_start
from .formatting import max_visible_width, visible_width

# Box corners
BOX_TL = "┌"  # Top-left
BOX_TR = "┐"  # Top-right
BOX_BL = "└"  # Bottom-left
BOX_BR = "┘"  # Bottom-right

# Rounded corners
BOX_TL_ROUND = "╭"
BOX_TR_ROUND = "╮"
BOX_BL_ROUND = "╰"
BOX_BR_ROUND = "╯"

# Box edges
BOX_H = "─"   # Horizontal
BOX_V = "│"   # Vertical

CORNERS = {
    "square": (BOX_TL, BOX_TR, BOX_BL, BOX_BR),
    "rounded": (BOX_TL_ROUND, BOX_TR_ROUND, BOX_BL_ROUND, BOX_BR_ROUND),
}


@dataclass(frozen=True)
class BoxConfig:
    """Padding and colors for one render call."""
    left_padding: int = 1
    right_padding: int = 1
    text_color: Optional[str] = None    # Palette name or raw color code
    border_color: Optional[str] = None
    style: str = "square"  # Key into CORNERS


def box_row(left: str, fill: str, right: str, width: int, color: Optional[str]) -> str:
    """
    Create a box row with colored borders.

    Args:
        left: Left border character
        fill: Fill character (repeated)
        right: Right border character
        width: Total width including borders
        color: Color selector for borders, or None

    Returns:
        Formatted string for the row
    """
    return f"{color_start(color)}{left}{fill * (width - 2)}{right}{color_reset(color)}"


def render_box(lines: Sequence[str], config: BoxConfig = BoxConfig()) -> list[str]:
    """
    Render lines inside a bordered box.

    All lines are measured before anything is drawn, since the column
    width is the widest visible line. Escape directives in the input are
    kept verbatim and don't count toward width.

    Args:
        lines: Already-expanded text lines
        config: Padding, colors and corner style

    Returns:
        Top border, one row per input line, bottom border
    """
    lines = list(lines)
    tl, tr, bl, br = CORNERS[config.style]
    left, right = config.left_padding, config.right_padding
    bc, tc = config.border_color, config.text_color

    content_width = max_visible_width(lines)
    width = content_width + left + right + 2

    edge = f"{color_start(bc)}{BOX_V}{color_reset(bc)}"

    rendered = [box_row(tl, BOX_H, tr, width, bc)]
    for line in lines:
        trailing = " " * (content_width + right - visible_width(line))
        rendered.append(
            f"{edge}{color_start(tc)}{' ' * left}{line}{trailing}"
            f"{color_reset(tc)}{edge}"
        )
    rendered.append(box_row(bl, BOX_H, br, width, bc))
    return rendered
