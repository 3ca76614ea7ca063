"""
Reusable visual building blocks.

Non-interactive components for rendering UI elements.
"""

from .box import (
    BOX_TL,
    BOX_TR,
    BOX_BL,
    BOX_BR,
    BOX_H,
    BOX_V,
    CORNERS,
    BoxConfig,
    box_row,
    render_box,
)
from .formatting import (
    ANSI_PATTERN,
    strip_ansi,
    visible_width,
    max_visible_width,
)

__all__ = [
    # Box drawing
    "BOX_TL",
    "BOX_TR",
    "BOX_BL",
    "BOX_BR",
    "BOX_H",
    "BOX_V",
    "CORNERS",
    "BoxConfig",
    "box_row",
    "render_box",
    # Formatting
    "ANSI_PATTERN",
    "strip_ansi",
    "visible_width",
    "max_visible_width",
]
