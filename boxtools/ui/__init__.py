"""
User interface module.

Handles colors and box rendering for terminal output.
"""

from .colors import Colors, PALETTE, resolve_color, fg, color_start, color_reset

__all__ = [
    "Colors",
    "PALETTE",
    "resolve_color",
    "fg",
    "color_start",
    "color_reset",
]
