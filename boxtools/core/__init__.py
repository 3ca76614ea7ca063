"""Text preprocessing shared by the command-line tools."""

from .escapes import expand_escapes, expand_lines

__all__ = ["expand_escapes", "expand_lines"]
