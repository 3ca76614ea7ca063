#!/usr/bin/env python3
"""
Boxify - draw a box around text.

Reads lines from stdin (or files), expands backslash escapes like
`printf '%b'`, and prints them inside a bordered box. Lines may carry
color escapes; they don't count toward the box width.

    printf 'hi\nthere\n' | boxify -b cyan
    echo '\e[31mwarning\e[0m: disk almost full' | boxify -l 2 -r 2
"""

import argparse
import os
import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from boxtools import __version__
from boxtools.core.escapes import expand_lines
from boxtools.ui.colors import Colors, PALETTE
from boxtools.ui.components import BoxConfig, render_box

# ============================================================================
# Configuration
# ============================================================================

DEFAULT_PADDING = 1
TEXT_COLOR_ENV = "BOXIFY_TEXT_COLOR"
BORDER_COLOR_ENV = "BOXIFY_BORDER_COLOR"

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


class BoxifyError(Exception):
    """Base class for command-line errors."""
    pass


class InvalidPadding(BoxifyError, ValueError):
    """Raised when a padding value is not a non-negative integer."""
    pass


class UnknownOption(BoxifyError):
    """Raised for flags the parser doesn't recognize."""
    pass


class InvalidColor(BoxifyError, ValueError):
    """Raised when a color is neither a palette name nor a code from 0 to 255."""
    pass


def env_color(name: str) -> Optional[str]:
    """Color selector from the environment, None if unset or empty."""
    return os.environ.get(name) or None


def parse_padding(value: str) -> int:
    """Parse a padding argument, rejecting anything but a non-negative integer."""
    if not re.fullmatch(r"[0-9]+", value):
        raise InvalidPadding(f"invalid padding {value!r}: expected a non-negative integer")
    return int(value)


def parse_color(value: Optional[str]) -> Optional[str]:
    """Check a color selector: a palette name or a 256-color code."""
    if value is None or value in PALETTE:
        return value
    if re.fullmatch(r"[0-9]+", value) and int(value) <= 255:
        return value
    names = ", ".join(PALETTE)
    raise InvalidColor(f"invalid color {value!r}: expected one of {names} or 0-255")


# ============================================================================
# Arguments
# ============================================================================


def build_parser() -> argparse.ArgumentParser:
    palette = ", ".join(PALETTE)
    parser = argparse.ArgumentParser(
        prog="boxify",
        description="Draw a box around text read from stdin or files.",
        epilog=f"Colors: {palette}, or a color code from 0 to 255 (e.g. 208).",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Files to read ('-' for stdin, the default)"
    )
    parser.add_argument(
        "-l", "--left",
        metavar="N",
        help=f"Spaces between the left border and text (default {DEFAULT_PADDING})"
    )
    parser.add_argument(
        "-r", "--right",
        metavar="N",
        help=f"Spaces between the widest line and the right border (default {DEFAULT_PADDING})"
    )
    parser.add_argument(
        "-p", "--padding",
        metavar="N",
        help="Set left and right padding at once"
    )
    parser.add_argument(
        "-t", "--text-color",
        metavar="COLOR",
        default=env_color(TEXT_COLOR_ENV),
        help=f"Text color (default ${TEXT_COLOR_ENV} or none)"
    )
    parser.add_argument(
        "-b", "--border-color",
        metavar="COLOR",
        default=env_color(BORDER_COLOR_ENV),
        help=f"Border color (default ${BORDER_COLOR_ENV} or none)"
    )
    parser.add_argument(
        "--rounded",
        action="store_true",
        help="Use rounded corners"
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Don't expand backslash escapes in the input"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse and validate command-line arguments.

    Raises:
        UnknownOption: An unrecognized flag was given
        InvalidPadding: A padding value isn't a non-negative integer
        InvalidColor: A color isn't a palette name or 0-255
    """
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)
    if extras:
        raise UnknownOption(f"unrecognized option {extras[0]!r}")

    # -l/-r win over -p
    both = parse_padding(args.padding) if args.padding is not None else DEFAULT_PADDING
    args.left = parse_padding(args.left) if args.left is not None else both
    args.right = parse_padding(args.right) if args.right is not None else both
    args.text_color = parse_color(args.text_color)
    args.border_color = parse_color(args.border_color)
    return args


def config_from_args(args: argparse.Namespace) -> BoxConfig:
    return BoxConfig(
        left_padding=args.left,
        right_padding=args.right,
        text_color=args.text_color,
        border_color=args.border_color,
        style="rounded" if args.rounded else "square",
    )


# ============================================================================
# Input / output
# ============================================================================


def split_lines(text: str) -> List[str]:
    """Split on newlines; a final newline doesn't start another line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(paths: Sequence[str]) -> List[str]:
    """
    Read every input before anything is rendered.

    Bytes that aren't valid UTF-8 survive the round trip to stdout.
    """
    lines = []
    for path in paths or ["-"]:
        if path == "-":
            data = sys.stdin.buffer.read()
        else:
            data = Path(path).read_bytes()
        lines.extend(split_lines(data.decode("utf-8", errors="surrogateescape")))
    return lines


def write_lines(lines: Sequence[str], stream=None):
    stream = stream or sys.stdout
    data = "".join(f"{line}\n" for line in lines)
    out = getattr(stream, "buffer", None)
    if out is None:
        stream.write(data)
        stream.flush()
        return
    stream.flush()
    out.write(data.encode("utf-8", errors="surrogateescape"))
    out.flush()


def report(message: str):
    """Print a diagnostic to stderr."""
    if sys.stderr.isatty():
        print(f"{Colors.BOLD}boxify:{Colors.RESET} {message}", file=sys.stderr)
    else:
        print(f"boxify: {message}", file=sys.stderr)


# ============================================================================
# Main
# ============================================================================


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    try:
        args = parse_args(argv)
    except BoxifyError as e:
        report(str(e))
        report("try 'boxify --help' for usage")
        return EXIT_USAGE

    try:
        lines = read_lines(args.files)
    except OSError as e:
        report(f"{e.filename or 'stdin'}: {e.strerror or e}")
        return EXIT_IO_ERROR
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    if not args.raw:
        lines = expand_lines(lines)

    try:
        write_lines(render_box(lines, config_from_args(args)))
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); silence the flush at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return EXIT_IO_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
