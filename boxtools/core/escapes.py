"""
Backslash escape expansion, the way `printf '%b'` does it.

Input lines may spell control characters as text ("\\e[31m", "\\t");
they must be real characters before widths are measured.
"""

import re
from typing import Iterable, List

SIMPLE_ESCAPES = {
    "\\": "\\",
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "E": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

# \c comes first so it can cut the line short
ESCAPE_PATTERN = re.compile(
    r"\\(?:"
    r"(?P<c>c)"
    r"|0(?P<oct0>[0-7]{0,3})"
    r"|x(?P<hex>[0-9A-Fa-f]{1,2})"
    r"|u(?P<u4>[0-9A-Fa-f]{1,4})"
    r"|U(?P<u8>[0-9A-Fa-f]{1,8})"
    r"|(?P<simple>[\\abeEfnrtv])"
    r")"
)


def _decode(match: re.Match) -> str:
    if match.group("oct0") is not None:
        digits = match.group("oct0")
        return chr(int(digits, 8)) if digits else "\0"
    if match.group("hex"):
        return chr(int(match.group("hex"), 16))
    code = match.group("u4") or match.group("u8")
    if code:
        value = int(code, 16)
        # Surrogates and out-of-range code points stay literal
        if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
            return match.group(0)
        return chr(value)
    return SIMPLE_ESCAPES[match.group("simple")]


def expand_escapes(text: str) -> str:
    """
    Expand backslash escapes in text.

    Unknown sequences and a trailing lone backslash are kept literally.
    A \\c stops output: the rest of the text is dropped.
    """
    result = []
    pos = 0
    for match in ESCAPE_PATTERN.finditer(text):
        result.append(text[pos:match.start()])
        if match.group("c"):
            return "".join(result)
        result.append(_decode(match))
        pos = match.end()
    result.append(text[pos:])
    return "".join(result)


def expand_lines(lines: Iterable[str]) -> List[str]:
    return [expand_escapes(line) for line in lines]
