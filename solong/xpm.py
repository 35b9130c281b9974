"""Reading XPM images into rows of 32-bit pixel values."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional, Union

TRANSPARENT = 0xFF000000
_DIRECT_CPP_LIMIT = 2

_COLOR_NAMES = {
    "white": 0xFFFFFF,
    "black": 0x0,
    "gray": 0xBEBEBE,
    "grey": 0xBEBEBE,
    "red": 0xFF0000,
    "green": 0xFF00,
    "blue": 0xFF,
    "yellow": 0xFFFF00,
    "cyan": 0xFFFF,
    "magenta": 0xFF00FF,
    "orange": 0xFFA500,
    "brown": 0xA52A2A,
    "purple": 0xA020F0,
    "pink": 0xFFC0CB,
    "none": -1,
}

_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*([+-]?)([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels[y][x]`` holds a 0xAARRGGBB value."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        return self.pixels[y][x]


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_unquoted(text: str, marker: str) -> int:
    in_quote = False
    for index, ch in enumerate(text):
        if ch == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(marker, index):
            return index
    return -1


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments outside quotes, keeping the length."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _strtol_hex(text: str) -> int:
    match = _LEADING_HEX.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def color_from_text(name: str, extra: Optional[str]) -> int:
    """Resolve a colour given as ``#RRGGBB`` or a name; unknown names give 0."""
    if name.startswith("#"):
        return _strtol_hex(name[1:])
    if extra:
        name = f"{name} {extra}"
    return _COLOR_NAMES.get(name.lower(), 0)


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError("XPM header values must be positive")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        after_c = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' entry: {line!r}") from None
    if after_c >= len(words):
        raise XpmError(f"colour line has no colour value: {line!r}")
    extra = words[after_c + 1] if after_c + 1 < len(words) else None
    return line[:cpp], color_from_text(words[after_c], extra)


def parse_xpm(lines: Sequence[str]) -> XpmImage:
    """Decode XPM data given as its list of strings (header, colours, rows)."""
    rows = iter(lines)

    def next_line(what: str) -> str:
        line = next(rows, None)
        if line is None:
            raise XpmError(f"XPM data ends before the {what}")
        return line

    width, height, ncolors, cpp = _parse_header(next_line("header"))

    colors: dict[str, int] = {}
    last_wins = cpp <= _DIRECT_CPP_LIMIT
    for _ in range(ncolors):
        key, value = _parse_color(next_line("colour table"), cpp)
        if last_wins:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    pixels = []
    for _ in range(height):
        line = next_line("pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row is too short: {line!r}")
        row = []
        for start in range(0, width * cpp, cpp):
            value = colors.get(line[start:start + cpp], 0)
            row.append(TRANSPARENT if value == -1 else value & 0xFFFFFFFF)
        pixels.append(tuple(row))
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: Union[str, "os.PathLike[str]"]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)}") from exc
    return parse_xpm_text(text)