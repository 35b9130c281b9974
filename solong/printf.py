"""A small printf with the conversions %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

_INT_BITS = 32
_POINTER_BITS = 64
_MISSING = object()


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    span = 1 << _INT_BITS
    half = span >> 1
    return (value + half) % span - half


def _unsigned32(value: int) -> int:
    return value % (1 << _INT_BITS)


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(_require_int(value, "c") % 256)


def _conv_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _conv_signed(value: Any) -> str:
    return str(_signed32(_require_int(value, "d")))


def _conv_unsigned(value: Any) -> str:
    return str(_unsigned32(_require_int(value, "u")))


def _conv_hex_lower(value: Any) -> str:
    return format(_unsigned32(_require_int(value, "x")), "x")


def _conv_hex_upper(value: Any) -> str:
    return format(_unsigned32(_require_int(value, "X")), "X")


def _conv_pointer(value: Any) -> str:
    address = 0 if value is None else _require_int(value, "p")
    return "0x" + format(address % (1 << _POINTER_BITS), "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_str,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
    "p": _conv_pointer,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _CONVERSIONS.get(spec)
    if handler is None:
        # Unknown conversions are consumed and produce nothing.
        return ""
    value = next(values, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return handler(value)


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``."""
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)