"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_PTR_MASK = (1 << 64) - 1
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def _to_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return ((value + half) & _UINT_MASK) - half


def _to_hex(value: int, digits: str) -> str:
    if value < 16:
        return digits[value]
    return _to_hex(value // 16, digits) + digits[value % 16]


def format_str(value: str | None) -> str:
    """Render a string argument; a missing string renders as ``(null)``."""
    return "(null)" if value is None else value


def format_nbr(value: int) -> str:
    """Render a value as a signed 32-bit decimal integer."""
    return str(_to_int32(value))


def format_u_nbr(value: int) -> str:
    """Render a value as an unsigned 32-bit decimal integer."""
    return str(value & _UINT_MASK)


def format_x_nbr(value: int, conversion: str) -> str:
    """Render an unsigned 32-bit value in hex; lower case only for ``x``."""
    digits = _HEX_LOWER if conversion == "x" else _HEX_UPPER
    return _to_hex(value & _UINT_MASK, digits)


def format_ptr(value: int | None) -> str:
    """Render an address as ``0x`` followed by lower-case hex digits."""
    if not value:
        return "0x0"
    return "0x" + _to_hex(value & _PTR_MASK, _HEX_LOWER)


def _format_char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(value & 0xFF)


def _take(values: Iterator[Any], conversion: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{conversion}") from None


def _convert(conversion: str, values: Iterator[Any]) -> str:
    if conversion == "c":
        return _format_char(_take(values, conversion))
    if conversion == "s":
        return format_str(_take(values, conversion))
    if conversion == "p":
        return format_ptr(_take(values, conversion))
    if conversion in ("d", "i"):
        return format_nbr(_take(values, conversion))
    if conversion == "u":
        return format_u_nbr(_take(values, conversion))
    if conversion in ("x", "X"):
        return format_x_nbr(_take(values, conversion), conversion)
    # "%%" and unknown conversions both print the conversion character.
    return conversion


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``fmt`` produces with ``args``.

    A lone ``%`` at the very end of the format is dropped.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        pieces.append(_convert(conversion, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered text to ``stream`` and return the number of bytes."""
    text = render(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text.encode("utf-8", "surrogateescape"))