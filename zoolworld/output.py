"""printf-style formatting and small writers for characters, strings and numbers.

The formatter understands the conversions ``%c``, ``%s``, ``%d``, ``%i``,
``%p``, ``%u``, ``%x``, ``%X`` and ``%%``. Integer conversions follow the
widths of a 32-bit ``int``/``unsigned int``; ``%p`` uses a 64-bit value.
An unknown conversion produces no output and consumes no argument.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

_UINT_BITS = 32
_UINT_MASK = (1 << _UINT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1
_NULL_TEXT = "(null)"
_NIL_POINTER = "(nil)"


def _require_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _require_non_negative(value: Any) -> int:
    value = _require_int(value)
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {value}")
    return value


def _as_int32(value: Any) -> int:
    value = _require_int(value) & _UINT_MASK
    return value - (1 << _UINT_BITS) if value >> (_UINT_BITS - 1) else value


def _as_uint32(value: Any) -> int:
    return _require_int(value) & _UINT_MASK


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_require_int(value) & 0xFF)


def _as_text(value: Any) -> str:
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _as_pointer(value: Any) -> str:
    address = _require_int(value) & _POINTER_MASK
    if address == 0:
        return _NIL_POINTER
    return "0x" + hex_lower(address)


def hex_lower(n: int) -> str:
    """Write a non-negative integer in lower-case hexadecimal, without prefix."""
    return f"{_require_non_negative(n):x}"


def hex_upper(n: int) -> str:
    """Write a non-negative integer in upper-case hexadecimal, without prefix."""
    return f"{_require_non_negative(n):X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _as_char,
    "s": _as_text,
    "d": lambda value: str(_as_int32(value)),
    "i": lambda value: str(_as_int32(value)),
    "p": _as_pointer,
    "u": lambda value: str(_as_uint32(value)),
    "x": lambda value: hex_lower(_as_uint32(value)),
    "X": lambda value: hex_upper(_as_uint32(value)),
}


def format_printf(fmt: str, *args: Any) -> str:
    """Format args according to fmt and return the resulting text."""
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        pieces.append(convert(arg))
    return "".join(pieces)


def _write(text: str, file: TextIO | None) -> int:
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Format and write to file (standard output by default); return the length written."""
    return _write(format_printf(fmt, *args), file)


def put_char(c: str | int, file: TextIO | None = None) -> int:
    """Write one character; an integer is taken as a byte-sized character code."""
    return _write(_as_char(c), file)


def put_str(text: str | None, file: TextIO | None = None) -> int:
    """Write text; None writes nothing."""
    if text is None:
        return 0
    return _write(_as_text(text), file)


def put_endl(text: str | None, file: TextIO | None = None) -> int:
    """Write text followed by a newline; None writes nothing."""
    if text is None:
        return 0
    return _write(_as_text(text) + "\n", file)


def put_nbr(n: int, file: TextIO | None = None) -> int:
    """Write an integer in decimal."""
    return _write(str(_require_int(n)), file)