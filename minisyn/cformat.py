"""A small printf-style formatter with C integer semantics.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. There are no flags, widths or precisions.
"""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, Callable, Iterator, TextIO

_SPEC = re.compile(r"%(.?)", re.DOTALL)

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_ADDRESS_MASK = (1 << 64) - 1


class FormatError(ValueError):
    """Raised for a malformed format string or unusable arguments."""


def _as_int(value: Any, conversion: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise FormatError(f"%{conversion} needs an integer, got {type(value).__name__}") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("%c needs a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _signed(value: Any) -> str:
    number = _as_int(value, "d") & _UINT_MASK
    if number >= 1 << (_INT_BITS - 1):
        number -= 1 << _INT_BITS
    return str(number)


def _unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return format(_as_int(value, "x") & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(_as_int(value, "X") & _UINT_MASK, "X")


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") & _ADDRESS_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{conversion}") from None


def cformat(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Raises FormatError for an unknown conversion, a trailing ``%`` or a
    missing argument. Surplus arguments are ignored.
    """
    if fmt is None:
        raise FormatError("no format string")
    pieces: list[str] = []
    remaining = iter(args)
    last = 0
    for match in _SPEC.finditer(fmt):
        pieces.append(fmt[last:match.start()])
        last = match.end()
        conversion = match.group(1)
        if conversion == "%":
            pieces.append("%")
            continue
        handler = _CONVERSIONS.get(conversion)
        if handler is None:
            if conversion:
                raise FormatError(f"unknown conversion %{conversion}")
            raise FormatError("format ends with a lone %")
        pieces.append(handler(_next_arg(remaining, conversion)))
    pieces.append(fmt[last:])
    return "".join(pieces)


def cprintf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    text = cformat(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)