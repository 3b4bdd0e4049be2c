"""A small printf-style formatter with its own set of conversions.

Supported conversions: ``d``/``i`` (integers), ``s`` (text), ``S`` (a list of
texts), ``x``/``X`` (32-bit hexadecimal), ``b`` (32-bit binary), ``f``
(floats), ``p`` (addresses) and ``c`` (characters). Flags ``#``, ``0``,
``-``, space and ``+``, a width, a precision (both may be ``*``) and the
``l``/``h`` length modifiers are parsed. Any other conversion letter,
``%`` included, is consumed and writes nothing.
"""

from __future__ import annotations

import errno
import math
import os
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import IntFlag
from typing import Any, TextIO, Union

NIL_TEXT = "(nil)"
DEFAULT_FLOAT_PRECISION = 6
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


class Flag(IntFlag):
    """Conversion flags."""

    NONE = 0
    ALT = 1
    ZERO = 2
    LEFT = 4
    SPACE = 8
    PLUS = 16


_FLAG_CHARS = {
    "#": Flag.ALT,
    "0": Flag.ZERO,
    "-": Flag.LEFT,
    " ": Flag.SPACE,
    "+": Flag.PLUS,
}


@dataclass
class FormatSpec:
    """Flags, width, precision and length modifier of one conversion."""

    flags: Flag = Flag.NONE
    width: int = 0
    precision: int = -1
    length: str = ""

    def has(self, flag: Flag) -> bool:
        """Return whether ``flag`` is set."""
        return bool(self.flags & flag)

    def pad(self, length: int) -> str:
        """Return the fill that brings a field of ``length`` up to the width."""
        fill = "0" if self.has(Flag.ZERO) else " "
        return fill * max(0, self.width - length)

    def zeros(self, length: int) -> str:
        """Return the zeros that bring ``length`` digits up to the precision."""
        return "0" * max(0, self.precision - length)

    def justify(self, length: int, body: str) -> str:
        """Pad ``body`` on the left, or on the right with the ``-`` flag."""
        if self.has(Flag.LEFT):
            return body + self.pad(length)
        return self.pad(length) + body


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    start = pos
    while pos < len(fmt) and _is_digit(fmt[pos]):
        pos += 1
    return (int(fmt[start:pos]) if pos > start else 0), pos


def parse_spec(fmt: str, pos: int, args: Iterator[Any]) -> tuple[FormatSpec, int]:
    """Parse the conversion options starting at ``pos`` (just after ``%``).

    ``*`` widths and precisions are taken from the iterator ``args``.
    Returns the spec and the index of the conversion letter, which equals
    ``len(fmt)`` when the letter is missing.
    """
    spec = FormatSpec()
    end = len(fmt)
    while pos < end and fmt[pos] in _FLAG_CHARS:
        spec.flags |= _FLAG_CHARS[fmt[pos]]
        pos += 1
    if pos < end and fmt[pos] == "*":
        spec.width = int(_next_arg(args))
        pos += 1
    else:
        spec.width, pos = _read_number(fmt, pos)
    if pos < end and fmt[pos] == ".":
        pos += 1
        if pos < end and fmt[pos] == "*":
            spec.precision = int(_next_arg(args))
            pos += 1
        elif pos < end and _is_digit(fmt[pos]):
            spec.precision, pos = _read_number(fmt, pos)
    start = pos
    while pos < end and fmt[pos] in "lh":
        pos += 1
    spec.length = fmt[start:pos]
    return spec, pos


def _conv_d(spec: FormatSpec, args: Iterator[Any]) -> str:
    nb = int(_next_arg(args))
    digits = str(abs(nb))
    total = max(len(str(nb)), spec.precision)
    plus = spec.has(Flag.PLUS)
    if nb > 0 and plus:
        total += 1
    sign = "-" if nb < 0 else ("+" if plus else "")
    shown = "" if nb == 0 and spec.precision == 0 else digits
    return spec.justify(total, sign + spec.zeros(len(digits)) + shown)


def _put_str(spec: FormatSpec, value: Any) -> str:
    text = NIL_TEXT if value is None else str(value)
    if spec.precision > 0:
        text = text[: spec.precision]
    return spec.justify(len(text), text)


def _conv_s(spec: FormatSpec, args: Iterator[Any]) -> str:
    return _put_str(spec, _next_arg(args))


def _conv_big_s(spec: FormatSpec, args: Iterator[Any]) -> str:
    separator = " " if spec.has(Flag.SPACE) else "\n"
    parts = []
    for item in _next_arg(args):
        if item is None:
            break
        parts.append(_put_str(spec, item) + separator)
    return "".join(parts)


def _conv_c(spec: FormatSpec, args: Iterator[Any]) -> str:
    value = _next_arg(args)
    if isinstance(value, int):
        char = chr(value & 0xFF)
    elif isinstance(value, str) and len(value) == 1:
        char = value
    else:
        raise TypeError("%c requires an int or a single character")
    return spec.justify(1, char)


def _hex(spec: FormatSpec, args: Iterator[Any], upper: bool) -> str:
    nb = int(_next_arg(args)) & _UINT_MASK
    digits = format(nb, "X" if upper else "x")
    prefix = ("0X" if upper else "0x") if spec.has(Flag.ALT) else ""
    return (
        spec.pad(len(prefix) + len(digits)) + prefix + spec.zeros(len(digits)) + digits
    )


def _conv_x(spec: FormatSpec, args: Iterator[Any]) -> str:
    return _hex(spec, args, upper=False)


def _conv_big_x(spec: FormatSpec, args: Iterator[Any]) -> str:
    return _hex(spec, args, upper=True)


def _group_by_four(bits: str) -> str:
    head = len(bits) % 4 or 4
    groups = [bits[:head]]
    groups.extend(bits[i : i + 4] for i in range(head, len(bits), 4))
    return " ".join(groups)


def _binary_zeros(length: int, precision: int, grouped: bool) -> str:
    out = []
    i = precision
    while i > length:
        if grouped and i % 5 == 0:
            if i < precision:
                out.append(" ")
            i -= 1
        out.append("0")
        i -= 1
    return "".join(out)


def _conv_b(spec: FormatSpec, args: Iterator[Any]) -> str:
    nb = int(_next_arg(args)) & _UINT_MASK
    grouped = spec.has(Flag.SPACE)
    bits = format(nb, "b")
    if grouped:
        bits = _group_by_four(bits)
    precision = spec.precision
    if grouped:
        precision += int(precision / 4)
    prefix = "0b" if spec.has(Flag.ALT) else ""
    return (
        spec.pad(len(prefix) + max(len(bits), precision))
        + prefix
        + _binary_zeros(len(bits), precision, grouped)
        + bits
    )


def _fixed_point(value: float, depth: int) -> tuple[str, str]:
    magnitude = abs(value)
    if not math.isfinite(magnitude):
        return str(magnitude), ""
    if depth == 0:
        return str(int(magnitude)), ""
    step = Decimal(1).scaleb(-depth)
    rounded = Decimal(repr(magnitude)).quantize(step, rounding=ROUND_HALF_UP)
    whole, _, frac = f"{rounded:f}".partition(".")
    return whole, frac.ljust(depth, "0")


def _conv_f(spec: FormatSpec, args: Iterator[Any]) -> str:
    nb = float(_next_arg(args))
    depth = spec.precision if spec.precision > -1 else DEFAULT_FLOAT_PRECISION
    point = "." if spec.precision != 0 or spec.has(Flag.ALT) else ""
    whole, frac = _fixed_point(nb, depth)
    sign = "-" if nb < 0 and (int(whole) if whole.isdigit() else 1) + int(frac or 0) else ""
    body = sign + whole + point + frac
    return spec.justify(len(body), body)


def _conv_p(spec: FormatSpec, args: Iterator[Any]) -> str:
    value = _next_arg(args)
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value
    else:
        address = id(value)
    digits = format(address & _POINTER_MASK, "x")
    return spec.pad(2 + len(digits)) + "0x" + spec.zeros(len(digits)) + digits


_Converter = Callable[[FormatSpec, Iterator[Any]], str]

_CONVERSIONS: dict[str, _Converter] = {
    "d": _conv_d,
    "i": _conv_d,
    "s": _conv_s,
    "S": _conv_big_s,
    "x": _conv_x,
    "X": _conv_big_x,
    "b": _conv_b,
    "f": _conv_f,
    "p": _conv_p,
    "c": _conv_c,
}


def format_string(fmt: str | None, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    if fmt is None:
        return ""
    values = iter(args)
    out = []
    pos = 0
    while True:
        percent = fmt.find("%", pos)
        if percent == -1:
            out.append(fmt[pos:])
            break
        out.append(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent + 1, values)
        if pos >= len(fmt):
            break
        converter = _CONVERSIONS.get(fmt[pos])
        if converter is not None:
            out.append(converter(spec, values))
        pos += 1
    return "".join(out)


def printf(fmt: str | None, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def dprintf(stream: Union[TextIO, int], fmt: str | None, *args: Any) -> int:
    """Write the formatted text to a text stream or a file descriptor.

    Returns the number of characters written. A negative file descriptor
    raises OSError with ``errno.EBADF``.
    """
    if isinstance(stream, int):
        if stream < 0:
            raise OSError(errno.EBADF, os.strerror(errno.EBADF))
        text = format_string(fmt, *args)
        os.write(stream, text.encode("utf-8"))
        return len(text)
    text = format_string(fmt, *args)
    stream.write(text)
    return len(text)