"""A printf-style formatter with the library's own set of conversions.

Supported conversions: ``%c %s %% %d %i %u %x %X %o %b %p %f %e %E %n``,
the ``l`` length prefix for ``d i s c`` and the ``#``, space, ``-`` and
``+`` flags, each with its own set of conversions. An unknown conversion
character is echoed to the error stream and then printed as ordinary text.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from sketchpad.expfmt import (
    format_exponent,
    format_exponent_upper,
    format_plus_exponent,
    format_plus_exponent_upper,
    format_space_exponent,
    format_space_exponent_upper,
)
from sketchpad.numfmt import (
    format_float,
    format_plus_float,
    format_space_float,
    nbr_hexa,
    nbr_hexa_upper,
    nbr_octal,
    put_all_nbr,
    put_binary,
    put_nbr,
    put_plus_nbr,
    space_put_all_nbr,
)


@dataclass(frozen=True)
class Formatted:
    """Text produced by a format call, split by the stream it goes to."""

    out: str
    err: str = ""

    def __str__(self) -> str:
        return self.out


def _wrap(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


class _Arguments:
    """Hands out the variadic arguments in order, converted as C would read them."""

    def __init__(self, args: Iterable[Any]) -> None:
        self._args = iter(args)

    def _next(self) -> Any:
        try:
            return next(self._args)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def _integer(self) -> int:
        value = self._next()
        if not isinstance(value, int):
            raise TypeError(f"expected an integer argument, got {type(value).__name__}")
        return value

    def int32(self) -> int:
        return _wrap(self._integer(), 32)

    def int64(self) -> int:
        return _wrap(self._integer(), 64)

    def double(self) -> float:
        value = self._next()
        if not isinstance(value, (int, float)):
            raise TypeError(f"expected a number argument, got {type(value).__name__}")
        return float(value)

    def text(self) -> str:
        value = self._next()
        if not isinstance(value, str):
            raise TypeError(f"expected a string argument, got {type(value).__name__}")
        return value.split("\0", 1)[0]

    def char(self) -> str:
        value = self._next()
        if isinstance(value, int):
            return chr(value & 0xFF)
        if isinstance(value, str) and len(value) == 1:
            return value
        raise TypeError(f"expected a character argument, got {value!r}")


_Render = Callable[[_Arguments], str]


def _text(args: _Arguments) -> str:
    return args.text()


def _char(args: _Arguments) -> str:
    return args.char()


def _signed(args: _Arguments) -> str:
    return put_all_nbr(args.int32())


def _hexa(args: _Arguments) -> str:
    return nbr_hexa(args.int32())


def _hexa_upper(args: _Arguments) -> str:
    return nbr_hexa_upper(args.int32())


def _octal_int(args: _Arguments) -> str:
    return nbr_octal(args.int32())


def _float(args: _Arguments) -> str:
    return format_float(args.double())


def _exp(args: _Arguments) -> str:
    return format_exponent(args.double())


def _exp_upper(args: _Arguments) -> str:
    return format_exponent_upper(args.double())


def _unsigned_digits(args: _Arguments) -> str:
    return put_nbr(args.int32())


def _plus_number(args: _Arguments) -> str:
    return put_plus_nbr(args.int32())


_PLAIN: dict[str, _Render] = {
    "c": _char,
    "%": lambda args: "%",
    "s": _text,
    "x": _hexa,
    "X": _hexa_upper,
    "o": lambda args: nbr_octal(args.int64()),
    "u": _signed,
    "f": _float,
    "p": lambda args: "0x" + nbr_hexa(args.int32()),
    "d": _signed,
    "i": _signed,
    "n": lambda args: "",
    "e": _exp,
    "E": _exp_upper,
    "b": lambda args: put_binary(args.int64()),
}

_FLAGGED: dict[str, dict[str, _Render]] = {
    "l": {"i": _signed, "d": _signed, "s": _text, "c": _char},
    "#": {
        "x": lambda args: "0x" + nbr_hexa(args.int32()),
        "X": lambda args: "0X" + nbr_hexa_upper(args.int32()),
        "f": _float,
        "e": _exp,
        "E": _exp_upper,
        "o": lambda args: "0" + nbr_octal(args.int64()),
        "d": _signed,
        "i": _signed,
        "s": _text,
        "c": _char,
    },
    " ": {
        "x": _hexa,
        "X": _hexa_upper,
        "o": _octal_int,
        "f": lambda args: format_space_float(args.double()),
        "e": lambda args: format_space_exponent(args.double()),
        "E": lambda args: format_space_exponent_upper(args.double()),
        "p": lambda args: " 0x" + nbr_hexa_upper(args.int32()),
        "d": lambda args: space_put_all_nbr(args.int32()),
        "i": lambda args: space_put_all_nbr(args.int32()),
        "u": _unsigned_digits,
        "s": _text,
        "c": _char,
    },
    "-": {
        "x": _hexa,
        "X": _hexa_upper,
        "o": _octal_int,
        "f": _float,
        "e": _exp,
        "E": _exp_upper,
        "d": _unsigned_digits,
        "i": _unsigned_digits,
        "u": _unsigned_digits,
        "p": lambda args: "0x" + nbr_hexa(_wrap(int(args.double()), 32)),
        "s": _text,
        "c": _char,
    },
    "+": {
        "f": lambda args: format_plus_float(args.double()),
        "e": lambda args: format_plus_exponent(args.double()),
        "E": lambda args: format_plus_exponent_upper(args.double()),
        "x": _hexa,
        "X": _hexa_upper,
        "o": _octal_int,
        "d": _plus_number,
        "i": _plus_number,
        "u": _plus_number,
        "s": _text,
        "c": _char,
    },
}


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else "\0"


def _convert(text: str, start: int, args: _Arguments) -> tuple[str, str, int]:
    """Render the conversion whose '%' is at ``start``.

    Returns the output text, the error text and how far to advance.
    """
    kind = _char_at(text, start + 1)
    plain = _PLAIN.get(kind)
    if plain is not None:
        return plain(args), "", 2
    flagged = _FLAGGED.get(kind)
    if flagged is not None:
        render = flagged.get(_char_at(text, start + 2))
        if render is None:
            return "", "", 1
        return render(args), "", 3
    return "", kind, 1


def sprintf(fmt: str, *args: Any) -> Formatted:
    """Format ``args`` according to ``fmt`` and return the produced text."""
    text = fmt.split("\0", 1)[0]
    arguments = _Arguments(args)
    out: list[str] = []
    err: list[str] = []
    where = 0
    while where < len(text):
        if text[where] != "%":
            out.append(text[where])
            where += 1
            continue
        piece, error, advance = _convert(text, where, arguments)
        out.append(piece)
        err.append(error)
        where += advance
    return Formatted("".join(out), "".join(err))


def printf(fmt: str, *args: Any) -> None:
    """Format ``args`` according to ``fmt`` and write the result out."""
    result = sprintf(fmt, *args)
    sys.stdout.write(result.out)
    if result.err:
        sys.stderr.write(result.err)