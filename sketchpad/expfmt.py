"""Scientific-notation rendering for the ``%e`` family of conversions.

Values are handled in single precision and given six fractional digits.
Values below one in magnitude use a negative exponent; zero and small
negative values have no such form and are rejected.
"""

from __future__ import annotations

import math
from typing import Callable

from sketchpad.numfmt import (
    _float32,
    count_zeros,
    int_power,
    mantissa,
    negative_exponent,
    negative_mantissa,
    put_nbr,
    space_mantissa,
)

_PRECISION = 6

_Mantissa = Callable[[int, int, float], str]


def _plus_mantissa(i: int, i2: int, f2: float) -> str:
    return "+" + mantissa(i, i2, f2)


def _normalise(value: float) -> tuple[float, int]:
    shifted = 0
    while value > 10 or value < -10:
        value = _float32(value / 10.0)
        shifted += 1
    return value, shifted


def _parts(value: float) -> tuple[int, int, float]:
    whole = int(value)
    fraction = _float32(value - whole)
    digits = int(_float32(fraction * _float32(int_power(10, _PRECISION))))
    return whole, digits, fraction


def _exponent(f: float, positive: _Mantissa, upper: bool) -> str:
    if not math.isfinite(f):
        raise ValueError(f"cannot write {f!r} in exponent form")
    value, shifted = _normalise(_float32(f))
    if int(value) == 0:
        try:
            scaled, science = count_zeros(value)
        except ValueError:
            raise ValueError(f"cannot write {f!r} in exponent form") from None
        value, _ = _normalise(scaled)
        whole, digits, fraction = _parts(value)
        return negative_exponent(whole, digits, fraction, science, upper)
    whole, digits, fraction = _parts(value)
    if whole < 0:
        body = negative_mantissa(whole, digits, fraction)
    else:
        body = positive(whole, digits, fraction)
    letter = "E" if upper else "e"
    marker = f"{letter}+0" if shifted < 10 else f"{letter}+"
    return body + marker + put_nbr(shifted)


def format_exponent(f: float) -> str:
    """The ``%e`` conversion."""
    return _exponent(f, mantissa, upper=False)


def format_exponent_upper(f: float) -> str:
    """The ``%E`` conversion."""
    return _exponent(f, mantissa, upper=True)


def format_plus_exponent(f: float) -> str:
    """The ``%+e`` conversion."""
    return _exponent(f, _plus_mantissa, upper=False)


def format_plus_exponent_upper(f: float) -> str:
    """The ``%+E`` conversion."""
    return _exponent(f, _plus_mantissa, upper=True)


def format_space_exponent(f: float) -> str:
    """The ``% e`` conversion."""
    return _exponent(f, space_mantissa, upper=False)


def format_space_exponent_upper(f: float) -> str:
    """The ``% E`` conversion."""
    return _exponent(f, space_mantissa, upper=True)