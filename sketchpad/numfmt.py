"""Integer and fixed-point number rendering used by the formatter.

Every function returns the text it renders instead of writing it out.
Single-precision arithmetic is emulated where the formatter works on
32-bit floats, so digits come out the same as with a C ``float``.
"""

from __future__ import annotations

import math
import struct

_PRECISION = 6
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_DECIMAL = "0123456789"


def _float32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _positional(nb: int, base: int, alphabet: str) -> str:
    """Digits of a non-negative integer in the given base."""
    digits = []
    while True:
        nb, digit = divmod(nb, base)
        digits.append(alphabet[digit])
        if not nb:
            break
    return "".join(reversed(digits))


def _stray(magnitude: int) -> str:
    """The single byte written as ``magnitude + '0'`` for negative inputs."""
    return chr((magnitude + ord("0")) & 0xFF)


def put_nbr(nb: int) -> str:
    """Decimal digits of ``nb`` without any sign."""
    return _positional(abs(nb), 10, _DECIMAL)


def put_all_nbr(nb: int) -> str:
    """Decimal representation with a leading minus for negatives."""
    return ("-" if nb < 0 else "") + put_nbr(nb)


def put_plus_nbr(nb: int) -> str:
    """Decimal with a '+' marker before numbers of two digits or more."""
    prefix = "-" if nb < 0 else ""
    magnitude = abs(nb)
    if magnitude > 9:
        return prefix + "+" + put_nbr(magnitude)
    return prefix + put_nbr(magnitude)


def space_put_all_nbr(nb: int) -> str:
    """Decimal with a leading space for non-negative numbers."""
    return ("-" if nb < 0 else " ") + put_nbr(nb)


def nbr_hexa(nb: int) -> str:
    """Lower-case hexadecimal digits."""
    if nb < 0:
        return "-" + _stray(-nb) + _positional(-nb, 16, _HEX_LOWER)
    return _positional(nb, 16, _HEX_LOWER)


def nbr_hexa_upper(nb: int) -> str:
    """Upper-case hexadecimal digits."""
    if nb < 0:
        return "-" + _stray(-nb) + _positional(-nb, 16, _HEX_UPPER)
    return _positional(nb, 16, _HEX_UPPER)


def nbr_octal(nb: int) -> str:
    """Octal digits; a negative number yields only its marker pair."""
    if nb < 0:
        return "-" + _stray(-nb)
    return _positional(nb, 8, _DECIMAL)


def put_binary(nb: int) -> str:
    """Binary digits with a leading minus for negatives."""
    return ("-" if nb < 0 else "") + _positional(abs(nb), 2, "01")


def round_last_digit(n: int) -> int:
    """Add the last digit to ``n`` when it is five or more."""
    last = abs(n) % 10 * (1 if n >= 0 else -1)
    if last >= 5:
        return n + last
    return n


def int_power(nb: int, p: int) -> int:
    """``nb`` to the power ``p``; negative powers give 0."""
    if p == 0:
        return 1
    if p < 0:
        return 0
    return nb**p


def count_zeros(f: float) -> tuple[float, int]:
    """Scale ``f`` by ten until it reaches 1, in single precision.

    Returns the scaled value and the number of multiplications.
    """
    value = _float32(f)
    if value <= 0:
        raise ValueError(f"cannot scale non-positive value {f!r}")
    count = 0
    while value < 1.0:
        value = _float32(value * 10)
        count += 1
    return value, count


def fraction_exponent(f: float) -> int:
    """Number of zeros between the decimal point and the first digit of ``f``."""
    value = abs(f)
    if value == 0:
        raise ValueError("zero has no leading digit")
    count = 0
    while value < 1.0:
        value *= 10
        count += 1
    return count - 1


def _split_double(f: float) -> tuple[int, int, float, int]:
    whole = int(f)
    fraction = f - whole
    science = fraction_exponent(fraction) if fraction != 0 else 0
    digits = int(fraction * int_power(10, _PRECISION))
    return whole, digits, fraction, science


def _zero_padded(prefix: str, whole: int, digits: int, fraction: float, science: int) -> str:
    padding = "0" * science if fraction < 0.1 else ""
    return f"{prefix}{put_nbr(whole)}.{padding}{put_nbr(digits)}"


def format_float(f: float) -> str:
    """Render ``f`` with six fractional digits, the ``%f`` conversion."""
    whole, digits, fraction, science = _split_double(f)
    prefix = "-" if whole < 0 else ""
    return _zero_padded(prefix, whole, digits, fraction, science)


def format_space_float(f: float) -> str:
    """The ``% f`` conversion: a space stands for the sign of positives."""
    whole, digits, fraction, science = _split_double(f)
    prefix = "-" if whole < 0 else " "
    return _zero_padded(prefix, whole, digits, fraction, science)


def format_plus_float(f: float) -> str:
    """The ``%+f`` conversion."""
    whole, digits, fraction, science = _split_double(f)
    if whole < 0:
        return _zero_padded("-", whole, digits, fraction, science)
    return "+" + mantissa(whole, digits, fraction)


def format_precise_float(f: float, n: int) -> str:
    """Render ``f`` with ``n`` fractional digits in single precision."""
    value = _float32(f)
    whole = int(value)
    fraction = _float32(value - whole)
    digits = int(_float32(fraction * _float32(int_power(10, n))))
    if digits < 1 and whole < 1:
        return "inf"
    if fraction < 0.1:
        return f"{put_nbr(whole)}.0{put_nbr(digits)}"
    return f"{put_nbr(whole)}.{put_nbr(digits)}"


def mantissa(i: int, i2: int, f2: float) -> str:
    """Whole and fractional digits joined by a point."""
    zero = "0" if f2 < 0.1 else ""
    return f"{put_nbr(i)}.{zero}{put_nbr(round_last_digit(i2))}"


def space_mantissa(i: int, i2: int, f2: float) -> str:
    """A mantissa preceded by a space."""
    return " " + mantissa(i, i2, f2)


def negative_mantissa(i: int, i2: int, f2: float) -> str:
    """A mantissa with a minus sign; the padding zero follows ``f2 > 0.1``."""
    zero = "0" if f2 > 0.1 else ""
    return f"-{put_nbr(i)}.{zero}{put_nbr(round_last_digit(i2))}"


def negative_exponent(i: int, i2: int, f2: float, science: int, upper: bool) -> str:
    """A mantissa followed by a negative exponent of ``science``."""
    marker = "E-" if upper else "e-"
    if 0 <= science < 10:
        exponent = "0" + put_nbr(science)
    else:
        exponent = put_nbr(science)
    return mantissa(i, i2, f2) + marker + exponent