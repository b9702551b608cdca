"""Small string helpers: prefix comparison, integer parsing and word splitting.

Strings are read up to their first NUL character, if they hold one.
"""

from __future__ import annotations

from itertools import groupby, takewhile

_DIGITS = "0123456789"


def _c_string(text: str) -> str:
    """The part of ``text`` before its first NUL character."""
    return text.split("\0", 1)[0]


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _is_word_char(ch: str) -> bool:
    """Printable ASCII other than space and '!' belongs to a word."""
    return "!" < ch < "\x7f"


def strcmp(s1: str, s2: str) -> int:
    """Return 0 when the strings agree over their common length, else -1.

    A string therefore compares equal to any of its prefixes.
    """
    left, right = _c_string(s1), _c_string(s2)
    return 0 if all(a == b for a, b in zip(left, right)) else -1


def str_to_int(text: str) -> int:
    """Parse the leading decimal digits of ``text`` as a 32-bit integer.

    One leading '+' or '-' is skipped; the sign itself is not applied.
    Text without leading digits gives 0.
    """
    body = _c_string(text)
    if body[:1] in ("-", "+"):
        body = body[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, body))
    if not digits:
        return 0
    return _wrap_int32(int(digits))


def str_to_word_array(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces, '!', control or non-ASCII characters."""
    return [
        "".join(group)
        for is_word, group in groupby(_c_string(text), key=_is_word_char)
        if is_word
    ]


def strncpy(src: str, n: int) -> str:
    """Copy at most ``n`` characters of ``src``, padding with NULs to length ``n``."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    return _c_string(src)[:n].ljust(n, "\0")