"""Small string helpers with C-library semantics."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way atoi does, wrapping to 32 bits."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    number = int("".join(digits)) if digits else 0
    return _wrap_int32(number * sign)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtok(text: str, delims: str, index: int) -> tuple[str | None, int]:
    """Read the next token at or after ``index``.

    Returns the token and the index just past it, or None and the end
    index when only delimiters remain.
    """
    end = len(text)
    while index < end and text[index] in delims:
        index += 1
    if index >= end:
        return None, index
    start = index
    while index < end and text[index] not in delims:
        index += 1
    return text[start:index], index