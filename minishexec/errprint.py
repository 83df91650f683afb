"""A minimal printf for diagnostics written to standard error."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _int32(value: int) -> int:
    value &= _UINT32
    return value - 0x100000000 if value >= 0x80000000 else value


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"missing argument for '%{spec}'") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        value = _next_arg(args, spec)
        if isinstance(value, str):
            return value[:1] or "\0"
        return chr(int(value) & 0xFF)
    if spec == "s":
        value = _next_arg(args, spec)
        return "(null)" if value is None else str(value)
    if spec == "p":
        value = _next_arg(args, spec)
        address = 0 if value is None else int(value) & _UINT64
        return "(nil)" if address == 0 else f"0x{address:x}"
    if spec in ("d", "i"):
        return str(_int32(int(_next_arg(args, spec))))
    if spec == "u":
        return str(int(_next_arg(args, spec)) & _UINT32)
    if spec in ("x", "X"):
        return format(int(_next_arg(args, spec)) & _UINT32, spec)
    return "%" + spec


def format_message(fmt: str, *args: Any) -> str:
    """Expand the %c %s %p %d %i %u %x %X %% conversions in ``fmt``.

    Unknown conversions are kept as written. A lone trailing ``%`` is an error.
    """
    out: list[str] = []
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        out.append(_convert(spec, arg_iter))
    return "".join(out)


def eprintf(fmt: str, *args: Any) -> int:
    """Write the formatted message to standard error; return its length."""
    message = format_message(fmt, *args)
    sys.stderr.write(message)
    sys.stderr.flush()
    return len(message)