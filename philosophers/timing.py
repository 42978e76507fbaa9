"""Millisecond clock, a precise sleep and lenient integer parsing."""

from __future__ import annotations

import time

_WHITESPACE = frozenset(" \t\n\v\f\r")
_UINT64_MASK = (1 << 64) - 1
_INT32_MASK = (1 << 32) - 1


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def parse_int(text: str) -> int:
    """Parse a leading integer the way a C-style ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Nothing parsed yields 0. The value
    accumulates modulo 2**64 and is narrowed to a signed 32-bit result.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    negative = False
    if position < length and text[position] in "+-":
        negative = text[position] == "-"
        position += 1
    result = 0
    for char in text[position:]:
        if not "0" <= char <= "9":
            break
        result = (result * 10 + ord(char) - ord("0")) & _UINT64_MASK
    if negative:
        result = -result & _UINT64_MASK
    return _to_int32(result)


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(milliseconds: int) -> None:
    """Sleep for at least ``milliseconds``, finishing with short polls."""
    target = current_time_ms() + milliseconds
    if milliseconds > 5:
        time.sleep((milliseconds - 5) / 1000)
    while current_time_ms() < target:
        time.sleep(0.0001)