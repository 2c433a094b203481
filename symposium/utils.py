"""Shared helpers: philosopher states, lenient integer parsing and the clock."""

from __future__ import annotations

import re
import time
from enum import Enum

_INT_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_INT_BITS = 32


class State(Enum):
    """What a philosopher is doing; the value is the text printed for it."""

    EATING = "is eating"
    SLEEPING = "is sleeping"
    THINKING = "is thinking"
    HUNGRY = "has taken a fork"
    DEAD = "died"

    @property
    def message(self) -> str:
        return self.value


def _wrap_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def parse_int(text: str) -> int:
    """Parse a leading integer the lenient way.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a 32-bit signed integer.
    """
    match = _INT_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    total = int(digits) if digits else 0
    if sign == "-":
        total = -total
    return _wrap_int32(total)


def now_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000