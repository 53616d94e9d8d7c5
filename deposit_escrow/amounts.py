"""Checked Uint128 arithmetic for token amounts."""
from __future__ import annotations

from typing import Any

from .errors import ArithmeticFailure

UINT128_MAX = 2**128 - 1


def to_uint128(value: Any) -> int:
    """Coerce an int or decimal string into a Uint128 amount.

    Raises ``ArithmeticFailure`` for anything negative, too large, fractional
    or non-numeric. ``bool`` is rejected even though it is an ``int``.
    """
    if isinstance(value, bool):
        raise ArithmeticFailure(f"Invalid amount: {value!r}")
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise ArithmeticFailure(f"Invalid amount: {value!r}")
        value = int(value)
    if not isinstance(value, int):
        raise ArithmeticFailure(f"Invalid amount: {value!r}")
    if value < 0 or value > UINT128_MAX:
        raise ArithmeticFailure(f"Amount out of Uint128 range: {value}")
    return value


def checked_add(left: int, right: int) -> int:
    total = left + right
    if total > UINT128_MAX:
        raise ArithmeticFailure(f"Overflow: {left} + {right}")
    return total


def checked_sub(left: int, right: int) -> int:
    if right > left:
        raise ArithmeticFailure(f"Underflow: {left} - {right}")
    return left - right
