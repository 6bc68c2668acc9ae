from __future__ import annotations

from typing import Sequence, TypeVar

from divguard.errors import DivisionByZeroError, OutOfBoundsError

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

T = TypeVar("T")


def wrap_int32(value: int) -> int:
    """Reduce an integer to the signed 32-bit range (two's complement)."""
    return (value - INT_MIN) % (2 ** 32) + INT_MIN


def divide(dividend: int, divisor: int) -> int:
    """Integer division truncating toward zero, on 32-bit operands."""
    dividend, divisor = wrap_int32(dividend), wrap_int32(divisor)
    if divisor == 0:
        raise DivisionByZeroError(f"{dividend} / {divisor}")

    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    # INT_MIN / -1 overflows back to INT_MIN
    return wrap_int32(quotient)


def remainder(dividend: int, divisor: int) -> int:
    """Integer remainder on 32-bit operands; the sign follows the dividend."""
    dividend, divisor = wrap_int32(dividend), wrap_int32(divisor)
    if divisor == 0:
        raise DivisionByZeroError(f"{dividend} % {divisor}")

    rem = abs(dividend) % abs(divisor)
    return -rem if dividend < 0 else rem


def element_at(values: Sequence[T], index: int) -> T:
    if index < 0 or index >= len(values):
        raise OutOfBoundsError(index, len(values), f"values[{index}]")
    return values[index]
