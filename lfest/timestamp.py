"""Timestamps in nanoseconds and exchange order ids."""

from __future__ import annotations

from dataclasses import dataclass

NANOS_PER_SECOND = 1_000_000_000


def _trunc_div(numerator: int, denominator: int) -> int:
    if denominator == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


@dataclass(frozen=True, order=True)
class TimestampNs:
    """A timestamp measured in nanoseconds."""

    value: int = 0

    def floor_to_nearest_second(self) -> TimestampNs:
        """Drop the sub-second part, toward zero."""
        remainder = abs(self.value) % NANOS_PER_SECOND
        if self.value < 0:
            remainder = -remainder
        return TimestampNs(self.value - remainder)

    def __add__(self, other: object) -> TimestampNs:
        if not isinstance(other, TimestampNs):
            return NotImplemented
        return TimestampNs(self.value + other.value)

    def __sub__(self, other: object) -> TimestampNs:
        if not isinstance(other, TimestampNs):
            return NotImplemented
        return TimestampNs(self.value - other.value)

    def __mul__(self, other: object) -> TimestampNs:
        if not isinstance(other, TimestampNs):
            return NotImplemented
        return TimestampNs(self.value * other.value)

    def __truediv__(self, other: object) -> TimestampNs:
        if not isinstance(other, TimestampNs):
            return NotImplemented
        return TimestampNs(_trunc_div(self.value, other.value))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class OrderId:
    """The exchange's global order sequence number."""

    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("an order id cannot be negative")

    def incr(self) -> OrderId:
        """The next order id in the sequence."""
        return OrderId(self.value + 1)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)