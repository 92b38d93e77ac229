"""Fixed-point decimal numbers with a constant number of fractional digits."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

_NUMBER_PATTERN = re.compile(r"^([+-]?)(\d+)(?:\.(\d*))?$")


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


@functools.total_ordering
@dataclass(frozen=True)
class FixedDecimal:
    """A decimal stored as an integer scaled by ``10 ** decimals``."""

    scaled: int
    decimals: int

    def __post_init__(self) -> None:
        if isinstance(self.scaled, bool) or not isinstance(self.scaled, int):
            raise TypeError("scaled value must be an integer")
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise TypeError("decimals must be an integer")
        if self.decimals < 0:
            raise ValueError("decimals must not be negative")

    @property
    def _factor(self) -> int:
        return 10**self.decimals

    @classmethod
    def try_from_scaled(cls, integer: int, scale: int, decimals: int) -> FixedDecimal:
        """Build ``integer * 10 ** -scale`` with the given precision.

        Digits beyond the precision are truncated toward zero.
        """
        if scale < 0:
            raise ValueError("scale must not be negative")
        if decimals < 0:
            raise ValueError("decimals must not be negative")
        if scale <= decimals:
            return cls(integer * 10 ** (decimals - scale), decimals)
        return cls(_trunc_div(integer, 10 ** (scale - decimals)), decimals)

    @classmethod
    def zero(cls, decimals: int) -> FixedDecimal:
        """The value zero."""
        return cls(0, decimals)

    @classmethod
    def one(cls, decimals: int) -> FixedDecimal:
        """The value one."""
        return cls(10**decimals, decimals)

    @classmethod
    def from_str_radix(cls, text: str, radix: int, decimals: int) -> FixedDecimal:
        """Parse a decimal string such as ``"-12.5"``; only radix 10 is supported."""
        if radix != 10:
            raise ValueError(f"unsupported radix: {radix}")
        match = _NUMBER_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"invalid decimal: {text!r}")
        sign, whole, fraction = match.groups()
        fraction = fraction or ""
        if len(fraction) > decimals:
            raise ValueError(
                f"{text!r} has more than {decimals} fractional digits"
            )
        scaled = int(whole) * 10**decimals + int(fraction.ljust(decimals, "0") or "0")
        return cls(-scaled if sign == "-" else scaled, decimals)

    def is_zero(self) -> bool:
        """Whether the value is zero."""
        return self.scaled == 0

    def is_negative(self) -> bool:
        """Whether the value is below zero."""
        return self.scaled < 0

    def is_positive(self) -> bool:
        """Whether the value is above zero."""
        return self.scaled > 0

    def quantize_round_to_zero(self, quantum: FixedDecimal) -> FixedDecimal:
        """Round to a multiple of ``quantum``, toward zero."""
        self._same_precision(quantum)
        steps = _trunc_div(self.scaled, quantum.scaled)
        return FixedDecimal(steps * quantum.scaled, self.decimals)

    def to_float(self) -> float:
        """The value as a float."""
        return self.scaled / self._factor

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self.scaled != 0

    def _same_precision(self, other: FixedDecimal) -> None:
        if other.decimals != self.decimals:
            raise ValueError(
                f"precision mismatch: {self.decimals} and {other.decimals} decimals"
            )

    def __add__(self, other: object) -> FixedDecimal:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._same_precision(other)
        return FixedDecimal(self.scaled + other.scaled, self.decimals)

    def __sub__(self, other: object) -> FixedDecimal:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._same_precision(other)
        return FixedDecimal(self.scaled - other.scaled, self.decimals)

    def __mul__(self, other: object) -> FixedDecimal:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._same_precision(other)
        return FixedDecimal(
            _trunc_div(self.scaled * other.scaled, self._factor), self.decimals
        )

    def __truediv__(self, other: object) -> FixedDecimal:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._same_precision(other)
        return FixedDecimal(
            _trunc_div(self.scaled * self._factor, other.scaled), self.decimals
        )

    def __mod__(self, other: object) -> FixedDecimal:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._same_precision(other)
        quotient = _trunc_div(self.scaled, other.scaled)
        return FixedDecimal(self.scaled - quotient * other.scaled, self.decimals)

    def __neg__(self) -> FixedDecimal:
        return FixedDecimal(-self.scaled, self.decimals)

    def __abs__(self) -> FixedDecimal:
        return FixedDecimal(abs(self.scaled), self.decimals)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._same_precision(other)
        return self.scaled < other.scaled

    def __str__(self) -> str:
        sign = "-" if self.scaled < 0 else ""
        magnitude = abs(self.scaled)
        if self.decimals == 0:
            return f"{sign}{magnitude}"
        whole, fraction = divmod(magnitude, self._factor)
        return f"{sign}{whole}.{fraction:0{self.decimals}d}"