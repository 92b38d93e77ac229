"""Small helpers shared across the package."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import Error, ErrorKind
from .fixed import FixedDecimal


@dataclass(frozen=True)
class NoUserOrderId:
    """Placeholder when no user specified order id is required."""

    def __str__(self) -> str:
        return "NoUserId"


def decimal_from_f64(val: float, decimals: int) -> FixedDecimal:
    """Create a ``FixedDecimal`` from a float, rounding half away from zero."""
    if not math.isfinite(val):
        raise Error(ErrorKind.INTEGER_CONVERSION)
    scaled = math.copysign(math.floor(abs(val) * 10**decimals + 0.5), val)
    try:
        return FixedDecimal.try_from_scaled(int(scaled), decimals, decimals)
    except (ValueError, TypeError) as exc:
        raise Error(ErrorKind.UNABLE_TO_CREATE_DECIMAL) from exc


def scale(from_min: float, from_max: float, to_min: float, to_max: float, value: float) -> float:
    """Map ``value`` from the range ``[from_min, from_max]`` onto ``[to_min, to_max]``."""
    if from_min > from_max:
        raise ValueError("from_min must not exceed from_max")
    if to_min > to_max:
        raise ValueError("to_min must not exceed to_max")
    return to_min + ((value - from_min) * (to_max - to_min)) / (from_max - from_min)