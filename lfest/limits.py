"""Order message rate limits."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigError, ConfigErrorKind

_MAX_ORDERS_PER_SECOND = 65_535


@dataclass(frozen=True)
class OrderRateLimits:
    """Limits order submission, e.g. to 10 orders per second."""

    orders_per_second: int = 10

    def __post_init__(self) -> None:
        if isinstance(self.orders_per_second, bool) or not isinstance(
            self.orders_per_second, int
        ):
            raise TypeError("orders_per_second must be an integer")
        if self.orders_per_second == 0:
            raise ConfigError(ConfigErrorKind.INVALID_ORDER_LIMITS)
        if not 0 < self.orders_per_second <= _MAX_ORDERS_PER_SECOND:
            raise ValueError(
                f"orders_per_second must be between 1 and {_MAX_ORDERS_PER_SECOND}"
            )