"""Order metadata filled in by the exchange, and limit order re-pricing rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .timestamp import OrderId, TimestampNs


@dataclass(frozen=True)
class ExchangeOrderMeta:
    """Data the exchange attaches to an order when it receives it."""

    id: OrderId
    ts_exchange_received: TimestampNs

    def __post_init__(self) -> None:
        if not isinstance(self.id, OrderId):
            raise TypeError(f"id must be OrderId, got {type(self.id).__name__}")
        if not isinstance(self.ts_exchange_received, TimestampNs):
            raise TypeError(
                "ts_exchange_received must be TimestampNs, "
                f"got {type(self.ts_exchange_received).__name__}"
            )

    def __str__(self) -> str:
        return (
            f"ExchangeOrderMeta( id: {self.id}, "
            f"ts_ns_exchange_received: {self.ts_exchange_received})"
        )


class RePricing(Enum):
    """What to do when a limit order is priced at a marketable level.

    ``GOOD_TIL_CROSSING`` (post-only): an order that locks or crosses the
    away market quotation at entry is cancelled without any fills.
    """

    GOOD_TIL_CROSSING = "GoodTilCrossing"

    def __str__(self) -> str:
        return self.value