"""The stages an order passes through: new, pending and filled."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .currency import Currency, QuoteCurrency
from .order_meta import ExchangeOrderMeta
from .timestamp import TimestampNs


@dataclass(frozen=True)
class NewOrder:
    """An order the exchange has not received yet; no filters have been checked."""

    def __str__(self) -> str:
        return "NewOrder"


@dataclass(frozen=True)
class FilledQuantity:
    """The cumulative filled quantity and average fill price, or nothing if unfilled."""

    cumulative_qty: Optional[Currency] = None
    avg_price: Optional[QuoteCurrency] = None

    def __post_init__(self) -> None:
        if (self.cumulative_qty is None) != (self.avg_price is None):
            raise ValueError("cumulative_qty and avg_price must be given together")
        if self.avg_price is not None and not isinstance(self.avg_price, QuoteCurrency):
            raise TypeError(
                f"avg_price must be QuoteCurrency, got {type(self.avg_price).__name__}"
            )
        if self.cumulative_qty is not None and not isinstance(self.cumulative_qty, Currency):
            raise TypeError(
                f"cumulative_qty must be a Currency, got {type(self.cumulative_qty).__name__}"
            )

    @classmethod
    def unfilled(cls) -> FilledQuantity:
        """Nothing has been filled yet."""
        return cls()

    def is_filled(self) -> bool:
        """Whether some (or all) of the quantity has been filled."""
        return self.cumulative_qty is not None

    def __str__(self) -> str:
        if not self.is_filled():
            return "Unfilled"
        return (
            f"Filled( cumulative_qty: {self.cumulative_qty}, avg_price: {self.avg_price})"
        )


@dataclass
class Pending:
    """An order awaiting execution, carrying the exchange's metadata."""

    meta: ExchangeOrderMeta
    filled_quantity: FilledQuantity = field(default_factory=FilledQuantity.unfilled)

    def __str__(self) -> str:
        return f"Pending ( meta: {self.meta}, filled_quantity: {self.filled_quantity})"


@dataclass(frozen=True)
class Filled:
    """A fully filled order."""

    meta: ExchangeOrderMeta
    ts_ns_executed: TimestampNs
    avg_fill_price: QuoteCurrency
    filled_qty: Currency

    def __str__(self) -> str:
        return (
            f"Filled( meta: {self.meta}, ts_ns_executed: {self.ts_ns_executed}, "
            f"avg_fill_price: {self.avg_fill_price}, filled_qty: {self.filled_qty})"
        )