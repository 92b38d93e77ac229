"""Updates produced when a limit order gets filled."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .currency import Currency


@dataclass(frozen=True)
class LimitOrderFill:
    """A fill of a limit order; the fill price is always the limit price.

    ``fee`` is in the currency paired with the order quantity.
    """

    filled_quantity: Currency
    fee: Currency
    order_after_fill: Any

    _label: ClassVar[str] = "LimitOrderFill"

    def __post_init__(self) -> None:
        if type(self) is LimitOrderFill:
            raise TypeError("use PartiallyFilled or FullyFilled")

    @property
    def is_fully_filled(self) -> bool:
        """Whether the order has no quantity left."""
        return isinstance(self, FullyFilled)

    def __str__(self) -> str:
        return (
            f"{self._label}( filled_quantity: {self.filled_quantity}, fee: {self.fee}, "
            f"order_after_fill: {self.order_after_fill})"
        )


@dataclass(frozen=True)
class PartiallyFilled(LimitOrderFill):
    """The limit order was partially filled and remains pending."""

    _label: ClassVar[str] = "PartiallyFilled"


@dataclass(frozen=True)
class FullyFilled(LimitOrderFill):
    """The limit order was fully filled."""

    _label: ClassVar[str] = "FullyFilled"