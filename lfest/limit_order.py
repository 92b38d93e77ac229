"""Limit (maker) orders and their price-time priority."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Union

from .currency import Currency, QuoteCurrency
from .errors import OrderError, OrderErrorKind
from .order_meta import ExchangeOrderMeta, RePricing
from .order_status import Filled, FilledQuantity, NewOrder, Pending
from .order_update import FullyFilled, LimitOrderFill, PartiallyFilled
from .side import Side
from .timestamp import OrderId, TimestampNs
from .utils import NoUserOrderId

OrderState = Union[NewOrder, Pending, Filled]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def price_time_priority_ordering(o0: LimitOrder, o1: LimitOrder) -> int:
    """Compare two pending orders by limit price, then by time of receipt.

    Returns a negative number, zero or a positive number, so it works with
    ``functools.cmp_to_key``.
    """
    for order in (o0, o1):
        if not isinstance(order.state, Pending):
            raise ValueError("only pending orders can be ordered by priority")
    if o0.limit_price != o1.limit_price:
        return -1 if o0.limit_price < o1.limit_price else 1
    ts0 = o0.state.meta.ts_exchange_received
    ts1 = o1.state.meta.ts_exchange_received
    return _sign(ts0.value - ts1.value)


@dataclass
class LimitOrder:
    """A limit order resting at ``limit_price`` for ``remaining_quantity``.

    ``user_order_id`` is any value the user chooses; the exchange ignores it.
    """

    side: Side
    limit_price: QuoteCurrency
    remaining_quantity: Currency
    user_order_id: Any = field(default_factory=NoUserOrderId)
    re_pricing: RePricing = RePricing.GOOD_TIL_CROSSING
    state: OrderState = field(default_factory=NewOrder)

    def __post_init__(self) -> None:
        if not isinstance(self.side, Side):
            raise TypeError(f"side must be Side, got {self.side!r}")
        if not isinstance(self.limit_price, QuoteCurrency):
            raise TypeError(
                f"limit_price must be QuoteCurrency, got {type(self.limit_price).__name__}"
            )
        if not isinstance(self.remaining_quantity, Currency):
            raise TypeError(
                "remaining_quantity must be a Currency, "
                f"got {type(self.remaining_quantity).__name__}"
            )
        if not isinstance(self.re_pricing, RePricing):
            raise TypeError(f"re_pricing must be RePricing, got {self.re_pricing!r}")
        if not isinstance(self.state, (NewOrder, Pending, Filled)):
            raise TypeError(f"invalid order state: {self.state!r}")
        if not self.limit_price.is_positive():
            raise OrderError(OrderErrorKind.LIMIT_PRICE_LTE_ZERO)
        if isinstance(self.state, NewOrder):
            if not self.remaining_quantity.is_positive():
                raise OrderError(OrderErrorKind.ORDER_QUANTITY_LTE_ZERO)
        elif self.remaining_quantity.is_negative():
            raise ValueError("remaining quantity must not be negative")

    def _zero(self) -> Currency:
        return type(self.remaining_quantity).zero(self.remaining_quantity.decimals)

    def into_pending(self, meta: ExchangeOrderMeta) -> LimitOrder:
        """The order as received by the exchange, in the ``Pending`` state."""
        if not isinstance(self.state, NewOrder):
            raise ValueError("only a new order can become pending")
        return replace(self, state=Pending(meta), re_pricing=RePricing.GOOD_TIL_CROSSING)

    def set_remaining_quantity(self, new_qty: Currency) -> None:
        """Change the quantity of a new order; it must stay above zero."""
        if not isinstance(self.state, NewOrder):
            raise ValueError("only a new order can have its quantity changed")
        if type(new_qty) is not type(self.remaining_quantity):
            raise TypeError(
                f"expected {type(self.remaining_quantity).__name__}, "
                f"got {type(new_qty).__name__}"
            )
        if not new_qty.is_positive():
            raise ValueError("the new quantity must be greater than zero")
        self.remaining_quantity = new_qty

    def fill(
        self, filled_quantity: Currency, fee: Currency, ts_ns: TimestampNs
    ) -> LimitOrderFill:
        """Fill ``filled_quantity`` at the limit price and report the update.

        The order itself is updated in place; the returned update holds a
        snapshot of it, in the ``Filled`` state once nothing remains.
        """
        if not isinstance(self.state, Pending):
            raise ValueError("only a pending order can be filled")
        if type(filled_quantity) is not type(self.remaining_quantity):
            raise TypeError(
                f"expected {type(self.remaining_quantity).__name__}, "
                f"got {type(filled_quantity).__name__}"
            )
        if not isinstance(fee, self.remaining_quantity.paired_currency):
            raise TypeError(
                f"fee must be {self.remaining_quantity.paired_currency.__name__}, "
                f"got {type(fee).__name__}"
            )
        if not filled_quantity.is_positive():
            raise ValueError("Filled quantity must be greater than zero.")
        if filled_quantity > self.remaining_quantity:
            raise ValueError(
                "The filled quantity can not be greater than the limit order quantity"
            )

        self.remaining_quantity = self.remaining_quantity - filled_quantity

        previous = self.state.filled_quantity
        if previous.is_filled():
            cumulative_qty = previous.cumulative_qty + filled_quantity
            avg_price = previous.avg_price
        else:
            cumulative_qty = filled_quantity
            avg_price = self.limit_price
        self.state.filled_quantity = FilledQuantity(cumulative_qty, avg_price)

        if self.remaining_quantity.is_zero():
            order_after_fill = replace(
                self,
                remaining_quantity=self._zero(),
                state=Filled(self.state.meta, ts_ns, self.limit_price, cumulative_qty),
            )
            return FullyFilled(filled_quantity, fee, order_after_fill)

        snapshot = replace(self, state=replace(self.state))
        return PartiallyFilled(filled_quantity, fee, snapshot)

    def filled_quantity(self) -> Currency:
        """The quantity filled so far."""
        if isinstance(self.state, Filled):
            return self.state.filled_qty
        if isinstance(self.state, Pending) and self.state.filled_quantity.is_filled():
            return self.state.filled_quantity.cumulative_qty
        return self._zero()

    def total_quantity(self) -> Currency:
        """The total quantity the order is for, filled or not."""
        if isinstance(self.state, Filled):
            return self.state.filled_qty
        if isinstance(self.state, Pending) and self.state.filled_quantity.is_filled():
            return self.remaining_quantity + self.state.filled_quantity.cumulative_qty
        return self.remaining_quantity

    def id(self) -> OrderId:
        """The order id assigned by the exchange."""
        if isinstance(self.state, NewOrder):
            raise ValueError("a new order has no exchange order id yet")
        return self.state.meta.id

    def notional(self) -> Currency:
        """The value of the remaining quantity at the limit price."""
        paired = self.remaining_quantity.paired_currency
        return paired.convert_from(self.remaining_quantity, self.limit_price)

    def __str__(self) -> str:
        return (
            f"user_id: {self.user_order_id!r}, limit {self.side} "
            f"{self.remaining_quantity} @ {self.limit_price}, state: {self.state!r}"
        )