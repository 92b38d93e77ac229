"""Market (taker) orders."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Union

from .currency import Currency, QuoteCurrency
from .errors import OrderError, OrderErrorKind
from .order_meta import ExchangeOrderMeta
from .order_status import Filled, NewOrder, Pending
from .side import Side
from .timestamp import TimestampNs
from .utils import NoUserOrderId

OrderState = Union[NewOrder, Pending, Filled]


@dataclass(frozen=True)
class MarketOrder:
    """A market order for a positive ``quantity`` of base or quote currency.

    ``user_order_id`` is any value the user chooses; the exchange ignores it.
    """

    side: Side
    quantity: Currency
    user_order_id: Any = field(default_factory=NoUserOrderId)
    state: OrderState = field(default_factory=NewOrder)

    def __post_init__(self) -> None:
        if not isinstance(self.side, Side):
            raise TypeError(f"side must be Side, got {self.side!r}")
        if not isinstance(self.quantity, Currency):
            raise TypeError(
                f"quantity must be a Currency, got {type(self.quantity).__name__}"
            )
        if not isinstance(self.state, (NewOrder, Pending, Filled)):
            raise TypeError(f"invalid order state: {self.state!r}")
        if not self.quantity.is_positive():
            raise OrderError(OrderErrorKind.ORDER_QUANTITY_LTE_ZERO)

    def into_pending(self, meta: ExchangeOrderMeta) -> MarketOrder:
        """The order as received by the exchange, in the ``Pending`` state."""
        if not isinstance(self.state, NewOrder):
            raise ValueError("only a new order can become pending")
        return replace(self, state=Pending(meta))

    def into_filled(
        self, fill_price: QuoteCurrency, ts_ns_executed: TimestampNs
    ) -> MarketOrder:
        """The order fully filled at ``fill_price``."""
        if not isinstance(self.state, Pending):
            raise ValueError("only a pending order can be filled")
        return replace(
            self,
            state=Filled(self.state.meta, ts_ns_executed, fill_price, self.quantity),
        )

    def __str__(self) -> str:
        return (
            f"user_order_id: {self.user_order_id!r}, side: {self.side}, "
            f"quantity: {self.quantity}, state: {self.state}"
        )