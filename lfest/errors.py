"""Errors raised by the exchange simulation."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar


class ConfigErrorKind(Enum):
    """Reasons a configuration is rejected."""

    INVALID_LEVERAGE = "The specified leverage must be > 0"
    INVALID_STARTING_BALANCE = "The provided starting balance must be > 0"
    INVALID_MIN_QUANTITY = (
        "The chosen `tick_size` of the quantity filter does not work with the chosen "
        "`min_quantity`. `min_quantity` must be a multiple of `step_size`"
    )
    INVALID_MIN_PRICE = "The chosen `min_price` must work with the chosen `tick_size`"
    INVALID_TICK_SIZE = "The chosen `tick` size is invalid."
    INVALID_UP_MULTIPLIER = "The chosen `multiplier_up` must be greater than 1"
    INVALID_DOWN_MULTIPLIER = "The chosen `multiplier_down` must be smaller than 1"
    INVALID_MAINTENANCE_MARGIN_FRACTION = "The maintenance margin fraction is invalid"
    INVALID_ORDER_LIMITS = "Invalid order limits"


class FilterErrorKind(Enum):
    """Reasons a market update fails the price and quantity filters."""

    PRICE_TOO_LOW = "Some price in MarketUpdate is too low."
    PRICE_TOO_HIGH = "Some price in MarketUpdate is too high."
    PRICE_STEP_SIZE = "Some price in MarketUpdate does not conform to the step size"
    INVALID_BID_ASK_SPREAD = "The bid ask spread does not exist in this MarketUpdate."


class OrderErrorKind(Enum):
    """Reasons a new order is rejected."""

    LIMIT_PRICE_BELOW_MULTIPLE = "The limit order price is lower than the low price multiple."
    LIMIT_PRICE_LTE_ZERO = "The limit price is less than or equal zero."
    LIMIT_PRICE_ABOVE_MULTIPLE = "The limit order price exceeds the maximum price multiple."
    GOOD_TILL_CROSSING_REJECTED_ORDER = (
        "The limit order `RePricing` was `GoodTillCrossing` leading to its rejection as "
        "the limit_price {limit_price} locks or crosses the away market quotation price "
        "{away_market_quotation_price}"
    )
    ORDER_QUANTITY_LTE_ZERO = "order size is less than or equal zero."
    QUANTITY_TOO_LOW = "The order quantity is too low"
    QUANTITY_TOO_HIGH = "The order quantity is too high"
    INVALID_QUANTITY_STEP_SIZE = "The order quantity does not conform to the step size"
    FILTER = "{filter}"


class RiskErrorKind(Enum):
    """Reasons the risk engine refuses an action."""

    NOT_ENOUGH_AVAILABLE_BALANCE = "The `Trader` does not have enough balance."
    LIQUIDATE = "The position will be liquidated!"


class ErrorKind(Enum):
    """General failures not covered by the specialised error classes."""

    USER_ORDER_ID_NOT_FOUND = "user order id not found"
    ORDER_ID_NOT_FOUND = "internal order id not found"
    ORDER_NO_LONGER_ACTIVE = "The order is no longer active"
    ACCOUNT_LOOKUP_FAILURE = "Failed to lookup account."
    AMEND_QTY_ALREADY_FILLED = (
        "The amended order quantity has already been filled in the existing order. "
        "Remaining order was cancelled."
    )
    WRONG_DECIMAL_PRECISION = "The constant decimal precision is incompatible"
    MAX_NUMBER_OF_ACTIVE_ORDERS = "The maximum number of active orders is reached"
    INTEGER_CONVERSION = "Could not convert the in"
    UNABLE_TO_CREATE_DECIMAL = "Unable to create `Decimal`"
    RATE_LIMIT_REACHED = "The order rate limit was reached for this period."
    INVALID_CANDLE_PRICES = "The provided prices for `Candle` don't make sense."


_REQUIRED_DETAILS: dict[Enum, tuple[str, ...]] = {
    ErrorKind.ORDER_ID_NOT_FOUND: ("order_id",),
    FilterErrorKind.PRICE_STEP_SIZE: ("price", "step_size"),
    OrderErrorKind.GOOD_TILL_CROSSING_REJECTED_ORDER: (
        "limit_price",
        "away_market_quotation_price",
    ),
    OrderErrorKind.FILTER: ("filter",),
}


class Error(Exception):
    """Base of every error raised by the package.

    ``kind`` names the failure; ``details`` holds the values some kinds carry.
    """

    kind_type: ClassVar[type[Enum]] = ErrorKind

    def __init__(self, kind: Enum, **details: Any) -> None:
        if not isinstance(kind, self.kind_type):
            raise TypeError(
                f"{type(self).__name__} expects a {self.kind_type.__name__}, got {kind!r}"
            )
        missing = [name for name in _REQUIRED_DETAILS.get(kind, ()) if name not in details]
        if missing:
            raise TypeError(f"{kind.name} requires details: {', '.join(missing)}")
        self.kind = kind
        self.details = dict(details)
        super().__init__(kind.value.format(**details))

    @property
    def message(self) -> str:
        """The human readable message."""
        return str(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.kind == other.kind
            and self.details == other.details
        )

    def __hash__(self) -> int:
        return hash((type(self), self.kind))

    def __repr__(self) -> str:
        extra = "".join(f", {key}={value!r}" for key, value in self.details.items())
        return f"{type(self).__name__}({self.kind.name}{extra})"


class ConfigError(Error):
    """The configuration is invalid."""

    kind_type = ConfigErrorKind


class FilterError(Error):
    """A market update violates the price or quantity filters."""

    kind_type = FilterErrorKind


class OrderError(Error):
    """A submitted order is invalid."""

    kind_type = OrderErrorKind


class RiskError(Error):
    """The risk engine refuses the action."""

    kind_type = RiskErrorKind