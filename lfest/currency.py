"""Base and quote currency amounts backed by fixed-point decimals."""

from __future__ import annotations

import functools
from typing import ClassVar

from .fixed import FixedDecimal

DEFAULT_DECIMALS = 5


@functools.total_ordering
class Currency:
    """An amount of either the base or the quote currency of a symbol.

    Amounts of different currencies never mix: adding, comparing or
    dividing a ``BaseCurrency`` by a ``QuoteCurrency`` raises ``TypeError``.
    """

    __slots__ = ("_value",)

    paired_currency: ClassVar[type[Currency]]
    _label: ClassVar[str] = ""

    def __init__(
        self, integer: int = 0, scale: int = 0, decimals: int = DEFAULT_DECIMALS
    ) -> None:
        if type(self) is Currency:
            raise TypeError("use BaseCurrency or QuoteCurrency")
        self._check_scale(scale, decimals)
        self._value = FixedDecimal.try_from_scaled(integer, scale, decimals)

    @classmethod
    def _check_scale(cls, scale: int, decimals: int) -> None:
        """Hook for subclasses that restrict the scale."""

    @classmethod
    def from_decimal(cls, value: FixedDecimal) -> Currency:
        """Wrap an existing ``FixedDecimal``."""
        if cls is Currency:
            raise TypeError("use BaseCurrency or QuoteCurrency")
        if not isinstance(value, FixedDecimal):
            raise TypeError(f"expected FixedDecimal, got {type(value).__name__}")
        instance = cls.__new__(cls)
        instance._value = value
        return instance

    @classmethod
    def zero(cls, decimals: int = DEFAULT_DECIMALS) -> Currency:
        """The amount zero."""
        return cls.from_decimal(FixedDecimal.zero(decimals))

    @classmethod
    def one(cls, decimals: int = DEFAULT_DECIMALS) -> Currency:
        """The amount one."""
        return cls.from_decimal(FixedDecimal.one(decimals))

    @classmethod
    def from_str_radix(
        cls, text: str, radix: int, decimals: int = DEFAULT_DECIMALS
    ) -> Currency:
        """Parse an amount from text such as ``"27"`` or ``"-1.5"``."""
        return cls.from_decimal(FixedDecimal.from_str_radix(text, radix, decimals))

    @property
    def value(self) -> FixedDecimal:
        """The underlying decimal."""
        return self._value

    @property
    def decimals(self) -> int:
        """The number of fractional digits."""
        return self._value.decimals

    def is_zero(self) -> bool:
        """Whether the amount is zero."""
        return self._value.is_zero()

    def is_one(self) -> bool:
        """Whether the amount is exactly one."""
        return self == self.one(self.decimals)

    def is_positive(self) -> bool:
        """Whether the amount is above zero."""
        return self._value.is_positive()

    def is_negative(self) -> bool:
        """Whether the amount is below zero."""
        return self._value.is_negative()

    def signum(self) -> Currency:
        """-1, 0 or 1 in this currency, following the sign of the amount."""
        one = FixedDecimal.one(self.decimals)
        if self.is_negative():
            return self.from_decimal(-one)
        if self.is_zero():
            return self.zero(self.decimals)
        return self.from_decimal(one)

    def abs_sub(self, other: Currency) -> Currency:
        """``self - other`` if positive, else zero."""
        self._require_same(other)
        difference = self - other
        return difference if difference.is_positive() else self.zero(self.decimals)

    def quantize_round_to_zero(self, quantum: Currency) -> Currency:
        """Round to a multiple of ``quantum``, toward zero."""
        self._require_same(quantum)
        return self.from_decimal(self._value.quantize_round_to_zero(quantum._value))

    def _require_same(self, other: object) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )

    def _operand(self, other: object) -> FixedDecimal | None:
        if type(other) is type(self):
            return other._value  # type: ignore[union-attr]
        if isinstance(other, FixedDecimal):
            return other
        return None

    def __add__(self, other: object) -> Currency:
        if type(other) is not type(self):
            return NotImplemented
        return self.from_decimal(self._value + other._value)  # type: ignore[attr-defined]

    def __radd__(self, other: object) -> Currency:
        # Lets the built-in ``sum`` start from the integer zero.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Currency:
        if type(other) is not type(self):
            return NotImplemented
        return self.from_decimal(self._value - other._value)  # type: ignore[attr-defined]

    def __mul__(self, other: object) -> Currency:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self.from_decimal(self._value * operand)

    def __truediv__(self, other: object) -> Currency:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self.from_decimal(self._value / operand)

    def __mod__(self, other: object) -> Currency:
        if type(other) is not type(self):
            return NotImplemented
        return self.from_decimal(self._value % other._value)  # type: ignore[attr-defined]

    def __neg__(self) -> Currency:
        return self.from_decimal(-self._value)

    def __abs__(self) -> Currency:
        return self.from_decimal(abs(self._value))

    def __float__(self) -> float:
        return self._value.to_float()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __str__(self) -> str:
        return f"{self._value} {self._label}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"


def _require_positive_price(price: QuoteCurrency) -> None:
    if not isinstance(price, QuoteCurrency):
        raise TypeError(f"price must be QuoteCurrency, got {type(price).__name__}")
    if not price.is_positive():
        raise ValueError("price must be greater than zero")


class BaseCurrency(Currency):
    """The prefix currency of a symbol, e.g. BTC in BTCUSD.

    As margin currency it describes inverse futures.
    """

    __slots__ = ()
    _label = "Base"

    @classmethod
    def convert_from(
        cls, units: QuoteCurrency, price_per_unit: QuoteCurrency
    ) -> BaseCurrency:
        """Convert a quote amount into base units at the given price."""
        if not isinstance(units, QuoteCurrency):
            raise TypeError(f"units must be QuoteCurrency, got {type(units).__name__}")
        _require_positive_price(price_per_unit)
        return cls.from_decimal(units.value / price_per_unit.value)  # type: ignore[return-value]

    @classmethod
    def pnl(
        cls,
        entry_price: QuoteCurrency,
        exit_price: QuoteCurrency,
        quantity: QuoteCurrency,
    ) -> BaseCurrency:
        """Profit and loss of an inverse position; ``quantity`` is negative if short."""
        _require_positive_price(entry_price)
        _require_positive_price(exit_price)
        return cls.convert_from(quantity, entry_price) - cls.convert_from(
            quantity, exit_price
        )  # type: ignore[return-value]


class QuoteCurrency(Currency):
    """The postfix currency of a symbol, e.g. USD in BTCUSD.

    As margin currency it describes linear futures.
    """

    __slots__ = ()
    _label = "Quote"

    @classmethod
    def _check_scale(cls, scale: int, decimals: int) -> None:
        if scale > decimals:
            raise ValueError(f"scale {scale} exceeds the precision of {decimals} decimals")

    @classmethod
    def convert_from(
        cls, units: BaseCurrency, price_per_unit: QuoteCurrency
    ) -> QuoteCurrency:
        """Convert a base amount into its quote value at the given price."""
        if not isinstance(units, BaseCurrency):
            raise TypeError(f"units must be BaseCurrency, got {type(units).__name__}")
        _require_positive_price(price_per_unit)
        return cls.from_decimal(units.value * price_per_unit.value)  # type: ignore[return-value]

    @classmethod
    def pnl(
        cls,
        entry_price: QuoteCurrency,
        exit_price: QuoteCurrency,
        quantity: BaseCurrency,
    ) -> QuoteCurrency:
        """Profit and loss of a linear position; ``quantity`` is negative if short."""
        _require_positive_price(entry_price)
        _require_positive_price(exit_price)
        return cls.convert_from(quantity, exit_price) - cls.convert_from(
            quantity, entry_price
        )  # type: ignore[return-value]

    def _check_margin_req(self, maint_margin_req: FixedDecimal) -> None:
        if maint_margin_req > FixedDecimal.one(maint_margin_req.decimals):
            raise ValueError("maintenance margin requirement must not exceed one")

    def liquidation_price_long(self, maint_margin_req: FixedDecimal) -> QuoteCurrency:
        """The price at which a long entered at this price is liquidated."""
        self._check_margin_req(maint_margin_req)
        one = FixedDecimal.one(self.decimals)
        return self.from_decimal(self.value * (one - maint_margin_req))  # type: ignore[return-value]

    def liquidation_price_short(self, maint_margin_req: FixedDecimal) -> QuoteCurrency:
        """The price at which a short entered at this price is liquidated."""
        self._check_margin_req(maint_margin_req)
        one = FixedDecimal.one(self.decimals)
        return self.from_decimal(self.value * (one + maint_margin_req))  # type: ignore[return-value]

    @classmethod
    def new_weighted_price(
        cls,
        price_0: QuoteCurrency,
        weight_0: FixedDecimal,
        price_1: QuoteCurrency,
        weight_1: FixedDecimal,
    ) -> QuoteCurrency:
        """The average of two prices weighted by the given weights."""
        for price in (price_0, price_1):
            if not isinstance(price, QuoteCurrency):
                raise TypeError("prices must be QuoteCurrency")
            if price.is_negative():
                raise ValueError("prices must not be negative")
        for weight in (weight_0, weight_1):
            if not weight.is_positive():
                raise ValueError("weights must be greater than zero")
        total_weight = weight_0 + weight_1
        weighted = (price_0 * weight_0 + price_1 * weight_1) / total_weight
        if not weighted.is_positive():
            raise ValueError("weighted price must be greater than zero")
        return weighted  # type: ignore[return-value]


BaseCurrency.paired_currency = QuoteCurrency
QuoteCurrency.paired_currency = BaseCurrency