"""Order side."""

from __future__ import annotations

import numbers
from enum import Enum
from typing import Any


class Side(Enum):
    """Side of an order."""

    BUY = "Buy"
    SELL = "Sell"

    def __str__(self) -> str:
        return self.value

    def inverted(self) -> Side:
        """The opposite side."""
        return Side.SELL if self is Side.BUY else Side.BUY

    @classmethod
    def from_taker_quantity(cls, qty: Any) -> Side:
        """The taker side of a trade given its signed quantity.

        Raises ``ValueError`` for a zero quantity.
        """
        if isinstance(qty, numbers.Real):
            is_zero, is_negative = qty == 0, qty < 0
        else:
            is_zero, is_negative = qty.is_zero(), qty.is_negative()
        if is_zero:
            raise ValueError("A trade quantity cannot be zero")
        return cls.SELL if is_negative else cls.BUY