"""Maker and taker fees."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .fixed import FixedDecimal


class FeeKind(Enum):
    """Whether a fee applies to limit (maker) or market (taker) orders."""

    MAKER = "Maker"
    TAKER = "Taker"


@dataclass(frozen=True)
class Fee:
    """A fee rate as a fraction of the traded notional value."""

    value: FixedDecimal
    kind: FeeKind

    def __post_init__(self) -> None:
        if not isinstance(self.value, FixedDecimal):
            raise TypeError(f"fee value must be FixedDecimal, got {type(self.value).__name__}")
        if not isinstance(self.kind, FeeKind):
            raise TypeError(f"fee kind must be FeeKind, got {self.kind!r}")

    @classmethod
    def maker(cls, value: FixedDecimal) -> Fee:
        """The fee paid by limit orders."""
        return cls(value, FeeKind.MAKER)

    @classmethod
    def taker(cls, value: FixedDecimal) -> Fee:
        """The fee paid by market orders."""
        return cls(value, FeeKind.TAKER)