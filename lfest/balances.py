"""User balances including the margin reserved for positions and orders."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .currency import Currency

_log = logging.getLogger(__name__)


@dataclass
class Balances:
    """Wallet balances of a trader, all in the margin currency."""

    available: Currency
    position_margin: Currency
    order_margin: Currency
    total_fees_paid: Currency

    @classmethod
    def from_initial(cls, init_balance: Currency) -> Balances:
        """Start with ``init_balance`` available and nothing reserved."""
        zero = type(init_balance).zero(init_balance.decimals)
        return cls(
            available=init_balance,
            position_margin=zero,
            order_margin=zero,
            total_fees_paid=zero,
        )

    def __str__(self) -> str:
        return (
            f"available: {self.available}, position_margin: {self.position_margin}, "
            f"order_margin: {self.order_margin}"
        )

    def _zero(self) -> Currency:
        return type(self.available).zero(self.available.decimals)

    def sum(self) -> Currency:
        """Sum of available balance and both margins."""
        return self.available + self.position_margin + self.order_margin

    def check_state(self) -> None:
        """Raise ``ValueError`` if any balance is negative."""
        for name in ("available", "position_margin", "order_margin"):
            if getattr(self, name).is_negative():
                raise ValueError(f"{name} must not be negative: {getattr(self, name)}")

    def _require_positive(self, amount: Currency, what: str) -> None:
        if not amount.is_positive():
            raise ValueError(f"{what} must be greater than zero, got {amount}")

    def account_for_fee(self, fee: Currency) -> None:
        """Pay ``fee`` from the available balance; a negative fee is received."""
        _log.debug("account_for_fee: %s", fee)
        self.check_state()
        new_available = self.available - fee
        if new_available.is_negative():
            raise ValueError("fee exceeds the available balance")
        self.available = new_available
        self.total_fees_paid = self.total_fees_paid + fee

    def try_reserve_order_margin(self, init_margin: Currency) -> bool:
        """Move ``init_margin`` into order margin; ``False`` if not enough is available."""
        _log.debug("try_reserve_order_margin %s on %s", init_margin, self)
        self._require_positive(init_margin, "order margin")
        self.check_state()
        if init_margin > self.available:
            return False
        self.available = self.available - init_margin
        self.order_margin = self.order_margin + init_margin
        return True

    def free_order_margin(self, margin: Currency) -> None:
        """Release ``margin`` from order margin back into the available balance."""
        _log.debug("free_order_margin: %s on %s", margin, self)
        self._require_positive(margin, "order margin")
        self.check_state()
        if self.order_margin < margin:
            raise ValueError("cannot free more order margin than is reserved")
        self.order_margin = self.order_margin - margin
        self.available = self.available + margin

    def free_position_margin(self, margin: Currency) -> None:
        """Release ``margin`` from position margin back into the available balance."""
        _log.debug("free_position_margin: %s on %s", margin, self)
        self._require_positive(margin, "position margin")
        self.check_state()
        if self.position_margin < margin:
            raise ValueError("cannot free more position margin than is reserved")
        self.position_margin = self.position_margin - margin
        self.available = self.available + margin

    def try_reserve_position_margin(self, margin: Currency) -> bool:
        """Move ``margin`` into position margin; ``False`` if not enough is available."""
        _log.debug("try_reserve_position_margin %s on %s", margin, self)
        self._require_positive(margin, "position margin")
        self.check_state()
        if margin > self.available:
            return False
        self.available = self.available - margin
        self.position_margin = self.position_margin + margin
        return True

    def apply_pnl(self, pnl: Currency) -> None:
        """Add realised profit or loss to the available balance."""
        _log.debug("apply_pnl: %s, self: %s", pnl, self)
        new_available = self.available + pnl
        if new_available.is_negative():
            raise ValueError("loss exceeds the available balance")
        self.available = new_available