"""Account leverage."""

from __future__ import annotations

from dataclasses import dataclass

from .currency import DEFAULT_DECIMALS
from .errors import ConfigError, ConfigErrorKind
from .fixed import FixedDecimal

_MAX_LEVERAGE = 255


@dataclass(frozen=True)
class Leverage:
    """A whole-number leverage of at least one."""

    value: int
    decimals: int = DEFAULT_DECIMALS

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("leverage must be an integer")
        if self.value < 1:
            raise ConfigError(ConfigErrorKind.INVALID_LEVERAGE)
        if self.value > _MAX_LEVERAGE:
            raise ValueError(f"leverage must not exceed {_MAX_LEVERAGE}")

    @property
    def decimal(self) -> FixedDecimal:
        """The leverage as a ``FixedDecimal``."""
        return FixedDecimal.try_from_scaled(self.value, 0, self.decimals)

    def init_margin_req(self) -> FixedDecimal:
        """The initial margin requirement, ``1 / leverage``."""
        return FixedDecimal.one(self.decimals) / self.decimal

    def __str__(self) -> str:
        return str(self.decimal)