# lfest

Building blocks for a simulated leveraged perpetual futures exchange, meant for
backtesting trading strategies. Monetary values are fixed-point decimals held
as scaled integers; multiplication and division truncate toward zero at the
chosen number of decimal places.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `lfest.fixed`: `FixedDecimal`, a signed decimal stored as an integer scaled by
  `10 ** decimals`. Built with `FixedDecimal.try_from_scaled(integer, scale, decimals)`,
  `zero`, `one` or `from_str_radix` (radix 10 only). Supports `+ - * / %`,
  negation, `abs`, comparison, `quantize_round_to_zero` and `to_float`. Mixing
  precisions raises `ValueError`.
- `lfest.currency`: `BaseCurrency` and `QuoteCurrency`, both subclasses of
  `Currency`. Created as `QuoteCurrency(integer, scale, decimals)` (decimals
  default to 5). Amounts of different currencies never mix; doing so raises
  `TypeError`. `convert_from` converts between them at a price, and `pnl`
  computes profit and loss: `QuoteCurrency.pnl` for linear futures,
  `BaseCurrency.pnl` for inverse futures. `QuoteCurrency` also provides
  `liquidation_price_long`, `liquidation_price_short` and `new_weighted_price`.
- `lfest.balances`: `Balances`, the available balance plus the margin reserved
  for positions and for open orders. `Balances.from_initial` starts from a
  wallet balance; `try_reserve_order_margin`, `free_order_margin`,
  `try_reserve_position_margin`, `free_position_margin`, `account_for_fee` and
  `apply_pnl` move money around, and `check_state` raises `ValueError` if any
  balance is negative.
- `lfest.fee`: `Fee` with `Fee.maker(...)` and `Fee.taker(...)`, tagged by `FeeKind`.
- `lfest.leverage`: `Leverage`, a whole number from 1 to 255, with
  `init_margin_req()` returning `1 / leverage`.
- `lfest.limits`: `OrderRateLimits`, orders per second (default 10, zero is rejected).
- `lfest.market_order`: `MarketOrder` with `into_pending` and `into_filled`.
- `lfest.limit_order`: `LimitOrder` with `into_pending`, `set_remaining_quantity`,
  `fill`, `filled_quantity`, `total_quantity`, `id` and `notional`, plus
  `price_time_priority_ordering`, a comparison function usable with
  `functools.cmp_to_key`.
- `lfest.order_status`: the order states `NewOrder`, `Pending` and `Filled`, and
  `FilledQuantity`.
- `lfest.order_update`: `PartiallyFilled` and `FullyFilled`, the two kinds of
  `LimitOrderFill` returned by `LimitOrder.fill`.
- `lfest.order_meta`: `ExchangeOrderMeta` (order id and receive time) and the
  `RePricing` rule `GOOD_TIL_CROSSING`.
- `lfest.side`: `Side.BUY` / `Side.SELL`, `inverted()` and `from_taker_quantity()`.
- `lfest.timestamp`: `TimestampNs` (with `floor_to_nearest_second`) and `OrderId`
  (with `incr`, returning the next id).
- `lfest.errors`: `Error` and its subclasses `ConfigError`, `FilterError`,
  `OrderError` and `RiskError`. Each carries a `kind` from an enum
  (`ErrorKind`, `ConfigErrorKind`, `FilterErrorKind`, `OrderErrorKind`,
  `RiskErrorKind`) and any `details` that kind needs.
- `lfest.utils`: `decimal_from_f64`, `scale` and `NoUserOrderId`.

## Examples

```python
from lfest.currency import BaseCurrency, QuoteCurrency

price = QuoteCurrency(100, 0, 5)
qty = BaseCurrency(5, 1, 5)

# 0.5 units of base currency at a price of 100 are worth 50 in quote currency.
assert QuoteCurrency.convert_from(qty, price) == QuoteCurrency(50, 0, 5)

# Linear futures: a long of 5 units entered at 100 and exited at 110.
pnl = QuoteCurrency.pnl(QuoteCurrency(100, 0, 5), QuoteCurrency(110, 0, 5), BaseCurrency(5, 0, 5))
assert pnl == QuoteCurrency(50, 0, 5)
```

Filling a limit order:

```python
from lfest.currency import BaseCurrency, QuoteCurrency
from lfest.limit_order import LimitOrder
from lfest.order_meta import ExchangeOrderMeta
from lfest.order_update import PartiallyFilled
from lfest.side import Side
from lfest.timestamp import OrderId, TimestampNs

order = LimitOrder(Side.BUY, QuoteCurrency(100, 0), BaseCurrency(2, 0))
pending = order.into_pending(ExchangeOrderMeta(OrderId(0), TimestampNs(0)))
update = pending.fill(BaseCurrency(1, 0), QuoteCurrency.zero(), TimestampNs(1))
assert isinstance(update, PartiallyFilled)
assert pending.filled_quantity() == BaseCurrency(1, 0)
assert pending.total_quantity() == BaseCurrency(2, 0)
```

Invalid orders are rejected with an exception:

```python
from lfest.currency import BaseCurrency
from lfest.errors import OrderError, OrderErrorKind
from lfest.market_order import MarketOrder
from lfest.side import Side

try:
    MarketOrder(Side.BUY, BaseCurrency(0, 0, 5))
except OrderError as exc:
    assert exc.kind is OrderErrorKind.ORDER_QUANTITY_LTE_ZERO
```

## What this package does not do

It provides the value types, orders and balances only. There is no exchange
object, no order book or matching engine, no processing of market updates such
as trades or quotes, no price or quantity filters, no position or risk
tracking, no loading of market data, and no command-line tool.