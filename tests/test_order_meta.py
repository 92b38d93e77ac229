import dataclasses

import pytest

from lfest.order_meta import ExchangeOrderMeta, RePricing
from lfest.timestamp import OrderId, TimestampNs


def test_exchange_order_meta_display():
    meta = ExchangeOrderMeta(OrderId(1), TimestampNs(2))
    assert str(meta) == "ExchangeOrderMeta( id: 1, ts_ns_exchange_received: 2)"


def test_exchange_order_meta_fields_round_trip():
    meta = ExchangeOrderMeta(OrderId(7), TimestampNs(11))
    assert meta.id == OrderId(7)
    assert meta.ts_exchange_received == TimestampNs(11)


def test_exchange_order_meta_equality():
    first = ExchangeOrderMeta(OrderId(3), TimestampNs(4))
    second = ExchangeOrderMeta(OrderId(3), TimestampNs(4))
    other = ExchangeOrderMeta(OrderId(3), TimestampNs(5))
    assert first == second
    assert (first == other) is False


def test_exchange_order_meta_is_immutable():
    meta = ExchangeOrderMeta(OrderId(0), TimestampNs(0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        meta.id = OrderId(1)


def test_exchange_order_meta_rejects_wrong_types():
    with pytest.raises(TypeError):
        ExchangeOrderMeta(1, TimestampNs(0))
    with pytest.raises(TypeError):
        ExchangeOrderMeta(OrderId(1), 0)


def test_re_pricing_display():
    re_pricing = RePricing(RePricing.GOOD_TIL_CROSSING.value)
    assert str(re_pricing) == "GoodTilCrossing"
    assert list(RePricing) == [RePricing.GOOD_TIL_CROSSING]