import pytest

from lfest.currency import BaseCurrency, QuoteCurrency
from lfest.order_update import FullyFilled, LimitOrderFill, PartiallyFilled

ORDER = "order-state"


def test_partially_filled_display():
    qty = BaseCurrency(5, 1)
    fee = QuoteCurrency(1, 2)
    fill = PartiallyFilled(qty, fee, ORDER)
    assert str(fill) == (
        f"PartiallyFilled( filled_quantity: {qty}, fee: {fee}, order_after_fill: {ORDER})"
    )


def test_fully_filled_display():
    qty = BaseCurrency(5, 1)
    fee = QuoteCurrency(1, 2)
    fill = FullyFilled(qty, fee, ORDER)
    assert str(fill) == (
        f"FullyFilled( filled_quantity: {qty}, fee: {fee}, order_after_fill: {ORDER})"
    )


def test_fill_fields_round_trip():
    qty = QuoteCurrency(3, 0)
    fee = BaseCurrency(2, 4)
    fill = PartiallyFilled(filled_quantity=qty, fee=fee, order_after_fill=ORDER)
    assert fill.filled_quantity == qty
    assert fill.fee == fee
    assert fill.order_after_fill == ORDER


def test_variants_are_distinct():
    qty = BaseCurrency(1, 0)
    fee = QuoteCurrency(0, 0)
    partial = PartiallyFilled(qty, fee, ORDER)
    full = FullyFilled(qty, fee, ORDER)
    assert partial == PartiallyFilled(qty, fee, ORDER)
    assert (partial == full) is False
    assert partial.is_fully_filled is False
    assert full.is_fully_filled is True


def test_base_class_cannot_be_instantiated():
    with pytest.raises(TypeError):
        LimitOrderFill(BaseCurrency(1, 0), QuoteCurrency(0, 0), ORDER)