import pytest

from lfest.fixed import FixedDecimal
from lfest.side import Side


def test_side_from_taker_quantity():
    assert Side.from_taker_quantity(FixedDecimal.try_from_scaled(1, 0, 4)) is Side.BUY
    assert Side.from_taker_quantity(FixedDecimal.try_from_scaled(-1, 0, 4)) is Side.SELL


def test_side_from_taker_quantity_numbers():
    assert Side.from_taker_quantity(3) is Side.BUY
    assert Side.from_taker_quantity(-0.5) is Side.SELL


def test_side_from_taker_quantity_zero():
    with pytest.raises(ValueError):
        Side.from_taker_quantity(FixedDecimal.zero(4))
    with pytest.raises(ValueError):
        Side.from_taker_quantity(0)


def test_side_display():
    assert str(Side.from_taker_quantity(1)) == "Buy"
    assert str(Side.from_taker_quantity(-1)) == "Sell"
    assert str(Side.SELL.inverted()) == "Buy"


def test_inverted():
    assert Side.BUY.inverted() is Side.SELL
    assert Side.SELL.inverted() is Side.BUY
    assert Side.BUY.inverted().inverted() is Side.BUY