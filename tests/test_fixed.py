import pytest
from hypothesis import given
from hypothesis import strategies as st

from lfest.fixed import FixedDecimal


def test_convert_decimals():
    assert FixedDecimal.try_from_scaled(10, 1, 0).scaled == 1


def test_try_from_scaled_expands_to_precision():
    assert FixedDecimal.try_from_scaled(314, 2, 5) == FixedDecimal(314000, 5)


def test_try_from_scaled_negative_scale_rejected():
    with pytest.raises(ValueError):
        FixedDecimal.try_from_scaled(1, -1, 5)


def test_display_format():
    assert str(FixedDecimal.try_from_scaled(1000, 0, 5)) == "1000.00000"
    assert str(FixedDecimal.try_from_scaled(100, 0, 1)) == "100.0"
    assert str(FixedDecimal.try_from_scaled(5, 0, 1)) == "5.0"


def test_display_negative_fraction():
    value = FixedDecimal.try_from_scaled(-5, 1, 2)
    assert str(value) == "-0.50"


def test_zero_and_one():
    assert FixedDecimal.zero(5).is_zero()
    assert not FixedDecimal.one(5).is_zero()
    assert FixedDecimal.one(5) == FixedDecimal.try_from_scaled(1, 0, 5)


def test_remainder_and_division():
    eight = FixedDecimal.try_from_scaled(8, 0, 5)
    five = FixedDecimal.try_from_scaled(5, 0, 5)
    two = FixedDecimal.try_from_scaled(2, 0, 5)
    assert eight % five == FixedDecimal.try_from_scaled(3, 0, 5)
    assert eight / two == FixedDecimal.try_from_scaled(4, 0, 5)


def test_multiplication():
    qty = FixedDecimal.try_from_scaled(5, 1, 4)
    price = FixedDecimal.try_from_scaled(100, 0, 4)
    assert qty * price == FixedDecimal.try_from_scaled(50, 0, 4)


def test_division_to_fraction():
    units = FixedDecimal.try_from_scaled(250, 0, 4)
    price = FixedDecimal.try_from_scaled(1000, 0, 4)
    assert units / price == FixedDecimal.try_from_scaled(25, 2, 4)


def test_division_truncates_at_zero_precision():
    one = FixedDecimal.one(0)
    two = FixedDecimal.try_from_scaled(2, 0, 0)
    assert one / two == FixedDecimal.zero(0)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        FixedDecimal.one(3) / FixedDecimal.zero(3)


def test_quantize_round_to_zero():
    d = FixedDecimal.try_from_scaled(1165, 2, 5)
    quantum = FixedDecimal.try_from_scaled(5, 1, 5)
    assert d.quantize_round_to_zero(quantum) == FixedDecimal.try_from_scaled(115, 1, 5)


def test_from_str_radix():
    assert FixedDecimal.from_str_radix("27", 10, 5) == FixedDecimal.try_from_scaled(27, 0, 5)
    assert FixedDecimal.from_str_radix("-3.14", 10, 5) == FixedDecimal.try_from_scaled(-314, 2, 5)


def test_from_str_radix_errors():
    with pytest.raises(ValueError):
        FixedDecimal.from_str_radix("abc", 10, 5)
    with pytest.raises(ValueError):
        FixedDecimal.from_str_radix("1.234", 10, 2)
    with pytest.raises(ValueError):
        FixedDecimal.from_str_radix("27", 16, 5)


def test_to_float():
    assert FixedDecimal.try_from_scaled(-100, 0, 5).to_float() == -100.0
    assert float(FixedDecimal.one(5)) == 1.0


def test_precision_mismatch():
    with pytest.raises(ValueError):
        FixedDecimal.one(2) + FixedDecimal.one(3)
    with pytest.raises(ValueError):
        FixedDecimal.one(2) < FixedDecimal.one(3)


def test_ordering_and_sign():
    a = FixedDecimal.try_from_scaled(-1, 0, 2)
    b = FixedDecimal.try_from_scaled(1, 0, 2)
    assert a < b
    assert b >= a
    assert a.is_negative()
    assert b.is_positive()
    assert abs(a) == b
    assert -b == a


@given(st.integers(min_value=-10**12, max_value=10**12), st.integers(min_value=0, max_value=8))
def test_str_round_trip(scaled, decimals):
    value = FixedDecimal(scaled, decimals)
    assert FixedDecimal.from_str_radix(str(value), 10, decimals) == value


@given(st.integers(min_value=-10**9, max_value=10**9), st.integers(min_value=1, max_value=10**6))
def test_remainder_invariant(a, b):
    x = FixedDecimal(a, 3)
    y = FixedDecimal(b, 3)
    q = x.quantize_round_to_zero(y)
    assert q + x % y == x