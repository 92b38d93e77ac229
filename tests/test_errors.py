import pytest

from lfest.errors import (
    ConfigError,
    ConfigErrorKind,
    Error,
    ErrorKind,
    FilterError,
    FilterErrorKind,
    OrderError,
    OrderErrorKind,
    RiskError,
    RiskErrorKind,
)


def test_config_error_message():
    err = ConfigError(ConfigErrorKind.INVALID_LEVERAGE)
    assert str(err) == "The specified leverage must be > 0"
    assert err.message == str(err)


def test_order_error_message():
    err = OrderError(OrderErrorKind.ORDER_QUANTITY_LTE_ZERO)
    assert str(err) == "order size is less than or equal zero."


def test_good_till_crossing_message_holds_prices():
    err = OrderError(
        OrderErrorKind.GOOD_TILL_CROSSING_REJECTED_ORDER,
        limit_price="101.0 Quote",
        away_market_quotation_price="100.0 Quote",
    )
    assert "limit_price 101.0 Quote" in str(err)
    assert str(err).endswith("100.0 Quote")
    assert err.details["limit_price"] == "101.0 Quote"


def test_filter_wrapped_in_order_error_is_transparent():
    inner = FilterError(FilterErrorKind.PRICE_TOO_LOW)
    outer = OrderError(OrderErrorKind.FILTER, filter=inner)
    assert str(outer) == str(inner)
    assert outer.details["filter"] is inner


def test_all_errors_are_errors():
    for err in (
        ConfigError(ConfigErrorKind.INVALID_ORDER_LIMITS),
        FilterError(FilterErrorKind.INVALID_BID_ASK_SPREAD),
        OrderError(OrderErrorKind.QUANTITY_TOO_LOW),
        RiskError(RiskErrorKind.LIQUIDATE),
        Error(ErrorKind.RATE_LIMIT_REACHED),
    ):
        with pytest.raises(Error) as info:
            raise err
        assert info.value is err


def test_equality():
    assert RiskError(RiskErrorKind.LIQUIDATE) == RiskError(RiskErrorKind.LIQUIDATE)
    assert not (
        RiskError(RiskErrorKind.LIQUIDATE)
        == RiskError(RiskErrorKind.NOT_ENOUGH_AVAILABLE_BALANCE)
    )
    assert Error(ErrorKind.ORDER_ID_NOT_FOUND, order_id=1) == Error(
        ErrorKind.ORDER_ID_NOT_FOUND, order_id=1
    )
    assert not (
        Error(ErrorKind.ORDER_ID_NOT_FOUND, order_id=1)
        == Error(ErrorKind.ORDER_ID_NOT_FOUND, order_id=2)
    )


def test_missing_detail_rejected():
    with pytest.raises(TypeError):
        FilterError(FilterErrorKind.PRICE_STEP_SIZE, price="1")
    with pytest.raises(TypeError):
        Error(ErrorKind.ORDER_ID_NOT_FOUND)


def test_wrong_kind_rejected():
    with pytest.raises(TypeError):
        ConfigError(RiskErrorKind.LIQUIDATE)
    with pytest.raises(TypeError):
        Error(ConfigErrorKind.INVALID_LEVERAGE)


def test_kind_is_kept():
    err = Error(ErrorKind.UNABLE_TO_CREATE_DECIMAL)
    assert err.kind is ErrorKind.UNABLE_TO_CREATE_DECIMAL
    assert str(err) == "Unable to create `Decimal`"