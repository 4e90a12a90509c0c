from decimal import Decimal

import pytest

from storefront.integrations.gpwebpay import Amount, Currency, Operation, OrderNumber, ResponseUrl


def test_amount_is_sent_in_pennies():
    assert str(Amount(Decimal("1234.56"))) == "123456"
    assert str(Amount(Decimal("0.005"))) == "1"
    assert str(Amount(150, convert_to_pennies=False)) == "150"


def test_negative_amount_is_rejected():
    with pytest.raises(ValueError):
        Amount(Decimal("-1"))


def test_currency_is_three_digit_numeric_code():
    assert str(Currency(203)) == "203"
    assert str(Currency(36)) == "036"
    with pytest.raises(ValueError):
        Currency(0)
    with pytest.raises(ValueError):
        Currency(1000)


def test_order_number_limits():
    assert str(OrderNumber(1760000000)) == "1760000000"
    with pytest.raises(ValueError):
        OrderNumber(0)
    with pytest.raises(ValueError):
        OrderNumber(10 ** 15)


def test_response_url_must_be_absolute_and_short():
    assert str(ResponseUrl("https://shop.example.com/pay")) == "https://shop.example.com/pay"
    with pytest.raises(ValueError):
        ResponseUrl("/cs_CZ/orders/2610001/payment")
    with pytest.raises(ValueError):
        ResponseUrl("ftp://shop.example.com/pay")
    with pytest.raises(ValueError):
        ResponseUrl("https://shop.example.com/" + "a" * 300)


def test_operation_params_are_ordered():
    operation = Operation(
        order_number=OrderNumber(1760000000),
        amount=Amount(Decimal("10500")),
        currency=Currency(203),
        response_url=ResponseUrl("https://shop.example.com/cs_CZ/orders/2610001/payment?hash=abc"),
    )

    params = operation.to_params("8888880035")

    assert list(params) == [
        "MERCHANTNUMBER", "OPERATION", "ORDERNUMBER", "AMOUNT", "CURRENCY", "DEPOSITFLAG", "URL",
    ]
    assert params["OPERATION"] == "CREATE_ORDER"
    assert params["AMOUNT"] == "1050000"
    assert params["DEPOSITFLAG"] == "1"


def test_operation_without_response_url_has_no_url_param():
    operation = Operation(OrderNumber(1), Amount(1), Currency(978))
    assert "URL" not in operation.to_params("8888880035", deposit_flag=0)


def test_operation_requires_merchant_and_valid_deposit_flag():
    operation = Operation(OrderNumber(1), Amount(1), Currency(978))
    with pytest.raises(ValueError):
        operation.to_params("")
    with pytest.raises(ValueError):
        operation.to_params("8888880035", deposit_flag=2)
