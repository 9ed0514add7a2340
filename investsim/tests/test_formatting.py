import pytest

from investsim.core.formatting import format_currency, format_percent


@pytest.mark.parametrize(
    ("value", "currency", "expected"),
    [
        (1234.5, "BRL", "R$ 1.234,50"),
        (1234.5, "USD", "$1,234.50"),
        (1000000, "EUR", "€ 1.000.000,00"),
        (0, "BRL", "R$ 0,00"),
        (1234.5, "usd", "$1,234.50"),
        (1234.5, "JPY", "JPY 1,234.50"),
    ],
)
def test_format_currency(value, currency, expected):
    assert format_currency(value, currency) == expected


def test_format_currency_defaults_to_brl():
    assert format_currency(99.999) == "R$ 100,00"


def test_negative_amounts_carry_a_leading_sign():
    assert format_currency(-1234.5, "USD") == "-$1,234.50"
    assert format_currency(-0.001, "USD") == "$0.00"


def test_format_percent():
    assert format_percent(12.5) == "12.50%"
    assert format_percent(12.5, digits=0) == "12%"
    assert format_percent(12.5, signed=True) == "+12.50%"
    assert format_percent(-3, signed=True) == "-3.00%"
