"""Display helpers for money and percentages."""

from typing import Dict, NamedTuple


class CurrencyStyle(NamedTuple):
    symbol: str
    thousands: str
    decimal: str
    spaced: bool


CURRENCY_STYLES: Dict[str, CurrencyStyle] = {
    "BRL": CurrencyStyle("R$", ".", ",", True),
    "USD": CurrencyStyle("$", ",", ".", False),
    "EUR": CurrencyStyle("€", ".", ",", True),
    "GBP": CurrencyStyle("£", ",", ".", False),
}


def format_currency(value: float, currency: str = "BRL") -> str:
    """Format ``value`` with two decimals in the currency's local convention.

    >>> format_currency(1234.5)
    'R$ 1.234,50'
    >>> format_currency(-1234.5, "USD")
    '-$1,234.50'
    """
    code = currency.upper()
    style = CURRENCY_STYLES.get(code, CurrencyStyle(code, ",", ".", True))

    digits = f"{abs(value):,.2f}"
    if style.thousands != "," or style.decimal != ".":
        digits = (
            digits.replace(",", "\0")
            .replace(".", style.decimal)
            .replace("\0", style.thousands)
        )

    sign = "-" if round(value, 2) < 0 else ""
    separator = " " if style.spaced else ""
    return f"{sign}{style.symbol}{separator}{digits}"


def format_percent(value: float, digits: int = 2, signed: bool = False) -> str:
    """Format a value that is already a percentage (12.5 -> ``'12.50%'``)."""
    text = f"{value:.{digits}f}%"
    if signed and value >= 0:
        return f"+{text}"
    return text
