"""
Money helpers.

Amounts are stored as integer minor units (cents) everywhere; Decimal is
only used when turning them into display strings.
"""
from decimal import Decimal

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

# Currencies without a minor unit (amount in cents == amount in units)
ZERO_DECIMAL_CURRENCIES = {"JPY", "KRW", "VND"}


def from_cents(cents: int, currency: str = "usd") -> Decimal:
    """
    Convert minor units to a Decimal amount in major units.

    Args:
        cents: Amount in minor units (e.g., 12999)
        currency: ISO currency code, any case

    Returns:
        Amount in major units (e.g., Decimal("129.99"))
    """
    if currency.upper() in ZERO_DECIMAL_CURRENCIES:
        return Decimal(cents)
    return Decimal(cents) / Decimal(100)


def format_cents(cents: int, currency: str = "usd") -> str:
    """Format minor units for display, e.g. ``12999, "usd"`` -> ``"$129.99"``."""
    code = currency.upper()
    amount = from_cents(cents, code)
    if code in ZERO_DECIMAL_CURRENCIES:
        formatted = f"{int(amount):,}"
    else:
        formatted = f"{amount:,.2f}"

    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{symbol}{formatted}"
    return f"{formatted} {code}"
