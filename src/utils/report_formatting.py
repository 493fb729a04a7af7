"""
Display formatting for report values.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CURRENCY_SYMBOLS = {
    'USD': '$',
    'EUR': '€',
    'GBP': '£',
    'JPY': '¥',
    'INR': '₹',
    'KRW': '₩',
    'ILS': '₪',
    'VND': '₫',
    'CAD': 'CA$',
    'AUD': 'A$',
    'MXN': 'MX$',
    'NZD': 'NZ$',
    'HKD': 'HK$',
    'TWD': 'NT$',
    'BRL': 'R$',
}

TWO_PLACES = Decimal('0.01')


def format_amount(amount: Union[Decimal, int, float, str]) -> str:
    """Format an amount with two decimals and no grouping ("1234.50")."""
    value = Decimal(str(amount)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    return f"{value:.2f}"


def format_currency(amount: Union[Decimal, int, float, str], currency: str) -> str:
    """
    Format an amount in the given currency, en-US style.

    Known codes use their symbol ("$1,234.50"); other codes are written
    before the number ("CHF 1,234.50").
    """
    value = Decimal(str(amount)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    sign = '-' if value < 0 else ''
    number = f"{abs(value):,.2f}"
    code = currency.strip().upper()
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{sign}{symbol}{number}"
    return f"{sign}{code} {number}"


def format_date(date_str: str) -> str:
    """
    Convert a report date (MM/DD/YYYY) to YYYY-MM-DD.
    Strings in any other shape are returned unchanged.
    """
    if not date_str:
        return ''

    parts = date_str.split('/')
    if len(parts) == 3:
        month, day, year = parts
        return f"{year}-{month.zfill(2)}-{day.zfill(2)}"

    return date_str
