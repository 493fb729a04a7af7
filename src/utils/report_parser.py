"""
Row decoding for App Store financial reports.
"""
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from models.diagnostics import ParseDiagnostics
from models.transaction import Transaction
from utils.report_analyzer import split_row

logger = logging.getLogger(__name__)

__all__ = [
    'COLUMN_MAP',
    'REQUIRED_COLUMNS',
    'INTEGER_FIELDS',
    'DECIMAL_FIELDS',
    'MAX_DECIMAL_EXPONENT',
    'parse_header',
    'parse_int',
    'parse_decimal',
    'parse_transaction_row',
]

# Apple column header -> Transaction field. Columns not listed are ignored.
COLUMN_MAP: Dict[str, str] = {
    'Transaction Date': 'transaction_date',
    'Settlement Date': 'settlement_date',
    'Apple Identifier': 'apple_identifier',
    'SKU': 'sku',
    'Title': 'title',
    'Developer Name': 'developer_name',
    'Product Type Identifier': 'product_type_identifier',
    'Country of Sale': 'country_of_sale',
    'Quantity': 'quantity',
    'Partner Share': 'partner_share',
    'Extended Partner Share': 'extended_partner_share',
    'Partner Share Currency': 'partner_share_currency',
    'Customer Price': 'customer_price',
    'Customer Currency': 'customer_currency',
    'Sale or Return': 'sale_or_return',
    'Promo Code': 'promo_code',
    'Order Type': 'order_type',
    'Region': 'region',
}

REQUIRED_COLUMNS = [
    'Country of Sale',
    'Partner Share Currency',
    'Quantity',
    'Extended Partner Share',
]

INTEGER_FIELDS = frozenset({'quantity'})
DECIMAL_FIELDS = frozenset({'partner_share', 'extended_partner_share', 'customer_price'})

_INTEGER_PREFIX = re.compile(r'^\s*([+-]?\d+)')
_DECIMAL_PREFIX = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')

# Decimals of magnitude 10**16 or more are treated as unreadable
MAX_DECIMAL_EXPONENT = 15


def parse_header(line: str, delimiter: str) -> List[str]:
    """Split the transaction header line into trimmed column names."""
    return [h.strip() for h in split_row(line, delimiter)]


def parse_int(value: str) -> Optional[int]:
    """
    Read the leading integer of a value ("3", "3 units", "2.9" -> 2).
    Returns None when the value does not start with a number.
    """
    match = _INTEGER_PREFIX.match(value)
    if not match:
        return None
    return int(match.group(1))


def parse_decimal(value: str) -> Optional[Decimal]:
    """
    Read the leading decimal number of a value ("1.40", "1.40 USD", ".5").
    Returns None when the value does not start with a number or its
    magnitude is 10**16 or more.
    """
    match = _DECIMAL_PREFIX.match(value)
    if not match:
        return None
    try:
        parsed = Decimal(match.group(1))
    except InvalidOperation:
        return None
    if not parsed.is_finite() or parsed.adjusted() > MAX_DECIMAL_EXPONENT:
        return None
    return parsed


def _coerce(field_name: str, value: str, diagnostics: Optional[ParseDiagnostics]) -> Any:
    if field_name in INTEGER_FIELDS:
        parsed: Any = parse_int(value)
        fallback: Any = 0
    elif field_name in DECIMAL_FIELDS:
        parsed = parse_decimal(value)
        fallback = Decimal(0)
    else:
        return value

    if parsed is None:
        if value and diagnostics is not None:
            diagnostics.numeric_fallbacks += 1
        logger.debug(f"Could not read {field_name} value {value!r}, using {fallback}")
        return fallback
    return parsed


def parse_transaction_row(row: List[str], headers: List[str],
                          diagnostics: Optional[ParseDiagnostics] = None) -> Optional[Transaction]:
    """
    Decode one data row using the column order of the header line.

    Args:
        row: The delimited fields of the row
        headers: Trimmed column names from the transaction header line
        diagnostics: Optional counters updated for normalized values

    Returns:
        Transaction, or None when the row has no country of sale or no
        partner share currency
    """
    fields: Dict[str, Any] = {}
    for i, header in enumerate(headers):
        field_name = COLUMN_MAP.get(header)
        if not field_name:
            continue
        value = row[i].strip() if i < len(row) else ''
        fields[field_name] = _coerce(field_name, value, diagnostics)

    if not fields.get('country_of_sale') or not fields.get('partner_share_currency'):
        if diagnostics is not None:
            diagnostics.rows_missing_required_fields += 1
        logger.debug(f"Skipping row without country or currency: {row}")
        return None

    return Transaction(**fields)
