"""
Models package for the App Store sales report engine.
"""

from .money import Money

from .transaction import (
    Transaction,
    SaleOrReturn
)

from .breakdown import (
    CountryBreakdown,
    ProductBreakdown,
    CurrencySummary
)

from .diagnostics import ParseDiagnostics

from .report import (
    ReportMetadata,
    ReportSummary,
    ParsedReport
)

from .validation import ValidationResult

__all__ = [
    'Money',
    'Transaction',
    'SaleOrReturn',
    'CountryBreakdown',
    'ProductBreakdown',
    'CurrencySummary',
    'ParseDiagnostics',
    'ReportMetadata',
    'ReportSummary',
    'ParsedReport',
    'ValidationResult',
]

__all__ = sorted(list(set(__all__)))
