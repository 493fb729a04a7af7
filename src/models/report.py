"""
Parsed report models handed to renderers and exporters.
"""
from typing import List

from pydantic import BaseModel, Field, ConfigDict

from models.breakdown import CountryBreakdown, ProductBreakdown, CurrencySummary
from models.diagnostics import ParseDiagnostics
from models.transaction import Transaction


class ReportMetadata(BaseModel):
    """
    Key/value metadata from the top of the report.
    Values are kept verbatim; a key that is not present stays an empty string.
    """
    vendor_name: str = Field(default="", alias="vendorName")
    start_date: str = Field(default="", alias="startDate")
    end_date: str = Field(default="", alias="endDate")

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True
    )


class ReportSummary(BaseModel):
    by_country: List[CountryBreakdown] = Field(default_factory=list, alias="byCountry")
    by_product: List[ProductBreakdown] = Field(default_factory=list, alias="byProduct")
    by_currency: List[CurrencySummary] = Field(default_factory=list, alias="byCurrency")
    total_transactions: int = Field(default=0, alias="totalTransactions")

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True
    )


class ParsedReport(BaseModel):
    """
    The complete result of parsing one report file.

    Built once by the report parser service and never mutated afterwards;
    renderers and exporters only read from it.
    """
    metadata: ReportMetadata
    transactions: List[Transaction] = Field(default_factory=list)
    summary: ReportSummary
    diagnostics: ParseDiagnostics = Field(default_factory=ParseDiagnostics, exclude=True)

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True
    )
