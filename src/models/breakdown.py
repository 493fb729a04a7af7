"""
Aggregate models produced from the retained sales of a report.

Each aggregate carries the currency code its amounts are denominated in;
amounts of different currencies are never added together.
"""
from decimal import Decimal
from typing import Dict

from pydantic import BaseModel, Field, ConfigDict


class CountryBreakdown(BaseModel):
    """Units and proceeds for one (country of sale, currency) pair."""
    country_of_sale: str = Field(alias="countryOfSale")
    currency: str
    quantity: int = 0
    proceeds: Decimal = Decimal(0)

    model_config = ConfigDict(
        populate_by_name=True,
        json_encoders={Decimal: str},
        frozen=True
    )


class ProductBreakdown(BaseModel):
    """
    Units and proceeds for one SKU.

    Quantity is summed across every currency; proceeds are kept per currency
    in the order each currency was first seen for this product.
    """
    title: str
    sku: str
    quantity: int = 0
    proceeds_by_currency: Dict[str, Decimal] = Field(default_factory=dict, alias="proceedsByCurrency")

    model_config = ConfigDict(
        populate_by_name=True,
        json_encoders={Decimal: str},
        frozen=True
    )


class CurrencySummary(BaseModel):
    """Units and proceeds across all countries and products for one currency."""
    currency: str
    total_quantity: int = Field(default=0, alias="totalQuantity")
    total_proceeds: Decimal = Field(default=Decimal(0), alias="totalProceeds")

    model_config = ConfigDict(
        populate_by_name=True,
        json_encoders={Decimal: str},
        frozen=True
    )
