"""
Transaction model for App Store sales report rows.
"""
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, ConfigDict

from models.money import Money


class SaleOrReturn(str, Enum):
    """
    Values of the 'Sale or Return' column.
    """
    SALE = "S"
    RETURN = "R"


class Transaction(BaseModel):
    """
    Represents a single decoded data row of an App Store financial report.
    Text fields are kept verbatim (trimmed); dates stay in the report's own
    format until they are formatted for display.
    """
    transaction_date: str = Field(default="", alias="transactionDate")
    settlement_date: str = Field(default="", alias="settlementDate")
    apple_identifier: str = Field(default="", alias="appleIdentifier")
    sku: str = ""
    title: str = ""
    developer_name: str = Field(default="", alias="developerName")
    product_type_identifier: str = Field(default="", alias="productTypeIdentifier")
    country_of_sale: str = Field(alias="countryOfSale", min_length=1)
    quantity: int = 0
    partner_share: Decimal = Field(default=Decimal(0), alias="partnerShare")
    extended_partner_share: Decimal = Field(default=Decimal(0), alias="extendedPartnerShare")
    partner_share_currency: str = Field(alias="partnerShareCurrency", min_length=1)
    customer_price: Decimal = Field(default=Decimal(0), alias="customerPrice")
    customer_currency: str = Field(default="", alias="customerCurrency")
    sale_or_return: str = Field(default="", alias="saleOrReturn")
    promo_code: str = Field(default="", alias="promoCode")
    order_type: str = Field(default="", alias="orderType")
    region: str = ""

    model_config = ConfigDict(
        populate_by_name=True,  # Allows using field names or aliases for population
        json_encoders={
            Decimal: str        # Serialize Decimal as string in JSON
        },
        frozen=True
    )

    @field_validator('partner_share', 'extended_partner_share', 'customer_price', mode='before')
    @classmethod
    def ensure_amount_is_decimal(cls, v: Any) -> Decimal:
        if not isinstance(v, Decimal):
            try:
                return Decimal(str(v))
            except Exception as e:
                raise ValueError(f"Invalid amount value: {v}. Could not convert to Decimal.") from e
        return v

    def is_sale(self, sale_code: str = SaleOrReturn.SALE.value) -> bool:
        """Returns True if the row is a completed sale rather than a refund."""
        return self.sale_or_return == sale_code

    @property
    def proceeds(self) -> Money:
        """Proceeds of record: the extended partner share in the partner share currency."""
        return Money(amount=self.extended_partner_share, currency=self.partner_share_currency)
