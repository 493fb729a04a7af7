from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, field_validator, ConfigDict


class Money(BaseModel):
    """
    Money is a class that represents a monetary amount using Pydantic.
    It is used to represent the amount of money in a given currency.
    A None currency is used to represent an amount whose currency is not
    known yet, for example the zero used to start an accumulation.
    """
    amount: Decimal
    currency: Optional[str] = None

    model_config = ConfigDict(
        json_encoders={
            Decimal: str
        },
        frozen=True
    )

    @field_validator('currency', mode='before')
    @classmethod
    def normalize_currency_code(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        if not isinstance(v, str):
            raise ValueError(f"Currency must be a string code, got {type(v).__name__}: {v}")
        code = v.strip()
        if not code:
            raise ValueError("Currency code must not be empty")
        return code

    @classmethod
    def zero(cls, currency: Optional[str] = None) -> 'Money':
        return cls(amount=Decimal(0), currency=currency)

    def __add__(self, other: 'Money') -> 'Money':
        if self.currency != other.currency:
            if self.currency is not None and other.currency is not None:
                raise ValueError("Cannot add money with different currencies")

        resulting_currency = self.currency if self.currency is not None else other.currency
        return Money(amount=self.amount + other.amount, currency=resulting_currency)

    def __str__(self) -> str:
        if self.currency is None:
            return f"{self.amount}"
        return f"{self.amount} {self.currency}"
