"""
Money — Денежная сумма в конкретной валюте

Immutable Pydantic модель. Сумма хранится как Decimal, чтобы цены
(например, 267.29 USD) не теряли точность из-за float.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class Money(BaseModel):
    """
    Денежная сумма.

    Immutable модель (frozen=True).
    """

    amount: Decimal = Field(..., description="Сумма")
    currency: str = Field(
        ..., pattern=r"^[A-Z]{3}$", description="Код валюты ISO 4217 (например, 'USD')"
    )

    model_config = {"frozen": True}  # Immutable

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"
