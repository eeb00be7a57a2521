"""Pydantic schemas for cash holdings and exchange rates."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ExchangeRate(BaseModel):
    """Conversion rate from a currency to USD."""

    model_config = ConfigDict(extra="allow")

    id: int
    currency_code: str
    rate: float
    last_updated: Optional[str] = None
    is_active: bool = True
    is_manual: bool = False


class CashHolding(BaseModel):
    """Cash amount held in a single currency."""

    model_config = ConfigDict(extra="allow")

    id: int
    currency_code: str
    amount: float
    usd_value: float = 0.0
    description: Optional[str] = None
    last_updated: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
