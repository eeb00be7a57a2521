"""Pydantic schemas for stock resources."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from portfolio_dashboard.core.timezone import parse_timestamp


class Stock(BaseModel):
    """A tracked stock, either held (shares_owned > 0) or on the watchlist."""

    model_config = ConfigDict(extra="allow")

    id: int
    ticker: str
    isin: Optional[str] = None
    company_name: Optional[str] = None
    sector: Optional[str] = None
    current_price: Optional[float] = None
    currency: Optional[str] = None
    fair_value: Optional[float] = None
    upside_potential: Optional[float] = None
    downside_risk: Optional[float] = None
    probability_positive: Optional[float] = None
    expected_value: Optional[float] = None
    beta: Optional[float] = None
    volatility: Optional[float] = None
    pe_ratio: Optional[float] = None
    eps_growth_rate: Optional[float] = None
    debt_to_ebitda: Optional[float] = None
    dividend_yield: Optional[float] = None
    b_ratio: Optional[float] = None
    kelly_fraction: Optional[float] = None
    half_kelly_suggested: Optional[float] = None
    shares_owned: Optional[float] = None
    avg_price_local: Optional[float] = None
    current_value_usd: Optional[float] = None
    weight: Optional[float] = None
    unrealized_pnl: Optional[float] = None
    buy_zone_min: Optional[float] = None
    buy_zone_max: Optional[float] = None
    assessment: Optional[str] = None
    update_frequency: Optional[str] = None
    data_source: Optional[str] = None
    fair_value_source: Optional[str] = None
    alpha_vantage_fetched_at: Optional[str] = None
    grok_fetched_at: Optional[str] = None
    alpha_vantage_raw_json: Optional[str] = None
    grok_raw_json: Optional[str] = None
    comment: Optional[str] = None
    last_updated: Optional[str] = None

    @property
    def last_updated_at(self) -> Optional[datetime]:
        """Parsed last_updated timestamp in UTC."""
        return parse_timestamp(self.last_updated)

    @property
    def is_held(self) -> bool:
        """True when the stock is part of the portfolio rather than the watchlist."""
        return bool(self.shares_owned) and self.shares_owned > 0


class StockHistory(BaseModel):
    """Historical snapshot of a stock's valuation."""

    model_config = ConfigDict(extra="allow")

    id: int
    stock_id: int
    ticker: str
    current_price: Optional[float] = None
    fair_value: Optional[float] = None
    upside_potential: Optional[float] = None
    expected_value: Optional[float] = None
    kelly_fraction: Optional[float] = None
    weight: Optional[float] = None
    assessment: Optional[str] = None
    recorded_at: Optional[str] = None

    @property
    def recorded(self) -> Optional[datetime]:
        return parse_timestamp(self.recorded_at)


class DeletedStock(BaseModel):
    """A soft-deleted stock with the reason it was removed."""

    model_config = ConfigDict(extra="allow")

    id: int
    ticker: Optional[str] = None
    company_name: Optional[str] = None
    reason: Optional[str] = None
    deleted_at: Optional[str] = None
