"""Pydantic schemas for portfolio, settings and alert resources."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from portfolio_dashboard.api.schemas.stock import Stock


class PortfolioMetrics(BaseModel):
    """Aggregate metrics computed server-side for a portfolio."""

    model_config = ConfigDict(extra="allow")

    total_value: float = 0.0
    overall_ev: float = 0.0
    weighted_volatility: float = 0.0
    sharpe_ratio: float = 0.0
    kelly_utilization: float = 0.0
    sector_weights: dict[str, float] = Field(default_factory=dict)


class PortfolioSummary(BaseModel):
    """Response for GET /portfolio/summary."""

    summary: Optional[PortfolioMetrics] = None
    stocks: list[Stock] = Field(default_factory=list)


class Portfolio(BaseModel):
    """A named portfolio grouping stocks; one is the default."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    description: Optional[str] = None
    is_default: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Alert(BaseModel):
    """Alert raised by the backend for a stock."""

    model_config = ConfigDict(extra="allow")

    id: int
    stock_id: int
    ticker: str
    alert_type: str
    message: str
    email_sent: bool = False
    created_at: Optional[str] = None
