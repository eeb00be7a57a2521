"""Pydantic schemas for backend request/response bodies."""

from portfolio_dashboard.api.schemas.stock import (
    Stock,
    StockHistory,
    DeletedStock,
)
from portfolio_dashboard.api.schemas.portfolio import (
    PortfolioMetrics,
    PortfolioSummary,
    Portfolio,
    Alert,
)
from portfolio_dashboard.api.schemas.cash import (
    ExchangeRate,
    CashHolding,
)
from portfolio_dashboard.api.schemas.assessment import (
    AssessmentSource,
    AssessmentRequest,
    Assessment,
)

__all__ = [
    "Stock",
    "StockHistory",
    "DeletedStock",
    "PortfolioMetrics",
    "PortfolioSummary",
    "Portfolio",
    "Alert",
    "ExchangeRate",
    "CashHolding",
    "AssessmentSource",
    "AssessmentRequest",
    "Assessment",
]
