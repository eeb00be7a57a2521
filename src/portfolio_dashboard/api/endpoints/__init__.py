"""Backend endpoint groups."""

from portfolio_dashboard.api.endpoints.auth import AuthAPI
from portfolio_dashboard.api.endpoints.stocks import StockAPI
from portfolio_dashboard.api.endpoints.portfolio import PortfolioAPI
from portfolio_dashboard.api.endpoints.cash import CashAPI, ExchangeRateAPI
from portfolio_dashboard.api.endpoints.assessment import AssessmentAPI
from portfolio_dashboard.api.endpoints.settings import SettingsAPI
from portfolio_dashboard.api.endpoints.system import DeletedStockAPI, VersionAPI

__all__ = [
    "AuthAPI",
    "StockAPI",
    "PortfolioAPI",
    "CashAPI",
    "ExchangeRateAPI",
    "AssessmentAPI",
    "SettingsAPI",
    "DeletedStockAPI",
    "VersionAPI",
]
