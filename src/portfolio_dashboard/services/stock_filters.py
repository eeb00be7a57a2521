"""Helpers for splitting and labelling stock lists."""

import re

from portfolio_dashboard.api.schemas import Stock


def portfolio_stocks(stocks: list[Stock]) -> list[Stock]:
    """Stocks with shares owned."""
    return [s for s in stocks if s.is_held]


def watchlist_stocks(stocks: list[Stock]) -> list[Stock]:
    """Stocks tracked without a position."""
    return [s for s in stocks if not s.is_held]


def format_field_name(field: str) -> str:
    """'avg_price_local' -> 'Avg Price Local'."""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), field.replace("_", " "))
