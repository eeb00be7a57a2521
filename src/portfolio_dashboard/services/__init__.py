"""Service layer - caching, ticker merging and preference orchestration."""

from portfolio_dashboard.services.response_cache import (
    ResponseCache,
    CacheEntry,
    MISS,
    PORTFOLIO_SUMMARY_KEY,
    API_STATUS_KEY,
    PORTFOLIO_PREFIX,
)
from portfolio_dashboard.services.ticker_merge import (
    COMPLETENESS_FIELDS,
    evaluate_completeness,
    find_duplicate,
    resolve_ticker_change,
    transfer_labels,
)
from portfolio_dashboard.services.stock_filters import (
    portfolio_stocks,
    watchlist_stocks,
    format_field_name,
)
from portfolio_dashboard.services.ticker_edit_service import TickerEditService
from portfolio_dashboard.services.column_settings_service import ColumnSettingsService
from portfolio_dashboard.services.portfolio_selection_service import PortfolioSelectionService

__all__ = [
    "ResponseCache",
    "CacheEntry",
    "MISS",
    "PORTFOLIO_SUMMARY_KEY",
    "API_STATUS_KEY",
    "PORTFOLIO_PREFIX",
    "COMPLETENESS_FIELDS",
    "evaluate_completeness",
    "find_duplicate",
    "resolve_ticker_change",
    "transfer_labels",
    "portfolio_stocks",
    "watchlist_stocks",
    "format_field_name",
    "TickerEditService",
    "ColumnSettingsService",
    "PortfolioSelectionService",
]
