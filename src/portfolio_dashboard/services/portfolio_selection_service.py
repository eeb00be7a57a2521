"""Portfolio list, current selection and per-portfolio statistics."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Optional

from portfolio_dashboard.api.endpoints.portfolio import PortfolioAPI
from portfolio_dashboard.api.schemas import Portfolio
from portfolio_dashboard.core.exceptions import ApiError, AppError
from portfolio_dashboard.domain.views.portfolio import PortfolioStats
from portfolio_dashboard.repositories.protocols import LocalStore

logger = logging.getLogger(__name__)

CURRENT_PORTFOLIO_KEY = "currentPortfolioId"


class PortfolioSelectionService:
    """
    Holds the user's portfolios and which one is being viewed.

    Mutations go to the backend first and then reload the list, so the local
    state only ever reflects what the backend confirmed.
    """

    def __init__(self, portfolio_api: PortfolioAPI, local_store: LocalStore, max_workers: int = 4):
        self._api = portfolio_api
        self._local = local_store
        self._max_workers = max_workers
        self.portfolios: list[Portfolio] = []
        self.current: Optional[Portfolio] = None
        self.error: Optional[str] = None

    def load(self) -> list[Portfolio]:
        """Reload portfolios and select the default (or first) one."""
        self.error = None
        try:
            portfolios = self._api.get_all()
        except ApiError as e:
            logger.error("Failed to load portfolios: %s", e.message)
            self.error = "Failed to load portfolios"
            return self.portfolios

        self.portfolios = portfolios
        default = next((p for p in portfolios if p.is_default), None)
        self.current = default or (portfolios[0] if portfolios else None)
        if self.current is not None:
            self._local.set_item(CURRENT_PORTFOLIO_KEY, str(self.current.id))
        return self.portfolios

    def refresh(self) -> list[Portfolio]:
        return self.load()

    def set_current(self, portfolio: Portfolio) -> None:
        self.current = portfolio
        self._local.set_item(CURRENT_PORTFOLIO_KEY, str(portfolio.id))

    def create(self, name: str, description: str = "", is_default: bool = False) -> Portfolio:
        try:
            portfolio = self._api.create(name, description=description, is_default=is_default)
        except ApiError as e:
            raise AppError(e.detail or "Failed to create portfolio") from e
        self.refresh()
        return portfolio

    def update(self, portfolio_id: int, name: Optional[str] = None, description: Optional[str] = None) -> Portfolio:
        data: dict[str, Any] = {}
        if name is not None:
            data["name"] = name
        if description is not None:
            data["description"] = description
        try:
            portfolio = self._api.update(portfolio_id, data)
        except ApiError as e:
            raise AppError(e.detail or "Failed to update portfolio") from e
        self.refresh()
        return portfolio

    def delete(self, portfolio_id: int) -> None:
        try:
            self._api.delete(portfolio_id)
        except ApiError as e:
            raise AppError(e.detail or "Failed to delete portfolio") from e
        self.refresh()

    def set_default(self, portfolio_id: int) -> Portfolio:
        try:
            portfolio = self._api.set_default(portfolio_id)
        except ApiError as e:
            raise AppError(e.detail or "Failed to set default portfolio") from e
        self.refresh()
        return portfolio

    def _fetch_stats(self, portfolio_id: int) -> PortfolioStats:
        summary = self._api.get_portfolio_summary(portfolio_id)
        metrics = summary.summary
        if metrics is None:
            return PortfolioStats(stock_count=len(summary.stocks))
        return PortfolioStats(
            total_value=metrics.total_value or 0.0,
            ev=metrics.overall_ev or 0.0,
            sharpe=metrics.sharpe_ratio or 0.0,
            volatility=metrics.weighted_volatility or 0.0,
            stock_count=len(summary.stocks),
        )

    def load_stats(self) -> dict[int, PortfolioStats]:
        """
        Fetch summary statistics for every portfolio concurrently.

        Requests complete in any order. A portfolio whose fetch fails gets
        zeroed statistics instead of failing the whole batch.
        """
        stats: dict[int, PortfolioStats] = {}
        if not self.portfolios:
            return stats

        with ThreadPoolExecutor(max_workers=self._max_workers) as ex:
            futures = {ex.submit(self._fetch_stats, p.id): p.id for p in self.portfolios}
            for future in as_completed(futures):
                portfolio_id = futures[future]
                try:
                    stats[portfolio_id] = future.result()
                except ApiError as e:
                    logger.error("Failed to load stats for portfolio %s: %s", portfolio_id, e.message)
                    stats[portfolio_id] = PortfolioStats()
        return stats

    @staticmethod
    def deletion_blocker(portfolio: Portfolio, stats: Optional[PortfolioStats] = None) -> Optional[str]:
        """Reason the portfolio cannot be deleted, or None if it can."""
        if portfolio.is_default:
            return "Cannot delete the default portfolio. Set another portfolio as default first."
        if stats is not None and stats.stock_count > 0:
            return f"Cannot delete portfolio with {stats.stock_count} stocks. Remove all stocks first."
        return None
