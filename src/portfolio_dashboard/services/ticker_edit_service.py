"""Ticker rename and duplicate-merge application."""

import logging

from portfolio_dashboard.api.endpoints.stocks import StockAPI
from portfolio_dashboard.api.schemas import Stock
from portfolio_dashboard.core.exceptions import (
    ApiError,
    MergePartiallyAppliedError,
    TickerUpdateError,
    ValidationError,
)
from portfolio_dashboard.domain.views.ticker_merge import MergePlan, SimpleRename, TickerChange
from portfolio_dashboard.services.ticker_merge import (
    normalize_ticker,
    resolve_ticker_change,
    transfer_labels,
)

logger = logging.getLogger(__name__)


class TickerEditService:
    """
    Service behind the "edit ticker" dialog.

    preview() is side-effect free and meant to be called on every change of the
    proposed ticker. submit() re-resolves against the given stock list and
    carries out the result through the backend.
    """

    def __init__(self, stock_api: StockAPI):
        self._stocks = stock_api

    def preview(self, stock: Stock, new_ticker: str, all_stocks: list[Stock]) -> TickerChange:
        return resolve_ticker_change(new_ticker, stock, all_stocks)

    def submit(self, stock: Stock, new_ticker: str, all_stocks: list[Stock]) -> TickerChange:
        """
        Rename stock, merging with an existing stock if the ticker is taken.

        Raises TickerUpdateError when the backend rejects either call, and
        MergePartiallyAppliedError when the target was updated but the source
        could not be deleted. Local stock lists must be re-fetched afterwards.
        """
        if not normalize_ticker(new_ticker):
            raise ValidationError("Ticker symbol is required")

        change = resolve_ticker_change(new_ticker, stock, all_stocks)
        if isinstance(change, MergePlan):
            self._apply_merge(change)
        else:
            self._apply_rename(change)
        return change

    def _apply_rename(self, change: SimpleRename) -> None:
        if not change.changed:
            return
        try:
            self._stocks.update_field(change.stock.id, "ticker", change.new_ticker)
        except ApiError as e:
            logger.error("Error updating ticker for stock %s: %s", change.stock.id, e.detail or e.message)
            raise TickerUpdateError(e.detail) from e
        logger.info("Renamed %s to %s", change.stock.ticker, change.new_ticker)

    def _apply_merge(self, plan: MergePlan) -> None:
        target_id = plan.target.stock.id
        source_id = plan.source.stock.id

        try:
            self._stocks.update(target_id, plan.update_payload())
        except ApiError as e:
            logger.error("Error updating merge target %s: %s", target_id, e.detail or e.message)
            raise TickerUpdateError(e.detail) from e

        try:
            self._stocks.delete(source_id, plan.delete_reason)
        except ApiError as e:
            logger.error(
                "Merge into %s left duplicate: deleting stock %s failed: %s",
                target_id,
                source_id,
                e.detail or e.message,
            )
            raise MergePartiallyAppliedError(target_id, source_id, e.detail) from e

        logger.info(
            "Merged stock %s into %s as %s (fields: %s)",
            source_id,
            target_id,
            plan.new_ticker,
            ", ".join(transfer_labels(plan)) or "none",
        )
