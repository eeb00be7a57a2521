"""Stock endpoints."""

import logging
from typing import Any, Literal, Optional, Union

from portfolio_dashboard.api.client import ApiClient
from portfolio_dashboard.api.schemas import Stock, StockHistory
from portfolio_dashboard.services.response_cache import PORTFOLIO_PREFIX, ResponseCache

logger = logging.getLogger(__name__)

UpdateSource = Literal["grok", "alphavantage"]


class StockAPI:
    """
    CRUD and refresh operations on stocks.

    Every successful mutation drops the cached portfolio reads, since the
    summary embeds the stock list and its derived metrics.
    """

    def __init__(self, client: ApiClient, cache: ResponseCache):
        self._client = client
        self._cache = cache

    def _mutated(self) -> None:
        self._cache.invalidate(PORTFOLIO_PREFIX)

    def get_all(self) -> list[Stock]:
        body = self._client.get("/stocks") or []
        return [Stock.model_validate(item) for item in body]

    def get_by_id(self, stock_id: int) -> Stock:
        return Stock.model_validate(self._client.get(f"/stocks/{stock_id}"))

    def create(self, data: dict[str, Any]) -> Stock:
        stock = Stock.model_validate(self._client.post("/stocks", json=data))
        self._mutated()
        return stock

    def update(self, stock_id: int, data: dict[str, Any]) -> Stock:
        stock = Stock.model_validate(self._client.put(f"/stocks/{stock_id}", json=data))
        self._mutated()
        return stock

    def delete(self, stock_id: int, reason: Optional[str] = None) -> None:
        self._client.delete(f"/stocks/{stock_id}", params={"reason": reason})
        self._mutated()
        logger.info("Deleted stock %s (%s)", stock_id, reason or "no reason given")

    def update_all(self) -> Any:
        """Ask the backend to refresh every stock from its data sources."""
        result = self._client.post("/stocks/update-all")
        self._mutated()
        return result

    def update_single(self, stock_id: int, source: Optional[UpdateSource] = None) -> Any:
        """Refresh one stock, optionally from a specific data source."""
        result = self._client.post(
            f"/stocks/{stock_id}/update",
            json={},
            params={"source": source} if source else None,
        )
        self._mutated()
        return result

    def update_price(self, stock_id: int, new_price: float) -> Any:
        result = self._client.patch(
            f"/stocks/{stock_id}/price",
            json={"current_price": new_price},
        )
        self._mutated()
        return result

    def update_field(self, stock_id: int, field: str, value: Union[float, str]) -> Any:
        """
        Patch a single field.

        String values are sent both as string_value and value; the backend
        reads whichever matches the field's type.
        """
        payload: dict[str, Any] = {"field": field, "value": value}
        if isinstance(value, str):
            payload["string_value"] = value
        result = self._client.patch(f"/stocks/{stock_id}/field", json=payload)
        self._mutated()
        return result

    def get_history(self, stock_id: int) -> list[StockHistory]:
        body = self._client.get(f"/stocks/{stock_id}/history") or []
        return [StockHistory.model_validate(item) for item in body]

    def export_json(self) -> bytes:
        return self._client.get("/export/json", raw=True)
