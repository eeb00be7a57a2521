"""Portfolio, alert and connectivity endpoints."""

import logging
from typing import Any

from portfolio_dashboard.api.client import ApiClient
from portfolio_dashboard.api.schemas import Alert, Portfolio, PortfolioSummary
from portfolio_dashboard.services.response_cache import (
    API_STATUS_KEY,
    MISS,
    PORTFOLIO_PREFIX,
    PORTFOLIO_SUMMARY_KEY,
    ResponseCache,
)

logger = logging.getLogger(__name__)


class PortfolioAPI:
    """
    Portfolio-level reads and writes.

    The summary and the API-status reads are served from the response cache
    while fresh; everything else goes to the backend.
    """

    def __init__(
        self,
        client: ApiClient,
        cache: ResponseCache,
        summary_ttl_ms: int = 30000,
        api_status_ttl_ms: int = 60000,
    ):
        self._client = client
        self._cache = cache
        self._summary_ttl_ms = summary_ttl_ms
        self._api_status_ttl_ms = api_status_ttl_ms

    def _cached_get(self, key: str, ttl_ms: int, path: str) -> Any:
        cached = self._cache.get(key, ttl_ms)
        if cached is not MISS:
            return cached
        body = self._client.get(path)
        self._cache.set(key, body)
        return body

    def get_summary(self) -> PortfolioSummary:
        body = self._cached_get(PORTFOLIO_SUMMARY_KEY, self._summary_ttl_ms, "/portfolio/summary")
        return PortfolioSummary.model_validate(body or {})

    def get_api_status(self) -> dict[str, Any]:
        return self._cached_get(API_STATUS_KEY, self._api_status_ttl_ms, "/api-status") or {}

    def get_settings(self) -> dict[str, Any]:
        return self._client.get("/portfolio/settings") or {}

    def update_settings(self, data: dict[str, Any]) -> Any:
        result = self._client.put("/portfolio/settings", json=data)
        self._cache.invalidate(PORTFOLIO_PREFIX)
        return result

    def get_alerts(self) -> list[Alert]:
        body = self._client.get("/alerts") or []
        return [Alert.model_validate(item) for item in body]

    def delete_alert(self, alert_id: int) -> None:
        self._client.delete(f"/alerts/{alert_id}")

    # Multiple portfolios

    def get_all(self) -> list[Portfolio]:
        body = self._client.get("/portfolios") or {}
        return [Portfolio.model_validate(item) for item in body.get("portfolios") or []]

    def create(self, name: str, description: str = "", is_default: bool = False) -> Portfolio:
        body = self._client.post(
            "/portfolios",
            json={"name": name, "description": description, "is_default": is_default},
        )
        self._cache.invalidate(PORTFOLIO_PREFIX)
        return Portfolio.model_validate(body["portfolio"])

    def update(self, portfolio_id: int, data: dict[str, Any]) -> Portfolio:
        body = self._client.put(f"/portfolios/{portfolio_id}", json=data)
        self._cache.invalidate(PORTFOLIO_PREFIX)
        return Portfolio.model_validate(body["portfolio"])

    def delete(self, portfolio_id: int) -> None:
        self._client.delete(f"/portfolios/{portfolio_id}")
        self._cache.invalidate(PORTFOLIO_PREFIX)

    def set_default(self, portfolio_id: int) -> Portfolio:
        body = self._client.post(f"/portfolios/{portfolio_id}/default")
        self._cache.invalidate(PORTFOLIO_PREFIX)
        return Portfolio.model_validate(body["portfolio"])

    def get_portfolio_summary(self, portfolio_id: int) -> PortfolioSummary:
        body = self._client.get(f"/portfolios/{portfolio_id}/summary")
        return PortfolioSummary.model_validate(body or {})
