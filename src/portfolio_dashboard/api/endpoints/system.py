"""Deleted-stock recovery and backend version endpoints."""

from typing import Any

from portfolio_dashboard.api.client import ApiClient
from portfolio_dashboard.api.schemas import DeletedStock
from portfolio_dashboard.services.response_cache import PORTFOLIO_PREFIX, ResponseCache


class DeletedStockAPI:
    def __init__(self, client: ApiClient, cache: ResponseCache):
        self._client = client
        self._cache = cache

    def get_all(self) -> list[DeletedStock]:
        body = self._client.get("/deleted-stocks") or []
        return [DeletedStock.model_validate(item) for item in body]

    def restore(self, deleted_id: int) -> Any:
        result = self._client.post(f"/deleted-stocks/{deleted_id}/restore")
        self._cache.invalidate(PORTFOLIO_PREFIX)
        return result


class VersionAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    def get_backend_version(self) -> dict[str, Any]:
        return self._client.get("/version") or {}
