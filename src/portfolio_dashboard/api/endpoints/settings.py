"""User settings endpoints."""

from typing import Optional

from portfolio_dashboard.api.client import ApiClient


class SettingsAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    def get_column_settings(self) -> Optional[str]:
        """Return the stored column layout as a JSON string, or None if never saved."""
        body = self._client.get("/settings/columns") or {}
        return body.get("settings") or None

    def save_column_settings(self, settings_json: str) -> None:
        self._client.put("/settings/columns", json={"settings": settings_json})
