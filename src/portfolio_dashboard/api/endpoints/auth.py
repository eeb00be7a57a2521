"""Authentication endpoints."""

import logging
from typing import Any

from portfolio_dashboard.api.client import ApiClient
from portfolio_dashboard.services.response_cache import ResponseCache

logger = logging.getLogger(__name__)


class AuthAPI:
    """Login, logout and account credential changes."""

    def __init__(self, client: ApiClient, cache: ResponseCache):
        self._client = client
        self._cache = cache

    def login(self, username: str, password: str) -> dict[str, Any]:
        body = self._client.post("/login", json={"username": username, "password": password}) or {}
        token = body.get("token")
        if token:
            self._client.set_token(token)
            logger.info("Logged in as %s", username)
        return body

    def logout(self) -> None:
        """End the session; local state is cleared even if the backend call fails."""
        try:
            self._client.post("/logout")
        finally:
            self._client.clear_token()
            self._cache.invalidate()

    def change_password(self, current_password: str, new_password: str) -> Any:
        return self._client.post(
            "/change-password",
            json={"current_password": current_password, "new_password": new_password},
        )

    def change_username(self, current_password: str, new_username: str) -> Any:
        return self._client.post(
            "/change-username",
            json={"current_password": current_password, "new_username": new_username},
        )

    def current_user(self) -> dict[str, Any]:
        return self._client.get("/me") or {}
