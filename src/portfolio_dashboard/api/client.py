"""HTTP client for the dashboard REST backend."""

import logging
import threading
from typing import Any, Callable, Optional

import httpx

from portfolio_dashboard.core.exceptions import ApiError, AuthenticationError, NotFoundError
from portfolio_dashboard.repositories.protocols import LocalStore

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


def _error_detail(response: httpx.Response) -> Optional[str]:
    """Extract the server's error text from a JSON error body, if any."""
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return text or None
    if isinstance(body, dict):
        for key in ("error", "message", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return None


class ApiClient:
    """
    Thin wrapper over httpx.Client.

    Adds the bearer token, decodes JSON bodies and turns error responses into
    AppError subclasses. A 401 clears the stored token and notifies
    on_unauthorized so cached reads from the old session are dropped.

    Requests may run on worker threads. Token changes and the 401 side effects
    are serialized. Only the first request rejected with a given token
    clears it and notifies on_unauthorized.
    """

    def __init__(
        self,
        base_url: str,
        token_store: Optional[LocalStore] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
    ):
        self._token_store = token_store
        # Read once; requests may be issued from worker threads
        self._token: Optional[str] = token_store.get_item(TOKEN_KEY) if token_store else None
        self._on_unauthorized = on_unauthorized
        self._lock = threading.Lock()
        if http_client is None:
            options: dict[str, Any] = {}
            if timeout is not None:
                options["timeout"] = timeout
            http_client = httpx.Client(
                base_url=base_url,
                headers={"Content-Type": "application/json"},
                **options,
            )
        self._http = http_client

    # Token handling

    @property
    def token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: str) -> None:
        with self._lock:
            self._token = token
            if self._token_store is not None:
                self._token_store.set_item(TOKEN_KEY, token)

    def clear_token(self) -> None:
        with self._lock:
            self._clear_token_locked()

    def _clear_token_locked(self) -> None:
        self._token = None
        if self._token_store is not None:
            self._token_store.remove_item(TOKEN_KEY)

    def _handle_unauthorized(self, rejected_token: Optional[str]) -> None:
        with self._lock:
            if rejected_token is not None:
                # Another request already cleared or replaced this token
                if self._token != rejected_token:
                    return
                self._clear_token_locked()
            if self._on_unauthorized is not None:
                self._on_unauthorized()

    def is_authenticated(self) -> bool:
        return bool(self.token)

    # Requests

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
        raw: bool = False,
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Returns None for empty bodies; with raw=True returns the response bytes.
        """
        headers = {}
        token = self.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = self._http.request(
                method,
                path.lstrip("/"),
                json=json,
                params=params or None,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise ApiError(f"Request failed: {e}") from e

        if response.status_code == 401:
            logger.warning("%s %s rejected: unauthorized", method, path)
            self._handle_unauthorized(token)
            raise AuthenticationError(_error_detail(response))

        if response.status_code == 404:
            raise NotFoundError("Resource", path, detail=_error_detail(response))

        if response.is_error:
            detail = _error_detail(response)
            logger.error("%s %s returned %d: %s", method, path, response.status_code, detail)
            raise ApiError(
                detail or f"Request failed with status {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )

        if raw:
            return response.content
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {path}", status_code=response.status_code) from e

    def get(self, path: str, **kwargs: Any) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> Any:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> Any:
        return self.request("PUT", path, **kwargs)

    def patch(self, path: str, **kwargs: Any) -> Any:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> Any:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        self._http.close()
