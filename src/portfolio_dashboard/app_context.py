"""Application context for process-wide client and service management.

Holds the single response cache, the HTTP client and the service objects, so
that every screen of a front end shares one cache and one session.
"""

from pathlib import Path
from typing import Optional

import httpx

from portfolio_dashboard.config.settings import Settings, set_settings, get_settings
from portfolio_dashboard.config.logging_config import setup_logging
from portfolio_dashboard.repositories.sqlalchemy import (
    SqlAlchemyLocalStore,
    get_session,
    init_db,
    reset_database,
)
from portfolio_dashboard.api.client import ApiClient
from portfolio_dashboard.api.endpoints import (
    AuthAPI,
    StockAPI,
    PortfolioAPI,
    CashAPI,
    ExchangeRateAPI,
    AssessmentAPI,
    SettingsAPI,
    DeletedStockAPI,
    VersionAPI,
)
from portfolio_dashboard.services import (
    ResponseCache,
    TickerEditService,
    ColumnSettingsService,
    PortfolioSelectionService,
)


class AppContext:
    """
    Application context providing access to the backend client and services.

    One instance per process. Must be initialized before use and closed when
    done.
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize application context.

        Args:
            data_dir: Optional data directory. If not provided, uses default.
            http_client: Optional preconfigured httpx client (e.g. for tests).
        """
        self._data_dir = data_dir
        self._http_client = http_client
        self._session = None
        self._initialized = False

        self._cache: Optional[ResponseCache] = None
        self._client: Optional[ApiClient] = None
        self._local_store: Optional[SqlAlchemyLocalStore] = None

        # Service instances (lazy initialized)
        self._ticker_edit_service: Optional[TickerEditService] = None
        self._column_settings_service: Optional[ColumnSettingsService] = None
        self._portfolio_selection_service: Optional[PortfolioSelectionService] = None

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """
        Initialize or reinitialize the context with a data directory.

        Args:
            data_dir: Data directory path. Uses default if not provided.
        """
        if data_dir:
            self._data_dir = data_dir

        current = get_settings()
        settings = current.model_copy(update={"data_dir": self._data_dir})
        set_settings(settings)
        setup_logging()

        init_db()
        self._session = get_session()
        self._local_store = SqlAlchemyLocalStore(self._session)

        self._cache = ResponseCache()
        self._client = ApiClient(
            base_url=settings.api_url,
            token_store=self._local_store,
            http_client=self._http_client,
            timeout=settings.request_timeout_seconds,
            on_unauthorized=self._cache.invalidate,
        )

        self._ticker_edit_service = None
        self._column_settings_service = None
        self._portfolio_selection_service = None
        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._initialized

    @property
    def data_dir(self) -> Path:
        """Get the current data directory."""
        return get_settings().get_data_dir()

    def _require(self) -> Settings:
        if not self._initialized:
            raise RuntimeError("AppContext.initialize() must be called first")
        return get_settings()

    # Core accessors
    @property
    def cache(self) -> ResponseCache:
        self._require()
        return self._cache

    @property
    def client(self) -> ApiClient:
        self._require()
        return self._client

    @property
    def local_store(self) -> SqlAlchemyLocalStore:
        self._require()
        return self._local_store

    # Endpoint accessors
    @property
    def auth(self) -> AuthAPI:
        return AuthAPI(self.client, self.cache)

    @property
    def stocks(self) -> StockAPI:
        return StockAPI(self.client, self.cache)

    @property
    def portfolio(self) -> PortfolioAPI:
        settings = self._require()
        return PortfolioAPI(
            self.client,
            self.cache,
            summary_ttl_ms=settings.portfolio_summary_ttl_ms,
            api_status_ttl_ms=settings.api_status_ttl_ms,
        )

    @property
    def cash(self) -> CashAPI:
        return CashAPI(self.client)

    @property
    def exchange_rates(self) -> ExchangeRateAPI:
        return ExchangeRateAPI(self.client)

    @property
    def assessments(self) -> AssessmentAPI:
        return AssessmentAPI(self.client)

    @property
    def deleted_stocks(self) -> DeletedStockAPI:
        return DeletedStockAPI(self.client, self.cache)

    @property
    def version(self) -> VersionAPI:
        return VersionAPI(self.client)

    # Service accessors
    @property
    def ticker_edit(self) -> TickerEditService:
        """Get the TickerEditService instance."""
        if self._ticker_edit_service is None:
            self._ticker_edit_service = TickerEditService(self.stocks)
        return self._ticker_edit_service

    @property
    def column_settings(self) -> ColumnSettingsService:
        """Get the ColumnSettingsService instance."""
        if self._column_settings_service is None:
            self._column_settings_service = ColumnSettingsService(
                settings_api=SettingsAPI(self.client),
                client=self.client,
                local_store=self.local_store,
            )
        return self._column_settings_service

    @property
    def portfolios(self) -> PortfolioSelectionService:
        """Get the PortfolioSelectionService instance."""
        if self._portfolio_selection_service is None:
            self._portfolio_selection_service = PortfolioSelectionService(
                portfolio_api=self.portfolio,
                local_store=self.local_store,
            )
        return self._portfolio_selection_service

    def close(self) -> None:
        """Clean up resources."""
        if self._client is not None:
            self._client.close()
            self._client = None
        if self._session:
            self._session.close()
            self._session = None
        reset_database()
        self._initialized = False
