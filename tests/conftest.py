"""
Pytest configuration and fixtures for portfolio dashboard client tests.

This module provides:
- A controllable millisecond clock and response cache
- An in-process fake backend served through FastAPI's TestClient
- In-memory SQLite database and local store fixtures
- Endpoint and service fixtures wired to the fake backend
- Factory helpers for stocks
"""

from typing import Any, Callable

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from portfolio_dashboard.repositories.sqlalchemy.database import Base
# Import ORM models to register them with Base before creating tables
from portfolio_dashboard.repositories.sqlalchemy import orm_models  # noqa: F401
from portfolio_dashboard.repositories.sqlalchemy import SqlAlchemyLocalStore
from portfolio_dashboard.api.client import ApiClient
from portfolio_dashboard.api.endpoints import (
    AuthAPI,
    StockAPI,
    PortfolioAPI,
    SettingsAPI,
)
from portfolio_dashboard.api.schemas import Stock
from portfolio_dashboard.services import (
    ResponseCache,
    TickerEditService,
    ColumnSettingsService,
    PortfolioSelectionService,
)
from portfolio_dashboard.config.settings import reset_settings

from tests.fake_backend import FakeBackendState, create_fake_backend, VALID_TOKEN


# =============================================================================
# CLOCK AND CACHE
# =============================================================================


class FakeClock:
    """Manually advanced clock returning milliseconds."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> ResponseCache:
    """Response cache driven by the fake clock."""
    return ResponseCache(clock=clock)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def local_store(test_session) -> SqlAlchemyLocalStore:
    """Provide test LocalStore."""
    return SqlAlchemyLocalStore(test_session)


# =============================================================================
# FAKE BACKEND FIXTURES
# =============================================================================


@pytest.fixture
def fake_backend():
    """Fresh fake backend app and its state."""
    return create_fake_backend()


@pytest.fixture
def backend(fake_backend) -> FakeBackendState:
    """State of the fake backend, for seeding data and inspecting calls."""
    _, state = fake_backend
    return state


@pytest.fixture
def http_client(fake_backend):
    """httpx-compatible client routed to the fake backend in-process."""
    app, _ = fake_backend
    with TestClient(app, base_url="http://testserver/api") as client:
        yield client


@pytest.fixture
def api_client(http_client, local_store, cache) -> ApiClient:
    """ApiClient talking to the fake backend, unauthenticated."""
    return ApiClient(
        base_url="http://testserver/api",
        token_store=local_store,
        http_client=http_client,
        on_unauthorized=cache.invalidate,
    )


@pytest.fixture
def authed_client(api_client) -> ApiClient:
    """ApiClient holding the token the fake backend accepts."""
    api_client.set_token(VALID_TOKEN)
    return api_client


# =============================================================================
# ENDPOINT FIXTURES
# =============================================================================


@pytest.fixture
def auth_api(api_client, cache) -> AuthAPI:
    return AuthAPI(api_client, cache)


@pytest.fixture
def stock_api(api_client, cache) -> StockAPI:
    return StockAPI(api_client, cache)


@pytest.fixture
def portfolio_api(api_client, cache) -> PortfolioAPI:
    return PortfolioAPI(api_client, cache, summary_ttl_ms=30000, api_status_ttl_ms=60000)


@pytest.fixture
def settings_api(api_client) -> SettingsAPI:
    return SettingsAPI(api_client)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ticker_edit_service(stock_api) -> TickerEditService:
    return TickerEditService(stock_api)


@pytest.fixture
def column_settings_service(settings_api, api_client, local_store) -> ColumnSettingsService:
    return ColumnSettingsService(settings_api, api_client, local_store)


@pytest.fixture
def portfolio_selection_service(portfolio_api, local_store) -> PortfolioSelectionService:
    return PortfolioSelectionService(portfolio_api, local_store)


# =============================================================================
# FACTORY HELPERS
# =============================================================================


@pytest.fixture
def make_stock() -> Callable[..., Stock]:
    """Factory for Stock models with sensible ids."""
    counter = {"next": 1}

    def _make(ticker: str = "AAPL", **fields: Any) -> Stock:
        if "id" not in fields:
            fields["id"] = counter["next"]
        counter["next"] = max(counter["next"], fields["id"]) + 1
        return Stock(ticker=ticker, **fields)

    return _make


@pytest.fixture
def full_stock_fields() -> dict[str, Any]:
    """Values for every completeness field."""
    return {
        "company_name": "Apple Inc.",
        "sector": "Technology",
        "isin": "US0378331005",
        "current_price": 190.0,
        "fair_value": 210.0,
        "beta": 1.2,
        "volatility": 0.25,
        "pe_ratio": 29.0,
        "eps_growth_rate": 8.0,
        "debt_to_ebitda": 0.9,
        "dividend_yield": 0.5,
        "shares_owned": 10.0,
        "avg_price_local": 150.0,
        "comment": "Core holding",
    }
