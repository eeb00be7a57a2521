"""
Integration tests for cached portfolio reads.

Tests cover:
- Serving the summary and API status from the cache while fresh
- Refetching after the TTL
- Invalidation after stock and portfolio mutations
- Multi-portfolio endpoints
"""

import pytest

from portfolio_dashboard.api.endpoints import PortfolioAPI, StockAPI
from portfolio_dashboard.services import PORTFOLIO_SUMMARY_KEY, API_STATUS_KEY
from portfolio_dashboard.core.exceptions import ApiError


SUMMARY = ("GET", "/api/portfolio/summary")
STATUS = ("GET", "/api/api-status")


# =============================================================================
# SUMMARY CACHING TESTS
# =============================================================================


class TestSummaryCaching:
    """Tests for the portfolio summary cache."""

    def test_second_read_within_ttl_is_served_from_cache(
        self, portfolio_api: PortfolioAPI, backend, clock
    ):
        """
        GIVEN a summary fetched at t=0
        WHEN it is read again at t=29.999s
        THEN only one request reaches the backend
        """
        backend.add_stock(ticker="AAPL", current_price=10.0, shares_owned=3)

        first = portfolio_api.get_summary()
        clock.advance(29999)
        second = portfolio_api.get_summary()

        assert backend.count(*SUMMARY) == 1
        assert first == second
        assert second.summary.total_value == 30.0

    def test_read_after_ttl_refetches(self, portfolio_api: PortfolioAPI, backend, clock):
        portfolio_api.get_summary()
        clock.advance(30001)

        portfolio_api.get_summary()

        assert backend.count(*SUMMARY) == 2

    def test_configured_ttl_is_used(self, api_client, cache, backend, clock):
        api = PortfolioAPI(api_client, cache, summary_ttl_ms=1000)
        api.get_summary()
        clock.advance(1001)

        api.get_summary()

        assert backend.count(*SUMMARY) == 2

    def test_api_status_has_its_own_ttl(self, portfolio_api: PortfolioAPI, backend, clock):
        """
        GIVEN API status fetched at t=0
        WHEN it is read at t=45s and again at t=61s
        THEN the first is cached and the second refetches
        """
        portfolio_api.get_api_status()
        clock.advance(45000)
        assert portfolio_api.get_api_status() == {"alpha_vantage": "ok", "grok": "ok"}
        assert backend.count(*STATUS) == 1

        clock.advance(16000)
        portfolio_api.get_api_status()

        assert backend.count(*STATUS) == 2

    def test_failed_fetch_is_not_cached(self, portfolio_api: PortfolioAPI, cache, backend):
        backend.fail_on("summary", 503, "Service unavailable")

        with pytest.raises(ApiError):
            portfolio_api.get_summary()

        assert PORTFOLIO_SUMMARY_KEY not in cache


# =============================================================================
# INVALIDATION TESTS
# =============================================================================


class TestInvalidation:
    """Tests for invalidation after mutations."""

    def test_stock_update_invalidates_summary(
        self, portfolio_api: PortfolioAPI, stock_api: StockAPI, backend
    ):
        """
        GIVEN a cached summary
        WHEN a stock is updated
        THEN the next summary read goes to the backend and sees the change
        """
        stock = backend.add_stock(ticker="AAPL", current_price=10.0, shares_owned=1)
        portfolio_api.get_summary()

        stock_api.update_price(stock["id"], 20.0)
        summary = portfolio_api.get_summary()

        assert backend.count(*SUMMARY) == 2
        assert summary.summary.total_value == 20.0

    def test_stock_mutation_keeps_api_status(
        self, portfolio_api: PortfolioAPI, stock_api: StockAPI, cache, backend
    ):
        portfolio_api.get_api_status()

        stock_api.create({"ticker": "MSFT"})

        assert API_STATUS_KEY in cache
        assert PORTFOLIO_SUMMARY_KEY not in cache

    def test_failed_mutation_keeps_cache(
        self, portfolio_api: PortfolioAPI, stock_api: StockAPI, cache, backend
    ):
        stock = backend.add_stock(ticker="AAPL")
        portfolio_api.get_summary()
        backend.fail_on("update")

        with pytest.raises(ApiError):
            stock_api.update(stock["id"], {"ticker": "MSFT"})

        assert PORTFOLIO_SUMMARY_KEY in cache

    def test_portfolio_mutation_invalidates_summary(self, portfolio_api: PortfolioAPI, cache):
        portfolio_api.get_summary()

        portfolio_api.create("Growth")

        assert PORTFOLIO_SUMMARY_KEY not in cache


# =============================================================================
# MULTI-PORTFOLIO TESTS
# =============================================================================


class TestPortfolios:
    """Tests for the multi-portfolio endpoints."""

    def test_create_and_list(self, portfolio_api: PortfolioAPI):
        created = portfolio_api.create("Main", description="core", is_default=True)

        portfolios = portfolio_api.get_all()

        assert created.name == "Main"
        assert [(p.name, p.is_default) for p in portfolios] == [("Main", True)]

    def test_set_default_moves_flag(self, portfolio_api: PortfolioAPI, backend):
        backend.add_portfolio("Main", is_default=True)
        backend.add_portfolio("Growth")

        portfolio_api.set_default(2)

        assert {p.id: p.is_default for p in portfolio_api.get_all()} == {1: False, 2: True}

    def test_per_portfolio_summary(self, portfolio_api: PortfolioAPI, backend):
        backend.add_portfolio("Main")
        backend.add_portfolio("Growth")

        summary = portfolio_api.get_portfolio_summary(2)

        assert summary.summary.total_value == 2000.0
        assert summary.stocks == []


class TestSelectionAgainstBackend:
    """PortfolioSelectionService wired to the fake backend."""

    def test_load_and_stats(self, portfolio_selection_service, backend):
        backend.add_portfolio("Main")
        backend.add_portfolio("Growth", is_default=True)

        portfolio_selection_service.load()
        stats = portfolio_selection_service.load_stats()

        assert portfolio_selection_service.current.name == "Growth"
        assert stats[1].total_value == 1000.0
        assert stats[2].total_value == 2000.0
