"""
Unit tests for ColumnSettingsService.

Tests cover:
- Merging saved layouts with the default columns
- Load precedence between server and local store
- Save outcomes for logged-in and anonymous users
- Visibility toggling and reordering
"""

import json
from unittest.mock import MagicMock

import pytest

from portfolio_dashboard.api.client import ApiClient
from portfolio_dashboard.api.endpoints import SettingsAPI
from portfolio_dashboard.services import ColumnSettingsService
from portfolio_dashboard.services.column_settings_service import (
    COLUMNS_STORAGE_KEY,
    merge_with_defaults,
    serialize_columns,
)
from portfolio_dashboard.domain.models import DEFAULT_COLUMNS, default_columns
from portfolio_dashboard.domain.views import SaveState
from portfolio_dashboard.core.exceptions import ApiError, ValidationError


@pytest.fixture
def settings_api_mock() -> MagicMock:
    api = MagicMock(spec=SettingsAPI)
    api.get_column_settings.return_value = None
    return api


@pytest.fixture
def client_mock() -> MagicMock:
    client = MagicMock(spec=ApiClient)
    client.is_authenticated.return_value = True
    return client


@pytest.fixture
def service(settings_api_mock, client_mock, local_store) -> ColumnSettingsService:
    return ColumnSettingsService(settings_api_mock, client_mock, local_store)


def by_id(columns):
    return {col.id: col for col in columns}


# =============================================================================
# MERGE TESTS
# =============================================================================


class TestMergeWithDefaults:
    """Tests for overlaying a saved layout on the defaults."""

    def test_non_list_returns_defaults(self):
        assert merge_with_defaults({"id": "ticker"}) == default_columns()

    def test_saved_visibility_and_order_are_applied(self):
        merged = by_id(merge_with_defaults([{"id": "sector", "visible": False, "order": 42}]))

        assert merged["sector"].visible is False
        assert merged["sector"].order == 42

    def test_unknown_columns_are_dropped_and_missing_kept(self):
        """
        GIVEN a saved layout with an obsolete column and without "beta"
        WHEN merged with the defaults
        THEN the obsolete column is gone and beta keeps its default
        """
        merged = merge_with_defaults([{"id": "legacy", "visible": True}])

        ids = [col.id for col in merged]
        assert "legacy" not in ids
        assert len(merged) == len(DEFAULT_COLUMNS)
        assert by_id(merged)["beta"].visible is True

    def test_required_flag_is_not_overridable(self):
        merged = by_id(merge_with_defaults([{"id": "ticker", "required": False, "portfolioOnly": True}]))

        assert merged["ticker"].required is True
        assert merged["ticker"].portfolio_only is False

    def test_serialized_layout_round_trips_through_merge(self):
        columns = default_columns()
        columns[3].visible = False

        restored = merge_with_defaults(json.loads(serialize_columns(columns)))

        assert restored == columns
        assert "portfolioOnly" in json.loads(serialize_columns(columns))[0]


# =============================================================================
# LOAD TESTS
# =============================================================================


class TestLoad:
    """Tests for loading the layout."""

    def test_server_layout_wins_and_is_mirrored_locally(
        self, service, settings_api_mock, local_store
    ):
        """
        GIVEN a logged-in user with a server layout hiding "sector"
        WHEN the layout is loaded
        THEN sector is hidden and the layout is written to the local store
        """
        server_json = json.dumps([{"id": "sector", "visible": False, "order": 3}])
        settings_api_mock.get_column_settings.return_value = server_json
        local_store.set_item(COLUMNS_STORAGE_KEY, json.dumps([{"id": "sector", "visible": True}]))

        columns = by_id(service.load())

        assert columns["sector"].visible is False
        assert local_store.get_item(COLUMNS_STORAGE_KEY) == server_json

    def test_anonymous_user_reads_local_only(self, service, client_mock, settings_api_mock, local_store):
        client_mock.is_authenticated.return_value = False
        local_store.set_item(COLUMNS_STORAGE_KEY, json.dumps([{"id": "beta", "visible": False}]))

        columns = by_id(service.load())

        assert columns["beta"].visible is False
        settings_api_mock.get_column_settings.assert_not_called()

    def test_server_error_falls_back_to_local(self, service, settings_api_mock, local_store):
        settings_api_mock.get_column_settings.side_effect = ApiError("down", status_code=500)
        local_store.set_item(COLUMNS_STORAGE_KEY, json.dumps([{"id": "beta", "visible": False}]))

        columns = by_id(service.load())

        assert columns["beta"].visible is False

    def test_nothing_saved_anywhere_gives_defaults(self, service):
        assert service.load() == default_columns()

    def test_malformed_local_layout_gives_defaults(self, service, client_mock, local_store):
        client_mock.is_authenticated.return_value = False
        local_store.set_item(COLUMNS_STORAGE_KEY, "{not json")

        assert service.load() == default_columns()

    def test_malformed_server_layout_falls_back_to_local(
        self, service, settings_api_mock, local_store
    ):
        settings_api_mock.get_column_settings.return_value = "[oops"
        local_store.set_item(COLUMNS_STORAGE_KEY, json.dumps([{"id": "beta", "visible": False}]))

        columns = by_id(service.load())

        assert columns["beta"].visible is False
        assert local_store.get_item(COLUMNS_STORAGE_KEY) != "[oops"


# =============================================================================
# SAVE TESTS
# =============================================================================


class TestSave:
    """Tests for saving the layout."""

    def test_save_writes_local_and_server(self, service, settings_api_mock, local_store):
        columns = default_columns()
        columns[2].visible = False

        status = service.save(columns)

        assert status.ok
        expected = serialize_columns(columns)
        assert local_store.get_item(COLUMNS_STORAGE_KEY) == expected
        settings_api_mock.save_column_settings.assert_called_once_with(expected)

    def test_anonymous_save_is_local_only(self, service, client_mock, settings_api_mock, local_store):
        client_mock.is_authenticated.return_value = False

        status = service.save(default_columns())

        assert status.state == SaveState.SUCCESS
        assert local_store.get_item(COLUMNS_STORAGE_KEY) is not None
        settings_api_mock.save_column_settings.assert_not_called()

    def test_server_failure_reports_error_but_keeps_local(
        self, service, settings_api_mock, local_store
    ):
        """
        GIVEN the server rejects the save
        WHEN the layout is saved
        THEN an error status is returned and the local copy is still written
        """
        settings_api_mock.save_column_settings.side_effect = ApiError(
            "quota", status_code=500, detail="quota exceeded"
        )

        status = service.save(default_columns())

        assert status.state == SaveState.ERROR
        assert status.error == "quota exceeded"
        assert local_store.get_item(COLUMNS_STORAGE_KEY) is not None

    def test_server_failure_without_detail_uses_generic_message(self, service, settings_api_mock):
        settings_api_mock.save_column_settings.side_effect = ApiError("down")

        status = service.save(default_columns())

        assert status.error == "Failed to save settings"


# =============================================================================
# EDITING TESTS
# =============================================================================


class TestEditing:
    """Tests for visibility and ordering changes."""

    def test_toggle_hides_and_shows(self, service):
        service.toggle_visibility("sector")
        assert not service.is_column_visible("sector")

        service.toggle_visibility("sector")
        assert service.is_column_visible("sector")

    def test_required_column_cannot_be_hidden(self, service):
        with pytest.raises(ValidationError):
            service.toggle_visibility("ticker")

    def test_unknown_column_is_rejected(self, service):
        with pytest.raises(ValidationError):
            service.toggle_visibility("nope")

    def test_watchlist_hides_portfolio_only_columns(self, service):
        ids = [col.id for col in service.visible_columns(is_watchlist=True)]

        assert "shares_owned" not in ids
        assert "ticker" in ids
        assert not service.is_column_visible("weight", is_watchlist=True)
        assert service.is_column_visible("weight")

    def test_move_up_swaps_with_previous(self, service):
        service.move_column("sector", "up")

        ids = [col.id for col in service.visible_columns()]
        assert ids.index("sector") == ids.index("company_name") - 1

    def test_move_past_either_end_is_noop(self, service):
        before = [col.id for col in service.visible_columns()]

        service.move_column("checkbox", "up")
        service.move_column("actions", "down")

        assert [col.id for col in service.visible_columns()] == before
