"""Stock table column layout: load, merge with defaults, save."""

import json
import logging
from dataclasses import replace
from typing import Any, Literal, Optional

from portfolio_dashboard.api.client import ApiClient
from portfolio_dashboard.api.endpoints.settings import SettingsAPI
from portfolio_dashboard.core.exceptions import ApiError, ValidationError
from portfolio_dashboard.domain.models.columns import ColumnConfig, default_columns
from portfolio_dashboard.domain.views.portfolio import SaveState, SaveStatus
from portfolio_dashboard.repositories.protocols import LocalStore

logger = logging.getLogger(__name__)

COLUMNS_STORAGE_KEY = "stock-table-columns"


def merge_with_defaults(saved: Any) -> list[ColumnConfig]:
    """
    Overlay a saved layout onto the default columns.

    Defaults missing from the saved layout keep their default settings; saved
    entries for columns that no longer exist are dropped.
    """
    if not isinstance(saved, list):
        return default_columns()
    saved_by_id = {
        entry["id"]: entry
        for entry in saved
        if isinstance(entry, dict) and isinstance(entry.get("id"), str)
    }
    merged = []
    for column in default_columns():
        entry = saved_by_id.get(column.id)
        merged.append(column.merged_with(entry) if entry else column)
    return merged


def serialize_columns(columns: list[ColumnConfig]) -> str:
    return json.dumps([col.to_dict() for col in columns])


class ColumnSettingsService:
    """
    Column visibility and ordering preferences.

    The server copy wins when the user is logged in; the local store mirrors it
    and is the fallback when the server has nothing or cannot be reached.
    """

    def __init__(self, settings_api: SettingsAPI, client: ApiClient, local_store: LocalStore):
        self._settings_api = settings_api
        self._client = client
        self._local = local_store
        self._columns: list[ColumnConfig] = default_columns()

    @property
    def columns(self) -> list[ColumnConfig]:
        return list(self._columns)

    def load(self) -> list[ColumnConfig]:
        if not self._client.is_authenticated():
            self._columns = self._load_local()
            return self.columns

        try:
            settings_json = self._settings_api.get_column_settings()
        except ApiError as e:
            logger.error("Failed to load column settings from API: %s", e.message)
            self._columns = self._load_local()
            return self.columns

        if settings_json:
            try:
                self._columns = merge_with_defaults(json.loads(settings_json))
            except ValueError:
                logger.warning("Ignoring malformed column settings from API")
                self._columns = self._load_local()
            else:
                self._local.set_item(COLUMNS_STORAGE_KEY, settings_json)
        else:
            self._columns = self._load_local()
        return self.columns

    def _load_local(self) -> list[ColumnConfig]:
        saved = self._local.get_item(COLUMNS_STORAGE_KEY)
        if not saved:
            return default_columns()
        try:
            return merge_with_defaults(json.loads(saved))
        except ValueError:
            logger.error("Failed to load column settings from local storage")
            return default_columns()

    def save(self, columns: list[ColumnConfig]) -> SaveStatus:
        """Persist locally, then push to the server when logged in."""
        self._columns = [replace(col) for col in columns]
        settings_json = serialize_columns(self._columns)
        self._local.set_item(COLUMNS_STORAGE_KEY, settings_json)

        if not self._client.is_authenticated():
            return SaveStatus(SaveState.SUCCESS)

        try:
            self._settings_api.save_column_settings(settings_json)
        except ApiError as e:
            logger.error("Failed to save column settings to API: %s", e.message)
            return SaveStatus(SaveState.ERROR, e.detail or "Failed to save settings")
        return SaveStatus(SaveState.SUCCESS)

    def visible_columns(self, is_watchlist: bool = False) -> list[ColumnConfig]:
        shown = [
            col
            for col in self._columns
            if col.visible and not (is_watchlist and col.portfolio_only)
        ]
        return sorted(shown, key=lambda col: col.order)

    def is_column_visible(self, column_id: str, is_watchlist: bool = False) -> bool:
        column = self._find(column_id)
        if column is None:
            return False
        if is_watchlist and column.portfolio_only:
            return False
        return column.visible

    # Editing

    def _find(self, column_id: str) -> Optional[ColumnConfig]:
        return next((col for col in self._columns if col.id == column_id), None)

    def toggle_visibility(self, column_id: str) -> list[ColumnConfig]:
        column = self._find(column_id)
        if column is None:
            raise ValidationError(f"Unknown column: {column_id}")
        if column.required:
            raise ValidationError(f"Column {column.label} cannot be hidden")
        column.visible = not column.visible
        return self.columns

    def move_column(self, column_id: str, direction: Literal["up", "down"]) -> list[ColumnConfig]:
        """Swap a column's order with its neighbour; no-op at either end."""
        ordered = sorted(self._columns, key=lambda col: col.order)
        index = next((i for i, col in enumerate(ordered) if col.id == column_id), None)
        if index is None:
            raise ValidationError(f"Unknown column: {column_id}")

        neighbour = index - 1 if direction == "up" else index + 1
        if 0 <= neighbour < len(ordered):
            current, other = ordered[index], ordered[neighbour]
            current.order, other.order = other.order, current.order
        return self.columns
