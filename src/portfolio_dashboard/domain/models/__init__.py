"""Domain models."""

from portfolio_dashboard.domain.models.columns import (
    ColumnConfig,
    DEFAULT_COLUMNS,
    default_columns,
)

__all__ = [
    "ColumnConfig",
    "DEFAULT_COLUMNS",
    "default_columns",
]
