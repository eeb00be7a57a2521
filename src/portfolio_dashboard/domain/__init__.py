"""Domain layer - models and view types."""

from portfolio_dashboard.domain.models import (
    ColumnConfig,
    DEFAULT_COLUMNS,
    default_columns,
)
from portfolio_dashboard.domain.views import (
    MergeCandidate,
    MergePlan,
    SimpleRename,
    TickerChange,
    PortfolioStats,
    SaveState,
    SaveStatus,
)

__all__ = [
    "ColumnConfig",
    "DEFAULT_COLUMNS",
    "default_columns",
    "MergeCandidate",
    "MergePlan",
    "SimpleRename",
    "TickerChange",
    "PortfolioStats",
    "SaveState",
    "SaveStatus",
]
