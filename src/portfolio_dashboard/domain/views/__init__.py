"""View models for service outputs."""

from portfolio_dashboard.domain.views.ticker_merge import (
    MergeCandidate,
    MergePlan,
    SimpleRename,
    TickerChange,
)
from portfolio_dashboard.domain.views.portfolio import (
    PortfolioStats,
    SaveState,
    SaveStatus,
)

__all__ = [
    "MergeCandidate",
    "MergePlan",
    "SimpleRename",
    "TickerChange",
    "PortfolioStats",
    "SaveState",
    "SaveStatus",
]
