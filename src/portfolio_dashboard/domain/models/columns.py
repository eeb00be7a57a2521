"""Stock table column layout model."""

from dataclasses import dataclass, asdict, replace
from typing import Any


@dataclass
class ColumnConfig:
    """
    Visibility and position of one stock table column.

    required columns cannot be hidden; portfolio_only columns are never shown
    in the watchlist view.
    """

    id: str
    label: str
    visible: bool = True
    order: int = 0
    required: bool = False
    portfolio_only: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        # Stored layouts use the camelCase key shared with the web dashboard
        data["portfolioOnly"] = data.pop("portfolio_only")
        return data

    def merged_with(self, saved: dict[str, Any]) -> "ColumnConfig":
        """Overlay the user-controlled attributes of a saved entry."""
        updates: dict[str, Any] = {}
        if isinstance(saved.get("visible"), bool):
            updates["visible"] = saved["visible"]
        if isinstance(saved.get("order"), int) and not isinstance(saved.get("order"), bool):
            updates["order"] = saved["order"]
        if isinstance(saved.get("label"), str) and saved["label"]:
            updates["label"] = saved["label"]
        return replace(self, **updates)


DEFAULT_COLUMNS: tuple[ColumnConfig, ...] = (
    ColumnConfig("checkbox", "Select", order=0, required=True, portfolio_only=True),
    ColumnConfig("ticker", "Ticker", order=1, required=True),
    ColumnConfig("company_name", "Company", order=2),
    ColumnConfig("sector", "Sector", order=3),
    ColumnConfig("beta", "Beta", order=4),
    ColumnConfig("avg_price_local", "Avg Price", order=5, portfolio_only=True),
    ColumnConfig("current_price", "Current Price", order=6),
    ColumnConfig("total_value", "Total Value", order=7, portfolio_only=True),
    ColumnConfig("fair_value", "Fair Value", order=8),
    ColumnConfig("upside_potential", "Upside %", order=9),
    ColumnConfig("expected_value", "EV %", order=10),
    ColumnConfig("probability_positive", "Probability", order=11),
    ColumnConfig("downside_risk", "Downside %", order=12),
    ColumnConfig("kelly_fraction", "Kelly F* %", order=13),
    ColumnConfig("half_kelly_suggested", "½-Kelly %", order=14),
    ColumnConfig("shares_owned", "Shares", order=15, portfolio_only=True),
    ColumnConfig("weight", "Weight %", order=16, portfolio_only=True),
    ColumnConfig("unrealized_pnl", "P&L", order=17, portfolio_only=True),
    ColumnConfig("assessment", "Assessment", order=18),
    ColumnConfig("actions", "Actions", order=19, required=True),
)


def default_columns() -> list[ColumnConfig]:
    """Fresh, mutable copy of the default layout."""
    return [replace(col) for col in DEFAULT_COLUMNS]
