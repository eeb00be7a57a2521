"""View models for ticker rename and duplicate-merge decisions."""

from dataclasses import dataclass, field
from typing import Any, Union

from portfolio_dashboard.api.schemas import Stock


@dataclass
class MergeCandidate:
    """A stock scored by how many completeness fields it has filled."""

    stock: Stock
    filled_count: int
    empty_fields: list[str] = field(default_factory=list)


@dataclass
class SimpleRename:
    """Outcome when the new ticker collides with no other stock."""

    stock: Stock
    new_ticker: str

    @property
    def changed(self) -> bool:
        return self.new_ticker != self.stock.ticker


@dataclass
class MergePlan:
    """
    Outcome when the new ticker collides with another stock.

    target survives and receives new_ticker plus every entry of transfers;
    source is deleted afterwards. target.filled_count >= source.filled_count.
    """

    target: MergeCandidate
    source: MergeCandidate
    new_ticker: str
    transfers: dict[str, Any] = field(default_factory=dict)

    @property
    def fields_to_transfer(self) -> list[str]:
        return list(self.transfers)

    def update_payload(self) -> dict[str, Any]:
        """Body for the single batched update of the target."""
        return {"ticker": self.new_ticker, **self.transfers}

    @property
    def delete_reason(self) -> str:
        company = self.target.stock.company_name
        if not company:
            return f"Merged into {self.new_ticker}"
        return f"Merged into {self.new_ticker} ({company})"

    def merged_stock(self) -> Stock:
        """The target as it will look once the update has been applied."""
        return self.target.stock.model_copy(update=self.update_payload())


TickerChange = Union[SimpleRename, MergePlan]
