"""
Duplicate-ticker detection and merge planning.

Renaming a stock's ticker to one already used by another stock would leave two
active stocks with the same ticker. Instead of overwriting either record, the
change is resolved into a MergePlan: the more complete record survives with the
new ticker and inherits the other's data for fields it lacks, and the other is
deleted. Everything here is pure; applying a plan is done by TickerEditService.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from portfolio_dashboard.api.schemas import Stock
from portfolio_dashboard.domain.views.ticker_merge import (
    MergeCandidate,
    MergePlan,
    SimpleRename,
    TickerChange,
)
from portfolio_dashboard.services.stock_filters import format_field_name


@dataclass(frozen=True)
class CompletenessField:
    """A stock field that counts towards data completeness."""

    name: str
    get: Callable[[Stock], Any]


COMPLETENESS_FIELDS: tuple[CompletenessField, ...] = (
    CompletenessField("company_name", lambda s: s.company_name),
    CompletenessField("sector", lambda s: s.sector),
    CompletenessField("isin", lambda s: s.isin),
    CompletenessField("current_price", lambda s: s.current_price),
    CompletenessField("fair_value", lambda s: s.fair_value),
    CompletenessField("beta", lambda s: s.beta),
    CompletenessField("volatility", lambda s: s.volatility),
    CompletenessField("pe_ratio", lambda s: s.pe_ratio),
    CompletenessField("eps_growth_rate", lambda s: s.eps_growth_rate),
    CompletenessField("debt_to_ebitda", lambda s: s.debt_to_ebitda),
    CompletenessField("dividend_yield", lambda s: s.dividend_yield),
    CompletenessField("shares_owned", lambda s: s.shares_owned),
    CompletenessField("avg_price_local", lambda s: s.avg_price_local),
    CompletenessField("comment", lambda s: s.comment),
)

_FIELDS_BY_NAME = {f.name: f for f in COMPLETENESS_FIELDS}


def is_empty_value(value: Any) -> bool:
    """
    True for None, empty string, and numeric zero.

    Zero is treated as unset, so a legitimate 0 (no shares owned, 0% dividend
    yield) is indistinguishable from a missing value.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    return False


def _read(stock: Stock, descriptor: CompletenessField) -> Any:
    try:
        return descriptor.get(stock)
    except AttributeError:
        return None


def evaluate_completeness(stock: Stock) -> MergeCandidate:
    """Count filled completeness fields and list the empty ones."""
    empty_fields: list[str] = []
    filled = 0
    for descriptor in COMPLETENESS_FIELDS:
        if is_empty_value(_read(stock, descriptor)):
            empty_fields.append(descriptor.name)
        else:
            filled += 1
    return MergeCandidate(stock=stock, filled_count=filled, empty_fields=empty_fields)


def normalize_ticker(ticker: str) -> str:
    return (ticker or "").strip().upper()


def find_duplicate(new_ticker: str, stock: Stock, all_stocks: list[Stock]) -> Optional[Stock]:
    """
    Return the other stock whose ticker matches new_ticker, ignoring case.

    The edited stock itself never counts. When several match, the first in
    all_stocks is returned.
    """
    wanted = normalize_ticker(new_ticker)
    if not wanted:
        return None
    for other in all_stocks:
        if other.id == stock.id:
            continue
        if normalize_ticker(other.ticker) == wanted:
            return other
    return None


def plan_transfers(target: MergeCandidate, source: MergeCandidate) -> dict[str, Any]:
    """Source values for every field that is empty on target and filled on source."""
    transfers: dict[str, Any] = {}
    for name in target.empty_fields:
        value = _read(source.stock, _FIELDS_BY_NAME[name])
        if not is_empty_value(value):
            transfers[name] = value
    return transfers


def build_merge_plan(edited: Stock, duplicate: Stock, new_ticker: str) -> MergePlan:
    """
    Pick the surviving record and compute what it inherits.

    The record with strictly more filled fields is the target; on a tie the
    stock being edited is kept.
    """
    edited_candidate = evaluate_completeness(edited)
    duplicate_candidate = evaluate_completeness(duplicate)

    if edited_candidate.filled_count >= duplicate_candidate.filled_count:
        target, source = edited_candidate, duplicate_candidate
    else:
        target, source = duplicate_candidate, edited_candidate

    return MergePlan(
        target=target,
        source=source,
        new_ticker=normalize_ticker(new_ticker),
        transfers=plan_transfers(target, source),
    )


def resolve_ticker_change(new_ticker: str, stock: Stock, all_stocks: list[Stock]) -> TickerChange:
    """
    Decide how renaming stock to new_ticker should be carried out.

    Returns SimpleRename when no other stock uses the ticker (or the ticker is
    unchanged), otherwise a MergePlan. Re-evaluate on every change of
    new_ticker; nothing is remembered between calls.
    """
    normalized = normalize_ticker(new_ticker)
    if normalized == normalize_ticker(stock.ticker):
        return SimpleRename(stock=stock, new_ticker=normalized)

    duplicate = find_duplicate(normalized, stock, all_stocks)
    if duplicate is None:
        return SimpleRename(stock=stock, new_ticker=normalized)

    return build_merge_plan(stock, duplicate, normalized)


def transfer_labels(plan: MergePlan) -> list[str]:
    """Display names of the fields the merge copies onto the surviving stock."""
    return [format_field_name(name) for name in plan.fields_to_transfer]
