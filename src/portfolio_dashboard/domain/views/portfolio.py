"""View models for portfolio overview outputs."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass
class PortfolioStats:
    """Headline numbers shown on a portfolio card."""

    total_value: float = 0.0
    ev: float = 0.0
    sharpe: float = 0.0
    volatility: float = 0.0
    stock_count: int = 0


class SaveState(str, Enum):
    """Outcome of persisting a preference."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass
class SaveStatus:
    state: SaveState
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.state == SaveState.SUCCESS
