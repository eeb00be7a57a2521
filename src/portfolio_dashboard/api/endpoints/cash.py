"""Cash holding and exchange rate endpoints."""

from typing import Any, Optional

from portfolio_dashboard.api.client import ApiClient
from portfolio_dashboard.api.schemas import CashHolding, ExchangeRate


class ExchangeRateAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    def get_all(self) -> list[ExchangeRate]:
        body = self._client.get("/exchange-rates") or []
        return [ExchangeRate.model_validate(item) for item in body]

    def refresh(self) -> Any:
        return self._client.post("/exchange-rates/refresh")

    def add(self, currency_code: str, rate: float, is_manual: bool = True) -> Any:
        return self._client.post(
            "/exchange-rates",
            json={"currency_code": currency_code.upper(), "rate": rate, "is_manual": is_manual},
        )

    def update(self, code: str, rate: float, is_manual: bool = True) -> Any:
        return self._client.put(
            f"/exchange-rates/{code}",
            json={"rate": rate, "is_manual": is_manual},
        )

    def delete(self, code: str) -> None:
        self._client.delete(f"/exchange-rates/{code}")


class CashAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    def get_all(self) -> list[CashHolding]:
        body = self._client.get("/cash") or []
        return [CashHolding.model_validate(item) for item in body]

    def create(self, currency_code: str, amount: float, description: Optional[str] = None) -> CashHolding:
        data: dict[str, Any] = {"currency_code": currency_code.upper(), "amount": amount}
        if description is not None:
            data["description"] = description
        return CashHolding.model_validate(self._client.post("/cash", json=data))

    def update(self, holding_id: int, amount: float, description: Optional[str] = None) -> CashHolding:
        data: dict[str, Any] = {"amount": amount}
        if description is not None:
            data["description"] = description
        return CashHolding.model_validate(self._client.put(f"/cash/{holding_id}", json=data))

    def delete(self, holding_id: int) -> None:
        self._client.delete(f"/cash/{holding_id}")

    def refresh_usd(self) -> Any:
        """Recompute USD values from the current exchange rates."""
        return self._client.post("/cash/refresh")
