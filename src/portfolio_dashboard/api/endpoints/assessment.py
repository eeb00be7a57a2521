"""AI assessment endpoints."""

from portfolio_dashboard.api.client import ApiClient
from portfolio_dashboard.api.schemas import Assessment, AssessmentRequest, AssessmentSource


class AssessmentAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    def request(self, ticker: str, source: AssessmentSource) -> str:
        """Generate an assessment and return its text."""
        payload = AssessmentRequest(ticker=ticker.strip().upper(), source=source)
        body = self._client.post("/assessment/request", json=payload.model_dump()) or {}
        return body.get("assessment", "")

    def get_recent(self) -> list[Assessment]:
        body = self._client.get("/assessment/recent") or []
        return [Assessment.model_validate(item) for item in body]

    def get_by_id(self, assessment_id: int) -> Assessment:
        return Assessment.model_validate(self._client.get(f"/assessment/{assessment_id}"))
