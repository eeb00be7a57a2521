"""Pydantic schemas for AI-generated stock assessments."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

AssessmentSource = Literal["grok", "deepseek"]


class AssessmentRequest(BaseModel):
    """Request body for POST /assessment/request."""

    ticker: str
    source: AssessmentSource


class Assessment(BaseModel):
    """A stored assessment and its generation status."""

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    ticker: str
    source: str
    assessment: str = ""
    created_at: Optional[str] = None
    status: Literal["pending", "completed", "failed"] = "completed"
