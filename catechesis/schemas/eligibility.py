"""Eligibility API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class EligibilityCheckRequest(BaseModel):
    """Request body for POST /eligibility/check."""

    person_id: str = Field(..., min_length=1)
    level_id: str = Field(..., min_length=1)


class EligibilityVerdictResponse(BaseModel):
    """Verdict: eligible is True exactly when hard_failures is empty."""

    model_config = ConfigDict(from_attributes=True)

    eligible: bool
    hard_failures: list[str]
    soft_warnings: list[str]
    satisfied: list[str] = Field(default_factory=list)
