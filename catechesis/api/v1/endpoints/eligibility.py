"""Eligibility API: strict-path verdict for a person and a level."""

from typing import Annotated

from fastapi import APIRouter, Depends

from catechesis.api.v1.dependencies import CurrentPrincipal, get_eligibility_validator
from catechesis.application.services.eligibility_validator import EligibilityValidator
from catechesis.schemas.eligibility import EligibilityCheckRequest, EligibilityVerdictResponse

router = APIRouter()


@router.post("/check", response_model=EligibilityVerdictResponse)
async def check_eligibility(
    body: EligibilityCheckRequest,
    principal: CurrentPrincipal,
    validator: Annotated[EligibilityValidator, Depends(get_eligibility_validator)],
) -> EligibilityVerdictResponse:
    """Return the verdict; ineligibility is a 200 with hard_failures, not an error."""
    verdict = await validator.check(principal, body.person_id, body.level_id)
    return EligibilityVerdictResponse(**verdict.to_dict())
