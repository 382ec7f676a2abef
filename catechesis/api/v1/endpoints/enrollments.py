"""Enrollment API: thin routes delegating to EnrollmentWriter."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from catechesis.api.v1.dependencies import CurrentPrincipal, get_enrollment_writer
from catechesis.application.dtos.enrollment import EnrollmentCreate
from catechesis.application.use_cases.enrollments import EnrollmentWriter
from catechesis.schemas.enrollment import (
    AssistedEnrollmentRequest,
    AssistedEnrollmentResponse,
    EnrollmentCreateRequest,
    EnrollmentResponse,
    PaymentUpdateRequest,
    TransferRequest,
    TransferResponse,
)
from catechesis.schemas.error import ErrorResponse

router = APIRouter()

Writer = Annotated[EnrollmentWriter, Depends(get_enrollment_writer)]


def _to_create(body: EnrollmentCreateRequest) -> EnrollmentCreate:
    return EnrollmentCreate(
        person_id=body.person_id,
        group_id=body.group_id,
        tenant_id=body.tenant_id,
        paid=body.paid,
        notes=body.notes,
    )


@router.post(
    "",
    response_model=EnrollmentResponse,
    status_code=201,
    responses={409: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)
async def create_enrollment(
    body: EnrollmentCreateRequest,
    principal: CurrentPrincipal,
    writer: Writer,
) -> EnrollmentResponse:
    """Create an enrollment (no eligibility rules applied)."""
    enrollment = await writer.create_enrollment(principal, _to_create(body))
    return EnrollmentResponse.model_validate(enrollment)


@router.post(
    "/assisted",
    response_model=AssistedEnrollmentResponse,
    status_code=201,
    responses={
        200: {"description": "Created with eligibility warnings"},
        400: {"model": ErrorResponse, "description": "Eligibility requirements not met"},
    },
)
async def create_enrollment_assisted(
    body: AssistedEnrollmentRequest,
    principal: CurrentPrincipal,
    writer: Writer,
    response: Response,
) -> AssistedEnrollmentResponse:
    """Create an enrollment after eligibility; 201 when clean, 200 when warnings are present."""
    result = await writer.create_enrollment_assisted(
        principal, _to_create(body), enforce_eligibility=body.enforce_eligibility
    )
    if result.has_findings:
        response.status_code = 200
    return AssistedEnrollmentResponse(
        enrollment=EnrollmentResponse.model_validate(result.enrollment),
        warnings=result.warnings,
        hard_failures=result.hard_failures,
    )


@router.patch("/{enrollment_id}/payment", response_model=EnrollmentResponse)
async def update_payment(
    enrollment_id: str,
    body: PaymentUpdateRequest,
    principal: CurrentPrincipal,
    writer: Writer,
) -> EnrollmentResponse:
    """Set or clear the paid flag."""
    enrollment = await writer.update_payment(principal, enrollment_id, body.paid)
    return EnrollmentResponse.model_validate(enrollment)


@router.post("/{enrollment_id}/transfer", response_model=TransferResponse)
async def transfer_enrollment(
    enrollment_id: str,
    body: TransferRequest,
    principal: CurrentPrincipal,
    writer: Writer,
) -> TransferResponse:
    """Move an enrollment to another group of the same parish."""
    enrollment, transfer = await writer.transfer_enrollment(
        principal, enrollment_id, body.to_group_id, body.reason
    )
    return TransferResponse(
        enrollment=EnrollmentResponse.model_validate(enrollment),
        transfer_id=transfer.id,
        from_group_id=transfer.from_group_id,
        to_group_id=transfer.to_group_id,
        reason=transfer.reason,
        transferred_at=transfer.transferred_at,
    )


@router.delete("/{enrollment_id}", status_code=204)
async def delete_enrollment(
    enrollment_id: str,
    principal: CurrentPrincipal,
    writer: Writer,
) -> Response:
    """Delete an enrollment and its attendance."""
    await writer.delete_enrollment(principal, enrollment_id)
    return Response(status_code=204)
