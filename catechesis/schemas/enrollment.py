"""Enrollment API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EnrollmentCreateRequest(BaseModel):
    """Request body for POST /enrollments and POST /enrollments/assisted.

    tenant_id is optional; when given it must match the group's parish.
    """

    person_id: str = Field(..., min_length=1)
    group_id: str = Field(..., min_length=1)
    tenant_id: str | None = None
    paid: bool = False
    notes: str | None = Field(default=None, max_length=2000)


class AssistedEnrollmentRequest(EnrollmentCreateRequest):
    """Assisted creation; enforce_eligibility aborts on any hard failure."""

    enforce_eligibility: bool = True


class EnrollmentResponse(BaseModel):
    """Enrollment response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    person_id: str
    group_id: str
    tenant_id: str
    enrolled_at: datetime
    paid: bool
    notes: str | None = None


class AssistedEnrollmentResponse(BaseModel):
    """Enrollment plus advisory findings from the eligibility rules."""

    enrollment: EnrollmentResponse
    warnings: list[str]
    hard_failures: list[str]


class PaymentUpdateRequest(BaseModel):
    """Request body for PATCH /enrollments/{id}/payment."""

    paid: bool


class TransferRequest(BaseModel):
    """Request body for POST /enrollments/{id}/transfer."""

    to_group_id: str = Field(..., min_length=1)
    reason: str | None = Field(default=None, max_length=2000)


class TransferResponse(BaseModel):
    """Result of a transfer: updated enrollment and the log row."""

    enrollment: EnrollmentResponse
    transfer_id: str
    from_group_id: str
    to_group_id: str
    reason: str | None
    transferred_at: datetime
