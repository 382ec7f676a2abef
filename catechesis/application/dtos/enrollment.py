"""DTOs for enrollment use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class EnrollmentCreate:
    """Input for creating an enrollment.

    tenant_id is optional: when omitted it is derived from the group; when
    supplied it must equal the group's parish.
    """

    person_id: str
    group_id: str
    tenant_id: str | None = None
    paid: bool = False
    notes: str | None = None


@dataclass(frozen=True)
class EnrollmentToPersist:
    """Fully resolved enrollment row handed to the repository."""

    person_id: str
    group_id: str
    tenant_id: str
    paid: bool
    notes: str | None


@dataclass(frozen=True)
class EnrollmentResult:
    """Enrollment read-model."""

    id: str
    person_id: str
    group_id: str
    tenant_id: str
    enrolled_at: datetime
    paid: bool
    notes: str | None = None


@dataclass(frozen=True)
class AssistedEnrollmentResult:
    """Result of the assisted path: the enrollment plus any advisory findings."""

    enrollment: EnrollmentResult
    warnings: list[str] = field(default_factory=list)
    hard_failures: list[str] = field(default_factory=list)

    @property
    def has_findings(self) -> bool:
        return bool(self.warnings or self.hard_failures)


@dataclass(frozen=True)
class EnrollmentTransferResult:
    """Log row written when an enrollment moves to another group."""

    id: str
    enrollment_id: str
    from_group_id: str
    to_group_id: str
    reason: str | None
    transferred_at: datetime
    transferred_by: str
