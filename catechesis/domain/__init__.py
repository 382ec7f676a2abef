"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from catechesis.domain.entities import Principal
from catechesis.domain.enums import (
    Capability,
    DenialReason,
    EligibilityReason,
    OutcomeKind,
    ReportFormat,
    Role,
)
from catechesis.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    CatechesisException,
    EligibilityRequirementsNotMetException,
    EnrollmentAlreadyExistsException,
    GroupNotFoundException,
    GroupTenantMismatchException,
    InvalidAttendanceBatchException,
    PersonNotFoundException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    # Entities
    "Principal",
    # Enums
    "Capability",
    "DenialReason",
    "EligibilityReason",
    "OutcomeKind",
    "ReportFormat",
    "Role",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "CatechesisException",
    "EligibilityRequirementsNotMetException",
    "EnrollmentAlreadyExistsException",
    "GroupNotFoundException",
    "GroupTenantMismatchException",
    "InvalidAttendanceBatchException",
    "PersonNotFoundException",
    "ResourceNotFoundException",
    "ValidationException",
]
