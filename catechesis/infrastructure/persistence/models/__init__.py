"""Persistence models: ORM entities and mixins."""

from catechesis.infrastructure.persistence.models.attendance import AttendanceRecord
from catechesis.infrastructure.persistence.models.enrollment import (
    Enrollment,
    EnrollmentTransfer,
)
from catechesis.infrastructure.persistence.models.group import Group
from catechesis.infrastructure.persistence.models.level import Level
from catechesis.infrastructure.persistence.models.mixins import (
    CuidMixin,
    ParishScopedModel,
    TenantMixin,
    TimestampMixin,
)
from catechesis.infrastructure.persistence.models.parish import Parish
from catechesis.infrastructure.persistence.models.person import (
    BaptismRecord,
    Certificate,
    LegalRepresentative,
    Person,
)
from catechesis.infrastructure.persistence.models.user import User

__all__ = [
    "AttendanceRecord",
    "BaptismRecord",
    "Certificate",
    "CuidMixin",
    "Enrollment",
    "EnrollmentTransfer",
    "Group",
    "LegalRepresentative",
    "Level",
    "Parish",
    "ParishScopedModel",
    "Person",
    "TenantMixin",
    "TimestampMixin",
    "User",
]
