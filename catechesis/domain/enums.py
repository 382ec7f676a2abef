"""Domain enumerations for the catechesis records application.

Roles, capabilities, and the stable codes used for access denials,
eligibility rules and batch outcomes.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class Role(_ValuesMixin, str, Enum):
    """User role. Only ADMIN is allowed to exist without a parish."""

    ADMIN = "admin"
    PARISH_ADMIN = "parish_admin"
    SECRETARY = "secretary"
    CATECHIST = "catechist"
    READONLY = "readonly"

    @property
    def requires_tenant(self) -> bool:
        return self is not Role.ADMIN


class Capability(_ValuesMixin, str, Enum):
    """Operation a principal may perform on a resource (resource:action)."""

    PARISH_READ = "parish:read"
    PARISH_CREATE = "parish:create"
    PARISH_UPDATE = "parish:update"
    PARISH_DELETE = "parish:delete"

    LEVEL_READ = "level:read"
    LEVEL_MANAGE = "level:manage"

    GROUP_READ = "group:read"
    GROUP_CREATE = "group:create"
    GROUP_UPDATE = "group:update"
    GROUP_DELETE = "group:delete"

    PERSON_READ = "person:read"

    ENROLLMENT_READ = "enrollment:read"
    ENROLLMENT_CREATE = "enrollment:create"
    ENROLLMENT_UPDATE = "enrollment:update"
    ENROLLMENT_PAYMENT = "enrollment:payment"
    ENROLLMENT_TRANSFER = "enrollment:transfer"
    ENROLLMENT_DELETE = "enrollment:delete"
    ELIGIBILITY_READ = "eligibility:read"

    ATTENDANCE_READ = "attendance:read"
    ATTENDANCE_RECORD = "attendance:record"
    ATTENDANCE_UPDATE = "attendance:update"
    ATTENDANCE_DELETE = "attendance:delete"

    REPORT_EXPORT = "report:export"

    USER_READ = "user:read"
    USER_CREATE = "user:create"
    USER_UPDATE = "user:update"
    USER_DEACTIVATE = "user:deactivate"
    USER_DELETE = "user:delete"


class DenialReason(_ValuesMixin, str, Enum):
    """Why the access guard refused an operation."""

    CROSS_TENANT = "CROSS_TENANT"
    MISSING_CAPABILITY = "MISSING_CAPABILITY"
    SELF_ACTION = "SELF_ACTION"


class EligibilityReason(_ValuesMixin, str, Enum):
    """Eligibility rule codes, reported as hard failures or soft warnings."""

    AGE_FLOOR = "AGE_FLOOR"
    ACTIVE_ENROLLMENT_EXISTS = "ACTIVE_ENROLLMENT_EXISTS"
    LEVEL_SEQUENCE_INCOMPLETE = "LEVEL_SEQUENCE_INCOMPLETE"
    BAPTISM_RECORD_MISSING = "BAPTISM_RECORD_MISSING"
    LEGAL_REPRESENTATIVE_MISSING = "LEGAL_REPRESENTATIVE_MISSING"


class OutcomeKind(_ValuesMixin, str, Enum):
    """Per-item result of attendance reconciliation."""

    CREATED = "created"
    UPDATED = "updated"
    ERROR = "error"


class ReportFormat(_ValuesMixin, str, Enum):
    """Export format for attendance reports."""

    JSON = "json"
    CSV = "csv"
