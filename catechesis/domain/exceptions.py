"""Domain exceptions for the catechesis records application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers (by error_code).
"""

from typing import Any


class CatechesisException(Exception):
    """Base exception for all catechesis application errors.

    All custom exceptions inherit from this class to allow consistent
    error handling and logging. Presentation layer maps these to HTTP
    responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the error envelope returned by the API."""
        payload: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationException(CatechesisException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(CatechesisException):
    """Raised when authentication fails (e.g. invalid token or inactive user)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(CatechesisException):
    """Raised when the access guard denies an operation.

    The denial reason (CROSS_TENANT, MISSING_CAPABILITY, SELF_ACTION) is
    carried in details so clients can tell the cases apart without
    parsing the message.
    """

    def __init__(
        self,
        reason: str,
        capability: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with the denial reason and the capability checked.

        Args:
            reason: DenialReason value.
            capability: Capability that was checked (e.g. 'enrollment:create').
            message: Human-readable message; a default is built from capability.
        """
        if capability and message == "Permission denied":
            message = f"Permission denied: {capability}"
        details: dict[str, Any] = {"reason": reason}
        if capability:
            details["capability"] = capability
        super().__init__(message, "PERMISSION_DENIED", details)
        self.reason = reason
        self.capability = capability


class ResourceNotFoundException(CatechesisException):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        error_code: str = "RESOURCE_NOT_FOUND",
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'group', 'person').
            resource_id: The ID that was not found.
            error_code: Specific code for well-known resources.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            error_code,
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class GroupNotFoundException(ResourceNotFoundException):
    """Raised when a group does not exist."""

    def __init__(self, group_id: str) -> None:
        super().__init__("group", group_id, "GROUP_NOT_FOUND")


class PersonNotFoundException(ResourceNotFoundException):
    """Raised when a catechumen does not exist."""

    def __init__(self, person_id: str) -> None:
        super().__init__("person", person_id, "PERSON_NOT_FOUND")


class LevelNotFoundException(ResourceNotFoundException):
    """Raised when a curriculum level does not exist."""

    def __init__(self, level_id: str) -> None:
        super().__init__("level", level_id, "LEVEL_NOT_FOUND")


class EnrollmentNotFoundException(ResourceNotFoundException):
    """Raised when an enrollment does not exist."""

    def __init__(self, enrollment_id: str) -> None:
        super().__init__("enrollment", enrollment_id, "ENROLLMENT_NOT_FOUND")


class AttendanceRecordNotFoundException(ResourceNotFoundException):
    """Raised when an attendance record does not exist."""

    def __init__(self, record_id: str) -> None:
        super().__init__("attendance_record", record_id, "ATTENDANCE_RECORD_NOT_FOUND")


class UserNotFoundException(ResourceNotFoundException):
    """Raised when a user does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__("user", user_id, "USER_NOT_FOUND")


class ParishNotFoundException(ResourceNotFoundException):
    """Raised when a parish (tenant) does not exist."""

    def __init__(self, parish_id: str) -> None:
        super().__init__("parish", parish_id, "PARISH_NOT_FOUND")


class GroupTenantMismatchException(CatechesisException):
    """Raised when a caller-supplied parish differs from the group's parish."""

    def __init__(self, group_id: str, group_tenant_id: str, supplied_tenant_id: str) -> None:
        super().__init__(
            "Parish does not match the parish of the group",
            "GROUP_TENANT_MISMATCH",
            {
                "group_id": group_id,
                "group_tenant_id": group_tenant_id,
                "supplied_tenant_id": supplied_tenant_id,
            },
        )


class EnrollmentAlreadyExistsException(CatechesisException):
    """Raised when the person is already enrolled in the group (unique constraint)."""

    def __init__(self, person_id: str, group_id: str) -> None:
        super().__init__(
            "Person is already enrolled in this group",
            "ENROLLMENT_ALREADY_EXISTS",
            {"person_id": person_id, "group_id": group_id},
        )


class AttendanceAlreadyRecordedException(CatechesisException):
    """Raised by the store when attendance for (enrollment, day) already exists."""

    def __init__(self, enrollment_id: str, day: str) -> None:
        super().__init__(
            "Attendance already recorded for this day",
            "ATTENDANCE_ALREADY_RECORDED",
            {"enrollment_id": enrollment_id, "day": day},
        )


class EligibilityRequirementsNotMetException(CatechesisException):
    """Raised on the assisted path when enforcement is on and a hard rule fails.

    Details carry the full verdict so the client can show every reason.
    """

    def __init__(self, hard_failures: list[str], soft_warnings: list[str]) -> None:
        super().__init__(
            "Eligibility requirements not met",
            "ELIGIBILITY_REQUIREMENTS_NOT_MET",
            {"hard_failures": hard_failures, "soft_warnings": soft_warnings},
        )


class InvalidAttendanceBatchException(CatechesisException):
    """Raised when an attendance batch is structurally invalid."""

    def __init__(self, message: str, index: int | None = None) -> None:
        details: dict[str, Any] = {}
        if index is not None:
            details["index"] = index
        super().__init__(message, "INVALID_ATTENDANCE_BATCH", details)


class InvalidTransferException(CatechesisException):
    """Raised when an enrollment transfer target is not acceptable."""

    def __init__(self, message: str, enrollment_id: str, to_group_id: str) -> None:
        super().__init__(
            message,
            "INVALID_TRANSFER",
            {"enrollment_id": enrollment_id, "to_group_id": to_group_id},
        )


class ParishRequiredException(CatechesisException):
    """Raised when a non-admin user is created or re-roled without a parish."""

    def __init__(self, role: str) -> None:
        super().__init__(
            f"Role '{role}' requires a parish",
            "PARISH_REQUIRED",
            {"role": role},
        )


class AdminCannotHaveParishException(CatechesisException):
    """Raised when an admin user is given a parish."""

    def __init__(self) -> None:
        super().__init__(
            "Administrators cannot be assigned to a parish",
            "ADMIN_CANNOT_HAVE_PARISH",
            {},
        )


class UserAlreadyExistsException(CatechesisException):
    """Raised when creating a user whose username is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__(
            "Username already registered",
            "USER_ALREADY_EXISTS",
            {"username": username},
        )


class SqlNotConfiguredException(CatechesisException):
    """Raised when an operation requires Postgres but no database is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
