"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the repository interfaces.
"""

from catechesis.application.interfaces import (
    IAttendanceRepository,
    ICertificateRepository,
    IEnrollmentRepository,
    IGroupRepository,
    ILevelRepository,
    IParishRepository,
    IPersonRepository,
    IUserRepository,
)
from catechesis.application.services import (
    AccessGuard,
    EligibilityValidator,
    aggregate_outcomes,
    evaluate_eligibility,
)
from catechesis.application.use_cases import (
    AttendanceReconciler,
    AttendanceReportService,
    EnrollmentWriter,
    UserOperations,
)

__all__ = [
    "AccessGuard",
    "AttendanceReconciler",
    "AttendanceReportService",
    "EligibilityValidator",
    "EnrollmentWriter",
    "IAttendanceRepository",
    "ICertificateRepository",
    "IEnrollmentRepository",
    "IGroupRepository",
    "ILevelRepository",
    "IParishRepository",
    "IPersonRepository",
    "IUserRepository",
    "UserOperations",
    "aggregate_outcomes",
    "evaluate_eligibility",
]
