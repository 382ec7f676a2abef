"""Application interfaces (ports) implemented by infrastructure."""

from catechesis.application.interfaces.repositories import (
    IAttendanceRepository,
    ICertificateRepository,
    IEnrollmentRepository,
    IGroupRepository,
    ILevelRepository,
    IParishRepository,
    IPersonRepository,
    IUserRepository,
)
from catechesis.application.interfaces.unit_of_work import IUnitOfWork

__all__ = [
    "IAttendanceRepository",
    "ICertificateRepository",
    "IEnrollmentRepository",
    "IGroupRepository",
    "ILevelRepository",
    "IParishRepository",
    "IPersonRepository",
    "IUnitOfWork",
    "IUserRepository",
]
