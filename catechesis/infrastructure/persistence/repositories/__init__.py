"""SQLAlchemy repositories implementing the application repository protocols."""

from catechesis.infrastructure.persistence.repositories.attendance_repo import (
    AttendanceRepository,
)
from catechesis.infrastructure.persistence.repositories.base import BaseRepository
from catechesis.infrastructure.persistence.repositories.enrollment_repo import (
    EnrollmentRepository,
)
from catechesis.infrastructure.persistence.repositories.group_repo import GroupRepository
from catechesis.infrastructure.persistence.repositories.level_repo import LevelRepository
from catechesis.infrastructure.persistence.repositories.parish_repo import ParishRepository
from catechesis.infrastructure.persistence.repositories.person_repo import (
    CertificateRepository,
    PersonRepository,
)
from catechesis.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "AttendanceRepository",
    "BaseRepository",
    "CertificateRepository",
    "EnrollmentRepository",
    "GroupRepository",
    "LevelRepository",
    "ParishRepository",
    "PersonRepository",
    "UserRepository",
]
