"""Attendance record ORM model."""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from catechesis.infrastructure.persistence.database import Base
from catechesis.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class AttendanceRecord(CuidMixin, TimestampMixin, Base):
    """Attendance. Table: attendance_record. Unique (enrollment_id, attended_on)."""

    __tablename__ = "attendance_record"

    enrollment_id: Mapped[str] = mapped_column(
        String, ForeignKey("enrollment.id", ondelete="CASCADE"), nullable=False, index=True
    )
    attended_on: Mapped[date] = mapped_column(Date, nullable=False)
    present: Mapped[bool] = mapped_column(Boolean, nullable=False)

    __table_args__ = (
        UniqueConstraint("enrollment_id", "attended_on", name="uq_attendance_enrollment_day"),
    )
