"""Enrollment and enrollment transfer ORM models."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from catechesis.infrastructure.persistence.database import Base
from catechesis.infrastructure.persistence.models.mixins import (
    CuidMixin,
    ParishScopedModel,
    TimestampMixin,
)


class Enrollment(ParishScopedModel, Base):
    """Enrollment. Table: enrollment. Unique (person_id, group_id); tenant_id copies the group's."""

    __tablename__ = "enrollment"

    person_id: Mapped[str] = mapped_column(
        String, ForeignKey("person.id", ondelete="CASCADE"), nullable=False, index=True
    )
    group_id: Mapped[str] = mapped_column(
        String, ForeignKey("class_group.id", ondelete="CASCADE"), nullable=False, index=True
    )
    enrolled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("person_id", "group_id", name="uq_enrollment_person_group"),
    )


class EnrollmentTransfer(CuidMixin, TimestampMixin, Base):
    """Log of an enrollment moving between groups. Table: enrollment_transfer."""

    __tablename__ = "enrollment_transfer"

    enrollment_id: Mapped[str] = mapped_column(
        String, ForeignKey("enrollment.id", ondelete="CASCADE"), nullable=False, index=True
    )
    from_group_id: Mapped[str] = mapped_column(String, nullable=False)
    to_group_id: Mapped[str] = mapped_column(String, nullable=False)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    transferred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    transferred_by: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )
