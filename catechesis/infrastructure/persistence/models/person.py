"""Catechumen ORM model and the records attached to a person."""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, String, text
from sqlalchemy.orm import Mapped, mapped_column

from catechesis.infrastructure.persistence.database import Base
from catechesis.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Person(CuidMixin, TimestampMixin, Base):
    """Person. Table: person. Not owned by a parish; enrollments may span parishes."""

    __tablename__ = "person"

    first_names: Mapped[str] = mapped_column(String, nullable=False)
    last_names: Mapped[str] = mapped_column(String, nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    document_id: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    special_case: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )


class BaptismRecord(CuidMixin, TimestampMixin, Base):
    """Baptism data for a person. Table: baptism_record (at most one per person)."""

    __tablename__ = "baptism_record"

    person_id: Mapped[str] = mapped_column(
        String, ForeignKey("person.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    parish_name: Mapped[str] = mapped_column(String, nullable=False)
    baptized_on: Mapped[date | None] = mapped_column(Date, nullable=True)


class LegalRepresentative(CuidMixin, TimestampMixin, Base):
    """Legal representative of a person. Table: legal_representative."""

    __tablename__ = "legal_representative"

    person_id: Mapped[str] = mapped_column(
        String, ForeignKey("person.id", ondelete="CASCADE"), nullable=False, index=True
    )
    names: Mapped[str] = mapped_column(String, nullable=False)
    relationship: Mapped[str] = mapped_column(String, nullable=False)


class Certificate(CuidMixin, TimestampMixin, Base):
    """Level certificate for a person. Table: certificate."""

    __tablename__ = "certificate"

    person_id: Mapped[str] = mapped_column(
        String, ForeignKey("person.id", ondelete="CASCADE"), nullable=False, index=True
    )
    level_id: Mapped[str] = mapped_column(
        String, ForeignKey("level.id", ondelete="RESTRICT"), nullable=False
    )
    approved: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
    issued_at: Mapped[date | None] = mapped_column(Date, nullable=True)
