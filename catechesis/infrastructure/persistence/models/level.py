"""Curriculum level ORM model."""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catechesis.infrastructure.persistence.database import Base
from catechesis.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Level(CuidMixin, TimestampMixin, Base):
    """Level. Table: level. order is unique and positive (total order of the curriculum)."""

    __tablename__ = "level"

    name: Mapped[str] = mapped_column(String, nullable=False)
    order: Mapped[int] = mapped_column("sort_order", Integer, nullable=False, unique=True)

    __table_args__ = (CheckConstraint("sort_order > 0", name="ck_level_order_positive"),)
