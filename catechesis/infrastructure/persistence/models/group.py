"""Teaching group ORM model."""

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from catechesis.infrastructure.persistence.database import Base
from catechesis.infrastructure.persistence.models.mixins import ParishScopedModel


class Group(ParishScopedModel, Base):
    """Group. Table: class_group. Unique (tenant_id, name, period)."""

    __tablename__ = "class_group"

    level_id: Mapped[str] = mapped_column(
        String, ForeignKey("level.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    period: Mapped[str] = mapped_column(String(9), nullable=False)

    __table_args__ = (
        UniqueConstraint("tenant_id", "name", "period", name="uq_group_tenant_name_period"),
    )
