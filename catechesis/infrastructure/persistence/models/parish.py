"""Parish ORM model (the tenant)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catechesis.infrastructure.persistence.database import Base
from catechesis.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Parish(CuidMixin, TimestampMixin, Base):
    """Parish. Table: parish."""

    __tablename__ = "parish"

    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
