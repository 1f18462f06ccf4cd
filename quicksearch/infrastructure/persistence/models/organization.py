"""Organization ORM model. Owner of components (multi-tenant root)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from quicksearch.infrastructure.persistence.database import Base
from quicksearch.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Organization(CuidMixin, TimestampMixin, Base):
    """Organization. Table: organization. key is the public, unique identifier."""

    __tablename__ = "organization"

    key: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
