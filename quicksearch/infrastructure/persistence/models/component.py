"""Component ORM model: projects, modules, files, views, etc. of an organization."""

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from quicksearch.domain.enums import Qualifier
from quicksearch.infrastructure.persistence.database import Base
from quicksearch.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Component(CuidMixin, TimestampMixin, Base):
    """Component. Table: component. Disabled components are not suggested."""

    __tablename__ = "component"

    organization_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("organization.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    key: Mapped[str] = mapped_column(String(400), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(2000), nullable=False)
    long_name: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    qualifier: Mapped[str] = mapped_column(String(10), nullable=False)
    path: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint(
            "qualifier IN ({})".format(
                ", ".join("'{}'".format(v) for v in Qualifier.values())
            ),
            name="component_qualifier_check",
        ),
        Index("ix_component_qualifier_enabled", "qualifier", "enabled"),
    )

    @property
    def display_name(self) -> str:
        """Long name when set (e.g. file path), otherwise name."""
        return self.long_name or self.name
