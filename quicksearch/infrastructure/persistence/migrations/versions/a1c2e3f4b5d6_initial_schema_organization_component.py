"""Initial schema: organization and component

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-18 09:00:00.000000

Adds pg_trgm GIN indexes on component name and key so the suggestions
substring search (ILIKE '%q%') can use an index.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1c2e3f4b5d6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create organization and component tables."""
    op.create_table(
        "organization",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("key", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_organization_key"), "organization", ["key"], unique=True)

    op.create_table(
        "component",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("organization_id", sa.String(), nullable=False),
        sa.Column("key", sa.String(length=400), nullable=False),
        sa.Column("name", sa.String(length=2000), nullable=False),
        sa.Column("long_name", sa.String(length=2000), nullable=True),
        sa.Column("qualifier", sa.String(length=10), nullable=False),
        sa.Column("path", sa.String(length=2000), nullable=True),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "qualifier IN ('VW', 'SVW', 'TRK', 'BRC', 'DIR', 'FIL', 'UTS', 'LIB')",
            name="component_qualifier_check",
        ),
        sa.ForeignKeyConstraint(
            ["organization_id"], ["organization.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_component_key"), "component", ["key"], unique=True)
    op.create_index(
        op.f("ix_component_organization_id"), "component", ["organization_id"], unique=False
    )
    op.create_index(
        "ix_component_qualifier_enabled", "component", ["qualifier", "enabled"], unique=False
    )

    op.execute("CREATE EXTENSION IF NOT EXISTS pg_trgm")
    op.create_index(
        "ix_component_name_trgm",
        "component",
        ["name"],
        unique=False,
        postgresql_using="gin",
        postgresql_ops={"name": "gin_trgm_ops"},
    )
    op.create_index(
        "ix_component_key_trgm",
        "component",
        ["key"],
        unique=False,
        postgresql_using="gin",
        postgresql_ops={"key": "gin_trgm_ops"},
    )


def downgrade() -> None:
    """Drop component and organization tables."""
    op.drop_index("ix_component_key_trgm", table_name="component")
    op.drop_index("ix_component_name_trgm", table_name="component")
    op.drop_index("ix_component_qualifier_enabled", table_name="component")
    op.drop_index(op.f("ix_component_organization_id"), table_name="component")
    op.drop_index(op.f("ix_component_key"), table_name="component")
    op.drop_table("component")
    op.drop_index(op.f("ix_organization_key"), table_name="organization")
    op.drop_table("organization")
