"""Create tenants with a case-insensitive unique subdomain

Revision ID: 20250920_03
Revises: 20250920_02
Create Date: 2025-09-20 00:20:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20250920_03"
down_revision = "20250920_02"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tenants",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("subdomain", sa.String(length=63), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index(
        "ix_tenants_lower_subdomain",
        "tenants",
        [sa.text("lower(subdomain)")],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index("ix_tenants_lower_subdomain", table_name="tenants")
    op.drop_table("tenants")
