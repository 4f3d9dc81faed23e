"""Create sample_items owned by tenants

Revision ID: 20250920_04
Revises: 20250920_03
Create Date: 2025-09-20 00:21:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20250920_04"
down_revision = "20250920_03"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "sample_items",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "tenant_id",
            sa.Uuid(),
            sa.ForeignKey("tenants.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_sample_items_tenant_id", "sample_items", ["tenant_id"])


def downgrade() -> None:
    op.drop_index("ix_sample_items_tenant_id", table_name="sample_items")
    op.drop_table("sample_items")
