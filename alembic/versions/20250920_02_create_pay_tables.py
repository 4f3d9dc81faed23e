"""Create billing customer and subscription tables

Revision ID: 20250920_02
Revises: 20250920_01
Create Date: 2025-09-20 00:10:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20250920_02"
down_revision = "20250920_01"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "pay_customers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("owner_type", sa.String(length=100), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column("processor", sa.String(length=50), nullable=False),
        sa.Column("processor_id", sa.String(length=255), nullable=True),
        sa.Column("default", sa.Boolean(), nullable=True),
        sa.Column("data", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_pay_customers_owner", "pay_customers", ["owner_type", "owner_id"])
    op.create_index("ix_pay_customers_processor", "pay_customers", ["processor", "processor_id"])

    op.create_table(
        "pay_subscriptions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("pay_customers.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("processor", sa.String(length=50), nullable=False),
        sa.Column("processor_id", sa.String(length=255), nullable=True),
        sa.Column("processor_plan", sa.String(length=255), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=True, server_default="1"),
        sa.Column("trial_ends_at", sa.DateTime(), nullable=True),
        sa.Column("ends_at", sa.DateTime(), nullable=True),
        sa.Column("data", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_pay_subscriptions_customer_id", "pay_subscriptions", ["customer_id"])
    op.create_index("ix_pay_subscriptions_processor", "pay_subscriptions", ["processor", "processor_id"])


def downgrade() -> None:
    op.drop_index("ix_pay_subscriptions_processor", table_name="pay_subscriptions")
    op.drop_index("ix_pay_subscriptions_customer_id", table_name="pay_subscriptions")
    op.drop_table("pay_subscriptions")
    op.drop_index("ix_pay_customers_processor", table_name="pay_customers")
    op.drop_index("ix_pay_customers_owner", table_name="pay_customers")
    op.drop_table("pay_customers")
