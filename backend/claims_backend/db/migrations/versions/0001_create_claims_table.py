"""create claims table

Revision ID: 0001
Revises:
Create Date: 2026-10-18 09:00:00
"""

from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "claims",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("claim_id", sa.String(length=255), nullable=True),
        sa.Column("policyholder_name", sa.String(length=255), nullable=True),
        sa.Column("policy_number", sa.String(length=255), nullable=True),
        sa.Column("claim_type", sa.String(length=255), nullable=True),
        sa.Column("amount", sa.Float(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("incident_date", sa.DateTime(), nullable=True),
        sa.Column("claim_date", sa.DateTime(), nullable=True),
        sa.Column("status", sa.String(length=255), nullable=True),
        sa.Column("is_fraudulent", sa.Boolean(), nullable=True),
        sa.Column("fraud_reason", sa.Text(), nullable=True),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("claim_id"),
    )
    op.create_index("ix_claims_deleted_at", "claims", ["deleted_at"])


def downgrade() -> None:
    op.drop_index("ix_claims_deleted_at", table_name="claims")
    op.drop_table("claims")
