"""create custody tables

Revision ID: 5c1d9e2f7a40
Revises: 
Create Date: 2026-10-17 09:30:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5c1d9e2f7a40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "system_config",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("daily_limit", sa.BigInteger(), nullable=False),
        sa.Column("monthly_limit", sa.BigInteger(), nullable=False),
        sa.Column("high_value_threshold", sa.BigInteger(), nullable=False),
        sa.Column("required_approvals", sa.Integer(), nullable=False, server_default="2"),
        sa.Column("hot_wallet_percentage", sa.Integer(), nullable=False),
        sa.Column("cold_wallet_percentage", sa.Integer(), nullable=False),
        sa.Column("hot_wallet", sa.String(length=128), nullable=False),
        sa.Column("cold_wallet", sa.String(length=128), nullable=False),
        sa.Column("guardian_count", sa.Integer(), nullable=False, server_default="3"),
        sa.Column("transaction_counter", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("initialized_at", sa.BigInteger(), nullable=False),
    )

    op.create_table(
        "guardians",
        sa.Column("address", sa.String(length=128), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("daily_limit", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("monthly_limit", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("approval_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_approval", sa.BigInteger(), nullable=False, server_default="0"),
    )

    op.create_table(
        "wallets",
        sa.Column("address", sa.String(length=128), primary_key=True),
        sa.Column("kind", sa.String(length=10), nullable=False),
        sa.Column("balance", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("reserved_balance", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )

    op.create_table(
        "transactions",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=False),
        sa.Column("from_wallet", sa.String(length=128), sa.ForeignKey("wallets.address"), nullable=False),
        sa.Column("to_address", sa.String(length=128), nullable=False),
        sa.Column("amount", sa.BigInteger(), nullable=False),
        sa.Column("memo", sa.String(length=64), nullable=False, server_default=""),
        sa.Column("tx_type", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("executed_at", sa.BigInteger()),
        sa.Column("requires_approval", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_transactions_from_wallet", "transactions", ["from_wallet"])
    op.create_index("ix_transactions_status", "transactions", ["status"])

    op.create_table(
        "transaction_approvals",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("transaction_id", sa.BigInteger(), sa.ForeignKey("transactions.id"), nullable=False),
        sa.Column("guardian", sa.String(length=128), sa.ForeignKey("guardians.address"), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("approved_at", sa.BigInteger(), nullable=False),
        sa.UniqueConstraint("transaction_id", "guardian", name="uq_transaction_approvals_guardian"),
    )
    op.create_index("ix_transaction_approvals_transaction_id", "transaction_approvals", ["transaction_id"])
    op.create_index("ix_transaction_approvals_guardian", "transaction_approvals", ["guardian"])

    op.create_table(
        "spending_buckets",
        sa.Column("period", sa.String(length=10), primary_key=True),
        sa.Column("bucket", sa.BigInteger(), primary_key=True),
        sa.Column("spent", sa.BigInteger(), nullable=False, server_default="0"),
    )

    op.create_table(
        "emergency_state",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("initiator", sa.String(length=128)),
        sa.Column("activated_at", sa.BigInteger()),
    )

    op.create_table(
        "audit_events",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("action", sa.String(length=50), nullable=False),
        sa.Column("actor", sa.String(length=128)),
        sa.Column("resource", sa.String(length=100), nullable=False),
        sa.Column("data", sa.Text()),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
    )
    op.create_index("ix_audit_events_action", "audit_events", ["action"])


def downgrade() -> None:
    op.drop_index("ix_audit_events_action", table_name="audit_events")
    op.drop_table("audit_events")
    op.drop_table("emergency_state")
    op.drop_table("spending_buckets")
    op.drop_index("ix_transaction_approvals_guardian", table_name="transaction_approvals")
    op.drop_index("ix_transaction_approvals_transaction_id", table_name="transaction_approvals")
    op.drop_table("transaction_approvals")
    op.drop_index("ix_transactions_status", table_name="transactions")
    op.drop_index("ix_transactions_from_wallet", table_name="transactions")
    op.drop_table("transactions")
    op.drop_table("wallets")
    op.drop_table("guardians")
    op.drop_table("system_config")
