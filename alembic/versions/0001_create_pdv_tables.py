"""create orders, order_items, cash_sessions and profiles

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

order_status = sa.Enum("PENDENTE", "IN_PREP", "READY", "ENTREGUE", "CANCELADO", name="order_status")
service_type = sa.Enum("MESA", "DELIVERY", name="service_type")
cash_session_status = sa.Enum("OPEN", "CLOSED", name="cash_session_status")


def _audit_columns():
    return [
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "orders",
        *_audit_columns(),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("table_number", sa.String(50), nullable=True),
        sa.Column("customer_name", sa.String(255), nullable=True),
        sa.Column("customer_phone", sa.String(50), nullable=True),
        sa.Column("status", order_status, nullable=False),
        sa.Column("source", sa.String(50), nullable=False),
        sa.Column("service_type", service_type, nullable=False),
        sa.Column("obs", sa.Text(), nullable=True),
        sa.Column("motoboy_name", sa.String(255), nullable=True),
        sa.Column("motoboy_phone", sa.String(50), nullable=True),
        sa.Column("payment_method", sa.String(50), nullable=True),
        sa.Column("payment_status", sa.String(50), nullable=True),
        sa.Column("billing_type", sa.String(50), nullable=True),
        sa.Column("total", sa.Numeric(10, 2), nullable=True),
        sa.Column("delivered_by_id", sa.String(255), nullable=True),
        sa.Column("delivered_by_name", sa.String(255), nullable=True),
        sa.Column("delivered_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("invoice_url", sa.Text(), nullable=True),
        sa.Column("pix_copy_paste", sa.Text(), nullable=True),
    )
    op.create_index("ix_orders_id", "orders", ["id"])
    op.create_index("ix_orders_code", "orders", ["code"])
    op.create_index("ix_orders_status", "orders", ["status"])

    op.create_table(
        "order_items",
        *_audit_columns(),
        sa.Column("order_id", sa.Uuid(), sa.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("product_name", sa.String(255), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=True),
    )
    op.create_index("ix_order_items_id", "order_items", ["id"])
    op.create_index("ix_order_items_order_id", "order_items", ["order_id"])

    op.create_table(
        "cash_sessions",
        *_audit_columns(),
        sa.Column("opened_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("opened_by_id", sa.String(255), nullable=True),
        sa.Column("opened_by_name", sa.String(255), nullable=False),
        sa.Column("closed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("closed_by_id", sa.String(255), nullable=True),
        sa.Column("closed_by_name", sa.String(255), nullable=True),
        sa.Column("initial_balance", sa.Numeric(10, 2), nullable=False),
        sa.Column("expected_cash", sa.Numeric(10, 2), nullable=True),
        sa.Column("counted_cash", sa.Numeric(10, 2), nullable=True),
        sa.Column("variance", sa.Numeric(10, 2), nullable=True),
        sa.Column("total_sales", sa.Numeric(10, 2), nullable=False),
        sa.Column("total_pix", sa.Numeric(10, 2), nullable=False),
        sa.Column("total_card", sa.Numeric(10, 2), nullable=False),
        sa.Column("total_cash_sales", sa.Numeric(10, 2), nullable=False),
        sa.Column("order_count", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("status", cash_session_status, nullable=False),
    )
    op.create_index("ix_cash_sessions_id", "cash_sessions", ["id"])
    op.create_index("ix_cash_sessions_opened_at", "cash_sessions", ["opened_at"])
    # No máximo um caixa aberto por vez
    op.create_index(
        "uq_cash_sessions_single_open",
        "cash_sessions",
        ["status"],
        unique=True,
        postgresql_where=sa.text("status = 'OPEN'"),
        sqlite_where=sa.text("status = 'OPEN'"),
    )

    op.create_table(
        "profiles",
        *_audit_columns(),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("cpf", sa.String(20), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
    )
    op.create_index("ix_profiles_id", "profiles", ["id"])
    op.create_index("ix_profiles_full_name", "profiles", ["full_name"])
    op.create_index("ix_profiles_phone", "profiles", ["phone"])
    op.create_index("ix_profiles_cpf", "profiles", ["cpf"])


def downgrade() -> None:
    op.drop_table("profiles")
    op.drop_index("uq_cash_sessions_single_open", table_name="cash_sessions")
    op.drop_table("cash_sessions")
    op.drop_table("order_items")
    op.drop_table("orders")
    cash_session_status.drop(op.get_bind(), checkfirst=True)
    service_type.drop(op.get_bind(), checkfirst=True)
    order_status.drop(op.get_bind(), checkfirst=True)
