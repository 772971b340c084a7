"""create addresses and menu tables

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19 14:00:00

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def _audit_columns():
    return [
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "addresses",
        *_audit_columns(),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=True),
        sa.Column("asaas_customer_id", sa.String(100), nullable=True),
        sa.Column("street", sa.String(255), nullable=False),
        sa.Column("number", sa.String(20), nullable=False),
        sa.Column("complement", sa.String(255), nullable=True),
        sa.Column("neighborhood", sa.String(255), nullable=False),
        sa.Column("city", sa.String(255), nullable=True),
        sa.Column("state", sa.String(50), nullable=True),
        sa.Column("zip_code", sa.String(20), nullable=False),
        sa.Column("is_default", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_addresses_id", "addresses", ["id"])
    op.create_index("ix_addresses_user_id", "addresses", ["user_id"])
    op.create_index("ix_addresses_asaas_customer_id", "addresses", ["asaas_customer_id"])

    op.create_table(
        "categories",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("img", sa.Text(), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        sa.Column("schedule_available", sa.String(7), nullable=False),
        sa.Column("schedule_type", sa.Integer(), nullable=False),
    )
    op.create_index("ix_categories_id", "categories", ["id"])

    op.create_table(
        "products",
        *_audit_columns(),
        sa.Column("category_id", sa.Uuid(), sa.ForeignKey("categories.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("promotional_price", sa.Numeric(10, 2), nullable=True),
        sa.Column("img", sa.Text(), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        sa.Column("schedule_available", sa.String(7), nullable=False),
        sa.Column("schedule_type", sa.Integer(), nullable=False),
    )
    op.create_index("ix_products_id", "products", ["id"])
    op.create_index("ix_products_category_id", "products", ["category_id"])

    op.create_table(
        "choice_groups",
        *_audit_columns(),
        sa.Column("product_id", sa.Uuid(), sa.ForeignKey("products.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("required", sa.Boolean(), nullable=False),
        sa.Column("min_selections", sa.Integer(), nullable=False),
        sa.Column("max_selections", sa.Integer(), nullable=False),
        sa.Column("use_greater_option_price", sa.Boolean(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False),
    )
    op.create_index("ix_choice_groups_id", "choice_groups", ["id"])
    op.create_index("ix_choice_groups_product_id", "choice_groups", ["product_id"])

    op.create_table(
        "choice_options",
        *_audit_columns(),
        sa.Column(
            "choice_group_id", sa.Uuid(), sa.ForeignKey("choice_groups.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("img", sa.Text(), nullable=True),
        sa.Column("max_quantity", sa.Integer(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False),
    )
    op.create_index("ix_choice_options_id", "choice_options", ["id"])
    op.create_index("ix_choice_options_choice_group_id", "choice_options", ["choice_group_id"])


def downgrade() -> None:
    op.drop_table("choice_options")
    op.drop_table("choice_groups")
    op.drop_table("products")
    op.drop_table("categories")
    op.drop_table("addresses")
