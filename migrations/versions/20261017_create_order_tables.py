"""Create order_statuses, orders, order_items and order_vouchers tables

Adds the order tables to an existing shop database. The tables they point
to (locales, customers, delivery_methods, payment_methods, cart_rules,
products, variants, surface_finishes, cloths, glasses, weight_categories)
are not created by any revision: an empty database gets the whole schema,
order tables included, from `storefront.database.init_db.create_tables` on
startup and needs no upgrade.

Revision ID: 20261017_create_order_tables
Revises: 
Create Date: 2026-10-17 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261017_create_order_tables"
down_revision = None
branch_labels = None
depends_on = None


def _money(name: str) -> sa.Column:
    return sa.Column(name, sa.Numeric(18, 2), nullable=False, server_default="0")


def upgrade() -> None:
    # order_statuses + translations
    op.create_table(
        "order_statuses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(50), nullable=False, unique=True),
        sa.Column("color", sa.String(20), nullable=True),
        sa.Column("is_default", sa.Boolean, nullable=False, server_default=sa.text("false")),
    )
    op.create_table(
        "order_status_translations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("status_id", sa.Integer, sa.ForeignKey("order_statuses.id", ondelete="CASCADE"), nullable=False),
        sa.Column("locale_id", sa.Integer, sa.ForeignKey("locales.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.UniqueConstraint("status_id", "locale_id", name="uq_order_status_translation"),
    )

    # orders
    op.create_table(
        "orders",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("index", sa.String(20), nullable=False),
        sa.Column("hash", sa.String(64), nullable=False),
        sa.Column("locale_id", sa.Integer, sa.ForeignKey("locales.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("customer_id", sa.Integer, sa.ForeignKey("customers.id", ondelete="SET NULL"), nullable=True),
        sa.Column("status_id", sa.Integer, sa.ForeignKey("order_statuses.id", ondelete="SET NULL"), nullable=True),
        sa.Column("delivery_method_id", sa.Integer, sa.ForeignKey("delivery_methods.id", ondelete="RESTRICT"), nullable=True),
        sa.Column("payment_method_id", sa.Integer, sa.ForeignKey("payment_methods.id", ondelete="RESTRICT"), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(30), nullable=True),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("company", sa.String(255), nullable=True),
        sa.Column("company_id", sa.String(20), nullable=True),
        sa.Column("vat_id", sa.String(20), nullable=True),
        sa.Column("street", sa.String(255), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("zip", sa.String(20), nullable=True),
        sa.Column("country", sa.String(2), nullable=True),
        sa.Column("delivery_first_name", sa.String(100), nullable=True),
        sa.Column("delivery_last_name", sa.String(100), nullable=True),
        sa.Column("delivery_company", sa.String(255), nullable=True),
        sa.Column("delivery_phone", sa.String(30), nullable=True),
        sa.Column("delivery_street", sa.String(255), nullable=True),
        sa.Column("delivery_city", sa.String(100), nullable=True),
        sa.Column("delivery_zip", sa.String(20), nullable=True),
        sa.Column("delivery_country", sa.String(2), nullable=True),
        sa.Column("note", sa.String(1000), nullable=True),
        sa.Column("assembly", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("full_delivery", sa.Boolean, nullable=False, server_default=sa.text("false")),
        _money("products_price"),
        _money("total_discount"),
        _money("delivery_price"),
        _money("assembly_price"),
        _money("full_delivery_price"),
        _money("total_delivery_price"),
        _money("total_price"),
        _money("deposit"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.UniqueConstraint("index", name="uq_orders_index"),
    )

    # order_items
    op.create_table(
        "order_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("order_id", sa.Integer, sa.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False),
        sa.Column("product_id", sa.Integer, sa.ForeignKey("products.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("variant_id", sa.Integer, sa.ForeignKey("variants.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="1"),
        sa.Column("surface_finish_id", sa.Integer, sa.ForeignKey("surface_finishes.id", ondelete="SET NULL"), nullable=True),
        sa.Column("cloth_id", sa.Integer, sa.ForeignKey("cloths.id", ondelete="SET NULL"), nullable=True),
        sa.Column("glass_id", sa.Integer, sa.ForeignKey("glasses.id", ondelete="SET NULL"), nullable=True),
        sa.Column("weight_category_id", sa.Integer, sa.ForeignKey("weight_categories.id", ondelete="SET NULL"), nullable=True),
        sa.Column("is_gift", sa.Boolean, nullable=False, server_default=sa.text("false")),
        _money("single_price"),
        _money("total_price"),
    )

    # order_vouchers
    op.create_table(
        "order_vouchers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("order_id", sa.Integer, sa.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False),
        sa.Column("cart_rule_id", sa.Integer, sa.ForeignKey("cart_rules.id", ondelete="RESTRICT"), nullable=False),
        _money("discount"),
    )

    # Indexes for faster queries
    op.create_index("idx_orders_created_at", "orders", ["created_at"])
    op.create_index("idx_orders_customer", "orders", ["customer_id"])
    op.create_index("idx_order_items_order", "order_items", ["order_id"])

    # Default status for new orders
    op.execute("INSERT INTO order_statuses (code, color, is_default) VALUES ('new', 'orange', true)")


def downgrade() -> None:
    op.drop_index("idx_order_items_order", table_name="order_items")
    op.drop_index("idx_orders_customer", table_name="orders")
    op.drop_index("idx_orders_created_at", table_name="orders")

    op.drop_table("order_vouchers")
    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("order_status_translations")
    op.drop_table("order_statuses")
