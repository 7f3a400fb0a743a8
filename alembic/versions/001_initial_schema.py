"""Initial schema — tenants, auth, warehouse layout, catalog, stock, orders, audit.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer, primary_key=True, autoincrement=True)


def _fk(name: str, target: str, nullable: bool = False) -> sa.Column:
    return sa.Column(name, sa.Integer, sa.ForeignKey(f"{target}.id"), nullable=nullable)


def _created(name: str = "created_at") -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def upgrade() -> None:
    op.create_table(
        "organizations",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        _fk("parent_id", "organizations", nullable=True),
    )
    op.create_index("ix_organizations_parent_id", "organizations", ["parent_id"])

    op.create_table(
        "roles",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("permissions", sa.JSON, nullable=False),
        sa.Column("scope", sa.String(20), nullable=False, server_default="organization"),
    )

    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(200), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        _fk("organization_id", "organizations", nullable=True),
        _fk("role_id", "roles", nullable=True),
    )
    op.create_index("ix_users_organization_id", "users", ["organization_id"])

    op.create_table(
        "user_sessions",
        _id(),
        sa.Column("token", sa.String(128), nullable=False, unique=True),
        _fk("user_id", "users"),
        sa.Column("ip_address", sa.String(50), nullable=True),
        sa.Column("user_agent", sa.String(255), nullable=True),
        _created(),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_user_sessions_user_id", "user_sessions", ["user_id"])

    op.create_table(
        "warehouses",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("address", sa.Text, nullable=True),
        _fk("organization_id", "organizations"),
    )
    op.create_index("ix_warehouses_organization_id", "warehouses", ["organization_id"])

    op.create_table(
        "zones",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("code", sa.String(50), nullable=False),
        _fk("warehouse_id", "warehouses"),
    )
    op.create_index("ix_zones_warehouse_id", "zones", ["warehouse_id"])

    op.create_table(
        "bin_types",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("max_weight", sa.Float, nullable=True),
        sa.Column("max_volume", sa.Float, nullable=True),
        sa.Column("dimensions", sa.JSON, nullable=True),
        _fk("organization_id", "organizations"),
    )
    op.create_index("ix_bin_types_organization_id", "bin_types", ["organization_id"])

    op.create_table(
        "bins",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("code", sa.String(50), nullable=False),
        _fk("zone_id", "zones"),
        _fk("bin_type_id", "bin_types", nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_bins_zone_id", "bins", ["zone_id"])

    op.create_table(
        "categories",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        _fk("organization_id", "organizations"),
    )
    op.create_index("ix_categories_organization_id", "categories", ["organization_id"])

    op.create_table(
        "suppliers",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("contact_info", sa.JSON, nullable=True),
        _fk("organization_id", "organizations"),
    )
    op.create_index("ix_suppliers_organization_id", "suppliers", ["organization_id"])

    op.create_table(
        "items",
        _id(),
        sa.Column("sku", sa.String(100), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("barcode", sa.String(100), nullable=True),
        _fk("category_id", "categories", nullable=True),
        _fk("supplier_id", "suppliers", nullable=True),
        sa.Column("dimensions", sa.JSON, nullable=True),
        sa.Column("weight", sa.Float, nullable=True),
        sa.Column("reorder_point", sa.Integer, nullable=True),
        sa.Column("reorder_quantity", sa.Integer, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        _fk("organization_id", "organizations"),
        sa.UniqueConstraint("organization_id", "sku", name="uq_items_org_sku"),
    )
    op.create_index("ix_items_organization_id", "items", ["organization_id"])

    op.create_table(
        "inventory",
        _id(),
        _fk("item_id", "items"),
        _fk("bin_id", "bins"),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="0"),
        sa.Column("allocated_quantity", sa.Integer, nullable=False, server_default="0"),
        sa.UniqueConstraint("item_id", "bin_id", name="uq_inventory_item_bin"),
    )
    op.create_index("ix_inventory_item_id", "inventory", ["item_id"])
    op.create_index("ix_inventory_bin_id", "inventory", ["bin_id"])

    op.create_table(
        "inventory_transactions",
        _id(),
        _fk("item_id", "items"),
        _fk("bin_id", "bins"),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("reference", sa.String(200), nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        _fk("created_by", "users"),
        _created("timestamp"),
    )
    op.create_index("ix_inventory_transactions_item_id", "inventory_transactions", ["item_id"])
    op.create_index("ix_inventory_transactions_bin_id", "inventory_transactions", ["bin_id"])

    op.create_table(
        "orders",
        _id(),
        sa.Column("order_number", sa.String(100), nullable=False),
        sa.Column("customer_name", sa.String(200), nullable=False),
        sa.Column("customer_email", sa.String(255), nullable=True),
        sa.Column("shipping_address", sa.JSON, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("notes", sa.Text, nullable=True),
        _fk("organization_id", "organizations"),
        _fk("created_by", "users"),
        _created(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("organization_id", "order_number", name="uq_orders_org_number"),
    )
    op.create_index("ix_orders_organization_id", "orders", ["organization_id"])
    op.create_index("ix_orders_status", "orders", ["status"])

    op.create_table(
        "order_items",
        _id(),
        _fk("order_id", "orders"),
        _fk("item_id", "items"),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.Column("allocated_quantity", sa.Integer, nullable=False, server_default="0"),
        sa.Column("picked_quantity", sa.Integer, nullable=False, server_default="0"),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
    )
    op.create_index("ix_order_items_order_id", "order_items", ["order_id"])

    op.create_table(
        "shipments",
        _id(),
        _fk("order_id", "orders"),
        sa.Column("carrier", sa.String(100), nullable=False),
        sa.Column("tracking_number", sa.String(100), nullable=True),
        sa.Column("shipping_cost", sa.Float, nullable=True),
        sa.Column("weight", sa.Float, nullable=True),
        sa.Column("dimensions", sa.JSON, nullable=True),
        sa.Column("label_url", sa.String(500), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        _fk("created_by", "users"),
        _created(),
    )
    op.create_index("ix_shipments_order_id", "shipments", ["order_id"])

    op.create_table(
        "activity_logs",
        _id(),
        _fk("user_id", "users"),
        sa.Column("action", sa.String(30), nullable=False),
        sa.Column("entity_type", sa.String(30), nullable=False),
        sa.Column("entity_id", sa.String(50), nullable=False),
        sa.Column("details", sa.JSON, nullable=True),
        _created("timestamp"),
        _fk("organization_id", "organizations", nullable=True),
    )
    op.create_index("ix_activity_logs_user_id", "activity_logs", ["user_id"])
    op.create_index("ix_activity_logs_entity_type", "activity_logs", ["entity_type"])
    op.create_index("ix_activity_logs_organization_id", "activity_logs", ["organization_id"])


def downgrade() -> None:
    for table in (
        "activity_logs", "shipments", "order_items", "orders",
        "inventory_transactions", "inventory", "items", "suppliers",
        "categories", "bins", "bin_types", "zones", "warehouses",
        "user_sessions", "users", "roles", "organizations",
    ):
        op.drop_table(table)
