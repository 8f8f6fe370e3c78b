"""baseline LawnBoss schema

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 00:00:01
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def _id() -> sa.Column:
    return sa.Column("id", sa.String(36), nullable=False)


def _audit() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _money(name: str) -> sa.Column:
    return sa.Column(name, sa.Numeric(12, 2), nullable=False, server_default="0")


def _rate(name: str = "tax_rate") -> sa.Column:
    return sa.Column(name, sa.Numeric(6, 4), nullable=False, server_default="0")


def upgrade() -> None:
    op.create_table(
        "customers",
        _id(),
        sa.Column("first_name", sa.String(120), nullable=False),
        sa.Column("last_name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("phone", sa.String(32), nullable=True),
        sa.Column("company_name", sa.String(255), nullable=True),
        sa.Column("billing_address", sa.String(255), nullable=True),
        sa.Column("billing_city", sa.String(120), nullable=True),
        sa.Column("billing_state", sa.String(64), nullable=True),
        sa.Column("billing_zip", sa.String(20), nullable=True),
        sa.Column("payment_terms", sa.Integer(), nullable=False, server_default="30"),
        sa.Column("tax_exempt", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("status", sa.String(32), nullable=False, server_default="active"),
        sa.Column("referral_source", sa.String(255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_audit(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("idx_customers_status", "customers", ["status"])

    op.create_table(
        "properties",
        _id(),
        sa.Column("customer_id", sa.String(36), nullable=False),
        sa.Column("address_line1", sa.String(255), nullable=False),
        sa.Column("address_line2", sa.String(255), nullable=True),
        sa.Column("city", sa.String(120), nullable=False),
        sa.Column("state", sa.String(64), nullable=False),
        sa.Column("zip_code", sa.String(20), nullable=False),
        sa.Column("property_size", sa.Numeric(12, 2), nullable=True),
        sa.Column("lawn_size", sa.Numeric(12, 2), nullable=True),
        sa.Column("has_irrigation", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("has_pets", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("notes", sa.Text(), nullable=True),
        *_audit(),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_properties_customer_id", "properties", ["customer_id"])

    op.create_table(
        "technicians",
        _id(),
        sa.Column("first_name", sa.String(120), nullable=False),
        sa.Column("last_name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("phone", sa.String(32), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default="active"),
        *_audit(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "service_types",
        _id(),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("label", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _money("base_price"),
        _rate(),
        sa.Column("unit_type", sa.String(32), nullable=False, server_default="flat_rate"),
        *_audit(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "service_schedules",
        _id(),
        sa.Column("property_id", sa.String(36), nullable=False),
        sa.Column("service_type_id", sa.String(36), nullable=True),
        sa.Column("technician_id", sa.String(36), nullable=True),
        sa.Column("scheduled_date", sa.Date(), nullable=False),
        sa.Column("scheduled_time_window", sa.String(32), nullable=False, server_default="morning"),
        sa.Column("status", sa.String(32), nullable=False, server_default="pending"),
        sa.Column("base_price", sa.Numeric(12, 2), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_recurring", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("recurring_frequency", sa.String(32), nullable=True),
        sa.Column("recurring_end_date", sa.Date(), nullable=True),
        sa.Column("next_service_date", sa.Date(), nullable=True),
        *_audit(),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["service_type_id"], ["service_types.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["technician_id"], ["technicians.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_service_schedules_property_id", "service_schedules", ["property_id"])
    op.create_index("idx_service_schedules_date", "service_schedules", ["scheduled_date"])
    op.create_index("idx_service_schedules_status", "service_schedules", ["status"])

    op.create_table(
        "crews",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default="active"),
        *_audit(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "crew_members",
        _id(),
        sa.Column("crew_id", sa.String(36), nullable=False),
        sa.Column("technician_id", sa.String(36), nullable=False),
        sa.Column("role", sa.String(32), nullable=False, server_default="crew_member"),
        sa.Column("is_primary_crew", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        *_audit(),
        sa.ForeignKeyConstraint(["crew_id"], ["crews.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["technician_id"], ["technicians.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_crew_members_crew_id", "crew_members", ["crew_id"])
    op.create_index("ix_crew_members_technician_id", "crew_members", ["technician_id"])

    op.create_table(
        "crew_assignments",
        _id(),
        sa.Column("crew_id", sa.String(36), nullable=False),
        sa.Column("service_schedule_id", sa.String(36), nullable=False),
        sa.Column("assigned_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(32), nullable=False, server_default="pending"),
        sa.Column("notes", sa.Text(), nullable=True),
        *_audit(),
        sa.ForeignKeyConstraint(["crew_id"], ["crews.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["service_schedule_id"], ["service_schedules.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("crew_id", "service_schedule_id", name="uq_crew_assignments_crew_schedule"),
    )
    op.create_index("ix_crew_assignments_crew_id", "crew_assignments", ["crew_id"])
    op.create_index("ix_crew_assignments_service_schedule_id", "crew_assignments", ["service_schedule_id"])

    op.create_table(
        "tax_configurations",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("rate", sa.Numeric(6, 4), nullable=False),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_audit(),
        sa.CheckConstraint("rate >= 0 AND rate <= 1", name="ck_tax_configurations_rate"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "invoices",
        _id(),
        sa.Column("customer_id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=True),
        sa.Column("service_schedule_id", sa.String(36), nullable=True),
        sa.Column("invoice_number", sa.String(64), nullable=False),
        sa.Column("invoice_date", sa.Date(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        _money("subtotal"),
        _money("tax_amount"),
        _money("total"),
        _money("amount_paid"),
        _money("balance"),
        sa.Column("status", sa.String(32), nullable=False, server_default="draft"),
        sa.Column("payment_date", sa.Date(), nullable=True),
        sa.Column("payment_method", sa.String(32), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_audit(),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["service_schedule_id"], ["service_schedules.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("invoice_number"),
    )
    op.create_index("ix_invoices_customer_id", "invoices", ["customer_id"])
    op.create_index("idx_invoices_status", "invoices", ["status"])

    op.create_table(
        "invoice_items",
        _id(),
        sa.Column("invoice_id", sa.String(36), nullable=False),
        sa.Column("service_schedule_id", sa.String(36), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("quantity", sa.Numeric(10, 2), nullable=False, server_default="1"),
        _money("unit_price"),
        _rate(),
        _money("tax_amount"),
        _money("subtotal"),
        _money("total"),
        *_audit(),
        sa.ForeignKeyConstraint(["invoice_id"], ["invoices.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["service_schedule_id"], ["service_schedules.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_invoice_items_invoice_id", "invoice_items", ["invoice_id"])

    op.create_table(
        "estimates",
        _id(),
        sa.Column("customer_id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("valid_until", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _money("subtotal"),
        _money("tax_amount"),
        _money("total_amount"),
        sa.Column("status", sa.String(32), nullable=False, server_default="draft"),
        *_audit(),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_estimates_customer_id", "estimates", ["customer_id"])

    op.create_table(
        "estimate_items",
        _id(),
        sa.Column("estimate_id", sa.String(36), nullable=False),
        sa.Column("service_type_id", sa.String(36), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("quantity", sa.Numeric(10, 2), nullable=False, server_default="1"),
        _money("unit_price"),
        _rate(),
        _money("tax_amount"),
        _money("subtotal"),
        _money("total"),
        *_audit(),
        sa.ForeignKeyConstraint(["estimate_id"], ["estimates.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["service_type_id"], ["service_types.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_estimate_items_estimate_id", "estimate_items", ["estimate_id"])

    op.create_table(
        "messages",
        _id(),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("subject", sa.String(500), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("sent_by", sa.String(64), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default="pending"),
        sa.Column("metadata", sa.JSON(), nullable=True),
        *_audit(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "message_recipients",
        _id(),
        sa.Column("message_id", sa.String(36), nullable=False),
        sa.Column("customer_id", sa.String(36), nullable=False),
        sa.Column("recipient_name", sa.String(255), nullable=False),
        sa.Column("recipient_email", sa.String(320), nullable=True),
        sa.Column("recipient_phone", sa.String(32), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default="pending"),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("error_message", sa.Text(), nullable=True),
        *_audit(),
        sa.ForeignKeyConstraint(["message_id"], ["messages.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_message_recipients_message_id", "message_recipients", ["message_id"])
    op.create_index("ix_message_recipients_customer_id", "message_recipients", ["customer_id"])


def downgrade() -> None:
    for table in (
        "message_recipients",
        "messages",
        "estimate_items",
        "estimates",
        "invoice_items",
        "invoices",
        "tax_configurations",
        "crew_assignments",
        "crew_members",
        "crews",
        "service_schedules",
        "service_types",
        "technicians",
        "properties",
        "customers",
    ):
        op.drop_table(table)
