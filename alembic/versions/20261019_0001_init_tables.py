"""init tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 10:00:00

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps(with_updated: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("NOW()")),
    ]
    if with_updated:
        columns.append(
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("NOW()"))
        )
    return columns


def _property_fk() -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint(["property_id"], ["properties.id"], ondelete="CASCADE")


def upgrade() -> None:
    op.create_table(
        "properties",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column("city", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("state", sa.String(length=64), nullable=False),
        sa.Column("zip_code", sa.String(length=20), nullable=False, server_default=""),
        sa.Column("type", sa.String(length=64), nullable=False),
        sa.Column("market_value", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("purchase_price", sa.Numeric(12, 2), nullable=True),
        sa.Column("purchase_date", sa.Date(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "tenants",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=64), nullable=True),
        sa.Column("lease_start", sa.Date(), nullable=False),
        sa.Column("lease_end", sa.Date(), nullable=False),
        sa.Column("rent_amount", sa.Numeric(12, 2), nullable=False),
        *_timestamps(),
        sa.Column("property_id", sa.Integer(), nullable=False),
        _property_fk(),
    )

    op.create_table(
        "transactions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("description", sa.String(length=255), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("category", sa.String(length=64), nullable=False),
        sa.Column("tx_date", sa.Date(), nullable=False, server_default=sa.text("CURRENT_DATE")),
        *_timestamps(with_updated=False),
        sa.Column("property_id", sa.Integer(), nullable=False),
        _property_fk(),
    )
    op.create_index("ix_transactions_tx_date", "transactions", ["tx_date"])

    op.create_table(
        "repairs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("item", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("cost", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="PENDING"),
        sa.Column("priority", sa.String(length=16), nullable=False, server_default="MEDIUM"),
        sa.Column("repair_date", sa.Date(), nullable=False),
        sa.Column("estimated_completion_date", sa.Date(), nullable=True),
        *_timestamps(with_updated=False),
        sa.Column("property_id", sa.Integer(), nullable=False),
        _property_fk(),
    )

    op.create_table(
        "calendar_events",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end", sa.DateTime(timezone=True), nullable=True),
        sa.Column("all_day", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("type", sa.String(length=16), nullable=False),
        *_timestamps(),
        sa.Column("property_id", sa.Integer(), nullable=False),
        _property_fk(),
    )
    op.create_index("ix_calendar_events_start", "calendar_events", ["start"])

    for table in ("issues", "todos"):
        extra_columns: list = []
        extra_constraints: list = []
        if table == "todos":
            extra_columns.append(sa.Column("calendar_event_id", sa.Integer(), nullable=True))
            extra_constraints.append(
                sa.ForeignKeyConstraint(["calendar_event_id"], ["calendar_events.id"], ondelete="SET NULL")
            )
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("title", sa.String(length=255), nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("due_date", sa.Date(), nullable=True),
            sa.Column("status", sa.String(length=16), nullable=False, server_default="OPEN"),
            sa.Column("priority", sa.String(length=16), nullable=False, server_default="MEDIUM"),
            sa.Column("type", sa.String(length=16), nullable=False),
            *_timestamps(),
            sa.Column("property_id", sa.Integer(), nullable=False),
            sa.Column("repair_id", sa.Integer(), nullable=True),
            sa.Column("tenant_id", sa.Integer(), nullable=True),
            *extra_columns,
            _property_fk(),
            sa.ForeignKeyConstraint(["repair_id"], ["repairs.id"], ondelete="SET NULL"),
            sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], ondelete="SET NULL"),
            *extra_constraints,
        )


def downgrade() -> None:
    op.drop_table("todos")
    op.drop_table("issues")
    op.drop_index("ix_calendar_events_start", table_name="calendar_events")
    op.drop_table("calendar_events")
    op.drop_table("repairs")
    op.drop_index("ix_transactions_tx_date", table_name="transactions")
    op.drop_table("transactions")
    op.drop_table("tenants")
    op.drop_table("properties")
