"""create staffing tables

Revision ID: 3a41c9e07b52
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3a41c9e07b52"
down_revision = None
branch_labels = None
depends_on = None

EVENT_TYPES = ("NATIONAL_HOLIDAY", "COMPANY_CLOSURE", "LOCAL_HOLIDAY")


def upgrade() -> None:
    op.create_table(
        "resources",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=True),
        sa.Column("location", sa.String(), nullable=False),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column("last_day_of_work", sa.Date(), nullable=True),
        sa.Column("max_staffing_percentage", sa.Integer(), nullable=False, server_default=sa.text("100")),
    )
    op.create_table(
        "assignments",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "resource_id",
            sa.String(),
            sa.ForeignKey("resources.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("project_id", sa.String(), nullable=False),
    )
    op.create_index("idx_assignments_resource", "assignments", ["resource_id"])
    op.create_table(
        "allocations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "assignment_id",
            sa.String(),
            sa.ForeignKey("assignments.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("allocation_date", sa.Date(), nullable=False),
        sa.Column("percentage", sa.Integer(), nullable=False),
        sa.UniqueConstraint("assignment_id", "allocation_date", name="uq_allocation_assignment_date"),
    )
    op.create_index("idx_allocations_date", "allocations", ["allocation_date"])
    op.create_table(
        "calendar_events",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("type", sa.Enum(*EVENT_TYPES, name="calendareventtype"), nullable=False),
        sa.Column("location", sa.String(), nullable=True),
    )
    op.create_index("idx_calendar_events_date", "calendar_events", ["date"])


def downgrade() -> None:
    op.drop_index("idx_calendar_events_date", table_name="calendar_events")
    op.drop_table("calendar_events")
    op.drop_index("idx_allocations_date", table_name="allocations")
    op.drop_table("allocations")
    op.drop_index("idx_assignments_resource", table_name="assignments")
    op.drop_table("assignments")
    op.drop_table("resources")
