# infra/db/models.py
from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import (
    String,
    Date,
    Integer,
    ForeignKey,
    Enum as SAEnum,
    Index,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.models import CalendarEventType, DEFAULT_MAX_STAFFING_PERCENTAGE


class ResourceORM(Base):
    __tablename__ = "resources"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[str] = mapped_column(String, default="")
    location: Mapped[str] = mapped_column(String, nullable=False)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    last_day_of_work: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    max_staffing_percentage: Mapped[int] = mapped_column(
        Integer, nullable=False, default=DEFAULT_MAX_STAFFING_PERCENTAGE
    )


class AssignmentORM(Base):
    __tablename__ = "assignments"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    resource_id: Mapped[str] = mapped_column(
        String, ForeignKey("resources.id", ondelete="CASCADE"), nullable=False
    )
    project_id: Mapped[str] = mapped_column(String, nullable=False)

Index("idx_assignments_resource", AssignmentORM.resource_id)


class AllocationORM(Base):
    __tablename__ = "allocations"
    __table_args__ = (
        UniqueConstraint("assignment_id", "allocation_date", name="uq_allocation_assignment_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    assignment_id: Mapped[str] = mapped_column(
        String, ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False
    )
    allocation_date: Mapped[date] = mapped_column(Date, nullable=False)
    percentage: Mapped[int] = mapped_column(Integer, nullable=False)

Index("idx_allocations_date", AllocationORM.allocation_date)


class CalendarEventORM(Base):
    __tablename__ = "calendar_events"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    event_date: Mapped[date] = mapped_column("date", Date, nullable=False)
    type: Mapped[CalendarEventType] = mapped_column(SAEnum(CalendarEventType), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String, nullable=True)

Index("idx_calendar_events_date", CalendarEventORM.event_date)
