from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import (
    Boolean, CheckConstraint, Date, DateTime, Enum, ForeignKey, Integer, String, Text
)
from sqlalchemy.orm import Mapped, mapped_column

from green.db.base import Base

TASK_TYPES = ("water", "harvest", "pestCheck", "general")


class Planting(Base):
    __tablename__ = "plantings"
    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_plantings_quantity_positive"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(String(128), index=True)
    garden_id: Mapped[int] = mapped_column(ForeignKey("gardens.id", ondelete="CASCADE"), index=True)
    area_id: Mapped[int] = mapped_column(ForeignKey("areas.id", ondelete="CASCADE"), index=True)
    plant_id: Mapped[str] = mapped_column(String(100), index=True)  # Plant Catalog id

    quantity: Mapped[int] = mapped_column(Integer, default=1)
    date_planted: Mapped[date] = mapped_column(Date)
    location_notes: Mapped[Optional[str]] = mapped_column(Text)

    status: Mapped[str] = mapped_column(
        Enum("active", "removed", name="planting_status_enum"),
        default="active",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint(
            "(recurring = false AND recurring_days IS NULL) "
            "OR (recurring = true AND recurring_days > 0)",
            name="ck_tasks_recurrence",
        ),
        CheckConstraint(
            "(status = 'completed') = (completed_at IS NOT NULL)",
            name="ck_tasks_completed_at",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(String(128), index=True)
    # Tasks are deleted explicitly with their planting; the FK cascade is a backstop.
    planting_id: Mapped[int] = mapped_column(ForeignKey("plantings.id", ondelete="CASCADE"), index=True)
    garden_id: Mapped[int] = mapped_column(Integer, index=True)  # denormalized for display

    task_type: Mapped[str] = mapped_column(Enum(*TASK_TYPES, name="task_type_enum"))
    due_date: Mapped[Optional[date]] = mapped_column(Date, index=True)
    status: Mapped[str] = mapped_column(
        Enum("pending", "completed", name="task_status_enum"), default="pending"
    )
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    details: Mapped[str] = mapped_column(Text)
    related_plant_name: Mapped[Optional[str]] = mapped_column(String(200))
    related_area_id: Mapped[Optional[int]] = mapped_column(Integer)

    recurring: Mapped[bool] = mapped_column(Boolean, default=False)
    recurring_days: Mapped[Optional[int]] = mapped_column(Integer)
    notification_sent: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
