"""
Task engine: derives, tracks and retires scheduled garden actions.

generate_initial_tasks — builds the water / harvest / pest-check set for a new planting
complete_task         — pending → completed, plus exactly one successor when recurring
task views            — pure filters over due_date vs. today (all, today, overdue, week, completed)

Generation and the view filters are pure; only complete_task and the
query helpers touch the database.
"""
import logging
from datetime import date, datetime, timedelta
from typing import Any, Optional
from zoneinfo import ZoneInfo

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from green.core.clock import Clock
from green.core.exceptions import InternalError, NotFoundError, NotYetDueError, ValidationError
from green.data.plants import PlantDefinition
from green.models.planting import Planting, Task

logger = logging.getLogger(__name__)

# ── Generation rules ──────────────────────────────────────────────────────────

WATER_FREQ: dict[str, int] = {"high": 2, "medium": 3, "low": 5}
DEFAULT_WATER_FREQ = 5

FIRST_WATERING_AFTER_DAYS = 2
FIRST_PEST_CHECK_AFTER_DAYS = 7
PEST_CHECK_EVERY_DAYS = 14

DEFAULT_LOCATION = "your garden"

VIEWS = ("all", "today", "overdue", "week", "completed")


def as_calendar_date(value: Any, tz: Optional[ZoneInfo] = None) -> Optional[date]:
    """
    Normalize a stored or submitted due date to a calendar date.

    Accepts date, datetime (aware values are converted to ``tz`` first) or
    an ISO-8601 string. Returns None for None. Raises ValueError for
    anything unparseable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None and tz is not None:
            value = value.astimezone(tz)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            return as_calendar_date(datetime.fromisoformat(text), tz)
    raise ValueError(f"not a date: {value!r}")


def watering_interval(watering_needs: Optional[str]) -> int:
    return WATER_FREQ.get(watering_needs or "", DEFAULT_WATER_FREQ)


def generate_initial_tasks(planting: Planting, plant: PlantDefinition) -> list[Task]:
    """
    Build the initial task set for a planting. Does not persist or mutate anything.

    water     — date_planted + 2 days, recurring every 2/3/5 days (high/medium/low)
    harvest   — date_planted + days_to_maturity, one-off, only if days_to_maturity is set
    pestCheck — date_planted + 7 days, recurring every 14 days
    """
    planted = planting.date_planted
    location = planting.location_notes or DEFAULT_LOCATION

    def _task(task_type: str, due: date, details: str, recurring_days: Optional[int] = None) -> Task:
        return Task(
            user_id=planting.user_id,
            planting_id=planting.id,
            garden_id=planting.garden_id,
            task_type=task_type,
            due_date=due,
            status="pending",
            details=details,
            related_plant_name=plant.name,
            related_area_id=planting.area_id,
            recurring=recurring_days is not None,
            recurring_days=recurring_days,
            notification_sent=False,
        )

    tasks = [
        _task(
            "water",
            planted + timedelta(days=FIRST_WATERING_AFTER_DAYS),
            f"Water your {plant.name} in {location}",
            recurring_days=watering_interval(plant.watering_needs),
        )
    ]

    if plant.days_to_maturity is not None:
        tasks.append(_task(
            "harvest",
            planted + timedelta(days=plant.days_to_maturity),
            f"Harvest your {plant.name} from {location}",
        ))

    tasks.append(_task(
        "pestCheck",
        planted + timedelta(days=FIRST_PEST_CHECK_AFTER_DAYS),
        f"Check your {plant.name} in {location} for pests and diseases",
        recurring_days=PEST_CHECK_EVERY_DAYS,
    ))
    return tasks


# ── Completion ────────────────────────────────────────────────────────────────


def effective_due_date(task: Task, today: date) -> date:
    # A task with no due date is treated as due today.
    return task.due_date or today


def is_completable(task: Task, today: date) -> bool:
    """True once the task's due day has arrived (today or earlier)."""
    return effective_due_date(task, today) <= today


def next_occurrence(task: Task, today: date) -> Task:
    """The successor of a recurring task: same fields, due recurring_days after the original."""
    due = effective_due_date(task, today)
    return Task(
        user_id=task.user_id,
        planting_id=task.planting_id,
        garden_id=task.garden_id,
        task_type=task.task_type,
        due_date=due + timedelta(days=task.recurring_days),
        status="pending",
        completed_at=None,
        details=task.details,
        related_plant_name=task.related_plant_name,
        related_area_id=task.related_area_id,
        recurring=True,
        recurring_days=task.recurring_days,
        notification_sent=False,
    )


async def complete_task(
    db: AsyncSession, user_id: str, task_id: int, clock: Clock
) -> tuple[Task, Optional[Task]]:
    """
    Close a task and, if it recurs, enqueue its successor in the same commit.

    Raises NotFoundError for an unknown task, NotYetDueError when the due day
    is still in the future, ValidationError when the task is already completed.
    """
    task = await get_owned_task(db, task_id, user_id)
    if task.status == "completed":
        raise ValidationError("Task is already completed")

    today = clock.today()
    if not is_completable(task, today):
        logger.warning("complete_task: task %d not due until %s", task.id, task.due_date)
        raise NotYetDueError(task.due_date)

    try:
        successor = next_occurrence(task, today) if task.recurring and task.recurring_days else None
    except OverflowError as exc:
        raise ValidationError("Next occurrence date out of range") from exc

    task.status = "completed"
    task.completed_at = clock.now()
    if successor is not None:
        db.add(successor)
    try:
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("complete_task: failed to persist completion of task %d", task_id)
        raise InternalError("Could not complete the task") from exc

    await db.refresh(task)
    if successor is not None:
        await db.refresh(successor)
        logger.info(
            "complete_task: task %d completed, next %s due %s (task %d)",
            task.id, successor.task_type, successor.due_date, successor.id,
        )
    else:
        logger.info("complete_task: task %d completed", task.id)
    return task, successor


# ── Views ─────────────────────────────────────────────────────────────────────


def _end_of_week(today: date) -> date:
    # Weeks run Sunday through Saturday.
    return today + timedelta(days=(5 - today.weekday()) % 7)


def in_view(task: Task, view: str, today: date) -> bool:
    if view == "completed":
        return task.status == "completed"
    if task.status == "completed":
        return False

    due = effective_due_date(task, today)
    if view == "all":
        return True
    if view == "today":
        return due <= today
    if view == "overdue":
        return due < today
    if view == "week":
        return today < due <= _end_of_week(today)
    raise ValueError(f"unknown task view: {view}")


def date_label(due: Optional[date], today: date) -> str:
    due = due or today
    if due == today:
        return "Today"
    if due == today + timedelta(days=1):
        return "Tomorrow"
    if due < today:
        return "Overdue"
    if due <= _end_of_week(today):
        return due.strftime("%A")
    return f"{due:%b} {due.day}"


# ── Queries ───────────────────────────────────────────────────────────────────


async def get_owned_task(db: AsyncSession, task_id: int, user_id: str) -> Task:
    task = await db.scalar(select(Task).where(Task.id == task_id, Task.user_id == user_id))
    if task is None:
        raise NotFoundError("Task not found")
    return task


async def list_tasks(
    db: AsyncSession,
    user_id: str,
    today: date,
    view: str = "all",
    planting_id: Optional[int] = None,
) -> list[Task]:
    if view not in VIEWS:
        raise ValidationError(f"Unknown task view '{view}'")

    q = select(Task).where(Task.user_id == user_id)
    if planting_id is not None:
        q = q.where(Task.planting_id == planting_id)

    result = await db.execute(q.order_by(Task.due_date, Task.id))
    return [t for t in result.scalars().all() if in_view(t, view, today)]


async def list_planting_tasks(db: AsyncSession, planting_id: int) -> list[Task]:
    result = await db.execute(
        select(Task).where(Task.planting_id == planting_id).order_by(Task.due_date, Task.id)
    )
    return list(result.scalars().all())
