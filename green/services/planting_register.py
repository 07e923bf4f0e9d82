"""
Planting register: create, update and delete plantings.

Creating a planting writes the planting and its initial task set in one
transaction. Deleting a planting removes every task that references it in
the same transaction.
"""
import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from green.core.clock import Clock
from green.core.exceptions import InternalError, NotFoundError, ValidationError
from green.models.garden import Area, Garden
from green.models.planting import Planting, Task
from green.schemas.planting import PlantingCreate, PlantingUpdate
from green.services.catalog import PlantCatalog
from green.services.task_engine import as_calendar_date, generate_initial_tasks

logger = logging.getLogger(__name__)


async def create_planting(
    db: AsyncSession,
    user_id: str,
    data: PlantingCreate,
    catalog: PlantCatalog,
    clock: Clock,
) -> tuple[Planting, list[Task]]:
    if data.quantity < 1:
        raise ValidationError("Quantity must be at least 1")

    try:
        date_planted = as_calendar_date(data.date_planted, clock.tz) or clock.today()
    except ValueError:
        raise ValidationError(f"Invalid planting date: {data.date_planted!r}")

    try:
        plant = catalog.get(data.plant_id)
    except Exception as exc:
        logger.exception("create_planting: catalog lookup failed for %s", data.plant_id)
        raise InternalError("Plant catalog is unavailable") from exc
    if plant is None:
        raise ValidationError(f"Unknown plant '{data.plant_id}'")

    await get_owned_area(db, data.garden_id, data.area_id, user_id)

    planting = Planting(
        user_id=user_id,
        garden_id=data.garden_id,
        area_id=data.area_id,
        plant_id=plant.id,
        quantity=data.quantity,
        date_planted=date_planted,
        location_notes=data.location_notes,
        status="active",
        created_at=clock.now(),
    )
    try:
        db.add(planting)
        await db.flush()  # obtain planting.id before building tasks
        tasks = generate_initial_tasks(planting, plant)
        db.add_all(tasks)
        await db.commit()
    except OverflowError as exc:
        await db.rollback()
        raise ValidationError("Planting date out of range") from exc
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("create_planting: failed to persist planting of %s", plant.id)
        raise InternalError("Could not save the planting") from exc

    await db.refresh(planting)
    for t in tasks:
        await db.refresh(t)
    logger.info(
        "create_planting: planting %d (%s x%d) with %d tasks",
        planting.id, plant.id, planting.quantity, len(tasks),
    )
    return planting, tasks


async def update_planting(
    db: AsyncSession, user_id: str, planting_id: int, data: PlantingUpdate
) -> Planting:
    planting = await get_owned_planting(db, planting_id, user_id)
    changes = data.model_dump(exclude_unset=True)
    if "quantity" in changes and (changes["quantity"] is None or changes["quantity"] < 1):
        raise ValidationError("Quantity must be at least 1")
    if "status" in changes and changes["status"] is None:
        raise ValidationError("Status cannot be empty")

    for field, value in changes.items():
        setattr(planting, field, value)
    try:
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("update_planting: failed to update planting %d", planting_id)
        raise InternalError("Could not update the planting") from exc
    await db.refresh(planting)
    return planting


async def delete_planting(db: AsyncSession, user_id: str, planting_id: int) -> list[int]:
    """Delete a planting and its tasks. Returns the ids of the deleted tasks."""
    planting = await get_owned_planting(db, planting_id, user_id)
    task_ids = list(
        (await db.execute(select(Task.id).where(Task.planting_id == planting.id))).scalars().all()
    )
    try:
        await db.execute(delete(Task).where(Task.planting_id == planting.id))
        await db.delete(planting)
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("delete_planting: failed to delete planting %d", planting_id)
        raise InternalError("Could not delete the planting") from exc

    logger.info("delete_planting: planting %d removed with %d tasks", planting_id, len(task_ids))
    return task_ids


# ── Lookups ───────────────────────────────────────────────────────────────────


async def get_owned_planting(db: AsyncSession, planting_id: int, user_id: str) -> Planting:
    planting = await db.scalar(
        select(Planting).where(Planting.id == planting_id, Planting.user_id == user_id)
    )
    if planting is None:
        raise NotFoundError("Planting not found")
    return planting


async def get_owned_area(db: AsyncSession, garden_id: int, area_id: int, user_id: str) -> Area:
    area = await db.scalar(
        select(Area)
        .join(Garden, Area.garden_id == Garden.id)
        .where(Area.id == area_id, Area.garden_id == garden_id, Garden.user_id == user_id)
    )
    if area is None:
        raise NotFoundError("Garden area not found")
    return area


async def list_plantings(
    db: AsyncSession, user_id: str, garden_id: Optional[int] = None
) -> list[Planting]:
    q = select(Planting).where(Planting.user_id == user_id)
    if garden_id is not None:
        q = q.where(Planting.garden_id == garden_id)
    result = await db.execute(q.order_by(Planting.created_at, Planting.id))
    return list(result.scalars().all())
