import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from green.core.exceptions import InternalError, NotFoundError
from green.models.garden import Area, Garden
from green.models.planting import Planting, Task
from green.schemas.garden import AreaCreate, GardenCreate, GardenUpdate

logger = logging.getLogger(__name__)


async def _commit(db: AsyncSession, action: str) -> None:
    try:
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("%s: commit failed", action)
        raise InternalError(f"Could not {action.replace('_', ' ')}") from exc


async def get_owned_garden(db: AsyncSession, garden_id: int, user_id: str) -> Garden:
    garden = await db.scalar(
        select(Garden)
        .where(Garden.id == garden_id, Garden.user_id == user_id)
        .options(selectinload(Garden.areas))
    )
    if not garden:
        raise NotFoundError("Garden not found")
    return garden


async def list_gardens(db: AsyncSession, user_id: str) -> list[Garden]:
    result = await db.execute(
        select(Garden)
        .where(Garden.user_id == user_id)
        .options(selectinload(Garden.areas))
        .order_by(Garden.id)
    )
    return list(result.scalars().all())


async def create_garden(db: AsyncSession, user_id: str, data: GardenCreate) -> Garden:
    garden = Garden(
        user_id=user_id,
        name=data.name,
        description=data.description,
        location=data.location,
        areas=[Area(**a.model_dump()) for a in data.areas],
    )
    db.add(garden)
    await _commit(db, "create_garden")
    return await get_owned_garden(db, garden.id, user_id)


async def update_garden(db: AsyncSession, garden: Garden, data: GardenUpdate) -> Garden:
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(garden, field, value)
    await _commit(db, "update_garden")
    return await get_owned_garden(db, garden.id, garden.user_id)


async def add_area(db: AsyncSession, garden: Garden, data: AreaCreate) -> Area:
    area = Area(**data.model_dump())
    garden.areas.append(area)
    await _commit(db, "add_area")
    await db.refresh(area)
    return area


async def delete_garden(db: AsyncSession, garden: Garden) -> None:
    """Delete a garden with its areas, plantings and their tasks."""
    garden_id = garden.id
    planting_ids = select(Planting.id).where(Planting.garden_id == garden_id).scalar_subquery()
    await db.execute(delete(Task).where(Task.planting_id.in_(planting_ids)))
    await db.execute(delete(Planting).where(Planting.garden_id == garden_id))
    await db.delete(garden)
    await _commit(db, "delete_garden")
    logger.info("delete_garden: garden %d removed", garden_id)


async def clear_user_data(db: AsyncSession, user_id: str) -> dict[str, int]:
    """Remove every garden, planting and task owned by the user."""
    tasks = await db.execute(delete(Task).where(Task.user_id == user_id))
    plantings = await db.execute(delete(Planting).where(Planting.user_id == user_id))
    garden_ids = select(Garden.id).where(Garden.user_id == user_id).scalar_subquery()
    await db.execute(delete(Area).where(Area.garden_id.in_(garden_ids)))
    gardens = await db.execute(delete(Garden).where(Garden.user_id == user_id))
    await _commit(db, "clear_user_data")
    counts = {
        "gardens": gardens.rowcount or 0,
        "plantings": plantings.rowcount or 0,
        "tasks": tasks.rowcount or 0,
    }
    logger.info("clear_user_data: removed %s for user %s", counts, user_id)
    return counts
