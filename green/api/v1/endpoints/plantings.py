from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from green.core.clock import Clock
from green.core.deps import CurrentUserId, get_catalog, get_clock, get_db
from green.schemas.planting import (
    PlantingCreate,
    PlantingCreated,
    PlantingDeleted,
    PlantingRead,
    PlantingUpdate,
)
from green.schemas.task import TaskRead
from green.services import planting_register
from green.services.catalog import PlantCatalog
from green.services.task_engine import list_planting_tasks

router = APIRouter(prefix="/plantings", tags=["plantings"])


@router.post("", response_model=PlantingCreated, status_code=status.HTTP_201_CREATED)
async def create_planting(
    data: PlantingCreate,
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
    catalog: PlantCatalog = Depends(get_catalog),
    clock: Clock = Depends(get_clock),
):
    planting, tasks = await planting_register.create_planting(db, user_id, data, catalog, clock)
    return PlantingCreated(
        planting=PlantingRead.model_validate(planting),
        tasks=[TaskRead.model_validate(t) for t in tasks],
    )


@router.get("", response_model=list[PlantingRead])
async def list_plantings(
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
    garden_id: Optional[int] = Query(None),
):
    return await planting_register.list_plantings(db, user_id, garden_id)


@router.get("/{planting_id}", response_model=PlantingRead)
async def get_planting(planting_id: int, user_id: CurrentUserId, db: AsyncSession = Depends(get_db)):
    return await planting_register.get_owned_planting(db, planting_id, user_id)


@router.patch("/{planting_id}", response_model=PlantingRead)
async def update_planting(
    planting_id: int,
    data: PlantingUpdate,
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
):
    return await planting_register.update_planting(db, user_id, planting_id, data)


@router.delete("/{planting_id}", response_model=PlantingDeleted)
async def delete_planting(planting_id: int, user_id: CurrentUserId, db: AsyncSession = Depends(get_db)):
    task_ids = await planting_register.delete_planting(db, user_id, planting_id)
    return PlantingDeleted(planting_id=planting_id, deleted_task_ids=task_ids)


@router.get("/{planting_id}/tasks", response_model=list[TaskRead])
async def list_tasks_for_planting(
    planting_id: int, user_id: CurrentUserId, db: AsyncSession = Depends(get_db)
):
    planting = await planting_register.get_owned_planting(db, planting_id, user_id)
    return await list_planting_tasks(db, planting.id)
