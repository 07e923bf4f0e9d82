from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from green.core.deps import CurrentUserId, get_db
from green.schemas.garden import AreaCreate, AreaRead, GardenCreate, GardenRead, GardenUpdate
from green.services import garden_service

router = APIRouter(prefix="/gardens", tags=["gardens"])


# ── Gardens ──────────────────────────────────────────────────────────────────


@router.get("", response_model=list[GardenRead])
async def list_gardens(user_id: CurrentUserId, db: AsyncSession = Depends(get_db)):
    return await garden_service.list_gardens(db, user_id)


@router.post("", response_model=GardenRead, status_code=status.HTTP_201_CREATED)
async def create_garden(data: GardenCreate, user_id: CurrentUserId, db: AsyncSession = Depends(get_db)):
    return await garden_service.create_garden(db, user_id, data)


@router.get("/{garden_id}", response_model=GardenRead)
async def get_garden(garden_id: int, user_id: CurrentUserId, db: AsyncSession = Depends(get_db)):
    return await garden_service.get_owned_garden(db, garden_id, user_id)


@router.patch("/{garden_id}", response_model=GardenRead)
async def update_garden(
    garden_id: int, data: GardenUpdate, user_id: CurrentUserId, db: AsyncSession = Depends(get_db)
):
    garden = await garden_service.get_owned_garden(db, garden_id, user_id)
    return await garden_service.update_garden(db, garden, data)


@router.delete("/{garden_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_garden(garden_id: int, user_id: CurrentUserId, db: AsyncSession = Depends(get_db)):
    garden = await garden_service.get_owned_garden(db, garden_id, user_id)
    await garden_service.delete_garden(db, garden)


# ── Areas ────────────────────────────────────────────────────────────────────


@router.post("/{garden_id}/areas", response_model=AreaRead, status_code=status.HTTP_201_CREATED)
async def add_area(
    garden_id: int, data: AreaCreate, user_id: CurrentUserId, db: AsyncSession = Depends(get_db)
):
    garden = await garden_service.get_owned_garden(db, garden_id, user_id)
    return await garden_service.add_area(db, garden, data)
