from datetime import date, timedelta

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from green.core.clock import FrozenClock
from green.core.exceptions import InternalError, NotFoundError, ValidationError
from green.models.garden import Area, Garden
from green.models.planting import Planting, Task
from green.schemas.garden import GardenCreate
from green.schemas.planting import PlantingCreate, PlantingUpdate
from green.services.catalog import PlantCatalog, plant_catalog
from green.services.garden_service import clear_user_data, create_garden
from green.services.planting_register import create_planting, delete_planting, update_planting
from green.services.task_engine import complete_task

D = date(2026, 4, 1)


class BrokenCatalog(PlantCatalog):
    def __init__(self):
        super().__init__([])

    def get(self, plant_id):
        raise RuntimeError("catalog offline")


async def _garden(db: AsyncSession) -> Garden:
    garden = Garden(user_id="household-1", name="Home Garden", areas=[Area(name="Greenhouse 1")])
    db.add(garden)
    await db.commit()
    return garden


async def _count(db: AsyncSession, model) -> int:
    return await db.scalar(select(func.count()).select_from(model))


async def test_catalog_failure_persists_nothing(db: AsyncSession):
    garden = await _garden(db)
    data = PlantingCreate(garden_id=garden.id, area_id=garden.areas[0].id, plant_id="kale")

    with pytest.raises(InternalError):
        await create_planting(db, "household-1", data, BrokenCatalog(), FrozenClock.on(D))

    assert await _count(db, Planting) == 0
    assert await _count(db, Task) == 0


async def test_create_and_delete_planting(db: AsyncSession):
    garden = await _garden(db)
    data = PlantingCreate(
        garden_id=garden.id, area_id=garden.areas[0].id, plant_id="spinach", quantity=12,
    )

    planting, tasks = await create_planting(db, "household-1", data, plant_catalog, FrozenClock.on(D))
    assert planting.date_planted == D
    assert sorted(t.task_type for t in tasks) == ["harvest", "pestCheck", "water"]
    assert await _count(db, Task) == 3

    deleted = await delete_planting(db, "household-1", planting.id)
    assert sorted(deleted) == sorted(t.id for t in tasks)
    assert await _count(db, Planting) == 0
    assert await _count(db, Task) == 0


async def test_delete_planting_of_other_user(db: AsyncSession):
    garden = await _garden(db)
    data = PlantingCreate(garden_id=garden.id, area_id=garden.areas[0].id, plant_id="pea")
    planting, _ = await create_planting(db, "household-1", data, plant_catalog, FrozenClock.on(D))

    with pytest.raises(NotFoundError):
        await delete_planting(db, "household-2", planting.id)
    assert await _count(db, Task) == 3


# ── Commit failures ───────────────────────────────────────────────────────────


def _fail_commits(monkeypatch, db: AsyncSession) -> None:
    def commit():
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr(db.sync_session, "commit", commit)


async def _tomato(db: AsyncSession) -> tuple[int, dict[str, int]]:
    garden = await _garden(db)
    data = PlantingCreate(garden_id=garden.id, area_id=garden.areas[0].id, plant_id="tomato")
    planting, tasks = await create_planting(db, "household-1", data, plant_catalog, FrozenClock.on(D))
    return planting.id, {t.task_type: t.id for t in tasks}


async def test_failed_completion_leaves_task_pending_without_successor(db: AsyncSession, monkeypatch):
    _, task_ids = await _tomato(db)
    _fail_commits(monkeypatch, db)

    with pytest.raises(InternalError):
        await complete_task(db, "household-1", task_ids["water"], FrozenClock.on(D + timedelta(days=2)))

    row = (await db.execute(
        select(Task.status, Task.completed_at).where(Task.id == task_ids["water"])
    )).one()
    assert row.status == "pending"
    assert row.completed_at is None
    assert await _count(db, Task) == 3


async def test_failed_delete_keeps_planting_and_tasks(db: AsyncSession, monkeypatch):
    planting_id, _ = await _tomato(db)
    _fail_commits(monkeypatch, db)

    with pytest.raises(InternalError):
        await delete_planting(db, "household-1", planting_id)

    assert await _count(db, Planting) == 1
    assert await _count(db, Task) == 3


async def test_failed_update_keeps_planting(db: AsyncSession, monkeypatch):
    planting_id, _ = await _tomato(db)
    _fail_commits(monkeypatch, db)

    with pytest.raises(InternalError):
        await update_planting(db, "household-1", planting_id, PlantingUpdate(quantity=9))

    assert await db.scalar(select(Planting.quantity).where(Planting.id == planting_id)) == 1


async def test_failed_garden_writes_raise_internal_error(db: AsyncSession, monkeypatch):
    await _tomato(db)
    _fail_commits(monkeypatch, db)

    with pytest.raises(InternalError):
        await create_garden(db, "household-1", GardenCreate(name="Allotment"))
    with pytest.raises(InternalError):
        await clear_user_data(db, "household-1")

    assert await _count(db, Garden) == 1
    assert await _count(db, Planting) == 1
    assert await _count(db, Task) == 3


# ── Calendar limits ───────────────────────────────────────────────────────────


async def test_successor_past_end_of_calendar_is_rejected(db: AsyncSession):
    _, task_ids = await _tomato(db)
    last_day = date(9999, 12, 30)
    pest = await db.get(Task, task_ids["pestCheck"])
    pest.due_date = last_day
    await db.commit()

    with pytest.raises(ValidationError):
        await complete_task(db, "household-1", pest.id, FrozenClock.on(last_day))

    row = (await db.execute(
        select(Task.status, Task.completed_at).where(Task.id == pest.id)
    )).one()
    assert row.status == "pending"
    assert row.completed_at is None
    assert await _count(db, Task) == 3
