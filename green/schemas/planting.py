from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel

from green.schemas.task import TaskRead


class PlantingStatus(str, Enum):
    active = "active"
    removed = "removed"


class PlantingCreate(BaseModel):
    garden_id: int
    area_id: int
    plant_id: str
    quantity: int = 1
    # Parsed by the planting register so an unparseable date surfaces as a ValidationError.
    date_planted: Optional[Union[date, str]] = None
    location_notes: Optional[str] = None


class PlantingUpdate(BaseModel):
    quantity: Optional[int] = None
    location_notes: Optional[str] = None
    status: Optional[PlantingStatus] = None


class PlantingRead(BaseModel):
    id: int
    user_id: str
    garden_id: int
    area_id: int
    plant_id: str
    quantity: int
    date_planted: date
    location_notes: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PlantingCreated(BaseModel):
    planting: PlantingRead
    tasks: list[TaskRead]


class PlantingDeleted(BaseModel):
    planting_id: int
    deleted_task_ids: list[int]
