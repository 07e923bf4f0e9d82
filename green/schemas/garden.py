from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel


class AreaCreate(BaseModel):
    name: str
    area_type: Literal["outdoor", "greenhouse"] = "outdoor"
    length_ft: Optional[float] = None
    width_ft: Optional[float] = None


class AreaRead(BaseModel):
    id: int
    garden_id: int
    name: str
    area_type: str
    length_ft: Optional[float]
    width_ft: Optional[float]

    model_config = {"from_attributes": True}


class GardenCreate(BaseModel):
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    areas: list[AreaCreate] = []


class GardenUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None


class GardenRead(BaseModel):
    id: int
    user_id: str
    name: str
    description: Optional[str]
    location: Optional[str]
    areas: list[AreaRead] = []
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
