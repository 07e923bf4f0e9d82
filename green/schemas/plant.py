from typing import Optional

from pydantic import BaseModel


class PlantSummary(BaseModel):
    id: str
    name: str
    variety: str
    type: str
    watering_needs: str
    days_to_maturity: Optional[int] = None
    greenhouse_suitable: bool

    model_config = {"from_attributes": True}


class PlantRead(PlantSummary):
    sun_requirement: str
    hardiness_zones: list[str]
    planting_months: list[int]
    harvest_months: list[int]
    spacing_inches: Optional[float] = None
    depth_inches: Optional[float] = None
    companion_plants: list[str]
    avoid_plants: list[str]
    is_perennial: bool
    pest_info: Optional[str] = None
    how_to_guide: Optional[str] = None
