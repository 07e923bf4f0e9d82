from pydantic import BaseModel


class MonthlyClimateRead(BaseModel):
    month: int
    name: str
    avg_high_f: int
    avg_low_f: int
    precipitation_inches: float
    notes: str

    model_config = {"from_attributes": True}


class ClimateSummary(BaseModel):
    location: str
    usda_zone: str
    climate_type: str
    avg_last_frost: str
    avg_first_frost: str
    growing_season: str
    characteristics: list[str]
    months: list[MonthlyClimateRead]
