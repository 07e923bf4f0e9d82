from fastapi import APIRouter, Path

from green.data import climate
from green.schemas.climate import ClimateSummary, MonthlyClimateRead

router = APIRouter(prefix="/climate", tags=["climate"])


@router.get("", response_model=ClimateSummary)
async def get_climate():
    return ClimateSummary(
        location=climate.LOCATION,
        usda_zone=climate.USDA_ZONE,
        climate_type=climate.CLIMATE_TYPE,
        avg_last_frost=climate.AVG_LAST_FROST,
        avg_first_frost=climate.AVG_FIRST_FROST,
        growing_season=climate.GROWING_SEASON,
        characteristics=climate.CHARACTERISTICS,
        months=[MonthlyClimateRead.model_validate(m) for m in climate.MONTHS],
    )


@router.get("/months/{month}", response_model=MonthlyClimateRead)
async def get_month(month: int = Path(..., ge=1, le=12)):
    return climate.MONTHS[month - 1]
