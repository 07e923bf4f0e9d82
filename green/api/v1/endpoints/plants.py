from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from green.core.deps import get_catalog
from green.schemas.plant import PlantRead, PlantSummary
from green.services.catalog import PlantCatalog

router = APIRouter(prefix="/plants", tags=["plants"])


@router.get("", response_model=list[PlantSummary])
async def list_plants(
    catalog: PlantCatalog = Depends(get_catalog),
    watering: Optional[str] = Query(None, description="Filter by watering needs (low, medium, high)"),
    greenhouse: Optional[bool] = Query(None, description="Only greenhouse-suitable plants"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Plantable in this month"),
):
    """Reference data; no auth required."""
    return catalog.search(watering=watering, greenhouse=greenhouse, month=month)


@router.get("/{plant_id}", response_model=PlantRead)
async def get_plant(plant_id: str, catalog: PlantCatalog = Depends(get_catalog)):
    plant = catalog.get(plant_id)
    if not plant:
        raise HTTPException(status_code=404, detail="Plant not found")
    return plant
