"""
Plant Catalog lookup.

Read-only view over the static Winston plant list. get() returns None for
an unknown id; the planting register turns that into a ValidationError.
"""
import logging
from typing import Optional

from green.data.plants import PLANTS, PlantDefinition

logger = logging.getLogger(__name__)


class PlantCatalog:
    def __init__(self, plants: list[PlantDefinition]):
        self._by_id = {p.id: p for p in plants}

    def get(self, plant_id: str) -> Optional[PlantDefinition]:
        plant = self._by_id.get(plant_id)
        if plant is None:
            logger.debug("catalog miss: %s", plant_id)
        return plant

    def search(
        self,
        watering: Optional[str] = None,
        greenhouse: Optional[bool] = None,
        month: Optional[int] = None,
    ) -> list[PlantDefinition]:
        plants = sorted(self._by_id.values(), key=lambda p: p.name)
        if watering:
            plants = [p for p in plants if p.watering_needs == watering]
        if greenhouse is not None:
            plants = [p for p in plants if p.greenhouse_suitable == greenhouse]
        if month:
            plants = [p for p in plants if month in p.planting_months]
        return plants


plant_catalog = PlantCatalog(PLANTS)
