#!/usr/bin/env python3
"""
Create the default Winston household garden for a user: a perimeter bed
and two greenhouses.

Usage (inside the API container):
    python scripts/run_setup_garden.py <user_id>
"""
import asyncio
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)

from green.db.session import AsyncSessionLocal
from green.schemas.garden import AreaCreate, GardenCreate
from green.services.garden_service import create_garden

DEFAULT_GARDEN = GardenCreate(
    name="Home Garden",
    location="Winston, OR",
    areas=[
        AreaCreate(name="Perimeter Bed", area_type="outdoor", length_ft=80, width_ft=2),
        AreaCreate(name="Greenhouse 1", area_type="greenhouse", length_ft=20, width_ft=10),
        AreaCreate(name="Greenhouse 2", area_type="greenhouse", length_ft=20, width_ft=10),
    ],
)


async def main(user_id: str) -> None:
    async with AsyncSessionLocal() as db:
        garden = await create_garden(db, user_id, DEFAULT_GARDEN)
    print(f"Created garden {garden.id} with areas:")
    for area in garden.areas:
        print(f"  {area.id}: {area.name} ({area.area_type})")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(sys.argv[1]))
