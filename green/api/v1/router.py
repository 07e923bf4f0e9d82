from fastapi import APIRouter

from green.api.v1.endpoints import climate, gardens, plantings, plants, tasks, users

api_router = APIRouter()

api_router.include_router(gardens.router)
api_router.include_router(plantings.router)
api_router.include_router(tasks.router)
api_router.include_router(plants.router)
api_router.include_router(climate.router)
api_router.include_router(users.router)
