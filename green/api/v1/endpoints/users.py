from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from green.core.deps import CurrentUserId, get_db
from green.services.garden_service import clear_user_data

router = APIRouter(prefix="/users", tags=["users"])


@router.delete("/me/data")
async def delete_my_data(user_id: CurrentUserId, db: AsyncSession = Depends(get_db)):
    """Remove all gardens, plantings and tasks for the current user (account deletion)."""
    return {"deleted": await clear_user_data(db, user_id)}
