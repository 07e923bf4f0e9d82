from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from green.core.clock import Clock, system_clock
from green.core.security import decode_token
from green.db.session import get_db
from green.services.catalog import PlantCatalog, plant_catalog

# Sign-in happens outside this service; tokens arrive already issued.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token")


async def get_current_user_id(token: Annotated[str, Depends(oauth2_scheme)]) -> str:
    credentials_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_token(token)
        if payload.get("type") != "access":
            raise credentials_exc
        user_id: str = payload.get("sub")
        if not user_id:
            raise credentials_exc
    except JWTError:
        raise credentials_exc
    return user_id


def get_clock() -> Clock:
    return system_clock


def get_catalog() -> PlantCatalog:
    return plant_catalog


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
