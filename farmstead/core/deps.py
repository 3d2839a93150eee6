from collections.abc import AsyncIterator
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from farmstead.core.config import settings
from farmstead.core.security import decode_token
from farmstead.db.session import AsyncSessionLocal
from farmstead.models.user import User
from farmstead.storage import DatabaseStorage, MemStorage, Storage

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")

# Module-level memory backend (created once on first use)
_memory_storage: Optional[MemStorage] = None


def get_memory_storage() -> MemStorage:
    global _memory_storage
    if _memory_storage is None:
        _memory_storage = MemStorage()
    return _memory_storage


async def get_storage() -> AsyncIterator[Storage]:
    if settings.STORAGE_BACKEND == "memory":
        yield get_memory_storage()
        return
    async with AsyncSessionLocal() as db:
        yield DatabaseStorage(db)


StorageDep = Annotated[Storage, Depends(get_storage)]


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    storage: StorageDep,
) -> User:
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

    user = await storage.get_user(int(user_id))
    if not user or not user.is_active:
        raise credentials_exc
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]