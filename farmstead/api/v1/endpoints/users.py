from fastapi import APIRouter, HTTPException

from farmstead.core.deps import CurrentUser, StorageDep
from farmstead.schemas.user import UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
async def get_me(current_user: CurrentUser):
    return current_user


@router.patch("/me", response_model=UserRead)
async def patch_me(body: UserUpdate, current_user: CurrentUser, storage: StorageDep):
    user = await storage.update_user(current_user.id, body)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user
