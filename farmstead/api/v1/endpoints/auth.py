from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from jose import JWTError

from farmstead.core.deps import CurrentUser, StorageDep
from farmstead.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    verify_password,
)
from farmstead.schemas.auth import RefreshRequest, TokenResponse
from farmstead.schemas.user import UserCreate, UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register(data: UserCreate, storage: StorageDep):
    if await storage.get_user_by_username(data.username):
        raise HTTPException(status_code=400, detail="Username already taken")
    if await storage.get_user_by_email(data.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    return await storage.create_user(data, hash_password(data.password))


@router.post("/login", response_model=TokenResponse)
async def login(storage: StorageDep, form_data: OAuth2PasswordRequestForm = Depends()):
    user = await storage.get_user_by_username(form_data.username)
    if not user or not verify_password(form_data.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
        )
    if not user.is_active:
        raise HTTPException(status_code=400, detail="Account disabled")

    await storage.record_login(user.id)

    return TokenResponse(
        access_token=create_access_token(str(user.id), user.role),
        refresh_token=create_refresh_token(str(user.id)),
    )


@router.post("/refresh", response_model=TokenResponse)
async def refresh(body: RefreshRequest, storage: StorageDep):
    credentials_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token"
    )
    try:
        payload = decode_token(body.refresh_token)
        if payload.get("type") != "refresh":
            raise credentials_exc
        user_id = int(payload["sub"])
    except (JWTError, KeyError, ValueError):
        raise credentials_exc

    user = await storage.get_user(user_id)
    if not user or not user.is_active:
        raise credentials_exc

    return TokenResponse(
        access_token=create_access_token(str(user.id), user.role),
        refresh_token=create_refresh_token(str(user.id)),
    )


@router.get("/me", response_model=UserRead)
async def me(current_user: CurrentUser):
    return current_user
