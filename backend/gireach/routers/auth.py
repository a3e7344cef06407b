"""Auth API router: registration, login and the current identity."""

from fastapi import APIRouter, Depends, HTTPException

from gireach.middleware.auth_middleware import get_current_user
from gireach.schemas.common import MessageOut
from gireach.schemas.user import AuthClaims, AuthResponse, LoginRequest, RegisterRequest, UserOut
from gireach.services import auth_service
from gireach.storage import Storage, get_storage

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(request: RegisterRequest, storage: Storage = Depends(get_storage)):
    return auth_service.register(storage, request)


@router.post("/login", response_model=AuthResponse)
def login(request: LoginRequest, storage: Storage = Depends(get_storage)):
    return auth_service.authenticate(storage, request)


@router.post("/logout", response_model=MessageOut)
def logout(current_user: AuthClaims = Depends(get_current_user)):
    # Tokens are stateless; the client discards its copy.
    return MessageOut(message="Logged out")


@router.get("/me", response_model=UserOut)
def me(current_user: AuthClaims = Depends(get_current_user), storage: Storage = Depends(get_storage)):
    user = storage.get_user(current_user.user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserOut.model_validate(user.model_dump(exclude={"password"}))
