"""Password hashing, token issuing, and the register/login flows."""

import logging
from datetime import datetime, timedelta, timezone

import bcrypt
from fastapi import HTTPException, status
from jose import jwt

from gireach.config import settings
from gireach.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserCreate, UserOut, UserRecord
from gireach.storage.base import Storage
from gireach.utils.permissions import DEFAULT_SIGNUP_ROLE

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.PASSWORD_HASH_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def create_access_token(user: UserRecord) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "userId": user.id,
        "email": user.email,
        "role": user.role,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "exp": expire,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def register(storage: Storage, request: RegisterRequest) -> AuthResponse:
    email = str(request.email)
    if storage.get_user_by_email(email):
        logger.info("[auth] registration rejected, email already in use: %s", email)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists with this email")

    user = storage.create_user(
        UserCreate(
            email=email,
            password=hash_password(request.password),
            first_name=request.first_name,
            last_name=request.last_name,
            role=DEFAULT_SIGNUP_ROLE,
            institution=request.institution,
            year_of_study=request.year_of_study,
        )
    )
    logger.info("[auth] registered %s", email)
    return AuthResponse(
        message="User registered successfully",
        user=UserOut.model_validate(user.model_dump(exclude={"password"})),
        token=create_access_token(user),
    )


def authenticate(storage: Storage, request: LoginRequest) -> AuthResponse:
    email = str(request.email)
    user = storage.get_user_by_email(email)
    if not user or not user.is_active or not verify_password(request.password, user.password):
        logger.info("[auth] failed login for %s", email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")

    logger.info("[auth] login %s", email)
    return AuthResponse(
        message="Login successful",
        user=UserOut.model_validate(user.model_dump(exclude={"password"})),
        token=create_access_token(user),
    )
