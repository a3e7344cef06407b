"""User and authentication request/response contracts."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from gireach.schemas.common import ApiModel


class UserCreate(ApiModel):
    email: str
    password: str  # already hashed
    first_name: str
    last_name: str
    role: str = "mentee"
    institution: Optional[str] = None
    year_of_study: Optional[str] = None
    profile_image_url: Optional[str] = None
    is_active: bool = True


class UserUpdate(ApiModel):
    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None
    institution: Optional[str] = None
    year_of_study: Optional[str] = None
    profile_image_url: Optional[str] = None
    is_active: Optional[bool] = None


class UserOut(ApiModel):
    id: str
    email: str
    first_name: str
    last_name: str
    role: str
    institution: Optional[str] = None
    year_of_study: Optional[str] = None
    profile_image_url: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserRecord(UserOut):
    password: str


class RegisterRequest(ApiModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)
    institution: Optional[str] = None
    year_of_study: Optional[str] = None


class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthResponse(ApiModel):
    message: str
    user: UserOut
    token: str


class AuthClaims(ApiModel):
    """Identity carried by a bearer token; no server-side session backs it."""

    user_id: str
    email: str
    role: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
