import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import ValidationError

from gireach.config import settings
from gireach.schemas.user import AuthClaims
from gireach.services.auth_service import ALGORITHM

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def decode_token(token: str) -> AuthClaims:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        return AuthClaims.model_validate(payload)
    except (JWTError, ValidationError) as exc:
        logger.warning("[auth] token rejected: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> AuthClaims:
    if credentials is None or not credentials.credentials:
        logger.info("[auth] request without bearer token")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No token provided")
    return decode_token(credentials.credentials)


def require_roles(*roles: str):
    def checker(current_user: AuthClaims = Depends(get_current_user)) -> AuthClaims:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires role: {', '.join(roles)}",
            )
        return current_user
    return checker


def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> AuthClaims | None:
    if credentials is None:
        return None
    try:
        return decode_token(credentials.credentials)
    except HTTPException:
        return None
