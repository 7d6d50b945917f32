"""Issuing and decoding of bearer tokens."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import jwt

from src.api.core.constants import JWT_ALGORITHM
from src.database.models.users import UserRole
from src.utils.settings.auth import AuthSettings


def create_access_token(
    user_id: UUID,
    role: UserRole,
    expires_delta: timedelta | None = None,
) -> str:
    settings = AuthSettings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {
        "sub": str(user_id),
        "role": UserRole(role).value,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Decode and validate a token. Raises jose's JWTError subclasses on failure."""
    return jwt.decode(token, AuthSettings().JWT_SECRET, algorithms=[JWT_ALGORITHM])
