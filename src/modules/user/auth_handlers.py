"""Authentication handlers for bearer JWTs."""

from uuid import UUID

import structlog
from fastapi import status
from jose import ExpiredSignatureError, JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.context import AuthenticatedUserContext
from src.database.models.users import User, UserRole
from src.modules.user.tokens import decode_access_token
from src.utils.logger import get_logger

logger = get_logger(__name__)

WWW_AUTHENTICATE = {"WWW-Authenticate": "Bearer"}


async def handle_jwt_auth(db: AsyncSession, token: str) -> AuthenticatedUserContext:
    try:
        payload = decode_access_token(token)
    except ExpiredSignatureError:
        raise WelfareChainException(
            MessageCode.TOKEN_EXPIRED,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Token expired. Please log in again."},
            headers=WWW_AUTHENTICATE,
        )
    except JWTError as e:
        logger.warning(f"JWT decoding failed: {e}")
        raise WelfareChainException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Invalid authentication token"},
            headers=WWW_AUTHENTICATE,
        )

    try:
        user_id = UUID(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise WelfareChainException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Token subject is missing or malformed"},
            headers=WWW_AUTHENTICATE,
        )

    user = await db.get(User, user_id)
    if not user:
        raise WelfareChainException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Token user no longer exists"},
            headers=WWW_AUTHENTICATE,
        )

    # The stored role wins over the claim if they disagree
    role = UserRole(user.role)
    structlog.contextvars.bind_contextvars(user_id=str(user.id), role=role.value)
    return AuthenticatedUserContext(user_id=user.id, role=role, user=user)
