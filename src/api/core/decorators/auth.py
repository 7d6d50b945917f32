"""Role-based access decorators for route handlers."""

from functools import wraps

from fastapi import status

from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.context import AuthenticatedUserContext
from src.database.models.users import UserRole
from src.utils.logger import get_logger

logger = get_logger(__name__)


def require_role(*roles: UserRole):
    """
    Decorator restricting a handler to callers holding one of ``roles``.

    The wrapped handler must take an ``AuthenticatedUserContext`` parameter
    (normally ``current_user: CurrentUserAuthDep``).
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            current_user = None
            for value in (*args, *kwargs.values()):
                if isinstance(value, AuthenticatedUserContext):
                    current_user = value
                    break

            if current_user is None:
                raise WelfareChainException(
                    MessageCode.AUTH_REQUIRED,
                    status.HTTP_401_UNAUTHORIZED,
                    {"description": "Authenticated user context not found"},
                )

            if not current_user.has_role(*roles):
                logger.warning(
                    "Role check failed",
                    user_id=str(current_user.user_id),
                    role=current_user.role.value,
                    required=[role.value for role in roles],
                )
                raise WelfareChainException(
                    MessageCode.AUTH_INSUFFICIENT_ROLE,
                    status.HTTP_403_FORBIDDEN,
                    {"required_roles": [role.value for role in roles]},
                )

            return await func(*args, **kwargs)

        return wrapper

    return decorator
