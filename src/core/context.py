"""Authentication context model for typed user authentication."""

from dataclasses import dataclass
from uuid import UUID

from src.database.models.users import User, UserRole


@dataclass(frozen=True)
class AuthenticatedUserContext:
    """Verified identity of the caller, resolved from a bearer token."""

    user_id: UUID
    role: UserRole
    user: User

    def __post_init__(self):
        """Ensure the token identity matches the stored user."""
        if not self.user:
            raise ValueError("User is required in authentication context")
        if self.user.id != self.user_id:
            raise ValueError("Token subject does not match the loaded user")

    def has_role(self, *roles: UserRole) -> bool:
        return self.role in roles
