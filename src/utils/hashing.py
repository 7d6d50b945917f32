import hashlib

from passlib.context import CryptContext

from src.utils.settings.auth import AuthSettings

# bcrypt ignores everything past this many bytes
BCRYPT_MAX_BYTES = 72

_rounds = AuthSettings().BCRYPT_ROUNDS

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=_rounds,
    bcrypt__min_rounds=_rounds,
)


def _bcrypt_input(password: str) -> str:
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        return hashlib.sha256(raw).hexdigest()
    return password


class HashingService:
    """Salted bcrypt hashing for account passwords.

    Passwords longer than bcrypt's input limit are pre-hashed with SHA-256 so
    that characters past the limit still count.
    """

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(_bcrypt_input(password))

    @staticmethod
    def verify_password(password: str, hashed_password: str) -> bool:
        """Return False for a wrong password or an unparseable stored hash."""
        try:
            return pwd_context.verify(_bcrypt_input(password), hashed_password)
        except (ValueError, TypeError):
            return False

    @staticmethod
    def needs_rehash(hashed_password: str) -> bool:
        """True when the stored hash was made with other bcrypt settings."""
        return pwd_context.needs_update(hashed_password)
