from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SERVICE_NAME: str = "welfarechain-api"
    API_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "DEV"
    DEBUG: bool = False

    # Dashboard frontends
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    MAX_REQUEST_SIZE: int = 1024 * 1024

    @field_validator("ENVIRONMENT")
    @classmethod
    def normalize_environment(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "PROD"

    def validate_prod(self) -> None:
        if not self.is_production:
            return
        if not self.CORS_ORIGINS or "*" in self.CORS_ORIGINS:
            raise ValueError("CORS_ORIGINS must list explicit origins in production")
        if self.DEBUG:
            raise ValueError("DEBUG must be disabled in production")
