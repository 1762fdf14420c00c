from enum import Enum
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ErrorNotificationStrategy(str, Enum):
    """Which errors are pushed to the frontend as notifications."""

    ALL = "ALL"
    OPERATIONAL = "OPERATIONAL"
    CRITICAL = "CRITICAL"
    NONE = "NONE"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Campus Marketplace API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Security
    log_user_emails: bool = False  # Set to False in production for GDPR compliance
    log_level: str | None = None

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_pool_recycle: int = 1800  # seconds
    database_echo: bool = False

    # Auth
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == "change-this-to-a-secure-random-string":
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    # Error handling
    error_include_stack_trace: bool = False
    error_notify_frontend: bool = True
    error_notification_strategy: ErrorNotificationStrategy = ErrorNotificationStrategy.OPERATIONAL
    error_log_errors: bool = True
    error_capture_context: bool = True

    # Sentry (crash reporting, disabled unless a DSN is configured)
    sentry_enabled: bool = False
    sentry_dsn: str | None = None
    sentry_environment: str | None = None  # Falls back to app_env
    sentry_traces_sample_rate: float = 0.0

    @field_validator("sentry_traces_sample_rate")
    @classmethod
    def validate_sample_rate(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("SENTRY_TRACES_SAMPLE_RATE must be between 0.0 and 1.0")
        return v

    # Notifications
    notification_persist: bool = False
    notification_enable_logging: bool = True
    notification_history_size: int = 1000


@lru_cache
def get_settings() -> Settings:
    return Settings()
