"""Application configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from overload.core.constants import MAX_SUGGESTIONS, ONE_RM_HISTORY_SIZE


def _default_equipment_weights() -> dict[str, float]:
    return {
        "Barbell": 20.0,
        "EZ Bar": 12.0,
        "Dumbbell": 2.5,
        "Smith Machine": 15.0,
    }


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Overload Tracker API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # Database (PostgreSQL)
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "postgres"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "overload"
    database_ssl_mode: str = "disable"

    # Pool
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    # Singleton user until auth; X-User-Id header overrides it
    default_user_id: int = 1
    # bcrypt cost factor for stored password hashes
    password_hash_rounds: int = Field(default=12, ge=4, le=31)

    # Progression engine inputs
    default_one_rm: float = Field(default=20.0, ge=0, description="1RM assumed when an exercise has no history")
    one_rm_history_size: int = Field(default=ONE_RM_HISTORY_SIZE, ge=1)
    max_suggestions: int = Field(default=MAX_SUGGESTIONS, ge=1)
    # Equipment kind -> minimum loadable weight (JSON in env)
    equipment_minimum_weights: dict[str, float] = Field(default_factory=_default_equipment_weights)

    def _build_db_url(self, scheme: str = "postgresql", ssl_query: str = "sslmode=disable") -> str:
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        return (
            f"{scheme}://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}?{ssl_query}"
        )

    @property
    def database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        return self._build_db_url(scheme="postgresql", ssl_query=f"sslmode={self.database_ssl_mode}")

    @property
    def async_database_url(self) -> str:
        """Async URL for FastAPI (asyncpg driver)."""
        return self._build_db_url(scheme="postgresql+asyncpg", ssl_query=f"ssl={self.database_ssl_mode}")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
