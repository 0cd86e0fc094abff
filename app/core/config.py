"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "CurlWorkout"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["CurlWorkout maintainers"]
    PROJECT_URL: str = "https://github.com/curlworkout/curlworkout"

    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: Optional[str] = None  # full override, e.g. sqlite:// for local runs
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"

    # Identity tokens minted by the OAuth provider
    SECRET_KEY: str
    ALGORITHM: str = "HS256"

    # Device-local storage for the in-flight workout snapshot
    LOCAL_STORAGE_DIR: str = ".curlworkout"
    SNAPSHOT_KEY: str = "curlworkout_active_workout"
    SNAPSHOT_VERSION: int = 1

    # Workout timer
    TIMER_INTERVAL_SECONDS: float = 1.0

    # Calendar used for streaks and stats (IANA name)
    TIMEZONE: str = "UTC"

    # Cache warm on sign-in
    RECENT_WORKOUTS_LIMIT: int = 5

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def database_url(self) -> str:
        """Return the override URL if set, otherwise the PostgreSQL URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
