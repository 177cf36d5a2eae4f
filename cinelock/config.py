"""Application configuration settings."""

from datetime import timedelta
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "CineLock Simulation API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Seat layout
    SEAT_ROWS: str = "ABCDEFGH"
    SEATS_PER_ROW: int = 10

    # Lock lifecycle
    LOCK_DURATION_SECONDS: int = 420  # 7 minutes
    EXPIRY_SCAN_INTERVAL_SECONDS: float = 5.0
    LOG_CAPACITY: int = 50

    # Simulated latencies
    ACQUIRE_LATENCY_MS: int = 800
    COMMIT_LATENCY_MS: int = 1500
    BOT_NETWORK_DELAY_MS: int = 1200
    DEADLOCK_DETECTION_DELAY_MS: int = 2000
    DEADLOCK_RETRY_DELAY_MS: int = 1000

    # Primary user session
    PRIMARY_USER_ID: str = "u-current"
    PRIMARY_USER_NAME: str = "Main User"

    # Insight advisory service (Gemini)
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-3-flash-preview"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    INSIGHT_TIMEOUT_SECONDS: float = 10.0

    @property
    def lock_duration(self) -> timedelta:
        """Get lock duration as a timedelta."""
        return timedelta(seconds=self.LOCK_DURATION_SECONDS)

    @property
    def seat_rows(self) -> list[str]:
        """Get row labels in display order."""
        return list(self.SEAT_ROWS)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
