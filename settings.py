# settings.py
"""
Exercise Tracker API Settings.

Pydantic settings management with environment variable support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # MongoDB - missing value is logged at startup, not fatal
    MONGO_URI: Optional[str] = Field(
        default=None,
        description="MongoDB connection string"
    )
    DATABASE_NAME: str = Field(default="exercise_tracker")

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000, description="Listening port")

    # Environment
    ENV: str = Field(default="development")

    # CORS
    CORS_ORIGINS: str = Field(
        default="*",
        description="Comma-separated list of allowed origins, or *"
    )

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    @property
    def database_configured(self) -> bool:
        """Check if a MongoDB connection string was supplied."""
        return bool(self.MONGO_URI)

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
