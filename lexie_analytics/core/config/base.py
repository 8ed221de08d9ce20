"""
Base configuration settings for the application
"""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .logging import LogConfig
from .mongo import MongoConfig


class Settings(BaseSettings):
    """Base settings with common functionality and validation"""

    model_config = {
        "title": "Lexie Analytics Configuration",
        "case_sensitive": True,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "str_strip_whitespace": True,
        "validate_default": True,
        "env_prefix": "LEXIE_",
        "validate_assignment": True,
        "extra": "ignore"
    }

    # API Settings
    PROJECT_NAME: str = Field("Lexie Analytics", description="Project name")
    VERSION: str = Field("1.0.0", description="API version")
    DESCRIPTION: str = Field(
        "Telemetry ingestion and dashboards for the Lexie study app",
        description="API description"
    )
    DEBUG: bool = Field(False, description="Debug mode")

    # CORS Settings
    CORS_ORIGINS: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    # MongoDB Settings
    MONGO_URI: str = Field(
        "mongodb://localhost:27017", description="MongoDB connection URI"
    )
    MONGO_DB: str = Field("lexie_analytics", description="MongoDB database name")
    MONGO_MIN_POOL_SIZE: int = Field(
        0, ge=0, description="Minimum connection pool size"
    )
    MONGO_MAX_POOL_SIZE: int = Field(
        50, ge=1, description="Maximum connection pool size"
    )
    MONGO_MAX_IDLE_TIME_MS: int = Field(
        60000, ge=1000, description="Maximum connection idle time (ms)"
    )
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = Field(
        5000, ge=100, description="Fail fast if the server is unreachable (ms)"
    )

    # Collections
    ANALYTICS_COLLECTION: str = Field(
        "analytics_events", description="Collection for generic analytics events"
    )
    FEEDBACK_COLLECTION: str = Field(
        "feedback", description="Collection for user feedback"
    )

    # Reports
    FEEDBACK_PAGE_LIMIT: int = Field(
        100, ge=1, le=1000, description="Feedback records shown on the feedback page"
    )

    # Logging Settings
    LOG_LEVEL: str = Field("INFO", description="Logging level")
    LOG_FORMAT: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    LOG_FILE: Optional[Path] = Field(None, description="Log file path (optional)")
    LOG_ACCESS_LEVEL: str = Field("WARNING", description="uvicorn access log level")
    LOG_DRIVER_LEVEL: str = Field("WARNING", description="pymongo driver log level")

    @field_validator("LOG_LEVEL", "LOG_ACCESS_LEVEL", "LOG_DRIVER_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v.upper()

    @property
    def mongo_config(self) -> MongoConfig:
        """MongoDB connection settings"""
        return MongoConfig(
            URI=self.MONGO_URI,
            DB=self.MONGO_DB,
            MIN_POOL_SIZE=self.MONGO_MIN_POOL_SIZE,
            MAX_POOL_SIZE=self.MONGO_MAX_POOL_SIZE,
            MAX_IDLE_TIME_MS=self.MONGO_MAX_IDLE_TIME_MS,
            SERVER_SELECTION_TIMEOUT_MS=self.MONGO_SERVER_SELECTION_TIMEOUT_MS,
        )

    @property
    def log_config(self) -> LogConfig:
        """Logging settings"""
        return LogConfig(
            LEVEL=self.LOG_LEVEL,
            FORMAT=self.LOG_FORMAT,
            FILE=self.LOG_FILE,
            ACCESS_LEVEL=self.LOG_ACCESS_LEVEL,
            DRIVER_LEVEL=self.LOG_DRIVER_LEVEL,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
