"""
Logging Configuration

Builds the ``logging.config.dictConfig`` dict applied at startup.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

APP_LOGGER = "lexie_analytics"


class LogConfig(BaseModel):
    """Logging configuration settings"""

    LEVEL: str = Field("INFO", description="Level of the lexie_analytics loggers")
    FORMAT: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    FILE: Optional[Path] = Field(None, description="Log file path (optional)")
    ACCESS_LEVEL: str = Field("WARNING", description="Level of the uvicorn access log")
    DRIVER_LEVEL: str = Field("WARNING", description="Level of the pymongo driver loggers")

    def _handlers(self) -> List[str]:
        return ["console", "file"] if self.FILE else ["console"]

    @property
    def log_config(self) -> Dict[str, Any]:
        """dictConfig dict: app, access and driver loggers share the handlers"""
        handlers: Dict[str, Any] = {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            }
        }
        if self.FILE:
            handlers["file"] = {
                "class": "logging.FileHandler",
                "filename": str(self.FILE),
                "formatter": "standard",
            }

        def named(level: str) -> Dict[str, Any]:
            return {"handlers": self._handlers(), "level": level, "propagate": False}

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"standard": {"format": self.FORMAT}},
            "handlers": handlers,
            "loggers": {
                APP_LOGGER: named(self.LEVEL),
                "uvicorn.access": named(self.ACCESS_LEVEL),
                "pymongo": named(self.DRIVER_LEVEL),
            },
            "root": {"handlers": self._handlers(), "level": "WARNING"},
        }
