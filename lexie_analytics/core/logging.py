"""
Logger Configuration
Provides centralized logging setup with file and console output
"""
import logging
import logging.config
from pathlib import Path
from typing import Optional

from lexie_analytics.core.config import LogConfig, settings


class LogManager:
    """Centralized logging configuration management"""

    def __init__(self, config: Optional[LogConfig] = None):
        self.config = config or settings.log_config

    def setup_logging(self, level: Optional[str] = None, log_file: Optional[Path] = None):
        """
        Configure logging with console and optional file handlers

        Args:
            level: Optional level override (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional path to log file. If not provided,
                     uses the one from config if available.
        """
        if level:
            self.config.LEVEL = level.upper()
        if log_file:
            self.config.FILE = log_file

        logging.config.dictConfig(self.config.log_config)

        logger = logging.getLogger(__name__)
        logger.info("Logging configured successfully")
        if self.config.FILE:
            logger.info(f"Log file: {self.config.FILE}")


# Global logging manager instance
log_manager = LogManager()

# Global logger instance for importing in other modules
logger = logging.getLogger("lexie_analytics")


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None):
    """
    Configure application logging

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file

    Returns:
        Logger instance
    """
    log_manager.setup_logging(level=level, log_file=log_file)
    return logger
