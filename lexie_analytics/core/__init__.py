"""
Application Core Components
Provides centralized access to core functionality
"""
from .config import settings
from .database import db_manager
from .logging import log_manager

__all__ = [
    'settings',
    'db_manager',
    'log_manager',
]
