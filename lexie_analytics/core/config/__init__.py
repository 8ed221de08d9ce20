"""
Core Configuration Module
Provides centralized configuration management for the entire application
"""
from .base import Settings, settings, get_settings
from .mongo import MongoConfig
from .logging import LogConfig

__all__ = ['Settings', 'settings', 'get_settings', 'MongoConfig', 'LogConfig']
