"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Error hierarchy rendered by the API layer
- audit.py          : Request logging middleware
- validators.py     : Required-field checks
"""
from lucy_backend.core.config import Settings, get_settings
from lucy_backend.core.logging_config import get_logger, setup_logging

__all__ = [
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
]
