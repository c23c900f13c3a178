"""
Core module - Base abstractions and interfaces

Provides foundational components used across git-update:
- Interfaces and protocols
- Base exception hierarchy
- Configuration management
"""

from git_update.core.config import Settings, get_settings, reset_settings
from git_update.core.exceptions import ConfigurationError, GitUpdateError

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "GitUpdateError",
    "ConfigurationError",
]
