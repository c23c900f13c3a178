"""
Persistence for git-update

Site option stores and the bounded error log built on them.
"""

from git_update.storage.error_log import ERROR_LOG_OPTION, ErrorLog
from git_update.storage.models import ErrorLogEntry
from git_update.storage.options import JsonFileOptionStore, MemoryOptionStore

__all__ = [
    "ErrorLog",
    "ErrorLogEntry",
    "ERROR_LOG_OPTION",
    "JsonFileOptionStore",
    "MemoryOptionStore",
]
