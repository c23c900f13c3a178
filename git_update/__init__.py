"""
git-update

Update checks for themes and plugins whose source lives in a GitHub repository.
"""

__version__ = "1.3.0"
__license__ = "MIT"

from git_update.engine import UpdateCheckEngine
from git_update.github.client import GitHubTagClient
from git_update.host import GitUpdate, UpdateTransient
from git_update.models import ExtensionRecord, RepositoryKind, RepositoryReference, UpdateDecision
from git_update.storage.error_log import ErrorLog
from git_update.versioning import Ordering, compare

__all__ = [
    "GitUpdate",
    "UpdateCheckEngine",
    "GitHubTagClient",
    "ErrorLog",
    "ExtensionRecord",
    "RepositoryKind",
    "RepositoryReference",
    "UpdateDecision",
    "UpdateTransient",
    "Ordering",
    "compare",
]
