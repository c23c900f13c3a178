"""
GitHub repository tag client

Lists published tags for repositories referenced by extension headers.
"""

from git_update.github.client import GitHubTagClient
from git_update.github.endpoints import tags_endpoint
from git_update.github.exceptions import (
    FetchError,
    InvalidRepositoryError,
    RepositoryConnectionError,
    RepositoryHTTPError,
)
from git_update.github.models import TagRecord

__all__ = [
    "GitHubTagClient",
    "TagRecord",
    "tags_endpoint",
    "FetchError",
    "InvalidRepositoryError",
    "RepositoryConnectionError",
    "RepositoryHTTPError",
]
