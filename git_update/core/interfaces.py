"""
Core interfaces and protocols

Defines the host capabilities and collaborators that are injected into the
update check engine, keeping it free of global hook tables.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from git_update.github.models import TagRecord


class IOptionStore(Protocol):
    """Protocol for site-scoped persisted option storage"""

    def get_option(self, key: str, default: Any = None) -> Any:
        """Return the stored value for key, or default if absent"""
        ...

    def update_option(self, key: str, value: Any) -> None:
        """Overwrite the stored value for key"""
        ...


class ITagClient(Protocol):
    """Protocol for repository tag listing clients"""

    def fetch_tags(self, repo_uri: str, identifier: str = "") -> list[TagRecord]:
        """
        List published tags for a repository

        Raises:
            FetchError: On transport failure or non-200 response
        """
        ...


class ExtensionInventory(Protocol):
    """Host capability listing installed extensions with their header values"""

    def list_extensions(self) -> Mapping[str, Mapping[str, str]]:
        """Return identifier -> header mapping for every installed extension"""
        ...


class HeaderRegistrar(Protocol):
    """Host capability for recognizing extra metadata headers"""

    def register_headers(self, headers: list[str]) -> None:
        """Make the host parse the given header labels during inventory collection"""
        ...
