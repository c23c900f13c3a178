"""
Host integration

Connects the update check engine to a host application that owns the
extension inventory and the "update available" cache. Host capabilities are
injected explicitly; nothing registers itself globally.

Example:
    updater = GitUpdate.from_settings(plugins=my_plugins, themes=my_themes, registrar=my_host)
    updater.register_headers()
    ...
    transient = updater.check_plugins(transient)
    updater.close()
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from git_update.core.config import Settings, get_settings
from git_update.core.exceptions import ConfigurationError
from git_update.core.interfaces import ExtensionInventory, HeaderRegistrar
from git_update.engine import UpdateCheckEngine
from git_update.github.client import GitHubTagClient
from git_update.models import (
    REPOSITORY_HEADERS,
    ExtensionRecord,
    RepositoryReference,
    UpdateDecision,
)
from git_update.storage.error_log import ErrorLog
from git_update.storage.options import JsonFileOptionStore

logger = logging.getLogger(__name__)

# Header names the host exposes for every extension
VERSION_HEADER = "Version"
NAME_HEADERS = ("Name", "Theme Name", "Plugin Name")
HOMEPAGE_HEADERS = ("PluginURI", "ThemeURI", "Plugin URI", "Theme URI")


def enable_headers(headers: list[str]) -> list[str]:
    """
    Add the recognized repository headers to a host's extra-header list

    Args:
        headers: Extra headers other collaborators already registered

    Returns:
        New list with each repository header present exactly once
    """
    result = list(headers)
    for label in REPOSITORY_HEADERS.values():
        if label not in result:
            result.append(label)
    return result


def _first_header(headers: Mapping[str, str], names: tuple[str, ...]) -> str:
    for name in names:
        value = headers.get(name)
        if value:
            return str(value)
    return ""


def extension_from_headers(identifier: str, headers: Mapping[str, str]) -> ExtensionRecord:
    """
    Build an ExtensionRecord from raw host header values

    Args:
        identifier: Host identifier (plugin file path or theme template)
        headers: Header label -> value as parsed by the host

    Returns:
        ExtensionRecord; repository is None when no repository header is set
    """
    repository = None
    for kind, label in REPOSITORY_HEADERS.items():
        uri = str(headers.get(label) or "").strip()
        if uri:
            repository = RepositoryReference(kind=kind, uri=uri)
            break

    return ExtensionRecord(
        identifier=identifier,
        version=str(headers.get(VERSION_HEADER) or ""),
        repository=repository,
        name=_first_header(headers, NAME_HEADERS),
        homepage=_first_header(headers, HOMEPAGE_HEADERS),
    )


@dataclass
class UpdateTransient:
    """
    Host cache deciding whether "update available" is shown

    Attributes:
        checked: identifier -> installed version, filled by the host's own check
        response: identifier -> available update
    """

    checked: dict[str, str] = field(default_factory=dict)
    response: dict[str, UpdateDecision] = field(default_factory=dict)

    def merge(self, decisions: list[UpdateDecision]) -> None:
        """Record decisions, replacing any existing entry for the same extension"""
        for decision in decisions:
            self.response[decision.identifier] = decision


class GitUpdate:
    """
    Host-facing wiring of inventory, engine and update cache

    Owned by the host's top-level setup and passed to whatever triggers checks.
    """

    def __init__(
        self,
        engine: UpdateCheckEngine,
        plugins: ExtensionInventory | None = None,
        themes: ExtensionInventory | None = None,
        registrar: HeaderRegistrar | None = None,
    ):
        self.engine = engine
        self.plugins = plugins
        self.themes = themes
        self.registrar = registrar

    @classmethod
    def from_settings(
        cls,
        plugins: ExtensionInventory | None = None,
        themes: ExtensionInventory | None = None,
        registrar: HeaderRegistrar | None = None,
        settings: Settings | None = None,
    ) -> "GitUpdate":
        """Build with a GitHub client and a JSON-file error log configured from settings"""
        settings = settings or get_settings()
        client = GitHubTagClient(
            timeout=settings.http_timeout,
            token=settings.github_token,
            user_agent=settings.user_agent,
        )
        error_log = ErrorLog(
            JsonFileOptionStore(settings.options_file),
            capacity=settings.error_log_capacity,
        )
        return cls(UpdateCheckEngine(client, error_log), plugins, themes, registrar)

    def close(self) -> None:
        """Release the engine's HTTP client"""
        close = getattr(self.engine.tag_client, "close", None)
        if close is not None:
            close()

    def register_headers(self) -> None:
        """Ask the host to parse the repository headers during inventory collection"""
        if self.registrar is None:
            return
        self.registrar.register_headers(enable_headers([]))

    def check_plugins(self, transient: UpdateTransient) -> UpdateTransient:
        """Merge plugin updates into the host cache"""
        return self._check(transient, self.plugins, "plugins")

    def check_themes(self, transient: UpdateTransient) -> UpdateTransient:
        """Merge theme updates into the host cache"""
        return self._check(transient, self.themes, "themes")

    def _check(
        self,
        transient: UpdateTransient,
        inventory: ExtensionInventory | None,
        label: str,
    ) -> UpdateTransient:
        # Run only after the host has done its own check
        if not transient.checked or inventory is None:
            return transient

        extensions = [
            extension_from_headers(identifier, headers)
            for identifier, headers in inventory.list_extensions().items()
        ]
        logger.debug(f"Checking {len(extensions)} {label} for repository updates")

        transient.merge(self.engine.run(extensions))
        return transient


class JsonInventory:
    """
    Extension inventory read from a JSON file

    The file maps each identifier to its header values:
        {"my-plugin/my-plugin.php": {"Version": "1.0", "GitHub URI": "https://github.com/o/r"}}
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def list_extensions(self) -> dict[str, dict[str, str]]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Cannot read extension inventory {self.path}: {e}",
                recovery_hint="Pass a JSON object mapping identifiers to header values",
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Extension inventory {self.path} must be a JSON object")

        return {
            str(identifier): dict(headers)
            for identifier, headers in data.items()
            if isinstance(headers, dict)
        }
