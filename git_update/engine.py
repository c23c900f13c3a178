"""
Update Check Engine - decide which extensions have newer tagged releases

For every extension carrying a repository reference, the engine lists the
repository's tags, keeps those strictly newer than the installed version and
reports the highest one. Failed fetches go to the error log; they never abort
the batch and never reach the caller.

Example:
    with GitHubTagClient() as client:
        engine = UpdateCheckEngine(client, ErrorLog(JsonFileOptionStore(path)))
        for decision in engine.run(extensions):
            print(f"{decision.identifier}: {decision.new_version}")
"""

import logging
from collections.abc import Iterable

from git_update.core.interfaces import ITagClient
from git_update.github.exceptions import FetchError
from git_update.github.models import TagRecord
from git_update.models import (
    REPOSITORY_HEADERS,
    ExtensionRecord,
    RepositoryKind,
    UpdateDecision,
)
from git_update.storage.error_log import ErrorLog
from git_update.storage.models import ErrorLogEntry
from git_update.versioning import Ordering, compare, version_key

logger = logging.getLogger(__name__)


def select_update(extension: ExtensionRecord, tags: Iterable[TagRecord]) -> TagRecord | None:
    """
    Pick the highest tag strictly newer than the installed version

    Tags arrive in whatever order the API returns them, so every tag is
    considered rather than the first match.

    Returns:
        The winning tag, or None when nothing is newer
    """
    eligible = [
        tag for tag in tags
        if compare(tag.name, extension.version) is Ordering.GREATER
    ]
    if not eligible:
        return None
    return max(eligible, key=lambda tag: version_key(tag.name))


class UpdateCheckEngine:
    """
    Orchestrates tag fetches, version comparison and failure logging

    Runs synchronously: one blocking request per candidate, in order.
    """

    def __init__(
        self,
        tag_client: ITagClient,
        error_log: ErrorLog,
        supported_kinds: Iterable[RepositoryKind] = REPOSITORY_HEADERS,
    ):
        """
        Initialize engine

        Args:
            tag_client: Client listing tags for a repository URI
            error_log: Destination for failed fetches
            supported_kinds: Repository kinds this engine can check
        """
        self.tag_client = tag_client
        self.error_log = error_log
        self.supported_kinds = frozenset(supported_kinds)

    def candidates(self, extensions: Iterable[ExtensionRecord]) -> list[ExtensionRecord]:
        """Filter to extensions with a usable repository reference"""
        return [
            ext for ext in extensions
            if ext.is_tracked and ext.repository.kind in self.supported_kinds
        ]

    def check(self, extension: ExtensionRecord) -> UpdateDecision | None:
        """
        Check a single tracked extension

        Raises:
            FetchError: If the tag listing failed
        """
        tags = self.tag_client.fetch_tags(extension.repository.uri, extension.identifier)
        if not tags:
            logger.debug(f"No tags published for {extension.identifier}")
            return None

        tag = select_update(extension, tags)
        if tag is None:
            logger.debug(f"{extension.identifier} {extension.version} is up to date")
            return None

        logger.info(f"Update available for {extension.identifier}: {extension.version} -> {tag.name}")
        return UpdateDecision(
            identifier=extension.identifier,
            slug=extension.slug,
            new_version=tag.name,
            package=tag.zipball_url,
            url=extension.homepage,
        )

    def run(self, extensions: Iterable[ExtensionRecord]) -> list[UpdateDecision]:
        """
        Check every tracked extension for a newer tag

        Args:
            extensions: Installed extensions supplied by the host

        Returns:
            At most one decision per extension
        """
        to_check = self.candidates(extensions)
        if not to_check:
            return []

        decisions = []
        failures = 0
        for extension in to_check:
            try:
                decision = self.check(extension)
            except FetchError as e:
                failures += 1
                logger.warning(f"Update check failed for {extension.identifier}: {e.message}")
                self.error_log.append(ErrorLogEntry.from_fetch_error(e.with_identifier(extension.identifier)))
                continue

            if decision is not None:
                decisions.append(decision)

        logger.info(
            f"Checked {len(to_check)} extensions: "
            f"{len(decisions)} updates available, {failures} failed"
        )
        return decisions
