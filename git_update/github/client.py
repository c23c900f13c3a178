"""
Synchronous GitHub tags API client
"""

import json
import logging

import httpx

from git_update.github.endpoints import tags_endpoint
from git_update.github.exceptions import (
    FetchError,
    InvalidRepositoryError,
    RepositoryConnectionError,
    RepositoryHTTPError,
)
from git_update.github.models import TagRecord

logger = logging.getLogger(__name__)

GITHUB_ACCEPT = "application/vnd.github+json"


class GitHubTagClient:
    """
    Blocking client listing repository tags through the GitHub REST API

    One request per call, no retries: each check cycle is a fresh
    best-effort attempt.

    Example:
        with GitHubTagClient(timeout=10.0) as client:
            tags = client.fetch_tags("https://github.com/owner/repo")
            for tag in tags:
                print(f"{tag.name} - {tag.zipball_url}")
    """

    def __init__(
        self,
        timeout: float = 10.0,
        token: str = "",
        user_agent: str = "git-update",
        client: httpx.Client | None = None,
    ):
        """
        Initialize tag client

        Args:
            timeout: Request timeout in seconds
            token: Optional GitHub token, raises the API rate limit
            user_agent: User-Agent header (GitHub rejects requests without one)
            client: Pre-built httpx.Client; the caller keeps ownership of it
        """
        self.timeout = timeout

        headers = {"Accept": GITHUB_ACCEPT, "User-Agent": user_agent}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.headers = headers

        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def __enter__(self) -> "GitHubTagClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this instance created it"""
        if self._owns_client:
            self.client.close()

    def fetch_tags(self, repo_uri: str, identifier: str = "") -> list[TagRecord]:
        """
        List published tags for a repository

        Args:
            repo_uri: Repository browsing URL (e.g., "https://github.com/owner/repo")
            identifier: Extension identifier recorded on failures

        Returns:
            Tags in API order; empty when the body is empty or not a JSON array

        Raises:
            InvalidRepositoryError: If repo_uri cannot be rewritten to an API URL
            RepositoryConnectionError: On transport failure or timeout
            RepositoryHTTPError: On any non-200 status
        """
        try:
            url = tags_endpoint(repo_uri)
        except FetchError as e:
            raise e.with_identifier(identifier)

        logger.debug(f"Fetching tags for {identifier or repo_uri} from {url}")

        try:
            response = self.client.get(url, headers=self.headers)
        except httpx.InvalidURL as e:
            raise InvalidRepositoryError(
                f"Repository URI '{repo_uri}' does not give a valid API URL: {e}",
                context={"url": url},
                identifier=identifier,
                error=f"{type(e).__name__}: {e}",
            ) from e
        except httpx.HTTPError as e:
            raise RepositoryConnectionError(
                f"Request to {url} failed: {e}",
                context={"url": url},
                identifier=identifier,
                error=f"{type(e).__name__}: {e}",
            ) from e

        if response.status_code != 200:
            raise RepositoryHTTPError(
                f"Tags request returned HTTP {response.status_code}",
                context={"url": url},
                identifier=identifier,
                status_code=response.status_code,
                body=response.text,
            )

        return self._parse_tags(response.text)

    @staticmethod
    def _parse_tags(body: str) -> list[TagRecord]:
        """Parse a tags array; anything else counts as no tags"""
        if not body.strip():
            return []

        try:
            data = json.loads(body)
        except json.JSONDecodeError:
            logger.debug("Tags response is not valid JSON, treating as no tags")
            return []

        if not isinstance(data, list):
            return []

        tags = []
        for item in data:
            tag = TagRecord.from_api(item)
            if tag is not None:
                tags.append(tag)
        return tags
