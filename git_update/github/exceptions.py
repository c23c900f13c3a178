"""
Tag fetch exceptions with recovery hints

Every failed remote check is described by a FetchError carrying the
extension identifier, when it happened and what the remote returned, so it
can be written to the error log as-is.
"""

from datetime import UTC, datetime

from git_update.core.exceptions import GitUpdateError


class FetchError(GitUpdateError):
    """Base exception for failed tag fetches"""

    def __init__(
        self,
        message: str,
        recovery_hint: str = "",
        context: dict | None = None,
        identifier: str = "",
        status_code: int | None = None,
        error: str | None = None,
        body: str | None = None,
        timestamp: datetime | None = None,
    ):
        self.message = message
        self.context = context or {}
        self.identifier = identifier
        self.status_code = status_code
        self.error = error
        self.body = body
        self.timestamp = timestamp or datetime.now(UTC)
        super().__init__(self._format_message(), component="GitHub", recovery_hint=recovery_hint)

    def _format_message(self) -> str:
        """Format exception message with context"""
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} [{context_str}]"

    def with_identifier(self, identifier: str) -> "FetchError":
        """Attach the extension identifier once the caller knows it"""
        self.identifier = identifier
        return self


class RepositoryHTTPError(FetchError):
    """Raised when the API answers with a non-200 status"""

    def __init__(
        self,
        message: str = "Unexpected response from repository host",
        recovery_hint: str = "",
        **kwargs,
    ):
        default_hint = (
            "404 means the repository URI is wrong or private; "
            "403 usually means the API rate limit was hit (set GIT_UPDATE_GITHUB_TOKEN)."
        )
        super().__init__(message, recovery_hint or default_hint, **kwargs)


class RepositoryConnectionError(FetchError):
    """Raised when the request fails at the transport level"""

    def __init__(
        self,
        message: str = "Failed to connect to repository host",
        recovery_hint: str = "",
        **kwargs,
    ):
        default_hint = "Check network connectivity, proxy settings and GIT_UPDATE_HTTP_TIMEOUT."
        super().__init__(message, recovery_hint or default_hint, **kwargs)


class InvalidRepositoryError(FetchError):
    """Raised when a repository URI cannot be rewritten into an API URL"""

    def __init__(
        self,
        message: str = "Invalid repository URI",
        recovery_hint: str = "",
        **kwargs,
    ):
        default_hint = "Use the repository page URL, e.g. https://github.com/owner/repo"
        super().__init__(message, recovery_hint or default_hint, **kwargs)
