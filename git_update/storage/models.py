"""
Error log data models
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from git_update.github.exceptions import FetchError


@dataclass
class ErrorLogEntry:
    """
    One failed remote tag fetch

    Attributes:
        item: Extension identifier the check was for
        time: When the failure happened (UTC)
        status_code: HTTP status, None for transport failures
        error: Transport error description, if any
        body: Raw response body, if any
    """

    item: str
    time: datetime = field(default_factory=lambda: datetime.now(UTC))
    status_code: int | None = None
    error: str | None = None
    body: str | None = None

    @classmethod
    def from_fetch_error(cls, error: FetchError) -> "ErrorLogEntry":
        """Create from a failed fetch"""
        return cls(
            item=error.identifier,
            time=error.timestamp,
            status_code=error.status_code,
            error=error.error or (None if error.status_code else error.message),
            body=error.body,
        )

    @property
    def detail(self) -> str:
        """Short human-readable failure summary"""
        if self.status_code is not None:
            return f"HTTP {self.status_code}"
        return str(self.error or "Unknown error")

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "item": self.item,
            "time": self.time.isoformat(),
            "response": {
                "status_code": self.status_code,
                "error": self.error,
                "body": self.body,
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ErrorLogEntry":
        """
        Create from dictionary

        Accepts ISO-8601 or epoch-seconds timestamps.
        """
        raw_time = data.get("time")
        if isinstance(raw_time, (int, float)):
            time = datetime.fromtimestamp(raw_time, UTC)
        elif isinstance(raw_time, str):
            time = datetime.fromisoformat(raw_time)
        else:
            time = datetime.fromtimestamp(0, UTC)

        response = data.get("response")
        if not isinstance(response, dict):
            response = {}

        return cls(
            item=str(data.get("item", "")),
            time=time,
            status_code=response.get("status_code"),
            error=response.get("error"),
            body=response.get("body"),
        )
