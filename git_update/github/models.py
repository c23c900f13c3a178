"""
GitHub data models
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TagRecord:
    """
    Represents a published repository tag

    Attributes:
        name: Tag name, usually a version string (not guaranteed well-formed)
        zipball_url: Source archive URL for the tag
    """

    name: str
    zipball_url: str = ""

    @classmethod
    def from_api(cls, data: Any) -> "TagRecord | None":
        """Build from one element of the tags API array, None if unusable"""
        if not isinstance(data, dict):
            return None
        name = data.get("name")
        if not isinstance(name, str) or not name:
            return None
        zipball_url = data.get("zipball_url")
        return cls(name=name, zipball_url=zipball_url if isinstance(zipball_url, str) else "")

    def __repr__(self) -> str:
        return f"TagRecord(name='{self.name}')"
