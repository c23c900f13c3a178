"""
Extension and update decision models
"""

from dataclasses import dataclass
from enum import Enum


class RepositoryKind(str, Enum):
    """Kinds of repository reference an extension header can carry"""

    GITHUB = "github"


# Header label the host must recognize for each repository kind
REPOSITORY_HEADERS: dict[RepositoryKind, str] = {
    RepositoryKind.GITHUB: "GitHub URI",
}


@dataclass(frozen=True)
class RepositoryReference:
    """
    Pointer to a hosted source repository

    Attributes:
        kind: Repository host kind
        uri: Repository browsing URL (e.g., "https://github.com/owner/repo")
    """

    kind: RepositoryKind
    uri: str


@dataclass(frozen=True)
class ExtensionRecord:
    """
    Represents an installed theme or plugin

    Attributes:
        identifier: Unique slug (e.g., "my-plugin/my-plugin.php" or a theme template)
        version: Installed version string
        repository: Repository reference; None means the extension is not tracked
        name: Display name
        homepage: Extension homepage URL
    """

    identifier: str
    version: str
    repository: RepositoryReference | None = None
    name: str = ""
    homepage: str = ""

    @property
    def slug(self) -> str:
        """Extension directory: first path component of the identifier"""
        return self.identifier.split("/", 1)[0]

    @property
    def is_tracked(self) -> bool:
        return self.repository is not None and bool(self.repository.uri.strip())

    def __repr__(self) -> str:
        return f"ExtensionRecord(identifier='{self.identifier}', version='{self.version}')"


@dataclass(frozen=True)
class UpdateDecision:
    """
    A newer version available for one extension

    Attributes:
        identifier: Extension identifier
        slug: Extension directory
        new_version: Tag name of the newer version
        package: Archive download URL for that tag
        url: Extension homepage
    """

    identifier: str
    slug: str
    new_version: str
    package: str
    url: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "identifier": self.identifier,
            "slug": self.slug,
            "new_version": self.new_version,
            "package": self.package,
            "url": self.url,
        }
