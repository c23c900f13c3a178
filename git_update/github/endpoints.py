"""
GitHub REST API endpoint definitions

Rewrites repository browsing URLs into API URLs:
    https://<host>/<owner>/<repo>  ->  https://api.<host>/repos/<owner>/<repo>/tags
"""

from urllib.parse import urlsplit, urlunsplit

from git_update.github.exceptions import InvalidRepositoryError


class GitHubEndpoints:
    """API path templates relative to the api.<host> base URL"""

    TAGS = "/repos/{owner}/{repo}/tags"

    @staticmethod
    def tags(owner: str, repo: str) -> str:
        return GitHubEndpoints.TAGS.format(owner=owner, repo=repo)


def split_repository_uri(repo_uri: str) -> tuple[str, str, str, str]:
    """
    Split a repository URL into scheme, host, owner and repo

    Args:
        repo_uri: Browsing URL such as "https://github.com/owner/repo/"

    Returns:
        (scheme, host, owner, repo)

    Raises:
        InvalidRepositoryError: If the URL has no host or no owner/repo path
    """
    parts = urlsplit(repo_uri.strip().rstrip("/"))
    segments = [s for s in parts.path.split("/") if s]

    if not parts.scheme or not parts.netloc or len(segments) < 2:
        raise InvalidRepositoryError(
            f"Cannot derive owner/repo from repository URI '{repo_uri}'",
            context={"repo_uri": repo_uri},
        )

    return parts.scheme, parts.netloc, segments[0], segments[1]


def tags_endpoint(repo_uri: str) -> str:
    """
    Derive the tags-listing API URL for a repository

    Example:
        >>> tags_endpoint("https://github.com/owner/repo/")
        'https://api.github.com/repos/owner/repo/tags'
    """
    scheme, host, owner, repo = split_repository_uri(repo_uri)
    return urlunsplit((scheme, f"api.{host}", GitHubEndpoints.tags(owner, repo), "", ""))
