"""
Version comparison

Orders release tags against installed versions. The leading numeric release
segments always compare numerically, with implicit trailing zeros, whether or
not the rest of the string is well-formed. Ties on the release are broken by
the suffix: PEP 440 semantics via packaging when the whole string parses
(pre-releases below the release), otherwise a loose token ordering that ranks
below any PEP 440 suffix of the same release. A string with no leading
release at all, like "latest", sorts below every numbered version.
"""

import re
from enum import IntEnum
from typing import Any

from packaging.version import InvalidVersion, Version

_TOKEN_RE = re.compile(r"\d+|[a-z]+")
_RELEASE_RE = re.compile(r"v?(\d+(?:\.\d+)*)")


class Ordering(IntEnum):
    """Result of comparing two version strings"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _strip_zeros(release) -> tuple[int, ...]:
    segments = list(release)
    while segments and segments[-1] == 0:
        segments.pop()
    return tuple(segments)


def _loose_key(text: str) -> tuple:
    """
    Token key for suffixes packaging rejects

    Numbers rank above words and compare numerically; trailing zero
    components are dropped so "build.0" and "build" tie.
    """
    tokens = [
        (1, int(token)) if token.isdigit() else (0, token)
        for token in _TOKEN_RE.findall(text)
    ]
    while tokens and tokens[-1] == (1, 0):
        tokens.pop()
    return tuple(tokens)


def parse(value: str) -> Version | None:
    """Parse a version string, returning None when it is not well-formed"""
    try:
        return Version(value)
    except (InvalidVersion, TypeError):
        return None


def is_valid(value: str) -> bool:
    """Check whether a version string is well-formed"""
    return parse(value) is not None


def version_key(value: str) -> tuple[int, tuple[int, ...], int, Any]:
    """
    Total sort key for any version string

    Args:
        value: Version string, possibly malformed

    Returns:
        (epoch, release, suffix kind, suffix key), usable with sorted()/max()

    Examples:
        >>> version_key("1.10.0-custom") > version_key("1.2.0")
        True
    """
    parsed = parse(value)
    if parsed is not None:
        return (parsed.epoch, _strip_zeros(parsed.release), 1, parsed)

    text = str(value).strip().lower()
    match = _RELEASE_RE.match(text)
    if match is None:
        return (0, (), 0, _loose_key(text))

    release = _strip_zeros(int(segment) for segment in match.group(1).split("."))
    return (0, release, 0, _loose_key(text[match.end():]))


def compare(a: str, b: str) -> Ordering:
    """
    Compare two version strings

    Examples:
        >>> compare("1.2.0", "1.10.0")
        <Ordering.LESS: -1>
        >>> compare("1.0", "1.0.0")
        <Ordering.EQUAL: 0>
    """
    key_a = version_key(a)
    key_b = version_key(b)
    if key_a < key_b:
        return Ordering.LESS
    if key_a > key_b:
        return Ordering.GREATER
    return Ordering.EQUAL


def is_newer(candidate: str, installed: str) -> bool:
    """Check whether candidate is strictly newer than installed"""
    return compare(candidate, installed) is Ordering.GREATER
