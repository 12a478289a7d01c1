"""Semantic version helpers built on the semver package.

Versions follow SemVer 2.0.0: MAJOR.MINOR.PATCH with an optional
hyphenated pre-release and optional '+build' metadata. Ordering uses semver
precedence, so build metadata never affects comparisons.
"""

import semver


def parse_semver(version: str) -> semver.Version | None:
    """Parse a semantic version.

    Returns None for anything that is not a SemVer 2.0.0 string, including
    PEP 440 spellings such as '4.33.0rc1', partial versions and leading 'v'
    prefixes. Surrounding whitespace is not trimmed.
    """
    if not version or version != version.strip():
        return None

    try:
        return semver.Version.parse(version)
    except ValueError:
        return None


def is_valid_semver(version: str) -> bool:
    return parse_semver(version) is not None


def version_greater_than(version: str, other: str) -> bool:
    """Return True when version has strictly higher precedence than other.

    Raises:
        ValueError: If either value is not a semantic version
    """
    return _require(version).compare(_require(other)) > 0


def version_less_than(version: str, other: str) -> bool:
    """Return True when version has strictly lower precedence than other.

    Raises:
        ValueError: If either value is not a semantic version
    """
    return _require(version).compare(_require(other)) < 0


def _require(version: str) -> semver.Version:
    parsed = parse_semver(version)
    if parsed is None:
        raise ValueError(f"Invalid version: {version!r}")
    return parsed
