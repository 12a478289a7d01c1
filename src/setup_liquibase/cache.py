"""Caller-owned cache of extracted installations.

The cache is an explicit object handed to setup_liquibase() rather than a
process-wide singleton. Keys are (edition, version) with the edition token as
given, so 'oss' and 'community' are cached separately.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class InstallationCache:
    """In-memory installation cache."""

    def __init__(self, entries: dict[tuple[str, str], Path] | None = None):
        self._entries: dict[tuple[str, str], Path] = dict(entries or {})

    def get(self, edition: str, version: str) -> Path | None:
        path = self._entries.get((edition, version))
        if path is None:
            return None

        if not path.is_dir():
            logger.debug(f"Dropping cached installation {edition} {version}: {path} no longer exists")
            del self._entries[(edition, version)]
            return None

        return path

    def put(self, edition: str, version: str, path: Path) -> None:
        self._entries[(edition, version)] = path
        logger.debug(f"Cached installation {edition} {version} at {path}")
