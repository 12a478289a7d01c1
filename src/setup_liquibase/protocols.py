"""Protocols for the collaborators of the Liquibase installer.

The installer only sequences these calls; callers inject implementations
(HTTP download, tar/zip extraction, subprocess execution, PATH handling).
"""

from pathlib import Path
from typing import Protocol
from typing import runtime_checkable

from .schema import CommandResult


@runtime_checkable
class DownloaderProtocol(Protocol):
    """Protocol for fetching an archive to a local file."""

    async def download(self, url: str) -> Path:
        """Download url and return the path of the local file.

        Raises:
            Exception: If the download fails (HTTP error, network error, ...)
        """
        ...


@runtime_checkable
class ArchiveExtractorProtocol(Protocol):
    """Protocol for extracting a downloaded archive."""

    async def extract(self, archive: Path) -> Path:
        """Extract archive into a fresh directory and return that directory.

        Raises:
            ExtractionError: If the archive cannot be extracted
        """
        ...


@runtime_checkable
class CommandRunnerProtocol(Protocol):
    """Protocol for running an executable and capturing its output."""

    async def run(self, executable: str | Path, args: list[str], timeout: float | None = None) -> CommandResult:
        """Run executable with args.

        Non-zero exit codes are returned, not raised.

        Raises:
            TimeoutError: If the command does not finish within timeout seconds
            OSError: If the executable cannot be started
        """
        ...


@runtime_checkable
class PathRegistryProtocol(Protocol):
    """Protocol for making a directory's executables invocable by name."""

    def add_path(self, directory: Path) -> None:
        """Prepend directory to the executable search path."""
        ...


@runtime_checkable
class InstallationCacheProtocol(Protocol):
    """Protocol for looking up and storing extracted installations."""

    def get(self, edition: str, version: str) -> Path | None:
        """Return the cached installation directory, or None."""
        ...

    def put(self, edition: str, version: str, path: Path) -> None:
        """Remember path as the installation directory for edition and version."""
        ...
