"""Archive extraction.

Extraction is an ordered list of strategies tried in sequence until one
succeeds. Windows hosts extract zip archives in-process; Unix hosts invoke the
external tar tool, falling back to an alternate argument style once.

Extracted directories are created with tempfile.mkdtemp and left in place:
the runner process is short-lived.
"""

import asyncio
import logging
import tempfile
import zipfile
from pathlib import Path
from typing import Protocol
from typing import runtime_checkable

from .exceptions import ExtractionError
from .execution import AsyncCommandRunner
from .host import HostEnvironment
from .host import SystemHost
from .host import is_macos
from .host import is_windows
from .protocols import CommandRunnerProtocol

logger = logging.getLogger(__name__)


@runtime_checkable
class ExtractionStrategy(Protocol):
    """One way of extracting an archive."""

    name: str

    async def extract(self, archive: Path) -> Path: ...


def _make_extract_dir(prefix: str = "liquibase-extract-") -> Path:
    return Path(tempfile.mkdtemp(prefix=prefix))


class ZipExtractionStrategy:
    """Extract a zip archive with the zipfile module."""

    name = "zip"

    async def extract(self, archive: Path) -> Path:
        # Some zip tooling refuses files without a .zip suffix
        if archive.suffix.lower() != ".zip":
            renamed = archive.with_name(f"{archive.name}.zip")
            archive = archive.rename(renamed)
            logger.debug(f"Renamed archive to {archive}")

        target_dir = _make_extract_dir()
        await asyncio.to_thread(self._extract_all, archive, target_dir)
        return target_dir

    @staticmethod
    def _extract_all(archive: Path, target_dir: Path) -> None:
        with zipfile.ZipFile(archive) as zf:
            zf.extractall(target_dir)


class TarCommandStrategy:
    """Extract a tar.gz archive by invoking the external tar tool."""

    def __init__(self, name: str, args_template: list[str], runner: CommandRunnerProtocol, prefix: str):
        """Initialize with a tar argument template.

        Args:
            name: Strategy name for logging
            args_template: tar arguments; "{archive}" and "{target}" are replaced
            runner: Command runner used to invoke tar
            prefix: Prefix of the temporary extraction directory
        """
        self.name = name
        self.args_template = args_template
        self.runner = runner
        self.prefix = prefix

    async def extract(self, archive: Path) -> Path:
        target_dir = _make_extract_dir(self.prefix)
        args = [arg.replace("{archive}", str(archive)).replace("{target}", str(target_dir)) for arg in self.args_template]
        logger.debug(f"Extracting {archive} to {target_dir} with tar {' '.join(args)}")

        result = await self.runner.run("tar", args)
        if result.exit_code != 0:
            detail = result.stderr.strip() or result.stdout.strip() or "no output"
            raise ExtractionError(
                f"tar exited with code {result.exit_code}: {detail}",
                context={"archive": str(archive), "strategy": self.name},
            )
        return target_dir


def default_strategies(host: HostEnvironment, runner: CommandRunnerProtocol) -> list[ExtractionStrategy]:
    """Ordered extraction strategies for the host."""
    if is_windows(host):
        return [ZipExtractionStrategy()]

    if is_macos(host):
        fallback_args = ["-xf", "{archive}", "-C", "{target}"]
    else:
        fallback_args = ["--extract", "--file", "{archive}", "--directory", "{target}"]

    return [
        TarCommandStrategy("tar", ["xzf", "{archive}", "-C", "{target}"], runner, "liquibase-extract-"),
        TarCommandStrategy("tar-fallback", fallback_args, runner, "liquibase-extract-fallback-"),
    ]


class ArchiveExtractor:
    """Extract archives by trying each strategy in order."""

    def __init__(
        self,
        host: HostEnvironment | None = None,
        runner: CommandRunnerProtocol | None = None,
        strategies: list[ExtractionStrategy] | None = None,
    ):
        self.host = host or SystemHost()
        self.runner = runner or AsyncCommandRunner()
        self.strategies = strategies if strategies is not None else default_strategies(self.host, self.runner)

    async def extract(self, archive: Path) -> Path:
        first_error: Exception | None = None

        for strategy in self.strategies:
            try:
                target_dir = await strategy.extract(archive)
                logger.debug(f"Extracted {archive} with '{strategy.name}' strategy")
                return target_dir
            except Exception as e:
                logger.debug(f"Extraction with '{strategy.name}' failed: {e}")
                if first_error is None:
                    first_error = e

        if first_error is None:
            reason = "no extraction strategy available"
        elif isinstance(first_error, ExtractionError):
            reason = first_error.message
        else:
            reason = str(first_error) or type(first_error).__name__

        raise ExtractionError(
            f"Failed to extract Liquibase archive: {reason}",
            context={"archive": str(archive)},
        ) from first_error
