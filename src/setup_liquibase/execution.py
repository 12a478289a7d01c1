"""External command execution."""

import asyncio
import logging
import os
from pathlib import Path

from .schema import CommandResult

logger = logging.getLogger(__name__)


class AsyncCommandRunner:
    """Run commands with asyncio subprocesses."""

    def __init__(self, env: dict[str, str] | None = None):
        self.env = env

    async def run(self, executable: str | Path, args: list[str], timeout: float | None = None) -> CommandResult:
        logger.debug(f"Running: {executable} {' '.join(args)}")
        process = await asyncio.create_subprocess_exec(
            str(executable),
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=self.env if self.env is not None else dict(os.environ),
        )

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            raise TimeoutError(f"{Path(executable).name} timed out after {timeout:g} seconds") from None

        return CommandResult(
            exit_code=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace"),
        )
