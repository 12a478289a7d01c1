"""GitHub Action entry point.

Reads the action inputs, runs the installer and publishes the
liquibase-version and liquibase-path outputs. Any failure is reported through
the runner's failure mechanism with the error message only.
"""

import asyncio
import logging
import os
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from .environment import transform_liquibase_environment_variables
from .exceptions import MissingLicenseKeyError
from .exceptions import SetupError
from .installer import setup_liquibase
from .logging_config import configure_logging
from .logging_config import escape_command_data
from .schema import ActionInputs
from .schema import Edition
from .schema import SetupResult

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "True", "TRUE")
_FALSE_VALUES = ("false", "False", "FALSE")


class ActionContext:
    """
    Input/output binding for the GitHub Actions runner.

    Inputs come from INPUT_<NAME> environment variables, outputs and PATH
    additions go to the files named by GITHUB_OUTPUT and GITHUB_PATH.
    Implements PathRegistryProtocol.
    """

    def __init__(self, environ: dict[str, str] | None = None, stream: TextIO | None = None):
        """Initialize with an environment mapping and command stream.

        Args:
            environ: Environment to read and update (defaults to os.environ)
            stream: Where workflow commands are written (defaults to stdout)
        """
        self.environ = os.environ if environ is None else environ
        self.stream = stream or sys.stdout
        self.exit_code = 0

    def get_input(self, name: str) -> str:
        """Return the trimmed value of an action input, or an empty string."""
        return self.environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()

    def get_boolean_input(self, name: str, default: bool = False) -> bool:
        """Return a boolean action input.

        Accepts the YAML 1.2 core schema spellings true/True/TRUE and
        false/False/FALSE. An unset input yields default. None of this
        action's inputs are boolean today; the method completes the runner
        input binding next to get_input().

        Raises:
            ValueError: If the input is set to anything else
        """
        value = self.get_input(name)
        if not value:
            return default
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ValueError(
            f"Input is not a YAML 1.2 Core Schema boolean: {name}\n"
            "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
        )

    def set_output(self, name: str, value: str) -> None:
        output_file = self.environ.get("GITHUB_OUTPUT")
        if output_file:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            with open(output_file, "a", encoding="utf-8") as f:
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            self._command(f"::set-output name={name}::{escape_command_data(value)}")

    def add_path(self, directory: Path) -> None:
        """Prepend directory to PATH for this process and later workflow steps."""
        path_file = self.environ.get("GITHUB_PATH")
        if path_file:
            with open(path_file, "a", encoding="utf-8") as f:
                f.write(f"{directory}\n")

        current = self.environ.get("PATH", "")
        self.environ["PATH"] = f"{directory}{os.pathsep}{current}" if current else str(directory)

    def set_failed(self, message: str) -> None:
        self.exit_code = 1
        self._command(f"::error::{escape_command_data(message)}")

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        """Fold the output emitted inside the block under title."""
        self._command(f"::group::{title}")
        try:
            yield
        finally:
            self._command("::endgroup::")

    def _command(self, line: str) -> None:
        self.stream.write(f"{line}\n")
        self.stream.flush()


def read_inputs(context: ActionContext) -> ActionInputs:
    """
    Read and check the action inputs.

    The license key falls back to the LIQUIBASE_LICENSE_KEY environment variable.

    Raises:
        MissingLicenseKeyError: If a licensed edition is requested without a key
    """
    edition = context.get_input("edition") or Edition.OSS.value
    license_key = context.get_input("liquibase-pro-license-key") or context.environ.get("LIQUIBASE_LICENSE_KEY", "")

    if edition in (Edition.PRO.value, Edition.SECURE.value) and not license_key.strip():
        raise MissingLicenseKeyError(
            f"License key is required for Liquibase {edition} edition. "
            "Provide the 'liquibase-pro-license-key' input or set LIQUIBASE_LICENSE_KEY.",
            context={"edition": edition},
        )

    return ActionInputs(
        version=context.get_input("version"),
        edition=edition,
        license_key=license_key.strip(),
        download_url_base=context.get_input("download-url-base"),
    )


def _log_summary(context: ActionContext, inputs: ActionInputs, result: SetupResult) -> None:
    with context.group("Liquibase configuration"):
        logger.info(f" Edition: {inputs.edition.upper()}")
        logger.info(f" Version: {result.resolved_version}")
        logger.info(f" Install Path: {result.install_path}")
        logger.info(f" Execution Context: {Path.cwd()}")


async def run(context: ActionContext | None = None, **installer_options) -> int:
    """
    Run the action once.

    Args:
        context: Runner binding (defaults to the real environment and stdout)
        **installer_options: Collaborators passed through to setup_liquibase()

    Returns:
        Process exit status (0 on success, 1 on failure)
    """
    context = context or ActionContext()

    try:
        transform_liquibase_environment_variables(context.environ)

        inputs = read_inputs(context)
        logger.info(f"Setting up Liquibase {inputs.edition} version {inputs.version}")

        result = await setup_liquibase(inputs.to_request(), path_registry=context, **installer_options)

        context.set_output("liquibase-version", result.resolved_version)
        context.set_output("liquibase-path", str(result.install_path))
        _log_summary(context, inputs, result)

        logger.info(f"Successfully set up Liquibase {result.resolved_version} at {result.install_path}")
    except SetupError as e:
        logger.debug(f"Setup failed ({e.kind.value}): {e.context}")
        context.set_failed(e.message)
    except Exception as e:
        context.set_failed(str(e) or type(e).__name__)

    return context.exit_code


def main() -> None:
    configure_logging()
    sys.exit(asyncio.run(run()))
