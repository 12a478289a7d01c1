"""Path safety for Liquibase environment variables.

Workflows migrated from the Liquibase Docker image often point file variables
at absolute container paths such as /liquibase/changelog/liquibase.log. On a
runner those locations are outside the workspace and usually not writable, so
they are rewritten to the equivalent workspace-relative path.
"""

import logging
import os
import tempfile
from pathlib import Path
from pathlib import PurePath

from .config import LIQUIBASE_FILE_ENV_VARS
from .config import LIQUIBASE_PATH_ENV_VARS

logger = logging.getLogger(__name__)


def _is_within(path: Path, root: Path) -> bool:
    try:
        path.relative_to(root)
        return True
    except ValueError:
        return False


def _to_workspace_relative(value: str) -> str:
    """Drop the anchor of an absolute path, keeping a trailing separator."""
    relative = PurePath(*PurePath(value).parts[1:])
    result = str(relative)
    if result in ("", "."):
        return "."
    if value.endswith(("/", "\\")):
        result += os.sep
    return result


def transform_liquibase_environment_variables(
    environ: dict[str, str] | None = None,
    workspace: Path | None = None,
    temp_roots: list[Path] | None = None,
) -> dict[str, str]:
    """
    Rewrite Liquibase path variables that point outside the workspace.

    For each variable in LIQUIBASE_PATH_ENV_VARS:
    - absolute paths outside the workspace and temp roots become workspace-relative
      ('/liquibase/logs/app.log' -> 'liquibase/logs/app.log')
    - for file variables, the containing directory is created

    Args:
        environ: Environment mapping to update in place (defaults to os.environ)
        workspace: Workspace root (defaults to GITHUB_WORKSPACE or the current directory)
        temp_roots: Directories where absolute paths are left alone
            (defaults to the system temp dir and RUNNER_TEMP)

    Returns:
        Mapping of rewritten variable names to their new values
    """
    env = os.environ if environ is None else environ
    workspace = (workspace or Path(env.get("GITHUB_WORKSPACE") or Path.cwd())).resolve()
    if temp_roots is None:
        temp_roots = [Path(tempfile.gettempdir())]
        if env.get("RUNNER_TEMP"):
            temp_roots.append(Path(env["RUNNER_TEMP"]))
    safe_roots = [workspace] + [root.resolve() for root in temp_roots]

    transformed: dict[str, str] = {}

    for name in LIQUIBASE_PATH_ENV_VARS:
        value = env.get(name)
        if not value:
            continue

        if os.path.isabs(value):
            resolved = Path(value).resolve()
            if not any(_is_within(resolved, root) for root in safe_roots):
                new_value = _to_workspace_relative(value)
                env[name] = new_value
                transformed[name] = new_value
                logger.info(f"Transformed {name} from {value} to workspace-relative path {new_value}")
                value = new_value

        if name in LIQUIBASE_FILE_ENV_VARS:
            file_path = Path(value)
            if not file_path.is_absolute():
                file_path = workspace / file_path
            directory = file_path.parent
            try:
                directory.mkdir(parents=True, exist_ok=True)
                logger.debug(f"Ensured directory exists for {name}: {directory}")
            except OSError as e:
                logger.warning(f"Could not create directory {directory} for {name}: {e}")

    return transformed
