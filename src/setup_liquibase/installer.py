"""Liquibase installation orchestrator (protocol-based).

Sequences Validating -> Resolving -> Downloading -> Extracting -> Registering
-> Verifying. The download, extraction, execution and PATH steps are delegated
to injected collaborators; any step may fail with a SetupError, which aborts
the rest of the pipeline.
"""

import logging
from pathlib import Path

from .config import EXECUTABLE_NAME
from .config import LICENSE_PROPERTIES_FILENAME
from .config import MIN_SUPPORTED_VERSION
from .config import VALIDATION_TIMEOUT_SECONDS
from .download import HttpDownloader
from .download import classify_download_error
from .exceptions import ExtractionError
from .exceptions import InstallationValidationError
from .exceptions import InvalidEditionError
from .exceptions import InvalidVersionFormatError
from .exceptions import MissingVersionError
from .exceptions import SetupError
from .exceptions import UnsupportedVersionError
from .execution import AsyncCommandRunner
from .extraction import ArchiveExtractor
from .host import HostEnvironment
from .host import SystemHost
from .host import is_windows
from .protocols import ArchiveExtractorProtocol
from .protocols import CommandRunnerProtocol
from .protocols import DownloaderProtocol
from .protocols import InstallationCacheProtocol
from .protocols import PathRegistryProtocol
from .resolver import resolve_download_url
from .schema import Edition
from .schema import SetupRequest
from .schema import SetupResult
from .versions import is_valid_semver
from .versions import version_less_than

logger = logging.getLogger(__name__)


def validate_request(request: SetupRequest) -> Edition:
    """Validate version and edition before any I/O.

    Licensing is checked upstream by the action input layer.

    Returns:
        The parsed edition

    Raises:
        MissingVersionError: If no version was given
        InvalidVersionFormatError: If the version is not a semantic version
        UnsupportedVersionError: If the version is below MIN_SUPPORTED_VERSION
        InvalidEditionError: If the edition is not recognized
    """
    version = request.version

    if not version:
        raise MissingVersionError("Version is required")

    if not is_valid_semver(version):
        raise InvalidVersionFormatError(
            f'Invalid version format: {version}. Must be a valid semantic version (e.g., "4.32.0")',
            context={"version": version},
        )

    if version_less_than(version, MIN_SUPPORTED_VERSION):
        raise UnsupportedVersionError(
            f"Version {version} is not supported. Minimum supported version is {MIN_SUPPORTED_VERSION}",
            context={"version": version, "minimum": MIN_SUPPORTED_VERSION},
        )

    try:
        return Edition(request.edition)
    except ValueError:
        valid = ", ".join(f"'{value}'" for value in Edition.values())
        raise InvalidEditionError(
            f"Invalid edition: {request.edition}. Must be one of {valid}",
            context={"edition": request.edition, "valid": Edition.values()},
        ) from None


def executable_path(install_dir: Path, host: HostEnvironment) -> Path:
    """Path of the Liquibase launcher inside an installation directory."""
    name = f"{EXECUTABLE_NAME}.bat" if is_windows(host) else EXECUTABLE_NAME
    return install_dir / name


def write_license_properties(install_dir: Path, license_key: str) -> Path:
    """Write liquibase.properties with the license key into install_dir."""
    properties_path = install_dir / LICENSE_PROPERTIES_FILENAME
    properties_path.write_text(f"licenseKey={license_key}\n")
    logger.debug(f"Wrote license configuration to {properties_path}")
    return properties_path


async def validate_installation(
    install_dir: Path,
    runner: CommandRunnerProtocol,
    host: HostEnvironment,
    timeout: float = VALIDATION_TIMEOUT_SECONDS,
) -> str:
    """
    Check that install_dir holds a working Liquibase by running '--version'.

    Args:
        install_dir: Extracted installation directory
        runner: Command runner for the version check
        host: Host environment (selects the launcher name)
        timeout: Seconds before the version check is abandoned

    Returns:
        The version command's stdout

    Raises:
        InstallationValidationError: If the launcher is missing, times out,
            exits non-zero, or does not identify itself as Liquibase
    """
    executable = executable_path(install_dir, host)

    if not executable.exists():
        raise InstallationValidationError(
            f"Failed to validate Liquibase installation: Liquibase executable not found at {executable}",
            context={"executable": str(executable)},
        )

    try:
        result = await runner.run(executable, ["--version"], timeout=timeout)
    except TimeoutError as e:
        raise InstallationValidationError(
            f"Failed to validate Liquibase installation: "
            f"Liquibase validation timed out after {timeout:g} seconds",
            context={"executable": str(executable)},
        ) from e
    except OSError as e:
        raise InstallationValidationError(
            f"Failed to validate Liquibase installation: {e}",
            context={"executable": str(executable)},
        ) from e

    if result.exit_code != 0:
        message = f"Liquibase validation failed with exit code {result.exit_code}"
        if result.stderr.strip():
            message += f"\n\nLiquibase error output:\n{result.stderr.strip()}"
        if result.stdout.strip():
            message += f"\n\nLiquibase stdout:\n{result.stdout.strip()}"
        raise InstallationValidationError(
            message,
            context={"executable": str(executable), "exit_code": result.exit_code},
        )

    if EXECUTABLE_NAME not in result.stdout.lower():
        raise InstallationValidationError(
            f"Failed to validate Liquibase installation: Unexpected version output: {result.stdout}",
            context={"executable": str(executable)},
        )

    logger.info("Liquibase installation validated successfully")
    logger.debug(f"Version output: {result.stdout.strip()}")
    return result.stdout


async def setup_liquibase(
    request: SetupRequest,
    *,
    downloader: DownloaderProtocol | None = None,
    extractor: ArchiveExtractorProtocol | None = None,
    runner: CommandRunnerProtocol | None = None,
    path_registry: PathRegistryProtocol | None = None,
    host: HostEnvironment | None = None,
    cache: InstallationCacheProtocol | None = None,
) -> SetupResult:
    """
    Install and verify Liquibase (mechanism only, collaborators are injected).

    Process:
    1. Validate version and edition
    2. Resolve the download URL
    3. Download the archive (skipped on cache hit)
    4. Extract the archive (skipped on cache hit)
    5. Write license configuration for licensed editions with a key
    6. Prepend the installation directory to PATH
    7. Run 'liquibase --version' to verify the installation
    8. Cache the installation once it is verified

    Args:
        request: Requested version, edition and optional custom URL template
        downloader: Archive downloader (default: HttpDownloader)
        extractor: Archive extractor (default: ArchiveExtractor for the host)
        runner: Command runner for verification (default: AsyncCommandRunner)
        path_registry: PATH handler (default: ActionContext)
        host: Host environment (default: SystemHost)
        cache: Optional installation cache

    Returns:
        SetupResult with the installed version and directory

    Raises:
        SetupError: If any step fails

    Example:
        >>> result = await setup_liquibase(SetupRequest(version="4.32.0", edition="oss"))
        >>> print(f"Liquibase {result.resolved_version} at {result.install_path}")
    """
    edition = validate_request(request)
    version = request.version

    host = host or SystemHost()
    runner = runner or AsyncCommandRunner()
    downloader = downloader or HttpDownloader()
    extractor = extractor or ArchiveExtractor(host=host, runner=runner)
    if path_registry is None:
        from .action import ActionContext

        path_registry = ActionContext()

    logger.info(f"Setting up Liquibase {edition.value.upper()} {version}")

    url = resolve_download_url(version, edition, request.custom_url_template, host)

    install_dir = cache.get(edition.value, version) if cache is not None else None

    if install_dir is not None:
        logger.info(f"Using cached Liquibase installation at {install_dir}")
    else:
        logger.info(f"Downloading from: {url}")
        try:
            archive = await downloader.download(url)
        except Exception as e:
            raise classify_download_error(e, edition.value, version) from e

        logger.info("Extracting Liquibase archive...")
        try:
            install_dir = await extractor.extract(archive)
        except SetupError:
            raise
        except Exception as e:
            raise ExtractionError(
                f"Failed to extract Liquibase archive: {e}",
                context={"archive": str(archive)},
            ) from e

        logger.info("Installation completed successfully")

    if edition.is_licensed and request.license_key:
        write_license_properties(install_dir, request.license_key)

    path_registry.add_path(install_dir)
    logger.info("Added Liquibase to system PATH")

    await validate_installation(install_dir, runner, host)

    if cache is not None:
        cache.put(edition.value, version, install_dir)

    logger.info(f"Liquibase {edition.value.upper()} {version} installed at {install_dir}")
    return SetupResult(resolved_version=version, install_path=install_dir)
