"""setup-liquibase - Install Liquibase in GitHub Actions workflows.

Public API: URL resolution, the installation orchestrator, its collaborator
protocols and default implementations, and the action entry point.
"""

from .action import ActionContext
from .action import read_inputs
from .action import run
from .cache import InstallationCache
from .download import HttpDownloader
from .download import classify_download_error
from .environment import transform_liquibase_environment_variables
from .exceptions import DownloadError
from .exceptions import DownloadNotFoundError
from .exceptions import ErrorKind
from .exceptions import ExtractionError
from .exceptions import InstallationValidationError
from .exceptions import InvalidCustomUrlError
from .exceptions import InvalidEditionError
from .exceptions import InvalidVersionFormatError
from .exceptions import MissingLicenseKeyError
from .exceptions import MissingVersionError
from .exceptions import NetworkError
from .exceptions import PermissionDeniedError
from .exceptions import SetupError
from .exceptions import UnsupportedVersionError
from .execution import AsyncCommandRunner
from .extraction import ArchiveExtractor
from .host import HostEnvironment
from .host import OSFamily
from .host import StaticHost
from .host import SystemHost
from .installer import setup_liquibase
from .installer import validate_installation
from .installer import validate_request
from .logging_config import configure_logging
from .protocols import ArchiveExtractorProtocol
from .protocols import CommandRunnerProtocol
from .protocols import DownloaderProtocol
from .protocols import InstallationCacheProtocol
from .protocols import PathRegistryProtocol
from .resolver import build_download_target
from .resolver import resolve_download_url
from .schema import ActionInputs
from .schema import CommandResult
from .schema import DownloadTarget
from .schema import Edition
from .schema import SetupRequest
from .schema import SetupResult

__all__ = [
    # Models
    "ActionInputs",
    "CommandResult",
    "DownloadTarget",
    "Edition",
    "SetupRequest",
    "SetupResult",
    # Resolution
    "build_download_target",
    "resolve_download_url",
    # Installation
    "setup_liquibase",
    "validate_installation",
    "validate_request",
    "InstallationCache",
    # Collaborators
    "ArchiveExtractor",
    "ArchiveExtractorProtocol",
    "AsyncCommandRunner",
    "CommandRunnerProtocol",
    "DownloaderProtocol",
    "HttpDownloader",
    "InstallationCacheProtocol",
    "PathRegistryProtocol",
    "classify_download_error",
    # Host
    "HostEnvironment",
    "OSFamily",
    "StaticHost",
    "SystemHost",
    # Action
    "ActionContext",
    "configure_logging",
    "read_inputs",
    "run",
    "transform_liquibase_environment_variables",
    # Exceptions
    "DownloadError",
    "DownloadNotFoundError",
    "ErrorKind",
    "ExtractionError",
    "InstallationValidationError",
    "InvalidCustomUrlError",
    "InvalidEditionError",
    "InvalidVersionFormatError",
    "MissingLicenseKeyError",
    "MissingVersionError",
    "NetworkError",
    "PermissionDeniedError",
    "SetupError",
    "UnsupportedVersionError",
]

__version__ = "1.0.0"
