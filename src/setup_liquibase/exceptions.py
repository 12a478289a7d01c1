"""Setup-specific exceptions.

Every failure surfaces as a SetupError subclass whose message is safe to show
as the action's failure reason.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a setup failure."""

    MISSING_VERSION = "MissingVersion"
    INVALID_VERSION_FORMAT = "InvalidVersionFormat"
    UNSUPPORTED_VERSION = "UnsupportedVersion"
    INVALID_EDITION = "InvalidEdition"
    MISSING_LICENSE = "MissingLicenseForProEdition"
    INVALID_CUSTOM_URL = "InvalidCustomUrl"
    NOT_FOUND = "NotFound"
    NETWORK_ERROR = "NetworkError"
    PERMISSION_ERROR = "PermissionError"
    DOWNLOAD_FAILURE = "DownloadFailure"
    EXTRACTION_FAILURE = "ExtractionFailure"
    VALIDATION_FAILURE = "ValidationFailure"


class SetupError(Exception):
    """Base exception for setup operations."""

    kind: ErrorKind = ErrorKind.DOWNLOAD_FAILURE

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (version, url, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class MissingVersionError(SetupError):
    """No version was requested."""

    kind = ErrorKind.MISSING_VERSION


class InvalidVersionFormatError(SetupError):
    """Requested version is not a semantic version."""

    kind = ErrorKind.INVALID_VERSION_FORMAT


class UnsupportedVersionError(SetupError):
    """Requested version is older than the minimum supported version."""

    kind = ErrorKind.UNSUPPORTED_VERSION


class InvalidEditionError(SetupError):
    """Requested edition is not recognized."""

    kind = ErrorKind.INVALID_EDITION


class MissingLicenseKeyError(SetupError):
    """A licensed edition was requested without a license key."""

    kind = ErrorKind.MISSING_LICENSE


class InvalidCustomUrlError(SetupError):
    """Custom download URL template is malformed."""

    kind = ErrorKind.INVALID_CUSTOM_URL


class DownloadNotFoundError(SetupError):
    """Archive for the requested version does not exist."""

    kind = ErrorKind.NOT_FOUND


class NetworkError(SetupError):
    """Archive could not be fetched because of a network problem."""

    kind = ErrorKind.NETWORK_ERROR


class PermissionDeniedError(SetupError):
    """The runner lacks permissions needed for installation."""

    kind = ErrorKind.PERMISSION_ERROR


class DownloadError(SetupError):
    """Download failed for a reason that could not be classified."""

    kind = ErrorKind.DOWNLOAD_FAILURE


class ExtractionError(SetupError):
    """Archive could not be extracted."""

    kind = ErrorKind.EXTRACTION_FAILURE


class InstallationValidationError(SetupError):
    """Extracted installation is not a working Liquibase executable."""

    kind = ErrorKind.VALIDATION_FAILURE
