"""Request and result models for a Liquibase setup run.

All models are frozen: they are created once per invocation and never mutated.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict


class Edition(str, Enum):
    """Liquibase product editions.

    'oss' and 'pro' are kept for backward compatibility and behave exactly like
    'community' and 'secure'.
    """

    COMMUNITY = "community"
    OSS = "oss"
    PRO = "pro"
    SECURE = "secure"

    @property
    def is_licensed(self) -> bool:
        """True for editions that need a Liquibase license key."""
        return self in (Edition.PRO, Edition.SECURE)

    @classmethod
    def values(cls) -> list[str]:
        return [edition.value for edition in cls]


class SetupRequest(BaseModel):
    """Raw setup request as received from the action inputs.

    Fields are plain strings; validation happens in validate_request() so that
    each failure maps onto a specific SetupError.
    """

    model_config = ConfigDict(frozen=True)

    version: str
    edition: str = Edition.OSS.value
    custom_url_template: str | None = None
    license_key: str | None = None


class DownloadTarget(BaseModel):
    """Concrete download location derived from a request and the host."""

    model_config = ConfigDict(frozen=True)

    url: str
    platform: str
    archive_extension: str


class SetupResult(BaseModel):
    """Outcome of a fully verified installation."""

    model_config = ConfigDict(frozen=True)

    resolved_version: str
    install_path: Path


class CommandResult(BaseModel):
    """Captured outcome of an external command."""

    model_config = ConfigDict(frozen=True)

    exit_code: int
    stdout: str = ""
    stderr: str = ""


class ActionInputs(BaseModel):
    """Inputs read from the GitHub Actions runner."""

    model_config = ConfigDict(frozen=True)

    version: str
    edition: str = Edition.OSS.value
    license_key: str = ""
    download_url_base: str = ""

    def to_request(self) -> SetupRequest:
        return SetupRequest(
            version=self.version,
            edition=self.edition,
            custom_url_template=self.download_url_base or None,
            license_key=self.license_key or None,
        )
