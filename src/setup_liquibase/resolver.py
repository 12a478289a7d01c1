"""Download URL resolution.

Maps (version, edition, optional custom template) onto a single concrete
download URL for the executing host.

Editions are user-facing aliases over two distribution channels:
- community/oss: one endpoint family for every version
- pro/secure: legacy Pro endpoints up to and including 4.33.0, Secure
  endpoints for later versions (and for the secure release test tag)

Resolution is pure: identical inputs and host give identical output.
"""

import logging

import httpx

from .config import DOWNLOAD_URLS
from .config import SECURE_RELEASE_TEST_VERSION
from .config import SECURE_URL_BOUNDARY_VERSION
from .config import TEMPLATE_SAMPLE_VALUES
from .exceptions import InvalidCustomUrlError
from .exceptions import InvalidVersionFormatError
from .host import HostEnvironment
from .host import SystemHost
from .host import archive_extension
from .host import is_windows
from .host import platform_token
from .schema import DownloadTarget
from .schema import Edition
from .versions import version_greater_than

logger = logging.getLogger(__name__)


def _substitute(template: str, values: dict[str, str]) -> str:
    """Replace every occurrence of each {placeholder} in template."""
    result = template
    for name, value in values.items():
        result = result.replace(f"{{{name}}}", value)
    return result


def _edition_token(edition: Edition | str) -> str:
    return edition.value if isinstance(edition, Edition) else str(edition)


def validate_custom_url_template(template: str) -> str:
    """Check a custom download URL template and return it trimmed.

    Args:
        template: URL template with {version}, {platform}, {extension} and
            {edition} placeholders

    Returns:
        The trimmed template

    Raises:
        InvalidCustomUrlError: If the protocol is not http(s), the {version}
            placeholder is missing, or the substituted URL is malformed
    """
    trimmed = template.strip()

    if not (trimmed.startswith("https://") or trimmed.startswith("http://")):
        raise InvalidCustomUrlError(
            f"Invalid custom download URL '{trimmed}': URL must start with https:// or http://",
            context={"template": trimmed},
        )

    if trimmed.startswith("http://"):
        logger.warning(f"Custom download URL uses insecure HTTP protocol: {trimmed}. Consider using HTTPS.")

    if "{version}" not in trimmed:
        raise InvalidCustomUrlError(
            f"Invalid custom download URL '{trimmed}': URL must contain {{version}} placeholder",
            context={"template": trimmed},
        )

    sample = _substitute(trimmed, TEMPLATE_SAMPLE_VALUES)
    try:
        parsed = httpx.URL(sample)
    except httpx.InvalidURL as e:
        raise InvalidCustomUrlError(
            f"Invalid custom download URL '{trimmed}': {e}",
            context={"template": trimmed, "sample": sample},
        ) from e

    if not parsed.host:
        raise InvalidCustomUrlError(
            f"Invalid custom download URL '{trimmed}': URL has no host",
            context={"template": trimmed, "sample": sample},
        )

    return trimmed


def _uses_secure_endpoints(version: str) -> bool:
    if version == SECURE_RELEASE_TEST_VERSION:
        return True
    try:
        return version_greater_than(version, SECURE_URL_BOUNDARY_VERSION)
    except ValueError as e:
        raise InvalidVersionFormatError(
            f'Invalid version format: {version}. Must be a valid semantic version (e.g., "4.32.0")',
            context={"version": version},
        ) from e


def resolve_download_url(
    version: str,
    edition: Edition | str,
    custom_url_template: str | None = None,
    host: HostEnvironment | None = None,
) -> str:
    """
    Resolve the download URL for a Liquibase version and edition.

    Custom templates take precedence over the built-in endpoints. Supported
    placeholders (every occurrence is replaced):
    - {version}: the requested version
    - {platform}: 'windows' or 'unix'
    - {extension}: 'zip' or 'tar.gz'
    - {edition}: the edition token as passed in

    Args:
        version: Exact version to download
        edition: Edition token ('community', 'oss', 'pro' or 'secure')
        custom_url_template: Optional URL template for internal mirrors
        host: Host environment (defaults to the running system)

    Returns:
        Download URL. Custom template results are returned verbatim, reachability
        is never checked.

    Raises:
        InvalidCustomUrlError: If the custom template is malformed
        InvalidVersionFormatError: If a pro/secure version cannot be compared
            against the secure endpoint boundary

    Example:
        >>> resolve_download_url("4.32.0", "oss", host=StaticHost(OSFamily.UNIX))
        'https://package.liquibase.com/downloads/cli/liquibase/releases/download/v4.32.0/liquibase-4.32.0.tar.gz'
    """
    host = host or SystemHost()

    if custom_url_template and custom_url_template.strip():
        template = validate_custom_url_template(custom_url_template)
        url = _substitute(
            template,
            {
                "version": version,
                "platform": platform_token(host),
                "extension": archive_extension(host),
                "edition": _edition_token(edition),
            },
        )
        logger.debug(f"Resolved custom download URL: {url}")
        return url

    windows = is_windows(host)
    token = _edition_token(edition)

    if token in (Edition.PRO.value, Edition.SECURE.value):
        if _uses_secure_endpoints(version):
            template = DOWNLOAD_URLS["SECURE_WINDOWS_ZIP"] if windows else DOWNLOAD_URLS["SECURE_UNIX"]
        else:
            template = DOWNLOAD_URLS["PRO_WINDOWS_ZIP"] if windows else DOWNLOAD_URLS["PRO_UNIX"]
    else:
        template = DOWNLOAD_URLS["COMMUNITY_WINDOWS_ZIP"] if windows else DOWNLOAD_URLS["COMMUNITY_UNIX"]

    return _substitute(template, {"version": version})


def build_download_target(
    version: str,
    edition: Edition | str,
    custom_url_template: str | None = None,
    host: HostEnvironment | None = None,
) -> DownloadTarget:
    """Resolve the download URL together with the host's platform and archive type."""
    host = host or SystemHost()
    return DownloadTarget(
        url=resolve_download_url(version, edition, custom_url_template, host),
        platform=platform_token(host),
        archive_extension=archive_extension(host),
    )
