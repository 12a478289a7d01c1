"""Archive download and download error classification."""

import logging
import tempfile
from pathlib import Path

import httpx

from .config import DOWNLOAD_TIMEOUT_SECONDS
from .exceptions import DownloadError
from .exceptions import DownloadNotFoundError
from .exceptions import NetworkError
from .exceptions import PermissionDeniedError
from .exceptions import SetupError

logger = logging.getLogger(__name__)


class HttpDownloader:
    """Download archives over HTTP(S) with httpx."""

    def __init__(
        self,
        timeout: float = DOWNLOAD_TIMEOUT_SECONDS,
        download_dir: Path | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.download_dir = download_dir
        self.transport = transport

    async def download(self, url: str) -> Path:
        if self.download_dir is not None:
            self.download_dir.mkdir(parents=True, exist_ok=True)

        # Keep the archive suffix so zip tooling recognizes the file
        suffix = ".tar.gz" if url.endswith(".tar.gz") else Path(httpx.URL(url).path).suffix
        handle = tempfile.NamedTemporaryFile(
            prefix="liquibase-download-", suffix=suffix, dir=self.download_dir, delete=False
        )
        target = Path(handle.name)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, transport=self.transport
            ) as client:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()
                    with handle:
                        async for chunk in response.aiter_bytes():
                            handle.write(chunk)
        except Exception:
            handle.close()
            target.unlink(missing_ok=True)
            raise

        logger.debug(f"Downloaded {url} to {target}")
        return target


# Ordered (substring, error class) table, matched case-insensitively against the
# underlying error message. Best-effort: depends on the downloader's message format.
DOWNLOAD_ERROR_PATTERNS: list[tuple[str, type[SetupError]]] = [
    ("404", DownloadNotFoundError),
    ("not found", DownloadNotFoundError),
    ("enotfound", NetworkError),
    ("network", NetworkError),
    ("name or service not known", NetworkError),
    ("nodename nor servname", NetworkError),
    ("temporary failure in name resolution", NetworkError),
    ("getaddrinfo failed", NetworkError),
    ("connection refused", NetworkError),
    ("eacces", PermissionDeniedError),
    ("permission", PermissionDeniedError),
]


def _classify_by_type(error: BaseException) -> type[SetupError] | None:
    if isinstance(error, httpx.HTTPStatusError) and error.response.status_code == 404:
        return DownloadNotFoundError
    if isinstance(error, httpx.TransportError):
        return NetworkError
    if isinstance(error, PermissionError):
        return PermissionDeniedError
    return None


def _classify_by_message(message: str) -> type[SetupError] | None:
    lowered = message.lower()
    for pattern, error_class in DOWNLOAD_ERROR_PATTERNS:
        if pattern in lowered:
            return error_class
    return None


def classify_download_error(error: BaseException, edition: str, version: str) -> SetupError:
    """
    Translate a download failure into a classified SetupError.

    Exception types are checked first, then DOWNLOAD_ERROR_PATTERNS. Errors that
    match neither become a DownloadError carrying the underlying message.

    Args:
        error: Exception raised by the downloader
        edition: Requested edition (for the message)
        version: Requested version (for the message)

    Returns:
        Classified error, ready to raise
    """
    if isinstance(error, SetupError):
        return error

    message = str(error) or type(error).__name__
    context = {"edition": edition, "version": version, "error": message}
    error_class = _classify_by_type(error) or _classify_by_message(message)

    if error_class is DownloadNotFoundError:
        return DownloadNotFoundError(
            f"Liquibase {edition} version {version} not found. "
            "Please check that this version exists and is available for download.",
            context=context,
        )
    if error_class is NetworkError:
        return NetworkError(
            "Network error downloading Liquibase. Please check your internet connection and try again.",
            context=context,
        )
    if error_class is PermissionDeniedError:
        return PermissionDeniedError(
            "Permission denied while installing Liquibase. "
            "Please check that the runner has sufficient permissions.",
            context=context,
        )
    return DownloadError(f"Failed to download and install Liquibase: {message}", context=context)
