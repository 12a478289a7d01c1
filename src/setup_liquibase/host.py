"""Host environment capability.

The installer asks an injected HostEnvironment which operating system family
it runs on instead of reading sys.platform directly, so callers can simulate
Windows or Unix without mutating process globals.
"""

import sys
from enum import Enum
from typing import Protocol
from typing import runtime_checkable


class OSFamily(str, Enum):
    """Operating system families with distinct Liquibase distributions."""

    WINDOWS = "windows"
    UNIX = "unix"


@runtime_checkable
class HostEnvironment(Protocol):
    """Protocol for reporting the executing host's operating system family."""

    def operating_system_family(self) -> OSFamily:
        """Return the OS family of the executing host."""
        ...


class SystemHost:
    """HostEnvironment backed by the running interpreter."""

    def operating_system_family(self) -> OSFamily:
        if sys.platform == "win32":
            return OSFamily.WINDOWS
        return OSFamily.UNIX

    def is_macos(self) -> bool:
        return sys.platform == "darwin"


class StaticHost:
    """HostEnvironment that always reports the same OS family."""

    def __init__(self, family: OSFamily, macos: bool = False):
        self.family = family
        self.macos = macos

    def operating_system_family(self) -> OSFamily:
        return self.family

    def is_macos(self) -> bool:
        return self.macos


def is_windows(host: HostEnvironment) -> bool:
    return host.operating_system_family() == OSFamily.WINDOWS


def is_macos(host: HostEnvironment) -> bool:
    """Return True on macOS hosts (hosts without the check count as non-macOS)."""
    check = getattr(host, "is_macos", None)
    return bool(check()) if callable(check) else False


def platform_token(host: HostEnvironment) -> str:
    """Platform token used in download URLs: 'windows' or 'unix'."""
    return host.operating_system_family().value


def archive_extension(host: HostEnvironment) -> str:
    """Archive extension of the distribution for this host: 'zip' or 'tar.gz'."""
    return "zip" if is_windows(host) else "tar.gz"
