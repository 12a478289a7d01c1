"""Tests for the caller-owned installation cache."""

import tempfile
from pathlib import Path

from setup_liquibase import InstallationCache
from setup_liquibase import InstallationCacheProtocol


def test_put_and_get():
    """Test stored installations are returned by edition and version."""
    with tempfile.TemporaryDirectory() as tmpdir:
        cache = InstallationCache()
        cache.put("oss", "4.32.0", Path(tmpdir))

        assert cache.get("oss", "4.32.0") == Path(tmpdir)
        assert cache.get("oss", "4.33.0") is None


def test_aliases_are_separate_keys():
    """Test edition tokens are used as given."""
    with tempfile.TemporaryDirectory() as tmpdir:
        cache = InstallationCache()
        cache.put("oss", "4.32.0", Path(tmpdir))

        assert cache.get("community", "4.32.0") is None


def test_vanished_directory_is_dropped():
    """Test entries whose directory was removed are forgotten, even if it reappears."""
    with tempfile.TemporaryDirectory() as tmpdir:
        install_dir = Path(tmpdir) / "liquibase"
        install_dir.mkdir()
        cache = InstallationCache({("oss", "4.32.0"): install_dir})

        install_dir.rmdir()
        assert cache.get("oss", "4.32.0") is None

        install_dir.mkdir()
        assert cache.get("oss", "4.32.0") is None


def test_instances_do_not_share_state():
    """Test each cache object owns its entries."""
    with tempfile.TemporaryDirectory() as tmpdir:
        first = InstallationCache()
        second = InstallationCache()
        first.put("secure", "4.34.0", Path(tmpdir))

        assert second.get("secure", "4.34.0") is None


def test_satisfies_protocol():
    """Test the in-memory cache implements InstallationCacheProtocol."""
    assert isinstance(InstallationCache(), InstallationCacheProtocol)
