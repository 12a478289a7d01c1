"""Tests for semantic version helpers."""

import pytest
from setup_liquibase.versions import is_valid_semver
from setup_liquibase.versions import parse_semver
from setup_liquibase.versions import version_greater_than
from setup_liquibase.versions import version_less_than


@pytest.mark.parametrize(
    "version",
    [
        "4.32.0",
        "0.0.1",
        "10.20.30",
        "4.34.0-beta",
        "5.0.0-rc.1",
        "4.33.0+build.5",
        "4.34.0-SNAPSHOT",
        "5.0.0-secure.1",
        "4.33.0-1",
        "4.34.0-beta.2+sha.5114f85",
    ],
)
def test_valid_semver(version):
    """Test semantic versions are accepted, including pre-release and build metadata."""
    assert is_valid_semver(version)


@pytest.mark.parametrize(
    "version",
    [
        "",
        "latest",
        "invalid-version",
        "4.32",
        "4",
        "4.32.0.1",
        "v4.32.0",
        " 4.32.0",
        "4.32.0\n",
        "1!4.32.0",
        "4.32.0.post1",
        "4.33.0a1",
        "4.33.0rc1",
        "04.32.0",
        "5-secure-release-test",
    ],
)
def test_invalid_semver(version):
    """Test non-semantic versions are rejected."""
    assert not is_valid_semver(version)


def test_parse_keeps_prerelease_and_build():
    """Test parsed versions expose their pre-release and build parts."""
    parsed = parse_semver("4.34.0-beta.2+sha.5114f85")

    assert (parsed.major, parsed.minor, parsed.patch) == (4, 34, 0)
    assert parsed.prerelease == "beta.2"
    assert parsed.build == "sha.5114f85"


def test_comparisons():
    """Test strict ordering helpers."""
    assert version_greater_than("4.33.1", "4.33.0")
    assert not version_greater_than("4.33.0", "4.33.0")
    assert version_less_than("4.25.0", "4.32.0")
    assert not version_less_than("4.32.0", "4.32.0")


def test_prerelease_precedence():
    """Test pre-releases sort below their release."""
    assert version_less_than("4.32.0-beta", "4.32.0")
    assert version_less_than("4.32.0-1", "4.32.0-beta")
    assert version_greater_than("4.34.0-SNAPSHOT", "4.33.0")


def test_build_metadata_is_ignored_in_comparisons():
    """Test build metadata does not change precedence."""
    assert not version_greater_than("4.33.0+build.5", "4.33.0")
    assert not version_less_than("4.33.0+build.5", "4.33.0")


def test_comparison_rejects_invalid_version():
    """Test comparisons refuse values that are not semantic versions."""
    with pytest.raises(ValueError, match="Invalid version"):
        version_greater_than("5-secure-release-test", "4.33.0")
