"""Tests for Liquibase environment variable path transformation."""

import os
import tempfile
from pathlib import Path

from setup_liquibase import transform_liquibase_environment_variables


def test_unset_variables_are_ignored():
    """Test nothing happens when no Liquibase path variables are set."""
    with tempfile.TemporaryDirectory() as tmpdir:
        environ = {"PATH": "/usr/bin"}

        transformed = transform_liquibase_environment_variables(environ, workspace=Path(tmpdir), temp_roots=[])

        assert transformed == {}
        assert environ == {"PATH": "/usr/bin"}


def test_absolute_path_outside_workspace_is_rewritten():
    """Test container-style paths become workspace-relative and their directory is created."""
    with tempfile.TemporaryDirectory() as tmpdir:
        workspace = Path(tmpdir)
        environ = {"LIQUIBASE_LOG_FILE": "/liquibase/changelog/liquibase.dev.log.json"}

        transformed = transform_liquibase_environment_variables(environ, workspace=workspace, temp_roots=[])

        expected = os.path.join("liquibase", "changelog", "liquibase.dev.log.json")
        assert environ["LIQUIBASE_LOG_FILE"] == expected
        assert transformed == {"LIQUIBASE_LOG_FILE": expected}
        assert (workspace / "liquibase" / "changelog").is_dir()


def test_multiple_variables():
    """Test file variables get directories, directory variables keep their trailing separator."""
    with tempfile.TemporaryDirectory() as tmpdir:
        workspace = Path(tmpdir)
        environ = {
            "LIQUIBASE_LOG_FILE": "/liquibase/logs/app.log",
            "LIQUIBASE_OUTPUT_FILE": "/usr/local/output/result.sql",
            "LIQUIBASE_PROPERTIES_FILE": "/etc/liquibase/liquibase.properties",
            "LIQUIBASE_REPORT_PATH": "/var/reports/",
        }

        transform_liquibase_environment_variables(environ, workspace=workspace, temp_roots=[])

        assert environ["LIQUIBASE_LOG_FILE"] == os.path.join("liquibase", "logs", "app.log")
        assert environ["LIQUIBASE_OUTPUT_FILE"] == os.path.join("usr", "local", "output", "result.sql")
        assert environ["LIQUIBASE_PROPERTIES_FILE"] == os.path.join("etc", "liquibase", "liquibase.properties")
        assert environ["LIQUIBASE_REPORT_PATH"] == os.path.join("var", "reports") + os.sep

        assert (workspace / "liquibase" / "logs").is_dir()
        assert (workspace / "usr" / "local" / "output").is_dir()
        assert (workspace / "etc" / "liquibase").is_dir()
        assert not (workspace / "var").exists()


def test_paths_inside_workspace_are_kept():
    """Test absolute paths already inside the workspace are left alone."""
    with tempfile.TemporaryDirectory() as tmpdir:
        workspace = Path(tmpdir).resolve()
        log_file = str(workspace / "logs" / "liquibase.log")
        environ = {"LIQUIBASE_LOG_FILE": log_file}

        transformed = transform_liquibase_environment_variables(environ, workspace=workspace, temp_roots=[])

        assert transformed == {}
        assert environ["LIQUIBASE_LOG_FILE"] == log_file
        assert (workspace / "logs").is_dir()


def test_paths_in_temp_roots_are_kept():
    """Test absolute paths under a temp root keep their value and get a directory."""
    with tempfile.TemporaryDirectory() as workspace, tempfile.TemporaryDirectory() as temp_root:
        log_file = os.path.join(temp_root, "logs", "liquibase.log")
        environ = {"LIQUIBASE_LOG_FILE": log_file}

        transformed = transform_liquibase_environment_variables(
            environ, workspace=Path(workspace), temp_roots=[Path(temp_root)]
        )

        assert transformed == {}
        assert environ["LIQUIBASE_LOG_FILE"] == log_file
        assert Path(temp_root, "logs").is_dir()


def test_relative_paths_resolve_against_workspace():
    """Test relative file paths get their directory created inside the workspace."""
    with tempfile.TemporaryDirectory() as tmpdir:
        workspace = Path(tmpdir)
        environ = {"LIQUIBASE_LOG_FILE": "./tmp/logs/liquibase.log"}

        transformed = transform_liquibase_environment_variables(environ, workspace=workspace, temp_roots=[])

        assert transformed == {}
        assert (workspace / "tmp" / "logs").is_dir()


def test_workspace_defaults_to_github_workspace():
    """Test GITHUB_WORKSPACE is used when no workspace is passed."""
    with tempfile.TemporaryDirectory() as tmpdir:
        environ = {"GITHUB_WORKSPACE": tmpdir, "LIQUIBASE_OUTPUT_FILE": "out/result.sql"}

        transform_liquibase_environment_variables(environ, temp_roots=[])

        assert (Path(tmpdir) / "out").is_dir()
