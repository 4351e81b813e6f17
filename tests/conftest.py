"""
Pytest configuration for the prepost test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Common fixtures for temp directories, project trees and git repos
- Reset of the global route-detection and CLI configuration between tests
"""

import os
import shutil
import subprocess
import tempfile
from pathlib import Path

import pytest

from prepost.logging_config import setup_logging
from prepost.routes.config import reset_routes_config
from prepost.cli.config import CLIConfig


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Run the suite in machine mode."""
    os.environ.setdefault("PREPOST_MACHINE_MODE", "1")


# ============================================================================
# LOGGING AND CONFIG FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from default configuration."""
    for key in ("PREPOST_MAX_ROUTES", "PREPOST_FRAMEWORK", "PREPOST_SCAN_DEPTH", "PREPOST_HUMAN_MODE"):
        monkeypatch.delenv(key, raising=False)
    reset_routes_config()
    CLIConfig.set_machine_mode(None)
    yield
    reset_routes_config()
    CLIConfig.set_machine_mode(None)


# ============================================================================
# TEMPORARY DIRECTORY FIXTURES
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    tmp = Path(tempfile.mkdtemp(prefix="prepost_test_"))
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


def _write_file(root: Path, relative: str, content: str = "") -> Path:
    """Create a file (and its parents) below root."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def make_project(temp_dir):
    """
    Build a project tree from a list of relative file paths.

    Usage:
        def test_something(make_project):
            root = make_project(["app/page.tsx", "app/layout.tsx"])
    """
    def _make(files):
        for relative in files:
            _write_file(temp_dir, relative, "export default function Page() {}\n")
        return temp_dir

    return _make


# ============================================================================
# GIT FIXTURES
# ============================================================================

def _run_git(repo: Path, *args: str) -> None:
    """Run a git command in repo, failing the test on error."""
    subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True)


def _init_repo(repo: Path) -> None:
    """Initialize a git repo with default user config."""
    init = subprocess.run(
        ["git", "init", "-b", "main"],
        cwd=repo,
        capture_output=True,
        text=True,
    )
    if init.returncode != 0:
        _run_git(repo, "init")
        _run_git(repo, "checkout", "-b", "main")

    _run_git(repo, "config", "user.email", "test@example.com")
    _run_git(repo, "config", "user.name", "Test User")
    _run_git(repo, "config", "commit.gpgsign", "false")


@pytest.fixture
def git():
    """Callable running git in a repo: git(repo, "add", ".")."""
    return _run_git


@pytest.fixture
def git_repo(temp_dir):
    """
    An initialized repo with one commit containing app/page.tsx.

    Returns:
        Path to the repository root.
    """
    repo = temp_dir / "repo"
    repo.mkdir()
    _init_repo(repo)
    _write_file(repo, "app/page.tsx", "export default function Home() {}\n")
    _run_git(repo, "add", ".")
    _run_git(repo, "commit", "-m", "initial")
    return repo
