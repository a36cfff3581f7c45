"""Shared test fixtures and configuration."""

import shutil
import subprocess
from unittest.mock import MagicMock

import pytest
from loguru import logger


@pytest.fixture
def git_output():
    """Build a fake successful subprocess.run result with the given stdout."""

    def _make(stdout: str = "") -> MagicMock:
        result = MagicMock()
        result.stdout = stdout
        result.returncode = 0
        return result

    return _make


@pytest.fixture
def git_failure():
    """Build a CalledProcessError like the one raised by a failing git call."""

    def _make(stderr: str = "fatal: error", returncode: int = 128) -> subprocess.CalledProcessError:
        return subprocess.CalledProcessError(returncode, "git", stderr=stderr)

    return _make


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop log sinks added during a test so later tests never write to a closed stream."""
    yield
    logger.remove()


def _run_git(repo_dir, *args: str) -> str:
    """Run a real git command in repo_dir and return its stripped stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_dir,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def temp_repo(tmp_path, monkeypatch):
    """Create an empty git repository on branch feature/ABC-9-v2 and cd into it."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    _run_git(repo_dir, "init", "--quiet")
    _run_git(repo_dir, "config", "user.email", "test@example.com")
    _run_git(repo_dir, "config", "user.name", "Test User")
    _run_git(repo_dir, "config", "commit.gpgsign", "false")
    _run_git(repo_dir, "symbolic-ref", "HEAD", "refs/heads/feature/ABC-9-v2")

    monkeypatch.chdir(repo_dir)
    return repo_dir


@pytest.fixture
def run_git():
    """Run a real git command in a directory and return its stdout."""
    return _run_git
