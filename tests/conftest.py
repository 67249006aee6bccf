"""Shared fixtures for version-bump-hooks tests."""

from __future__ import annotations

import json
import subprocess
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from version_bump_hooks.config.models import FolderConfig, TagConfig
from version_bump_hooks.log_manager import LogManager
from version_bump_hooks.vcs.git import GitRepository

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


def git(cwd: Path, *args: str) -> str:
    """Run a git command in ``cwd`` and return its stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def write_manifest(root: Path, rel_path: str, version: str | None, **extra: object) -> Path:
    """Write a package.json-style manifest under ``root``."""
    data: dict[str, object] = {"name": rel_path.split("/")[0], **extra}
    if version is not None:
        data["version"] = version
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("VBH_LOG_DIR", "VBH_ENV_FILE", "VBH_MAX_ENTRIES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def back_folder() -> FolderConfig:
    return FolderConfig(folder="back/", path="back/package.json")


@pytest.fixture
def web_folder() -> FolderConfig:
    return FolderConfig(folder="web/", path="web/package.json")


@pytest.fixture
def tag_config() -> TagConfig:
    return TagConfig()


@pytest.fixture
def log_manager(tmp_path: Path) -> Iterator[LogManager]:
    """LogManager writing under tmp_path/logs."""
    log = LogManager(tmp_path / "logs")
    yield log
    log.close()


@pytest.fixture
def mock_repo(tmp_path: Path) -> MagicMock:
    """Create a mock GitRepository rooted at tmp_path."""
    repo = MagicMock(spec=GitRepository)
    repo.path = tmp_path
    return repo


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Path:
    """Create a git repository on branch main with a bare 'origin' remote."""
    remote = tmp_path / "origin.git"
    git(tmp_path, "init", "--bare", str(remote))

    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    git(repo, "config", "user.name", "Test User")
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "commit.gpgsign", "false")
    git(repo, "config", "tag.gpgsign", "false")
    git(repo, "remote", "add", "origin", str(remote))
    return repo


@pytest.fixture
def temp_git_repo_with_manifests(temp_git_repo: Path) -> Path:
    """Repository with back/ and web/ manifests committed at 1.2.3 and 4.5.6."""
    write_manifest(temp_git_repo, "back/package.json", "1.2.3")
    write_manifest(temp_git_repo, "web/package.json", "4.5.6")
    (temp_git_repo / "back" / "app.js").write_text("console.log('back');\n")
    (temp_git_repo / "web" / "index.js").write_text("console.log('web');\n")
    git(temp_git_repo, "add", ".")
    git(temp_git_repo, "commit", "-m", "initial")
    return temp_git_repo


@pytest.fixture
def run_git():
    """The ``git(cwd, *args)`` helper."""
    return git


@pytest.fixture
def make_manifest():
    """The ``write_manifest(root, rel_path, version, **extra)`` helper."""
    return write_manifest
