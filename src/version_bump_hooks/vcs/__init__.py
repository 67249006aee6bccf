"""Version control integration."""

from __future__ import annotations

from version_bump_hooks.vcs.git import GitRepository
from version_bump_hooks.vcs.hooks import find_git_dir, install_hooks, write_hooks

__all__ = [
    "GitRepository",
    "find_git_dir",
    "install_hooks",
    "write_hooks",
]
