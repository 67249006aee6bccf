"""Configuration management for version-bump-hooks."""

from __future__ import annotations

from version_bump_hooks.config.loader import load_config
from version_bump_hooks.config.models import (
    FolderConfig,
    FoldersConfig,
    LogConfig,
    TagConfig,
    VersionBumpHooksConfig,
)

__all__ = [
    "FolderConfig",
    "FoldersConfig",
    "LogConfig",
    "TagConfig",
    "VersionBumpHooksConfig",
    "load_config",
]
