"""Core logic for version-bump-hooks.

This module contains the building blocks the hooks are made of:
- Semantic version parsing and bumping
- Reading manifest versions from the working tree, index and HEAD
- Patch bumps and manual minor bump reconciliation
- Composite TAG_VERSION derivation
- Deployment detection and tag creation
"""

from __future__ import annotations

from version_bump_hooks.core.bumper import VersionBumper
from version_bump_hooks.core.reader import VersionReader
from version_bump_hooks.core.tag_version import TagVersionDeriver, compose_tag_version
from version_bump_hooks.core.tagging import TagManager
from version_bump_hooks.core.version import ZERO, SemanticVersion

__all__ = [
    "ZERO",
    "SemanticVersion",
    "TagManager",
    "TagVersionDeriver",
    "VersionBumper",
    "VersionReader",
    "compose_tag_version",
]
