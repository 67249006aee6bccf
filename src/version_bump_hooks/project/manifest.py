"""package.json version manipulation.

This module provides functionality for reading and updating the
version field of JSON manifests. Key order is preserved and files are
written back with 2-space indentation and a trailing newline, matching
the formatting npm uses.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from version_bump_hooks.exceptions import ManifestError

if TYPE_CHECKING:
    from pathlib import Path

    from version_bump_hooks.core.version import SemanticVersion


def parse_manifest(content: str, source: str = "<manifest>") -> dict[str, Any]:
    """Parse manifest text into a JSON object.

    Args:
        content: Raw manifest text
        source: Description of where the content came from, for messages

    Returns:
        The decoded JSON object

    Raises:
        ManifestError: If the content is not a JSON object
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {source}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"Expected a JSON object in {source}")
    return data


def read_manifest(path: Path) -> dict[str, Any]:
    """Read and parse a manifest from disk.

    Raises:
        ManifestError: If the file is missing, unreadable or malformed
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Could not read {path}: {e}") from e
    return parse_manifest(content, str(path))


def dump_manifest(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def update_manifest_version(path: Path, new_version: SemanticVersion) -> Path:
    """Update the version field of a manifest on disk.

    Every other field is written back unchanged and in its original order.

    Args:
        path: Path to the manifest file
        new_version: Version to write

    Returns:
        Path to the updated manifest

    Raises:
        ManifestError: If the manifest cannot be read, parsed or written
    """
    data = read_manifest(path)
    data["version"] = str(new_version)

    try:
        path.write_text(dump_manifest(data), encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Could not write {path}: {e}") from e
    return path
