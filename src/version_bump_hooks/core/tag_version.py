"""Composite deployment tag derivation.

The deployment tag combines the minor and patch numbers of both
sub-projects as ``backMinor.backPatch.webMinor.webPatch``. Major
versions are not part of the tag; they are expected to move together
and are bumped by hand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from version_bump_hooks.project.env_file import write_tag_version

if TYPE_CHECKING:
    from pathlib import Path

    from version_bump_hooks.config.models import FolderConfig
    from version_bump_hooks.core.reader import VersionReader
    from version_bump_hooks.core.version import SemanticVersion
    from version_bump_hooks.log_manager import LogManager


def compose_tag_version(back: SemanticVersion, web: SemanticVersion) -> str:
    """Build the composite tag value from the back and web versions.

    Example:
        >>> compose_tag_version(SemanticVersion(1, 2, 3), SemanticVersion(4, 5, 6))
        '2.3.5.6'
    """
    return f"{back.minor}.{back.patch}.{web.minor}.{web.patch}"


class TagVersionDeriver:
    """Derives TAG_VERSION from the working-tree manifests and stores it."""

    def __init__(
        self,
        reader: VersionReader,
        log: LogManager,
        env_file: Path,
        *,
        check_major_sync: bool = False,
    ) -> None:
        self.reader = reader
        self.log = log
        self.env_file = env_file
        self.check_major_sync = check_major_sync

    def derive_and_persist(self, back: FolderConfig, web: FolderConfig) -> str | None:
        """Compute TAG_VERSION and write it to the env file.

        Args:
            back: First sub-project; its numbers lead the tag
            web: Second sub-project

        Returns:
            The new tag version, or None if a manifest or the env file
            could not be read, in which case the env file is unchanged
        """
        self.log.debug("Updating TAG_VERSION in env file")

        back_version = self.reader.read_working_version(back)
        web_version = self.reader.read_working_version(web)
        if back_version is None or web_version is None:
            self.log.debug("Error updating TAG_VERSION: manifest could not be read")
            return None

        self.log.debug(f"Back version: {back_version}, Web version: {web_version}")
        if self.check_major_sync and back_version.major != web_version.major:
            self.log.debug(
                f"Major versions differ (back {back_version.major}, web {web_version.major}); "
                "they are not part of the tag"
            )

        tag_version = compose_tag_version(back_version, web_version)
        try:
            write_tag_version(self.env_file, tag_version)
        except (OSError, UnicodeDecodeError) as e:
            self.log.debug(f"Error updating TAG_VERSION: {e}")
            return None

        self.log.history(f"Updated TAG_VERSION to {tag_version} (not committed)")
        self.log.debug(f"New TAG_VERSION: {tag_version}")
        return tag_version
