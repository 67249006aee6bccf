"""Deciding and applying version bumps for staged sub-projects.

A sub-project is bumped when its staged changes include something other
than its own manifest; manifest-only commits are left alone so that the
bump written by one run never triggers another.

If the minor version was raised by hand since HEAD, the patch number is
reset to 0 instead of being incremented. Both paths rewrite the manifest
in the working tree and stage it again so the new version lands in the
commit being made.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from version_bump_hooks.core.version import SemanticVersion
from version_bump_hooks.exceptions import GitError, ManifestError
from version_bump_hooks.project.manifest import read_manifest, update_manifest_version

if TYPE_CHECKING:
    from version_bump_hooks.config.models import FolderConfig
    from version_bump_hooks.core.reader import VersionReader
    from version_bump_hooks.log_manager import LogManager
    from version_bump_hooks.vcs.git import GitRepository


def _normalize(path: str) -> str:
    return str(PurePosixPath(path.replace("\\", "/")))


class VersionBumper:
    """Applies patch bumps and manual minor bump reconciliation."""

    def __init__(self, repo: GitRepository, reader: VersionReader, log: LogManager) -> None:
        self.repo = repo
        self.reader = reader
        self.log = log

    def has_non_manifest_changes(self, folder: FolderConfig) -> bool:
        """Return True if anything besides the manifest is staged under the folder."""
        self.log.debug(f"Checking for changes in {folder.folder}")
        try:
            changes = self.repo.get_staged_changes(folder.folder)
        except GitError as e:
            self.log.debug(f"Error checking changes for {folder.folder}: {e}")
            return False

        if not changes:
            self.log.debug(f"No changes detected in {folder.folder}")
            return False

        manifest = _normalize(folder.path)
        others = [path for path in changes if _normalize(path) != manifest]
        self.log.debug(f"Non-manifest changes for {folder.folder}: {', '.join(others)}")
        return bool(others)

    def _write_and_stage(self, folder: FolderConfig, version: SemanticVersion) -> None:
        """Write ``version`` to the manifest and stage it.

        The manifest is put back as it was if staging fails, so the working
        tree never holds a bump that is not in the index.
        """
        path = self.reader.manifest_path(folder)
        try:
            original = path.read_bytes()
        except OSError as e:
            raise ManifestError(f"Could not read {path}: {e}") from e

        update_manifest_version(path, version)
        self.log.debug(f"Updated version for {folder.folder} to {version}")
        try:
            self.repo.stage_file(folder.path)
        except GitError:
            path.write_bytes(original)
            self.log.debug(f"Restored {folder.path} after failed staging")
            raise
        self.log.debug(f"Staged manifest changes for {folder.folder}")

    def bump_patch(self, folder: FolderConfig) -> SemanticVersion | None:
        """Increment the patch version in the working tree and stage it.

        Returns:
            The new version, or None if the manifest could not be read,
            written or staged
        """
        self.log.debug(f"Starting patch version bump for {folder.folder}")
        try:
            data = read_manifest(self.reader.manifest_path(folder))
            new_version = SemanticVersion.coerce(data.get("version")).bump_patch()
            self._write_and_stage(folder, new_version)
        except (GitError, ManifestError) as e:
            self.log.debug(f"Error bumping version for {folder.folder}: {e}")
            return None
        return new_version

    def reconcile_minor_bump(
        self,
        folder: FolderConfig,
        staged: SemanticVersion,
        committed: SemanticVersion,
    ) -> SemanticVersion | None:
        """Reset the patch to 0 if the minor version was raised by hand.

        Args:
            folder: Sub-project to reconcile
            staged: Version in the index
            committed: Version at HEAD

        Returns:
            The reset version, or None if no manual minor bump was found
            or the manifest could not be updated
        """
        self.log.debug(f"Checking for minor version bump in {folder.folder}")
        if not (staged.major == committed.major and staged.minor > committed.minor):
            return None

        self.log.debug(
            f"Minor version manually increased in {folder.folder} - resetting patch to 0"
        )
        new_version = staged.with_patch_reset()
        try:
            self._write_and_stage(folder, new_version)
        except (GitError, ManifestError) as e:
            self.log.debug(f"Error in minor bump reconciliation for {folder.folder}: {e}")
            return None
        return new_version

    def apply_bump(self, folder: FolderConfig) -> SemanticVersion | None:
        """Bump one sub-project that has relevant staged changes.

        A manual minor bump is reconciled first; the patch is incremented
        only when there is nothing to reconcile.

        Returns:
            The version written, or None if the bump failed
        """
        staged = self.reader.read_staged_version(folder)
        if staged is not None:
            committed = self.reader.read_committed_version(folder)
            reconciled = self.reconcile_minor_bump(folder, staged, committed)
            if reconciled is not None:
                return reconciled

        return self.bump_patch(folder)
