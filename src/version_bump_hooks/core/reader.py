"""Reading sub-project versions from their manifests.

A manifest can be read in three states: the working tree, the index
(what is about to be committed) and HEAD. The readers never raise; each
state has its own fallback so callers can tell "nothing staged" apart
from an explicit 0.0.0.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from version_bump_hooks.core.version import ZERO, SemanticVersion
from version_bump_hooks.exceptions import GitError, ManifestError
from version_bump_hooks.project.manifest import parse_manifest, read_manifest

if TYPE_CHECKING:
    from version_bump_hooks.config.models import FolderConfig
    from version_bump_hooks.log_manager import LogManager
    from version_bump_hooks.vcs.git import GitRepository


class VersionReader:
    """Reads manifest versions from the working tree, the index and HEAD."""

    def __init__(self, repo: GitRepository, log: LogManager) -> None:
        self.repo = repo
        self.log = log

    def manifest_path(self, folder: FolderConfig) -> Path:
        return Path(self.repo.path) / folder.path

    def read_working_version(self, folder: FolderConfig) -> SemanticVersion | None:
        """Read the version from the manifest in the working tree.

        Returns:
            The version, 0.0.0 if the version field is missing or malformed,
            or None if the manifest itself cannot be read or parsed
        """
        path = self.manifest_path(folder)
        self.log.debug(f"Reading current version from {folder.path}")
        try:
            data = read_manifest(path)
        except ManifestError as e:
            self.log.debug(f"Error reading {folder.path}: {e}")
            return None

        raw = data.get("version")
        if not raw:
            self.log.debug(f"No version field found in {folder.path}")
            return ZERO

        version = SemanticVersion.coerce(raw)
        if version == ZERO and raw != "0.0.0":
            self.log.debug(f"Invalid version format in {folder.path}: {raw}")
        else:
            self.log.debug(f"Current version for {folder.folder}: {version}")
        return version

    def read_staged_version(self, folder: FolderConfig) -> SemanticVersion | None:
        """Read the version from the manifest as staged in the index.

        Returns:
            The staged version, or None if the manifest is not in the index,
            is not valid JSON, or has no version field
        """
        self.log.debug(f"Getting staged version for {folder.folder}")
        try:
            data = parse_manifest(self.repo.show_staged_file(folder.path), f":{folder.path}")
        except (GitError, ManifestError) as e:
            self.log.debug(f"Error getting staged version for {folder.folder}: {e}")
            return None

        raw = data.get("version")
        if raw is None:
            self.log.debug(f"No version field in staged {folder.path}")
            return None

        version = SemanticVersion.coerce(raw)
        self.log.debug(f"Staged version for {folder.folder}: {version}")
        return version

    def read_committed_version(self, folder: FolderConfig, ref: str = "HEAD") -> SemanticVersion:
        """Read the version from the manifest at ``ref``.

        Every failure, including a repository without commits, falls back
        to 0.0.0.
        """
        self.log.debug(f"Checking {ref} version for {folder.folder}")

        if not self.repo.has_commits():
            self.log.debug(f"No {ref} commit exists")
            return ZERO

        try:
            if not self.repo.file_in_commit(ref, folder.path):
                self.log.debug(f"{folder.path} does not exist in {ref}")
                return ZERO

            content = self.repo.show_committed_file(ref, folder.path).strip()
            if not content:
                self.log.debug(f"Empty {folder.path} content in {ref}")
                return ZERO

            data = parse_manifest(content, f"{ref}:{folder.path}")
        except (GitError, ManifestError) as e:
            self.log.debug(f"Error reading {ref} version for {folder.folder}: {e}")
            return ZERO

        raw = data.get("version")
        if not raw:
            self.log.debug(f"No version field in {ref} {folder.path}")
            return ZERO

        version = SemanticVersion.coerce(raw)
        self.log.debug(f"{ref} version for {folder.folder}: {version}")
        return version
