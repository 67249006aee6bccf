"""Deployment detection and tag creation.

A commit is a deployment when its message contains the deployment
marker (``-d`` by default). The check is a plain substring test, so a
message such as "redo -design" also counts as a deployment.

Deployment tags are only created from protected branches, are never
overwritten, and are pushed individually to the configured remote.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from version_bump_hooks.exceptions import (
    BranchPolicyError,
    ConflictError,
    GitError,
    VersionBumpHooksError,
)
from version_bump_hooks.project.env_file import read_tag_version

if TYPE_CHECKING:
    from pathlib import Path

    from version_bump_hooks.config.models import TagConfig
    from version_bump_hooks.log_manager import LogManager
    from version_bump_hooks.vcs.git import GitRepository


class TagManager:
    """Creates and pushes the deployment tag for the latest commit."""

    def __init__(
        self,
        repo: GitRepository,
        log: LogManager,
        env_file: Path,
        config: TagConfig,
    ) -> None:
        self.repo = repo
        self.log = log
        self.env_file = env_file
        self.config = config

    def get_tag_version(self) -> str:
        """Read the pending TAG_VERSION.

        Raises:
            ConfigError: If the env file or the TAG_VERSION entry is missing
        """
        self.log.debug(f"Reading TAG_VERSION from {self.env_file}")
        try:
            version = read_tag_version(self.env_file)
        except VersionBumpHooksError as e:
            self.log.error(f"get_tag_version error: {e}")
            raise
        self.log.debug(f"Found TAG_VERSION: {version}")
        return version

    def tag_name(self, version: str) -> str:
        return f"{self.config.prefix}{version}"

    def create_and_push_tag(self) -> str:
        """Create an annotated tag for TAG_VERSION and push it.

        Returns:
            Name of the created tag

        Raises:
            ConfigError: If TAG_VERSION is not available
            ConflictError: If the tag already exists
            GitError: If creating or pushing the tag fails
        """
        self.log.debug("Starting tag creation process")
        try:
            name = self.tag_name(self.get_tag_version())
            self.log.debug(f"Tag to be created: {name}")

            if self.repo.tag_exists(name):
                raise ConflictError(f"Tag {name} already exists")

            self.repo.create_annotated_tag(name, name)
            output = self._push_tag(name)
            self.log.debug(f"Git push output: {output.strip()}")
        except VersionBumpHooksError as e:
            self.log.error(f"Tag creation failed: {e}")
            raise

        self.log.history(f"Created and pushed tag: {name}")
        return name

    def _push_tag(self, name: str) -> str:
        try:
            return self.repo.push(self.config.remote, name)
        except GitError:
            # a failed push leaves no local tag behind
            try:
                self.repo.delete_tag(name)
            except GitError as e:
                self.log.error(f"Could not delete local tag {name}: {e}")
            else:
                self.log.debug(f"Deleted local tag {name} after failed push")
            raise

    def is_deployment_commit(self) -> bool:
        """Return True if the latest commit message contains the deployment marker.

        Raises:
            GitError: If the commit message cannot be read
        """
        message = self.repo.get_last_commit_message()
        return self.config.deploy_marker in message

    def verify_main_branch(self) -> str:
        """Return the current branch if it may carry deployment tags.

        Raises:
            BranchPolicyError: If the branch is not protected
            GitError: If the branch cannot be determined, e.g. detached HEAD
        """
        branch = self.repo.get_current_branch()
        if branch not in self.config.protected_branches:
            allowed = "/".join(self.config.protected_branches)
            raise BranchPolicyError(
                f"Deployment tags only allowed on {allowed} (current: {branch})"
            )
        return branch
