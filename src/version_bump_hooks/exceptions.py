"""Exception hierarchy for version-bump-hooks.

All errors raised by this package derive from VersionBumpHooksError so the
CLI can report them uniformly. Version-read and bump paths recover from
errors locally; tag creation paths let them propagate.
"""

from __future__ import annotations


class VersionBumpHooksError(Exception):
    """Base exception for version-bump-hooks."""


class ConfigError(VersionBumpHooksError):
    """A required file or configuration value is missing or unusable."""


class ConfigNotFoundError(ConfigError):
    """A required configuration file or entry does not exist."""


class ConfigValidationError(ConfigError):
    """Configuration values failed validation."""


class ConflictError(VersionBumpHooksError):
    """A tag with the target name already exists."""


class BranchPolicyError(VersionBumpHooksError):
    """A deployment was attempted from a branch that is not protected."""


class ManifestError(VersionBumpHooksError):
    """A manifest file could not be read or written."""


class InvalidVersionError(ManifestError):
    """A version string is not a MAJOR.MINOR.PATCH triple."""


class GitError(VersionBumpHooksError):
    """A git command failed."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr

    def __str__(self) -> str:
        base = super().__str__()
        if self.stderr:
            return f"{base}: {self.stderr.strip()}"
        return base


class HookInstallError(VersionBumpHooksError):
    """Git hooks could not be installed."""
