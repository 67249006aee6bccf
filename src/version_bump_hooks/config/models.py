"""Configuration models for version-bump-hooks.

These are loaded from ``[tool.version-bump-hooks]`` in the repository's
pyproject.toml. Every field has a default so a repository laid out as
``back/`` + ``web/`` needs no configuration at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FolderConfig(BaseModel):
    """A sub-project and its manifest.

    Attributes:
        folder: Path prefix of the sub-project, relative to the repo root
        path: Path of the sub-project's manifest, relative to the repo root
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    folder: str
    path: str

    @field_validator("folder", "path")
    @classmethod
    def _posix_path(cls, value: str) -> str:
        value = value.replace("\\", "/")
        if not value:
            raise ValueError("must not be empty")
        return value


class FoldersConfig(BaseModel):
    """The two sub-projects whose versions make up the deployment tag."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    back: FolderConfig = FolderConfig(folder="back/", path="back/package.json")
    web: FolderConfig = FolderConfig(folder="web/", path="web/package.json")

    def as_tuple(self) -> tuple[FolderConfig, FolderConfig]:
        return (self.back, self.web)


class LogConfig(BaseModel):
    """Log file settings."""

    model_config = ConfigDict(extra="forbid")

    dir: Path = Path("build/logs")
    max_entries: int = Field(default=500, ge=0)
    clear_debug_log: bool = False


class TagConfig(BaseModel):
    """Deployment tag settings."""

    model_config = ConfigDict(extra="forbid")

    prefix: str = "v"
    remote: str = "origin"
    deploy_marker: str = Field(default="-d", min_length=1)
    protected_branches: list[str] = Field(default_factory=lambda: ["main", "master"])
    push_head: bool = True
    check_major_sync: bool = False


class VersionBumpHooksConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    env_file: Path = Path("build/.env")
    folders: FoldersConfig = Field(default_factory=FoldersConfig)
    log: LogConfig = Field(default_factory=LogConfig)
    tag: TagConfig = Field(default_factory=TagConfig)

    def resolve(self, root: Path) -> VersionBumpHooksConfig:
        """Return a copy with relative file paths anchored at ``root``."""
        return self.model_copy(
            update={
                "env_file": root / self.env_file,
                "log": self.log.model_copy(update={"dir": root / self.log.dir}),
            }
        )
