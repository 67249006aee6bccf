"""Configuration loading.

Settings come from three layers, later ones winning:

1. Model defaults
2. ``[tool.version-bump-hooks]`` in the repository's pyproject.toml
3. VBH_* environment variables
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from version_bump_hooks.config.models import VersionBumpHooksConfig
from version_bump_hooks.exceptions import ConfigNotFoundError, ConfigValidationError

TOOL_SECTION = "version-bump-hooks"

ENV_LOG_DIR = "VBH_LOG_DIR"
ENV_ENV_FILE = "VBH_ENV_FILE"
ENV_MAX_ENTRIES = "VBH_MAX_ENTRIES"


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Load and parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"pyproject.toml not found at {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_tool_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.version-bump-hooks]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_SECTION, {})


def apply_env_overrides(
    data: dict[str, Any], environ: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Overlay VBH_* environment variables onto raw config data."""
    environ = os.environ if environ is None else environ
    data = {**data, "log": dict(data.get("log", {}))}

    if environ.get(ENV_ENV_FILE):
        data["env_file"] = environ[ENV_ENV_FILE]
    if environ.get(ENV_LOG_DIR):
        data["log"]["dir"] = environ[ENV_LOG_DIR]
    if environ.get(ENV_MAX_ENTRIES):
        data["log"]["max_entries"] = environ[ENV_MAX_ENTRIES]
    return data


def load_config(
    root: Path,
    environ: Mapping[str, str] | None = None,
) -> VersionBumpHooksConfig:
    """Load configuration for the repository at ``root``.

    A missing pyproject.toml or a missing tool section is not an error;
    defaults are used. Relative paths in the result are anchored at root.

    Args:
        root: Repository root directory
        environ: Environment mapping, defaults to os.environ

    Returns:
        Validated, path-resolved configuration

    Raises:
        ConfigValidationError: If the configuration is invalid
    """
    pyproject_path = root / "pyproject.toml"
    data: dict[str, Any] = {}
    if pyproject_path.is_file():
        data = extract_tool_config(load_pyproject_toml(pyproject_path))

    data = apply_env_overrides(data, environ)

    try:
        config = VersionBumpHooksConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}") from e

    return config.resolve(root)
