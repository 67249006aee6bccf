""".env-style key-value store handling.

The store is line oriented (KEY=VALUE) and is read with python-dotenv, so
quoting and inline comments follow the usual .env rules. Only one key is
ever written; every other line is kept exactly as it was found. Updates
use targeted regex replacement rather than re-serializing the whole file,
so comments, ordering and line endings survive.
"""

from __future__ import annotations

import io
import os
import re
import tempfile
from pathlib import Path

from dotenv import dotenv_values

from version_bump_hooks.exceptions import ConfigError, ConfigNotFoundError

TAG_VERSION_KEY = "TAG_VERSION"


def _key_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(key)}=(.*?)\r?$", re.MULTILINE)


def get_env_value(content: str, key: str = TAG_VERSION_KEY) -> str | None:
    """Return the value of ``key`` in env file content, or None if absent."""
    value = dotenv_values(stream=io.StringIO(content), interpolate=False).get(key)
    if value is None:
        return None
    return value.strip() or None


def set_env_value(content: str, value: str, key: str = TAG_VERSION_KEY) -> str:
    """Return ``content`` with ``key`` set to ``value``.

    The first existing entry is replaced in place, keeping its line ending;
    otherwise a new entry is appended on its own line. Trailing whitespace
    of the result is trimmed.
    """
    pattern = _key_pattern(key)
    entry = f"{key}={value}"

    if pattern.search(content):
        content = pattern.sub(lambda _m: entry, content, count=1)
    else:
        newline = "\r\n" if "\r\n" in content else "\n"
        if content and not content.endswith("\n"):
            content += newline
        content += entry + newline

    return content.rstrip()


def read_env_file(path: Path) -> str:
    """Read the store file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigError: If the file cannot be read
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Env file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}") from e


def read_tag_version(path: Path) -> str:
    """Read TAG_VERSION from the store file.

    Raises:
        ConfigNotFoundError: If the file or the key is missing
    """
    value = get_env_value(read_env_file(path))
    if value is None:
        raise ConfigNotFoundError(f"{TAG_VERSION_KEY} not found in {path}")
    return value


def write_tag_version(path: Path, tag_version: str) -> Path:
    """Set TAG_VERSION in the store file, creating the file if needed.

    The new content is written to a temporary file in the same directory
    and renamed over the original, so readers never see a partial file.

    Raises:
        OSError: If the file cannot be read or written
    """
    content = ""
    if path.exists():
        with path.open(encoding="utf-8", newline="") as f:
            content = f.read()
    new_content = set_env_value(content, tag_version)

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(prefix=".env_", suffix=".tmp", dir=path.parent)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(new_content)
        os.replace(temp_path, path)
    finally:
        if temp_path.exists():
            temp_path.unlink()
    return path
