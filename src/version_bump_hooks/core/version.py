"""Semantic version value type.

Only plain MAJOR.MINOR.PATCH triples are understood; pre-release and build
metadata are not part of the manifests these hooks manage.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from version_bump_hooks.exceptions import InvalidVersionError

VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """An immutable MAJOR.MINOR.PATCH version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise InvalidVersionError(f"{name} must be a non-negative integer, got {value!r}")

    @classmethod
    def parse(cls, text: str) -> SemanticVersion:
        """Parse a strict MAJOR.MINOR.PATCH string.

        Args:
            text: Version string such as "1.2.3"

        Returns:
            Parsed version

        Raises:
            InvalidVersionError: If the string is not a numeric triple
        """
        match = VERSION_PATTERN.match(text.strip()) if isinstance(text, str) else None
        if not match:
            raise InvalidVersionError(f"Invalid version: {text!r}")
        major, minor, patch = (int(part) for part in match.groups())
        return cls(major, minor, patch)

    @classmethod
    def coerce(cls, value: Any) -> SemanticVersion:
        """Parse a version, normalizing anything malformed to 0.0.0."""
        try:
            return cls.parse(value)
        except InvalidVersionError:
            return ZERO

    def bump_patch(self) -> SemanticVersion:
        return SemanticVersion(self.major, self.minor, self.patch + 1)

    def with_patch_reset(self) -> SemanticVersion:
        return SemanticVersion(self.major, self.minor, 0)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


ZERO = SemanticVersion(0, 0, 0)
