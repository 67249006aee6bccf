"""Git hooks for bumping sub-project versions and pushing deployment tags."""

from __future__ import annotations

__version__ = "0.1.0"
