"""Installation of the git hook shims."""

from __future__ import annotations

from typing import TYPE_CHECKING

from version_bump_hooks.exceptions import HookInstallError

if TYPE_CHECKING:
    from pathlib import Path

HOOK_COMMANDS = {
    "pre-commit": "vbh pre-commit",
    "post-commit": "vbh post-commit",
}


def find_git_dir(start: Path) -> Path | None:
    """Look for a .git directory in ``start`` or its parent."""
    for candidate in (start / ".git", start.parent / ".git"):
        if candidate.exists():
            return candidate
    return None


def render_hook(command: str) -> str:
    return f"#!/bin/sh\n{command}\n"


def write_hooks(hooks_dir: Path) -> list[Path]:
    """Write executable hook shims into ``hooks_dir``.

    Existing hooks with the same names are overwritten.

    Args:
        hooks_dir: Directory git runs hooks from

    Returns:
        Paths of the installed hooks

    Raises:
        HookInstallError: If the hooks cannot be written
    """
    installed = []
    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
        for hook_name, command in HOOK_COMMANDS.items():
            hook_path = hooks_dir / hook_name
            hook_path.write_text(render_hook(command), encoding="utf-8")
            hook_path.chmod(0o755)
            installed.append(hook_path)
    except OSError as e:
        raise HookInstallError(f"Error installing hooks: {e}") from e
    return installed


def install_hooks(git_dir: Path) -> list[Path]:
    """Install the shims into the repository's own hooks directory."""
    if not git_dir.is_dir():
        # worktrees and submodules use a .git file pointing elsewhere
        raise HookInstallError(f"{git_dir} is not a directory; use --hooks-path instead")
    return write_hooks(git_dir / "hooks")
