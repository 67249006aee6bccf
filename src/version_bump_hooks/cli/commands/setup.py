"""Implementation of the 'setup' command.

Installs the pre-commit and post-commit shims, either into .git/hooks
or into a separate directory registered as core.hooksPath.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from version_bump_hooks.cli.commands.common import print_error, print_success
from version_bump_hooks.exceptions import VersionBumpHooksError
from version_bump_hooks.vcs import GitRepository, find_git_dir, install_hooks, write_hooks

if TYPE_CHECKING:
    from rich.console import Console


def run_setup(
    path: str | None,
    hooks_path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the setup command.

    Args:
        path: Optional project directory, defaults to the current directory
        hooks_path: Install into this directory and set core.hooksPath to it
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    if hooks_path:
        _configure_hooks_path(project_path, Path(hooks_path), console, err_console)
        return

    git_dir = find_git_dir(project_path.resolve())
    if git_dir is None:
        print_error(err_console, "Could not find .git directory in current or parent folder")
        raise SystemExit(1)

    try:
        installed = install_hooks(git_dir)
    except VersionBumpHooksError as e:
        print_error(err_console, str(e))
        raise SystemExit(1) from e

    for hook_path in installed:
        print_success(console, f"{hook_path.name} hook installed successfully in {hook_path.parent}")


def _configure_hooks_path(
    project_path: Path,
    hooks_path: Path,
    console: Console,
    err_console: Console,
) -> None:
    repo = GitRepository(project_path)
    if not repo.is_inside_work_tree():
        console.print("⚠️  Not a Git repo - skipping hook setup")
        return

    hooks_dir = hooks_path if hooks_path.is_absolute() else project_path / hooks_path
    try:
        write_hooks(hooks_dir)
        repo.set_config("core.hooksPath", str(hooks_dir.resolve()))
    except VersionBumpHooksError as e:
        print_error(err_console, f"Failed to configure hooks: {e}")
        raise SystemExit(1) from e

    print_success(console, f"Git hooks configured at: {hooks_dir.resolve()}")
