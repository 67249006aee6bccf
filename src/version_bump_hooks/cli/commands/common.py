"""Helpers shared by the hook commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from version_bump_hooks.config import load_config
from version_bump_hooks.exceptions import ConfigError, VersionBumpHooksError
from version_bump_hooks.log_manager import LogManager
from version_bump_hooks.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from version_bump_hooks.config.models import VersionBumpHooksConfig


def print_success(console: Console, message: str) -> None:
    console.print(f"✅ {escape(message)}")


def print_error(err_console: Console, message: str) -> None:
    err_console.print(f"[red]❌ {escape(message)}[/]")


def open_repository(path: str | None) -> tuple[GitRepository, VersionBumpHooksConfig]:
    """Locate the repository containing ``path`` and load its configuration.

    Raises:
        ConfigError: If path is not inside a git work tree or the
            configuration is invalid
    """
    start = Path(path) if path else Path.cwd()
    probe = GitRepository(start)
    if not probe.is_inside_work_tree():
        raise ConfigError(f"Not inside a git repository: {start}")

    root = probe.get_toplevel()
    return GitRepository(root), load_config(root)


def open_log(config: VersionBumpHooksConfig) -> LogManager:
    """Create the hook's LogManager.

    Raises:
        ConfigError: If the log directory cannot be created or read
    """
    try:
        return LogManager(
            config.log.dir,
            max_entries=config.log.max_entries,
            clear_debug_log=config.log.clear_debug_log,
        )
    except OSError as e:
        raise ConfigError(f"Cannot use log directory {config.log.dir}: {e}") from e


def bootstrap(
    path: str | None, err_console: Console
) -> tuple[GitRepository, VersionBumpHooksConfig, LogManager]:
    """Open the repository, config and logs, exiting with status 1 on failure."""
    try:
        repo, config = open_repository(path)
        log = open_log(config)
    except VersionBumpHooksError as e:
        print_error(err_console, str(e))
        raise SystemExit(1) from e
    return repo, config, log
