"""Implementation of the 'pre-commit' command.

Bumps the version of every sub-project with staged changes and refreshes
TAG_VERSION. Only configuration problems fail the commit; a bump that
cannot be applied is logged and skipped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from version_bump_hooks.cli.commands.common import bootstrap, print_success
from version_bump_hooks.core import TagVersionDeriver, VersionBumper, VersionReader

if TYPE_CHECKING:
    from rich.console import Console


def run_pre_commit(path: str | None, console: Console, err_console: Console) -> None:
    """Run the pre-commit hook.

    Args:
        path: Optional path inside the repository
        console: Console for standard output
        err_console: Console for error output
    """
    repo, config, log = bootstrap(path, err_console)
    try:
        log.debug("Starting pre-commit hook")
        reader = VersionReader(repo, log)
        bumper = VersionBumper(repo, reader, log)

        changed: list[str] = []
        for folder in config.folders.as_tuple():
            if not bumper.has_non_manifest_changes(folder):
                continue
            changed.append(folder.folder)
            new_version = bumper.apply_bump(folder)
            if new_version is not None:
                log.history(f"Bumped {folder.folder} to {new_version}")
                print_success(console, f"{folder.folder} version bumped to {new_version}")

        if not changed:
            log.debug("No version bump needed")
            return

        deriver = TagVersionDeriver(
            reader,
            log,
            config.env_file,
            check_major_sync=config.tag.check_major_sync,
        )
        tag_version = deriver.derive_and_persist(config.folders.back, config.folders.web)
        if tag_version is not None:
            print_success(console, f"TAG_VERSION updated to {tag_version}")
    finally:
        log.close()
