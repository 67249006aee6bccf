"""Implementation of the 'post-commit' command.

Creates and pushes the deployment tag when the commit just made asks
for a deployment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from version_bump_hooks.cli.commands.common import bootstrap, print_error, print_success
from version_bump_hooks.core import TagManager
from version_bump_hooks.exceptions import GitError, VersionBumpHooksError

if TYPE_CHECKING:
    from rich.console import Console


def run_post_commit(path: str | None, console: Console, err_console: Console) -> None:
    """Run the post-commit hook.

    Args:
        path: Optional path inside the repository
        console: Console for standard output
        err_console: Console for error output
    """
    repo, config, log = bootstrap(path, err_console)
    tags = TagManager(repo, log, config.env_file, config.tag)
    try:
        log.debug("Starting post-commit hook")

        if not tags.is_deployment_commit():
            log.debug("No deployment flag in commit message")
            return

        log.debug(f"Deployment flag ({config.tag.deploy_marker}) found")
        tags.verify_main_branch()

        tag_name = tags.create_and_push_tag()
        print_success(console, f"Successfully deployed tag: {tag_name}")

        if config.tag.push_head:
            try:
                repo.push(config.tag.remote, "HEAD")
            except GitError as e:
                log.debug(f"Commit was already pushed or push failed: {e}")
    except VersionBumpHooksError as e:
        log.error(f"post-commit aborted: {e}")
        print_error(err_console, str(e))
        raise SystemExit(1) from e
    finally:
        log.close()
