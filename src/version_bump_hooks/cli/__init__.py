"""Command line interface for version-bump-hooks.

The installed git hooks call ``vbh pre-commit`` and ``vbh post-commit``;
``vbh setup`` installs them.
"""

from __future__ import annotations

import click
from rich.console import Console

from version_bump_hooks import __version__
from version_bump_hooks.cli.commands.post_commit import run_post_commit
from version_bump_hooks.cli.commands.pre_commit import run_pre_commit
from version_bump_hooks.cli.commands.setup import run_setup

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

path_option = click.option(
    "--path",
    "-C",
    type=click.Path(file_okay=False),
    default=None,
    help="Run as if started in this directory.",
)


@click.group()
@click.version_option(__version__, prog_name="vbh")
def cli() -> None:
    """Version bump and deployment tag git hooks."""


@cli.command("pre-commit")
@path_option
def pre_commit(path: str | None) -> None:
    """Bump versions of sub-projects with staged changes."""
    run_pre_commit(path, console, err_console)


@cli.command("post-commit")
@path_option
def post_commit(path: str | None) -> None:
    """Create and push the deployment tag for a '-d' commit."""
    run_post_commit(path, console, err_console)


@cli.command("setup")
@path_option
@click.option(
    "--hooks-path",
    type=click.Path(file_okay=False),
    default=None,
    help="Install hooks into this directory and point core.hooksPath at it.",
)
def setup(path: str | None, hooks_path: str | None) -> None:
    """Install the pre-commit and post-commit hooks."""
    run_setup(path, hooks_path, console, err_console)


def main() -> None:
    cli()
