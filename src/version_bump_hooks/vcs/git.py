"""Git operations via subprocess.

GitRepository is the only place the hooks talk to git. Every call is a
blocking ``git`` invocation; a non-zero exit status raises GitError with
the captured stderr attached.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from version_bump_hooks.exceptions import GitError


class GitRepository:
    """Thin wrapper around the git command line for one working tree."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path) if path else Path.cwd()

    def _run(self, *args: str) -> str:
        """Run a git command and return its stdout.

        Raises:
            GitError: If git is missing or the command fails
        """
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=self.path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=True,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {' '.join(args)} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    def is_inside_work_tree(self) -> bool:
        try:
            return self._run("rev-parse", "--is-inside-work-tree").strip() == "true"
        except GitError:
            return False

    def get_toplevel(self) -> Path:
        return Path(self._run("rev-parse", "--show-toplevel").strip())

    def has_commits(self) -> bool:
        """Return True if HEAD points at a commit."""
        try:
            self._run("rev-parse", "--verify", "HEAD")
        except GitError:
            return False
        return True

    def file_in_commit(self, ref: str, path: str) -> bool:
        return bool(self._run("ls-tree", "--name-only", ref, "--", path).strip())

    def show_staged_file(self, path: str) -> str:
        """Return the content of ``path`` as recorded in the index."""
        return self._run("show", f":{path}")

    def show_committed_file(self, ref: str, path: str) -> str:
        """Return the content of ``path`` at commit ``ref``."""
        return self._run("show", f"{ref}:{path}")

    def get_staged_changes(self, folder: str = "") -> list[str]:
        """List paths staged for commit, optionally limited to ``folder``."""
        args = ["diff", "--cached", "--name-only"]
        if folder:
            args.extend(["--", folder])
        output = self._run(*args)
        return [line for line in output.splitlines() if line.strip()]

    def stage_file(self, path: str | Path) -> None:
        self._run("add", "--", str(path))

    def tag_exists(self, name: str) -> bool:
        output = self._run("tag", "--list", name)
        return name in output.splitlines()

    def create_annotated_tag(self, name: str, message: str) -> None:
        self._run("tag", "-a", name, "-m", message)

    def delete_tag(self, name: str) -> None:
        self._run("tag", "-d", name)

    def push(self, remote: str, refspec: str) -> str:
        """Push ``refspec`` to ``remote``.

        Returns:
            Combined push output, for logging
        """
        return self._run("push", remote, refspec)

    def get_last_commit_message(self) -> str:
        return self._run("log", "-1", "--pretty=%B").strip()

    def get_current_branch(self) -> str:
        return self._run("symbolic-ref", "--short", "HEAD").strip()

    def set_config(self, key: str, value: str) -> None:
        self._run("config", key, value)
