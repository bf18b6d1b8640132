"""Version-control seam used for change detection and publishing."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from js_dependency_update.commands import CommandRunner


class VersionControl(Protocol):
    """The git operations the action needs."""

    def status(self, pathspec: str, cwd: str) -> str: ...

    def configure_identity(self, name: str, email: str) -> None: ...

    def create_branch(self, name: str, cwd: str) -> None: ...

    def add(self, paths: Sequence[str], cwd: str) -> None: ...

    def commit(self, message: str, cwd: str) -> None: ...

    def push(
        self,
        branch: str,
        cwd: str,
        remote: str = "origin",
        force: bool = True,
        set_upstream: bool = True,
    ) -> None: ...


class Git:
    """git command-line implementation of ``VersionControl``."""

    def __init__(self, runner: CommandRunner, executable: str = "git") -> None:
        self._runner = runner
        self._git = executable

    def status(self, pathspec: str, cwd: str) -> str:
        """Return short-format status for paths matching ``pathspec``."""
        return self._runner.run([self._git, "status", "-s", "--", pathspec], cwd=cwd).stdout

    def configure_identity(self, name: str, email: str) -> None:
        # Global so every later commit in this job is attributed the same way.
        self._runner.run([self._git, "config", "--global", "user.name", name])
        self._runner.run([self._git, "config", "--global", "user.email", email])

    def create_branch(self, name: str, cwd: str) -> None:
        self._runner.run([self._git, "checkout", "-b", name], cwd=cwd)

    def add(self, paths: Sequence[str], cwd: str) -> None:
        self._runner.run([self._git, "add", "--", *paths], cwd=cwd)

    def commit(self, message: str, cwd: str) -> None:
        self._runner.run([self._git, "commit", "-m", message], cwd=cwd)

    def push(
        self,
        branch: str,
        cwd: str,
        remote: str = "origin",
        force: bool = True,
        set_upstream: bool = True,
    ) -> None:
        args = [self._git, "push"]
        if set_upstream:
            args.append("-u")
        args.extend([remote, branch])
        if force:
            args.append("--force")
        self._runner.run(args, cwd=cwd)
