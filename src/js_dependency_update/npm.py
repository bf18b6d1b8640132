"""Package manager seam: updating dependencies in place."""

from __future__ import annotations

from typing import Protocol

from js_dependency_update.commands import CommandRunner
from js_dependency_update.logging import get_logger

log = get_logger("js_dependency_update.npm")


class PackageManager(Protocol):
    """Updates a project's manifest and lockfile in place."""

    def update(self, cwd: str) -> None: ...


class Npm:
    """``npm update`` via the command runner."""

    def __init__(self, runner: CommandRunner, executable: str = "npm") -> None:
        self._runner = runner
        self._executable = executable

    def update(self, cwd: str) -> None:
        self._runner.run([self._executable, "update"], cwd=cwd)


def run_update(package_manager: PackageManager, working_directory: str) -> None:
    """Update dependencies in ``working_directory``.

    Failures propagate; an update is never retried.
    """
    log.debug("updating_dependencies", working_directory=working_directory)
    package_manager.update(working_directory)
    log.debug("dependencies_updated", working_directory=working_directory)
