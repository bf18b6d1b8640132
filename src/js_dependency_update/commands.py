"""Subprocess execution for the package manager and git.

All subprocess calls go through ``CommandRunner``. Commands are argument
lists and never pass through a shell.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from js_dependency_update.errors import CommandFailedError
from js_dependency_update.logging import get_logger

log = get_logger("js_dependency_update.commands")


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one finished subprocess."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class CommandRunner:
    """Runs commands to completion, one at a time."""

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    def run(self, args: Sequence[str], cwd: str | None = None) -> CommandResult:
        """Run ``args`` in ``cwd`` and return its output.

        Raises:
            CommandFailedError: The command exited non-zero, timed out or
                could not be started.
        """
        log.info("command", command=" ".join(args), cwd=cwd)
        try:
            proc = subprocess.run(  # noqa: S603
                list(args),
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            log.error("command_timeout", command=" ".join(args), timeout=self._timeout)
            raise CommandFailedError(args, None, f"timed out after {self._timeout}s") from exc
        except OSError as exc:
            log.error("command_error", command=" ".join(args), error=str(exc))
            raise CommandFailedError(args, None, str(exc)) from exc

        if proc.stdout:
            log.debug("command_stdout", command=args[0], stdout=proc.stdout.rstrip())
        if proc.stderr:
            log.debug("command_stderr", command=args[0], stderr=proc.stderr.rstrip())

        if proc.returncode != 0:
            log.error(
                "command_failed",
                command=" ".join(args),
                returncode=proc.returncode,
                stderr=proc.stderr[:500],
            )
            raise CommandFailedError(args, proc.returncode, proc.stderr)

        return CommandResult(
            args=tuple(args),
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )
