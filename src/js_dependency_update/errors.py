"""Exception hierarchy for the dependency update action."""

from __future__ import annotations

from collections.abc import Sequence


class DependencyUpdateError(Exception):
    """Base exception for all action failures."""


class ConfigError(DependencyUpdateError):
    """An action input could not be used."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class MissingConfigError(ConfigError):
    """A required input was not provided."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Input required and not supplied: {name}")


class InvalidConfigError(ConfigError):
    """An input failed its format check."""

    def __init__(self, name: str, reason: str) -> None:
        self.reason = reason
        super().__init__(name, f"Invalid {name} input. {reason}")


class RepositoryContextError(ConfigError):
    """The runner did not provide the repository to open the pull request against."""

    def __init__(self, value: str) -> None:
        super().__init__(
            "GITHUB_REPOSITORY", f"GITHUB_REPOSITORY must be set to 'owner/repo', got {value!r}"
        )


class CommandFailedError(DependencyUpdateError):
    """A subprocess exited non-zero or could not be started."""

    def __init__(self, args: Sequence[str], returncode: int | None, stderr: str = "") -> None:
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr
        command = " ".join(self.args_list)
        if returncode is None:
            message = f"Unable to run '{command}': {stderr}"
        else:
            message = f"'{command}' failed with exit code {returncode}"
            if stderr.strip():
                message = f"{message}: {stderr.strip()[:500]}"
        super().__init__(message)


class PublishError(DependencyUpdateError):
    """The pull request could not be created.

    The branch and commit may already be on the remote; nothing is rolled back.
    """
