"""Action inputs, publishing defaults and ambient repository context.

Inputs arrive the way the GitHub Actions runner passes them to a step, as
``INPUT_<NAME>`` environment variables with the input name upper-cased and
its hyphens kept (``INPUT_BASE-BRANCH``).
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from js_dependency_update.errors import (
    InvalidConfigError,
    MissingConfigError,
    RepositoryContextError,
)

BRANCH_NAME_RE = re.compile(r"^[a-zA-Z0-9_\-./]+$")
DIRECTORY_NAME_RE = re.compile(r"^[a-zA-Z0-9_\-/]+$")

BRANCH_NAME_RULE = (
    "Branch names should include only characters, numbers, hyphens, "
    "underscores, dots and forward slashes"
)
DIRECTORY_NAME_RULE = (
    "Directory names should include only characters, numbers, hyphens, "
    "underscores and forward slashes"
)

# Input names in the order a missing value is reported.
REQUIRED_INPUTS = ("base-branch", "head-branch", "gh-token", "working-directory")


def is_valid_branch_name(name: str) -> bool:
    return bool(BRANCH_NAME_RE.fullmatch(name))


def is_valid_directory_name(name: str) -> bool:
    return bool(DIRECTORY_NAME_RE.fullmatch(name))


class ActionInputs(BaseSettings):
    """Inputs of one action run, read from the step environment."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    base_branch: str = Field(
        validation_alias="input_base-branch",
        description="Branch the pull request targets",
    )
    head_branch: str = Field(
        validation_alias=AliasChoices("input_head-branch", "input_target-branch"),
        description="Branch the dependency update is committed to",
    )
    gh_token: SecretStr = Field(
        validation_alias="input_gh-token",
        description="Token used to push and open the pull request",
    )
    working_directory: str = Field(
        validation_alias="input_working-directory",
        description="Directory holding package.json",
    )
    debug: bool = Field(
        default=False,
        validation_alias="input_debug",
        description="Emit debug-level log messages",
    )

    @field_validator("base_branch", "head_branch", "working_directory", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("debug", mode="before")
    @classmethod
    def _blank_debug_is_false(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return False
        return value


class PublishOptions(BaseModel):
    """Fixed text and identity used when publishing an update."""

    model_config = ConfigDict(frozen=True)

    committer_name: str = "gh-automation"
    committer_email: str = "gh-automation@email.com"
    commit_message: str = "chore: update dependencies"
    pull_request_title: str = "Update NPM dependencies"
    pull_request_body: str = "This pull request updates NPM packages"
    manifest_files: tuple[str, ...] = ("package.json", "package-lock.json")
    status_pathspec: str = "package*.json"
    remote: str = "origin"


class RepositoryContext(BaseSettings):
    """Ambient context the runner provides for every workflow run."""

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore", frozen=True)

    github_repository: str | None = Field(
        default=None, description="owner/repo of the repository running the workflow"
    )
    github_api_url: str = Field(
        default="https://api.github.com", description="Base URL of the GitHub REST API"
    )
    github_output: str | None = Field(
        default=None, description="File step outputs are appended to"
    )

    @property
    def owner(self) -> str:
        return self._split()[0]

    @property
    def repo(self) -> str:
        return self._split()[1]

    def _split(self) -> tuple[str, str]:
        value = self.github_repository or ""
        owner, _, repo = value.partition("/")
        if not owner or not repo:
            raise RepositoryContextError(value)
        return owner, repo


def _input_name(loc: Any) -> str:
    name = str(loc).lower()
    name = name.removeprefix("input_")
    return name.replace("_", "-")


def validate_inputs(inputs: ActionInputs) -> ActionInputs:
    """Check every input before anything is run with it.

    Missing values are reported before malformed ones.
    """
    values = {
        "base-branch": inputs.base_branch,
        "head-branch": inputs.head_branch,
        "gh-token": inputs.gh_token.get_secret_value(),
        "working-directory": inputs.working_directory,
    }
    for name in REQUIRED_INPUTS:
        if not values[name].strip():
            raise MissingConfigError(name)

    if not is_valid_branch_name(inputs.base_branch):
        raise InvalidConfigError("base-branch", BRANCH_NAME_RULE)
    if not is_valid_branch_name(inputs.head_branch):
        raise InvalidConfigError("head-branch", BRANCH_NAME_RULE)
    if not is_valid_directory_name(inputs.working_directory):
        raise InvalidConfigError("working-directory", DIRECTORY_NAME_RULE)
    return inputs


def load_inputs(**overrides: Any) -> ActionInputs:
    """Read the action inputs from the environment and validate them.

    Raises:
        MissingConfigError: A required input is absent or blank.
        InvalidConfigError: An input fails its format check.
    """
    try:
        inputs = ActionInputs(**overrides)
    except ValidationError as exc:
        errors = exc.errors()
        missing = [e for e in errors if e["type"] == "missing"]
        if missing:
            names = {_input_name(e["loc"][0]) for e in missing}
            first = next((n for n in REQUIRED_INPUTS if n in names), sorted(names)[0])
            raise MissingConfigError(first) from exc
        error = errors[0]
        raise InvalidConfigError(_input_name(error["loc"][0]), error["msg"]) from exc
    return validate_inputs(inputs)
