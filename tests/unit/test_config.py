"""Unit tests for action inputs and their validation."""

import pytest
from pydantic import ValidationError

from js_dependency_update.config import (
    ActionInputs,
    PublishOptions,
    RepositoryContext,
    is_valid_branch_name,
    is_valid_directory_name,
    load_inputs,
    validate_inputs,
)
from js_dependency_update.errors import (
    ConfigError,
    InvalidConfigError,
    MissingConfigError,
    RepositoryContextError,
)


def _make_inputs(**overrides) -> dict:
    defaults = {
        "base_branch": "main",
        "head_branch": "update-dependencies",
        "gh_token": "ghp_testtoken123",
        "working_directory": "web",
    }
    defaults.update(overrides)
    return defaults


class TestBranchNames:
    """Tests for the branch name character class."""

    @pytest.mark.parametrize(
        "name", ["main", "feature/deps", "release-1.2", "user_branch", "a.b/c-d_e"]
    )
    def test_valid(self, name):
        """Test that allowed names pass."""
        assert is_valid_branch_name(name)

    @pytest.mark.parametrize(
        "name",
        ["main; rm -rf /", "main branch", "$(whoami)", "main`id`", "a|b", "", "main\n"],
    )
    def test_invalid(self, name):
        """Test that names with disallowed characters fail."""
        assert not is_valid_branch_name(name)


class TestDirectoryNames:
    """Tests for the working directory character class."""

    @pytest.mark.parametrize("name", ["web", "apps/web", "packages/ui-kit", "my_app/"])
    def test_valid(self, name):
        """Test that allowed names pass."""
        assert is_valid_directory_name(name)

    @pytest.mark.parametrize(
        "name", ["src && echo pwned", "src;ls", "my app", "../..", ".", "web\t"]
    )
    def test_invalid(self, name):
        """Test that names with disallowed characters fail."""
        assert not is_valid_directory_name(name)


class TestLoadInputsFromEnvironment:
    """Tests for reading INPUT_* variables the way the runner sets them."""

    def test_reads_all_inputs(self, action_env):
        """Test reads all inputs."""
        action_env(**{"INPUT_DEBUG": "true"})
        inputs = load_inputs()
        assert inputs.base_branch == "main"
        assert inputs.head_branch == "update-dependencies"
        assert inputs.gh_token.get_secret_value() == "ghp_testtoken123"
        assert inputs.working_directory == "web"
        assert inputs.debug is True

    def test_debug_defaults_to_false(self, action_env):
        """Test debug defaults to false."""
        action_env(**{"INPUT_DEBUG": None})
        assert load_inputs().debug is False

    def test_blank_debug_is_false(self, action_env):
        """Test blank debug is false."""
        action_env(**{"INPUT_DEBUG": ""})
        assert load_inputs().debug is False

    def test_target_branch_alias(self, action_env):
        """Test target branch alias."""
        action_env(**{"INPUT_HEAD-BRANCH": None, "INPUT_TARGET-BRANCH": "deps/npm"})
        assert load_inputs().head_branch == "deps/npm"

    def test_missing_token_is_reported(self, action_env):
        """Test missing token is reported."""
        action_env(**{"INPUT_GH-TOKEN": None})
        with pytest.raises(MissingConfigError) as exc_info:
            load_inputs()
        assert exc_info.value.name == "gh-token"
        assert "gh-token" in str(exc_info.value)

    def test_blank_input_is_missing(self, action_env):
        """Test blank input is missing."""
        action_env(**{"INPUT_WORKING-DIRECTORY": "  "})
        with pytest.raises(MissingConfigError) as exc_info:
            load_inputs()
        assert exc_info.value.name == "working-directory"

    def test_missing_reported_before_invalid(self, action_env):
        """Test missing reported before invalid."""
        action_env(**{"INPUT_BASE-BRANCH": "main; rm -rf /", "INPUT_GH-TOKEN": None})
        with pytest.raises(MissingConfigError):
            load_inputs()

    def test_token_is_not_in_repr(self, action_env):
        """Test token is not in repr."""
        action_env()
        assert "ghp_testtoken123" not in repr(load_inputs())


class TestValidateInputs:
    """Tests for format validation."""

    def test_valid_inputs_pass(self):
        """Test valid inputs pass."""
        inputs = load_inputs(**_make_inputs())
        assert validate_inputs(inputs) is inputs

    def test_injected_base_branch_rejected(self):
        """Test injected base branch rejected."""
        with pytest.raises(InvalidConfigError) as exc_info:
            load_inputs(**_make_inputs(base_branch="main; rm -rf /"))
        assert exc_info.value.name == "base-branch"
        assert "base-branch" in str(exc_info.value)

    def test_injected_head_branch_rejected(self):
        """Test injected head branch rejected."""
        with pytest.raises(InvalidConfigError) as exc_info:
            load_inputs(**_make_inputs(head_branch="deps && curl evil"))
        assert exc_info.value.name == "head-branch"

    def test_injected_directory_rejected(self):
        """Test injected directory rejected."""
        with pytest.raises(InvalidConfigError) as exc_info:
            load_inputs(**_make_inputs(working_directory="src && echo pwned"))
        assert exc_info.value.name == "working-directory"
        assert "forward slashes" in str(exc_info.value)

    def test_inputs_are_immutable(self):
        """Test inputs are immutable."""
        inputs = load_inputs(**_make_inputs())
        with pytest.raises(ValidationError):
            inputs.base_branch = "other"

    def test_direct_construction_is_not_validated(self):
        """Test direct construction is not validated."""
        inputs = ActionInputs(**_make_inputs(working_directory="a b"))
        with pytest.raises(InvalidConfigError):
            validate_inputs(inputs)


class TestPublishOptions:
    """Tests for the publishing defaults."""

    def test_defaults(self):
        """Test defaults."""
        opts = PublishOptions()
        assert opts.committer_name == "gh-automation"
        assert opts.committer_email == "gh-automation@email.com"
        assert opts.manifest_files == ("package.json", "package-lock.json")
        assert opts.status_pathspec == "package*.json"
        assert opts.pull_request_title == "Update NPM dependencies"
        assert opts.remote == "origin"

    def test_override(self):
        """Test override."""
        opts = PublishOptions(commit_message="deps: bump")
        assert opts.commit_message == "deps: bump"


class TestRepositoryContext:
    """Tests for the ambient repository context."""

    def test_owner_and_repo(self, monkeypatch):
        """Test owner and repo."""
        monkeypatch.setenv("GITHUB_REPOSITORY", "octo-org/web-app")
        ctx = RepositoryContext()
        assert ctx.owner == "octo-org"
        assert ctx.repo == "web-app"
        assert ctx.github_api_url == "https://api.github.com"

    def test_missing_repository_raises_on_use(self):
        """Test missing repository raises on use."""
        ctx = RepositoryContext()
        with pytest.raises(RepositoryContextError, match="GITHUB_REPOSITORY") as exc_info:
            _ = ctx.owner
        assert isinstance(exc_info.value, ConfigError)
        assert exc_info.value.name == "GITHUB_REPOSITORY"

    def test_repository_without_slash_is_rejected(self):
        """Test a GITHUB_REPOSITORY value without owner and repo raises."""
        ctx = RepositoryContext(github_repository="octo-org")
        with pytest.raises(RepositoryContextError, match="octo-org"):
            _ = ctx.repo
