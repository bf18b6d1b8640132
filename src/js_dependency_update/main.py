"""Entry point for the js-dependency-update action."""

from __future__ import annotations

from collections.abc import Sequence

from js_dependency_update.actions import add_mask, set_failed, set_output
from js_dependency_update.commands import CommandRunner
from js_dependency_update.config import PublishOptions, RepositoryContext, load_inputs
from js_dependency_update.errors import CommandFailedError, ConfigError
from js_dependency_update.git import Git
from js_dependency_update.github import GitHubClient
from js_dependency_update.logging import get_logger, register_secret, setup_logging
from js_dependency_update.npm import Npm
from js_dependency_update.publisher import Publisher
from js_dependency_update.workflow import DependencyUpdateWorkflow, RunStatus

log = get_logger("js_dependency_update.main")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the action once and return the process exit code.

    Inputs come from the step environment; ``argv`` is accepted for the
    console-script signature only.
    """
    setup_logging()

    try:
        inputs = load_inputs()
    except ConfigError as exc:
        log.error("invalid_input", input=exc.name, error=str(exc))
        return set_failed(str(exc))

    token = inputs.gh_token.get_secret_value()
    add_mask(token)
    register_secret(token)
    setup_logging(debug=inputs.debug)

    log.info("base_branch", value=inputs.base_branch)
    log.info("head_branch", value=inputs.head_branch)
    log.info("working_directory", value=inputs.working_directory)

    repository = RepositoryContext()
    options = PublishOptions()
    runner = CommandRunner()
    vcs = Git(runner)

    with GitHubClient(token, api_url=repository.github_api_url) as github:
        workflow = DependencyUpdateWorkflow(
            package_manager=Npm(runner),
            vcs=vcs,
            publisher=Publisher(vcs, github, repository, options),
            options=options,
        )
        try:
            result = workflow.run(inputs)
        except CommandFailedError as exc:
            return set_failed(str(exc))

    log.debug("run_finished", **result.to_dict())
    output_path = repository.github_output
    set_output("updates-available", str(result.updates_available).lower(), output_path)
    if result.pull_request is not None:
        set_output("pull-request-url", result.pull_request.html_url, output_path)

    if result.status is RunStatus.FAILED:
        return set_failed(result.message)

    log.info("run_succeeded", status=result.status.value, message=result.message)
    return 0
