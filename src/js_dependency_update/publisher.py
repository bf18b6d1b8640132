"""Publishing an update: commit, push and open a pull request."""

from __future__ import annotations

from collections.abc import Callable

from js_dependency_update.config import ActionInputs, PublishOptions, RepositoryContext
from js_dependency_update.errors import PublishError, RepositoryContextError
from js_dependency_update.git import VersionControl
from js_dependency_update.github import GitHubAPIError, PullRequest, PullRequestCreator
from js_dependency_update.logging import get_logger

log = get_logger("js_dependency_update.publisher")


class Publisher:
    """Pushes updated manifests to the head branch and opens a pull request.

    The git steps are not guarded: a failing command aborts the rest. A
    failed pull request leaves the pushed branch in place.
    """

    def __init__(
        self,
        vcs: VersionControl,
        pull_requests: PullRequestCreator,
        repository: RepositoryContext,
        options: PublishOptions | None = None,
    ) -> None:
        self._vcs = vcs
        self._pull_requests = pull_requests
        self._repository = repository
        self._options = options or PublishOptions()

    def publish(
        self,
        inputs: ActionInputs,
        on_step: Callable[[str], None] | None = None,
    ) -> PullRequest:
        """Commit the manifests to ``inputs.head_branch`` and open a PR.

        Raises:
            CommandFailedError: A git step failed.
            PublishError: The pull request could not be created.
        """
        opts = self._options
        cwd = inputs.working_directory
        done = on_step or (lambda step: None)

        self._vcs.configure_identity(opts.committer_name, opts.committer_email)
        done("configure_identity")
        self._vcs.create_branch(inputs.head_branch, cwd)
        done("create_branch")
        self._vcs.add(opts.manifest_files, cwd)
        done("stage")
        self._vcs.commit(opts.commit_message, cwd)
        done("commit")
        self._vcs.push(inputs.head_branch, cwd, remote=opts.remote, force=True, set_upstream=True)
        done("push")
        log.info("branch_pushed", branch=inputs.head_branch, remote=opts.remote)

        try:
            pull_request = self._pull_requests.create_pull_request(
                owner=self._repository.owner,
                repo=self._repository.repo,
                title=opts.pull_request_title,
                body=opts.pull_request_body,
                base=inputs.base_branch,
                head=inputs.head_branch,
            )
        except (GitHubAPIError, RepositoryContextError) as exc:
            log.error(
                "pull_request_failed",
                base=inputs.base_branch,
                head=inputs.head_branch,
                error=str(exc),
                cause=type(exc).__name__,
                status=getattr(exc, "status_code", None),
            )
            raise PublishError(str(exc)) from exc
        done("pull_request")

        log.info("pull_request_created", number=pull_request.number, url=pull_request.html_url)
        return pull_request
