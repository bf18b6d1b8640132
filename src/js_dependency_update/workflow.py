"""The update-and-publish pipeline.

Flow:
1. ``npm update`` in the working directory
2. ``git status`` over the manifest files
3. If anything changed, publish: commit, push, open a pull request
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from js_dependency_update.config import ActionInputs, PublishOptions
from js_dependency_update.detector import detect_changes
from js_dependency_update.errors import PublishError
from js_dependency_update.git import VersionControl
from js_dependency_update.github import PullRequest
from js_dependency_update.logging import get_logger
from js_dependency_update.npm import PackageManager, run_update
from js_dependency_update.publisher import Publisher

log = get_logger("js_dependency_update.workflow")

NO_UPDATES_MESSAGE = "No updates at this point in time!"


class RunStatus(Enum):
    """Terminal status of a run."""

    NO_UPDATES = "no_updates"
    PULL_REQUEST_CREATED = "pull_request_created"
    FAILED = "failed"


@dataclass
class RunResult:
    """Result of one run."""

    status: RunStatus
    message: str = ""
    pull_request: PullRequest | None = None
    steps_completed: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status is not RunStatus.FAILED

    @property
    def updates_available(self) -> bool:
        return self.status is not RunStatus.NO_UPDATES

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "message": self.message,
            "pull_request_url": self.pull_request.html_url if self.pull_request else None,
            "steps_completed": self.steps_completed,
        }


class DependencyUpdateWorkflow:
    """Runs the update, detects changes and publishes them."""

    def __init__(
        self,
        package_manager: PackageManager,
        vcs: VersionControl,
        publisher: Publisher,
        options: PublishOptions | None = None,
    ) -> None:
        self._package_manager = package_manager
        self._vcs = vcs
        self._publisher = publisher
        self._options = options or PublishOptions()

    def run(self, inputs: ActionInputs) -> RunResult:
        """Run the pipeline once.

        ``CommandFailedError`` from npm or git propagates to the caller. A
        failed pull request is reported as ``RunStatus.FAILED``.
        """
        result = RunResult(status=RunStatus.FAILED)
        cwd = inputs.working_directory

        run_update(self._package_manager, cwd)
        result.steps_completed.append("npm_update")

        changed = detect_changes(self._vcs, cwd, self._options.status_pathspec)
        result.steps_completed.append("change_detection")
        if not changed:
            result.status = RunStatus.NO_UPDATES
            result.message = NO_UPDATES_MESSAGE
            return result

        try:
            result.pull_request = self._publisher.publish(
                inputs, on_step=result.steps_completed.append
            )
        except PublishError as exc:
            result.message = f"Pull request was not created: {exc}"
            log.error(
                "publish_failed",
                error=str(exc),
                branch=inputs.head_branch,
                steps_completed=result.steps_completed,
            )
            return result

        result.status = RunStatus.PULL_REQUEST_CREATED
        result.message = f"Pull request created: {result.pull_request.html_url}"
        return result
