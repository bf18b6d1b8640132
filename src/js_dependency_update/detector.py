"""Change detection over the manifest files."""

from __future__ import annotations

from js_dependency_update.git import VersionControl
from js_dependency_update.logging import get_logger

log = get_logger("js_dependency_update.detector")


def has_changes(status_text: str) -> bool:
    """Any status line at all counts as a change, untracked files included."""
    return bool(status_text.strip())


def detect_changes(vcs: VersionControl, working_directory: str, pathspec: str) -> bool:
    """Return True when files matching ``pathspec`` differ from HEAD."""
    status = vcs.status(pathspec, working_directory)
    log.debug("manifest_status", pathspec=pathspec, status=status.rstrip())

    if has_changes(status):
        log.info("updates_available", status=status.rstrip())
        return True

    log.info("no_updates", pathspec=pathspec)
    return False
