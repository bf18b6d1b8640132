"""Shared fixtures for js-dependency-update tests."""

from __future__ import annotations

import os

import pytest

from js_dependency_update.logging import clear_secrets, setup_logging


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep runner-provided variables from leaking into tests."""
    for key in list(os.environ):
        if key.upper().startswith("INPUT_") or key.upper() in (
            "GITHUB_REPOSITORY",
            "GITHUB_API_URL",
            "GITHUB_OUTPUT",
        ):
            monkeypatch.delenv(key, raising=False)
    clear_secrets()
    setup_logging()
    yield
    clear_secrets()


@pytest.fixture
def action_env(monkeypatch):
    """Set a complete, valid set of action inputs in the environment."""

    def _set(**overrides: str) -> None:
        values = {
            "INPUT_BASE-BRANCH": "main",
            "INPUT_HEAD-BRANCH": "update-dependencies",
            "INPUT_GH-TOKEN": "ghp_testtoken123",
            "INPUT_WORKING-DIRECTORY": "web",
            "INPUT_DEBUG": "false",
        }
        values.update(overrides)
        for key, value in values.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, value)

    return _set
