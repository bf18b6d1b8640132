"""GitHub Actions workflow commands and step outputs."""

from __future__ import annotations

import sys
import uuid
from pathlib import Path
from typing import TextIO


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _issue(command: str, message: str, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    out.write(f"::{command}::{_escape_data(message)}\n")
    out.flush()


def add_mask(value: str, stream: TextIO | None = None) -> None:
    """Ask the runner to mask ``value`` in the job log."""
    if value:
        _issue("add-mask", value, stream)


def error_annotation(message: str, stream: TextIO | None = None) -> None:
    _issue("error", message, stream)


def set_failed(message: str, stream: TextIO | None = None) -> int:
    """Report the step as failed and return the process exit code."""
    error_annotation(message, stream)
    return 1


def set_output(name: str, value: str, path: str | None) -> None:
    """Append a step output to the ``GITHUB_OUTPUT`` file.

    Does nothing outside a runner, where ``path`` is unset.
    """
    if not path:
        return
    with Path(path).open("a", encoding="utf-8") as fh:
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            fh.write(f"{name}={value}\n")
