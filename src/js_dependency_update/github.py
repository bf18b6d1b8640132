"""GitHub REST API client for opening pull requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from js_dependency_update import __version__
from js_dependency_update.logging import get_logger

log = get_logger("js_dependency_update.github")

DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"


class GitHubAPIError(Exception):
    """Base exception for GitHub API errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class GitHubAuthError(GitHubAPIError):
    """Bad credentials or missing permissions."""


class GitHubNotFoundError(GitHubAPIError):
    """Repository not found or not visible to the token."""


class GitHubRateLimitError(GitHubAPIError):
    """API rate limit exceeded."""


class GitHubValidationError(GitHubAPIError):
    """Request rejected, e.g. a pull request already exists for the branch."""


@dataclass(frozen=True)
class PullRequest:
    """A pull request as returned by the API."""

    number: int
    html_url: str
    head: str
    base: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> PullRequest:
        return cls(
            number=int(data["number"]),
            html_url=str(data.get("html_url", "")),
            head=str(data.get("head", {}).get("ref", "")),
            base=str(data.get("base", {}).get("ref", "")),
        )


class PullRequestCreator(Protocol):
    """Anything that can open a pull request."""

    def create_pull_request(
        self, owner: str, repo: str, title: str, body: str, base: str, head: str
    ) -> PullRequest: ...


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if not isinstance(data, dict):
        return response.text
    message = str(data.get("message", ""))
    details = [
        str(err.get("message") or err.get("code"))
        for err in data.get("errors", [])
        if isinstance(err, dict)
    ]
    if details:
        message = f"{message}: {'; '.join(details)}"
    return message or response.text


class GitHubClient:
    """Minimal synchronous GitHub API client."""

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=api_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": f"js-dependency-update/{__version__}",
            },
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.RequestError as exc:
            raise GitHubAPIError(f"Request to GitHub failed: {exc}") from exc

        if response.is_success:
            try:
                return response.json()
            except ValueError as exc:
                raise GitHubAPIError(
                    f"Unexpected response from GitHub: {response.text[:200]!r}",
                    response.status_code,
                ) from exc

        message = _error_message(response)
        status = response.status_code
        log.debug("github_api_error", method=method, path=path, status=status, message=message)

        if status in (403, 429) and (
            "rate limit" in message.lower() or response.headers.get("x-ratelimit-remaining") == "0"
        ):
            raise GitHubRateLimitError(message, status)
        if status in (401, 403):
            raise GitHubAuthError(message, status)
        if status == 404:
            raise GitHubNotFoundError(message, status)
        if status == 422:
            raise GitHubValidationError(message, status)
        raise GitHubAPIError(message, status)

    def create_pull_request(
        self, owner: str, repo: str, title: str, body: str, base: str, head: str
    ) -> PullRequest:
        """Open a pull request from ``head`` into ``base``."""
        data = self._request(
            "POST",
            f"/repos/{owner}/{repo}/pulls",
            json={"title": title, "body": body, "base": base, "head": head},
        )
        try:
            pull_request = PullRequest.from_api(data)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise GitHubAPIError(
                f"Unexpected response from GitHub when creating a pull request: {exc!r}"
            ) from exc
        log.debug("github_pull_request_created", number=pull_request.number)
        return pull_request
