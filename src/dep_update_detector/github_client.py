"""Repository backend for the GitHub REST API."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Any, NoReturn

import httpx
import structlog
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from .errors import GitHubAPIError, UnsupportedFeatureError
from .repo_client import Commit, FilePredicate, SearchCommitsOptions, User

logger = structlog.get_logger(__name__)

DEFAULT_API_URL = "https://api.github.com"


def _handle_http_error(e: httpx.HTTPStatusError) -> NoReturn:
    """Extract GitHub error message and raise GitHubAPIError."""
    status = e.response.status_code
    try:
        gh_message = e.response.json().get("message", "Unknown error")
    except ValueError:
        gh_message = e.response.text or "Unknown error"

    if status == 401:
        raise GitHubAPIError(f"Invalid GitHub token: {gh_message}", status) from e
    if status == 404:
        raise GitHubAPIError(f"Resource not found: {gh_message}", status) from e
    if status in (403, 429):
        raise GitHubAPIError(f"GitHub API rate limit exceeded: {gh_message}", status) from e
    raise GitHubAPIError(f"GitHub API error ({status}): {gh_message}", status) from e


def _commit_from_search_item(item: dict[str, Any]) -> Commit:
    # Search results attribute bot commits to the bot's account under "author".
    account = item.get("author") or item.get("committer") or {}
    return Commit(
        sha=item.get("sha", ""),
        message=(item.get("commit") or {}).get("message", ""),
        committer=User(login=account.get("login", ""), id=int(account.get("id") or 0)),
    )


@dataclass(slots=True, weakref_slot=True)
class GitHubRepoClient:
    owner: str
    repo: str
    token: str
    ref: str = "HEAD"
    base_url: str = DEFAULT_API_URL
    _client: httpx.Client = field(init=False, repr=False)
    _finalizer: weakref.finalize | None = field(init=False, repr=False, default=None)
    rate_limit_remaining: int = field(default=5000, init=False)
    rate_limit_reset: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self._client = httpx.Client(timeout=10.0, headers=self._headers())
        self._finalizer = weakref.finalize(self, self._client.close)

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.token}",
        }

    def _update_rate_limits(self, response: httpx.Response) -> None:
        if "X-RateLimit-Remaining" in response.headers:
            self.rate_limit_remaining = int(response.headers["X-RateLimit-Remaining"])
        if "X-RateLimit-Reset" in response.headers:
            self.rate_limit_reset = int(response.headers["X-RateLimit-Reset"])

    @retry(
        wait=wait_exponential(min=1, max=10),
        stop=stop_after_attempt(3),
        retry=retry_if_exception_type(httpx.RequestError),
        reraise=True,
    )
    def _request(self, path: str, params: dict[str, Any] | None) -> httpx.Response:
        response = self._client.get(f"{self.base_url}{path}", params=params)
        self._update_rate_limits(response)
        response.raise_for_status()
        return response

    def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        try:
            logger.info("github_api_request", method="GET", path=path)
            response = self._request(path, params)
            logger.info(
                "github_api_success",
                method="GET",
                path=path,
                status=response.status_code,
                rate_limit_remaining=self.rate_limit_remaining,
            )
            return response
        except httpx.HTTPStatusError as e:
            logger.error("github_api_error", method="GET", path=path, status=e.response.status_code)
            _handle_http_error(e)
        except httpx.RequestError as e:
            logger.error("github_api_connection_failed", method="GET", path=path, error=str(e))
            raise GitHubAPIError(f"GitHub API connection failed: {e}") from e

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        response = self.get(path, params)
        try:
            data = response.json()
        except ValueError as e:
            logger.error("github_api_invalid_json", method="GET", path=path, status=response.status_code)
            raise GitHubAPIError(f"GitHub API returned invalid JSON for {path}", response.status_code) from e
        if not isinstance(data, dict):
            raise GitHubAPIError(f"GitHub API returned unexpected payload for {path}", response.status_code)
        return data

    def list_files(self, predicate: FilePredicate) -> list[str]:
        """List blobs of the git tree at ``ref`` that satisfy ``predicate``."""
        path = f"/repos/{self.owner}/{self.repo}/git/trees/{self.ref}"
        data = self.get_json(path, params={"recursive": "1"})
        if data.get("truncated"):
            logger.warning("github_tree_truncated", owner=self.owner, repo=self.repo, ref=self.ref)
        return [
            entry["path"]
            for entry in data.get("tree", [])
            if entry.get("type") == "blob" and predicate(entry["path"])
        ]

    def search_commits(self, options: SearchCommitsOptions) -> list[Commit]:
        query = f"repo:{self.owner}/{self.repo} author:{options.author}"
        try:
            data = self.get_json("/search/commits", params={"q": query, "per_page": 100})
        except GitHubAPIError as e:
            if e.status_code == 422:
                raise UnsupportedFeatureError(f"commit search unavailable: {e}") from e
            raise
        items = data.get("items", [])
        logger.info("github_commit_search", query=query, count=len(items))
        return [_commit_from_search_item(item) for item in items]

    def close(self) -> None:
        if self._finalizer and self._finalizer.alive:
            self._finalizer.detach()
        self._client.close()

    def __enter__(self) -> GitHubRepoClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["GitHubRepoClient", "DEFAULT_API_URL"]
