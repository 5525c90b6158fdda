"""Repository access contract shared by all backends."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

FilePredicate = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class User:
    login: str = ""
    id: int = 0


@dataclass(frozen=True, slots=True)
class Commit:
    sha: str = ""
    message: str = ""
    committer: User = field(default_factory=User)


@dataclass(frozen=True, slots=True)
class SearchCommitsOptions:
    author: str


@runtime_checkable
class RepoClient(Protocol):
    """Interface every repository backend must satisfy.

    ``list_files`` returns repository-relative, ``/``-separated paths.
    ``search_commits`` raises ``UnsupportedFeatureError`` when the backend
    cannot search history.
    """

    def list_files(self, predicate: FilePredicate) -> list[str]: ...

    def search_commits(self, options: SearchCommitsOptions) -> list[Commit]: ...


def match_all(path: str) -> bool:
    return True


__all__ = ["FilePredicate", "User", "Commit", "SearchCommitsOptions", "RepoClient", "match_all"]
