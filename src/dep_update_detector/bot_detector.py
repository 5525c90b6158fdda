"""Known automation bot identities."""

from __future__ import annotations

from dataclasses import dataclass

from .repo_client import Commit


@dataclass(frozen=True, slots=True)
class BotIdentity:
    """Author name used to filter a commit search, plus the account id that decides a match.

    The author filter may over-select; only the committer id is authoritative.
    """

    author: str
    account_id: int


DEPENDABOT = BotIdentity(author="dependabot[bot]", account_id=49699333)


def is_bot_commit(commit: Commit, identity: BotIdentity = DEPENDABOT) -> bool:
    """Detect if a commit was committed by the given bot account."""
    return commit.committer.id == identity.account_id


__all__ = ["BotIdentity", "DEPENDABOT", "is_bot_commit"]
