"""Detect automated dependency-update tooling in a repository."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

import structlog

from .bot_detector import DEPENDABOT, is_bot_commit
from .errors import (
    DependencyUpdateToolError,
    InvalidArgLengthError,
    InvalidArgTypeError,
    UnsupportedFeatureError,
)
from .fileparser import on_all_files_do
from .models import OFFSET_DEFAULT, DependencyUpdateToolData, File, FileType, Tool
from .repo_client import RepoClient, SearchCommitsOptions

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ToolIdentity:
    name: str
    url: str
    desc: str


DEPENDABOT_TOOL = ToolIdentity(
    name="Dependabot",
    url="https://github.com/dependabot",
    desc="Automated dependency updates built into GitHub",
)
RENOVATE_TOOL = ToolIdentity(
    name="RenovateBot",
    url="https://github.com/renovatebot/renovate",
    desc="Automated dependency updates. Multi-platform and multi-language.",
)
PYUP_TOOL = ToolIdentity(
    name="PyUp",
    url="https://pyup.io/",
    desc="Automated dependency updates for Python.",
)
SCALA_STEWARD_TOOL = ToolIdentity(
    name="scala-steward",
    url="https://github.com/scala-steward-org/scala-steward",
    desc="Works with Maven, Mill, sbt, and Scala CLI.",
)

_CONFIG_PATHS: dict[ToolIdentity, tuple[str, ...]] = {
    DEPENDABOT_TOOL: (
        ".github/dependabot.yml",
        ".github/dependabot.yaml",
    ),
    # https://docs.renovatebot.com/configuration-options/
    RENOVATE_TOOL: (
        "renovate.json",
        "renovate.json5",
        ".github/renovate.json",
        ".github/renovate.json5",
        ".gitlab/renovate.json",
        ".gitlab/renovate.json5",
        ".renovaterc",
        ".renovaterc.json",
        ".renovaterc.json5",
    ),
    PYUP_TOOL: (".pyup.yml",),
    # https://github.com/scala-steward-org/scala-steward/blob/main/docs/repo-specific-configuration.md
    SCALA_STEWARD_TOOL: (
        ".scala-steward.conf",
        "scala-steward.conf",
        ".github/.scala-steward.conf",
        ".github/scala-steward.conf",
        ".config/.scala-steward.conf",
        ".config/scala-steward.conf",
    ),
}

# Keys are lower-case; look up with ``path.lower()``.
CONFIG_FILE_TOOLS: MappingProxyType[str, ToolIdentity] = MappingProxyType(
    {path: tool for tool, paths in _CONFIG_PATHS.items() for path in paths}
)


def _make_tool(identity: ToolIdentity, evidence: File) -> Tool:
    return Tool(name=identity.name, url=identity.url, desc=identity.desc, files=(evidence,))


def check_dependency_file_exists(name: str, *args: Any) -> bool:
    """File visitor: record a tool when ``name`` is a known configuration path.

    Expects exactly one argument, the ``list[Tool]`` accumulator. Always
    returns True so that the traversal keeps going for the other probes that
    share it.
    """
    if len(args) != 1:
        raise InvalidArgLengthError("check_dependency_file_exists requires exactly one argument")
    tools = args[0]
    if not isinstance(tools, list):
        raise InvalidArgTypeError(
            "check_dependency_file_exists requires an argument of type: list[Tool]"
        )

    identity = CONFIG_FILE_TOOLS.get(name.lower())
    if identity is not None:
        logger.debug("dependency_file_found", path=name, tool=identity.name)
        tools.append(
            _make_tool(identity, File(path=name, type=FileType.source, offset=OFFSET_DEFAULT))
        )

    return True


def search_dependabot_commits(client: RepoClient, tools: list[Tool]) -> list[Tool]:
    """Append a Dependabot tool if the history has a commit from its account.

    A backend without commit search yields no evidence instead of an error.
    """
    try:
        commits = client.search_commits(SearchCommitsOptions(author=DEPENDABOT.author))
    except UnsupportedFeatureError:
        logger.info("dependabot_commit_search_unsupported")
        return tools
    except Exception as exc:
        raise DependencyUpdateToolError(f"dependabot commit search: {exc}") from exc

    for commit in commits:
        if is_bot_commit(commit, DEPENDABOT):
            logger.debug("dependabot_commit_found", sha=commit.sha)
            tools.append(_make_tool(DEPENDABOT_TOOL, File()))
            break
    return tools


def dependency_update_tool(client: RepoClient) -> DependencyUpdateToolData:
    """Run the file scan and, when it finds nothing, the Dependabot commit fallback."""
    tools: list[Tool] = []
    logger.info("dependency_update_tool_start")
    try:
        on_all_files_do(client, check_dependency_file_exists, tools)
    except Exception as exc:
        raise DependencyUpdateToolError(f"file scan: {exc}") from exc

    if not tools:
        search_dependabot_commits(client, tools)

    logger.info(
        "dependency_update_tool_complete",
        tools=[tool.name for tool in tools],
        count=len(tools),
    )
    return DependencyUpdateToolData(tools=tools)


__all__ = [
    "ToolIdentity",
    "CONFIG_FILE_TOOLS",
    "check_dependency_file_exists",
    "search_dependabot_commits",
    "dependency_update_tool",
]
