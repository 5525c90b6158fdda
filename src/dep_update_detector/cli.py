"""CLI entry point."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog

from .config import (
    DEFAULT_LOG_LEVEL,
    CheckerConfig,
    load_config_file,
    load_from_env,
    merge_config,
    parse_repository,
)
from .dependency_update_tool import dependency_update_tool
from .errors import DetectorError
from .github_client import DEFAULT_API_URL, GitHubRepoClient
from .local_client import LocalDirClient
from .logging_config import configure_logging
from .repo_client import RepoClient
from .schemas import DependencyUpdateToolResponse

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="dep-update-detector",
        description="Detect dependency-update tooling (Dependabot, Renovate, PyUp, scala-steward) in a repository.",
    )
    source = ap.add_mutually_exclusive_group()
    source.add_argument("--repo", help="GitHub repository as owner/repo.")
    source.add_argument("--local", type=Path, help="Path to a local checkout.")
    ap.add_argument("--ref", help="Git ref to inspect on GitHub (default: HEAD).")
    ap.add_argument("--config", type=Path, help="YAML settings file.")
    ap.add_argument("--log-level", help="Log level (default: INFO).")
    return ap


def resolve_config(args: argparse.Namespace, env: dict[str, str]) -> CheckerConfig:
    config = load_from_env(env)
    if args.config is not None:
        config = merge_config(config, load_config_file(args.config))
    flags = CheckerConfig(
        repository=args.repo,
        ref=args.ref,
        local_path=args.local,
        log_level=args.log_level,
    )
    config = merge_config(config, flags)
    if args.repo:
        config.local_path = None
    elif args.local:
        config.repository = None
    return config


def open_client(config: CheckerConfig) -> tuple[str, RepoClient]:
    """Build the repository backend; raises ValueError on unusable settings."""
    if config.local_path is not None:
        return str(config.local_path), LocalDirClient(config.local_path)

    if not config.repository:
        raise ValueError("No repository given. Use --repo OWNER/REPO, --local PATH or GITHUB_REPOSITORY.")
    if not config.github_token:
        raise ValueError("GITHUB_TOKEN environment variable required for GitHub repositories")
    owner, repo = parse_repository(config.repository)
    client = GitHubRepoClient(
        owner=owner,
        repo=repo,
        token=config.github_token,
        ref=config.ref or "HEAD",
        base_url=config.api_url or DEFAULT_API_URL,
    )
    return f"{owner}/{repo}", client


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    try:
        config = resolve_config(args, dict(os.environ))
        configure_logging(config.log_level or DEFAULT_LOG_LEVEL)
        repository, client = open_client(config)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        data = dependency_update_tool(client)
    except DetectorError as exc:
        logger.error("dependency_update_tool_failed", repository=repository, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILED
    finally:
        if isinstance(client, GitHubRepoClient):
            client.close()

    response = DependencyUpdateToolResponse.from_data(repository, data)
    sys.stdout.write(response.model_dump_json(indent=2) + "\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
