"""Configuration loading for the detector CLI."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(slots=True)
class CheckerConfig:
    """Where to find the repository and how to talk to it.

    ``None`` means "not set"; defaults are applied by the caller.
    """

    github_token: str | None = None
    repository: str | None = None
    ref: str | None = None
    local_path: Path | None = None
    log_level: str | None = None
    api_url: str | None = None


def parse_repository(value: str) -> tuple[str, str]:
    parts = value.strip().strip("/").split("/")
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        raise ValueError(f"Invalid repository format: '{value}'. Expected format: 'owner/repo'")
    return parts[0].strip(), parts[1].strip()


def _from_mapping(data: Mapping[str, str | None]) -> CheckerConfig:
    local_path = data.get("local_path")
    return CheckerConfig(
        github_token=data.get("github_token") or None,
        repository=data.get("github_repository") or None,
        ref=data.get("github_ref") or None,
        local_path=Path(local_path) if local_path else None,
        log_level=data.get("log_level") or None,
        api_url=data.get("github_api_url") or None,
    )


def load_from_env(env: Mapping[str, str]) -> CheckerConfig:
    keys = ("GITHUB_TOKEN", "GITHUB_REPOSITORY", "GITHUB_REF", "LOCAL_PATH", "LOG_LEVEL", "GITHUB_API_URL")
    return _from_mapping({key.lower(): env.get(key) for key in keys})


def load_config_file(path: Path) -> CheckerConfig:
    try:
        data = yaml.safe_load(path.read_text()) if path.exists() else {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid config file {path}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, MutableMapping):
        raise ValueError("Config file must contain a mapping")
    return _from_mapping({str(k): (str(v) if v is not None else None) for k, v in data.items()})


def merge_config(base: CheckerConfig, override: CheckerConfig | None) -> CheckerConfig:
    """Return ``base`` with every field that is set in ``override`` replaced."""
    if override is None:
        return base
    merged = {}
    for f in fields(CheckerConfig):
        value = getattr(override, f.name)
        merged[f.name] = value if value is not None else getattr(base, f.name)
    return CheckerConfig(**merged)


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "CheckerConfig",
    "parse_repository",
    "load_from_env",
    "load_config_file",
    "merge_config",
]
