"""Domain records produced by the dependency-update-tool check."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Whole-file evidence has no line offset.
OFFSET_DEFAULT = 0


class FileType(str, Enum):
    none = ""
    source = "source"


@dataclass(frozen=True, slots=True)
class File:
    """One piece of evidence; an empty path means the evidence is not a file."""

    path: str = ""
    type: FileType = FileType.none
    offset: int = OFFSET_DEFAULT


@dataclass(frozen=True, slots=True)
class Tool:
    name: str
    url: str | None = None
    desc: str | None = None
    files: tuple[File, ...] = ()


@dataclass(slots=True)
class DependencyUpdateToolData:
    """Detected tools in detection order; config-file matches come first."""

    tools: list[Tool] = field(default_factory=list)


__all__ = ["OFFSET_DEFAULT", "FileType", "File", "Tool", "DependencyUpdateToolData"]
