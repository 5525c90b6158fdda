"""Shared per-file traversal used by repository probes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from .errors import DetectorError, FileEnumerationError
from .repo_client import RepoClient, match_all

logger = structlog.get_logger(__name__)

# Returns False to stop the traversal early.
FileVisitor = Callable[..., bool]


def on_all_files_do(client: RepoClient, visitor: FileVisitor, *args: Any) -> None:
    """Call ``visitor(path, *args)`` for every file in the repository.

    Files are visited in the order the client lists them. Errors raised by
    the visitor propagate unchanged.
    """
    try:
        paths = client.list_files(match_all)
    except DetectorError:
        raise
    except (OSError, ValueError) as exc:
        raise FileEnumerationError(f"listing repository files: {exc}") from exc

    logger.debug("file_traversal_start", file_count=len(paths))
    for path in paths:
        if not visitor(path, *args):
            logger.debug("file_traversal_stopped", path=path)
            break


__all__ = ["FileVisitor", "on_all_files_do"]
