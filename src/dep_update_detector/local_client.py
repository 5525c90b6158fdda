"""Repository backend for a checkout on local disk."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from .errors import FileEnumerationError, UnsupportedFeatureError
from .repo_client import Commit, FilePredicate, SearchCommitsOptions

logger = structlog.get_logger(__name__)

SKIP_DIRS = frozenset({".git"})


class LocalDirClient:
    def __init__(self, path: Path) -> None:
        if not path.is_dir():
            raise ValueError(f"Not a directory: {path}")
        self._root = path

    @property
    def root(self) -> Path:
        return self._root

    def list_files(self, predicate: FilePredicate) -> list[str]:
        """Return matching relative paths, sorted lexicographically."""

        def on_error(exc: OSError) -> None:
            raise exc

        files: list[str] = []
        try:
            for dirpath, dirnames, filenames in os.walk(self._root, onerror=on_error):
                dirnames[:] = [d for d in dirnames if d not in SKIP_DIRS]
                base = Path(dirpath).relative_to(self._root)
                for filename in filenames:
                    rel = (base / filename).as_posix()
                    if predicate(rel):
                        files.append(rel)
        except OSError as exc:
            logger.error("local_list_files_failed", root=str(self._root), error=str(exc))
            raise FileEnumerationError(f"Failed to walk {self._root}: {exc}") from exc

        files.sort()
        logger.debug("local_list_files", root=str(self._root), count=len(files))
        return files

    def search_commits(self, options: SearchCommitsOptions) -> list[Commit]:
        raise UnsupportedFeatureError("commit search is not supported for local directories")


__all__ = ["LocalDirClient"]
