"""Exception hierarchy for dependency-update-tool detection."""

from __future__ import annotations


class DetectorError(Exception):
    """Base class for all detector failures."""


class InvalidArgumentError(DetectorError, ValueError):
    """A file visitor was called with the wrong argument bundle."""


class InvalidArgLengthError(InvalidArgumentError):
    pass


class InvalidArgTypeError(InvalidArgumentError):
    pass


class UnsupportedFeatureError(DetectorError):
    """The repository backend cannot perform the requested operation."""


class FileEnumerationError(DetectorError):
    """Listing the repository files failed."""


class DependencyUpdateToolError(DetectorError, RuntimeError):
    """Detection aborted; the message names the phase that failed."""


class GitHubAPIError(DetectorError, ValueError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "DetectorError",
    "InvalidArgumentError",
    "InvalidArgLengthError",
    "InvalidArgTypeError",
    "UnsupportedFeatureError",
    "FileEnumerationError",
    "DependencyUpdateToolError",
    "GitHubAPIError",
]
