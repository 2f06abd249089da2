"""Exceptions raised while fetching, scanning and rendering a repository."""

from __future__ import annotations

from pathlib import Path


class GitInsightError(Exception):
    """Base class for all analysis failures."""


class FetchError(GitInsightError):
    """Raised when the repository cannot be cloned (network, bad URL, auth)."""

    def __init__(self, url: str, cause: BaseException | None = None) -> None:
        self.url = url
        self.cause = cause
        message = f"failed to clone repository {url}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class NoHeadError(GitInsightError):
    """Raised when HEAD cannot be resolved (empty or corrupt repository)."""

    def __init__(self, url: str, message: str | None = None) -> None:
        self.url = url
        if message is None:
            message = f"failed to get HEAD reference for {url}: repository has no commits"
        super().__init__(message)


class StructuralExtractionError(GitInsightError):
    """Raised when a commit object cannot be loaded or the history walk breaks."""

    def __init__(self, url: str, cause: BaseException | None = None) -> None:
        self.url = url
        self.cause = cause
        message = f"failed to analyze repository structure of {url}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class LanguageWalkError(GitInsightError):
    """Raised when the working tree root cannot be walked.

    Non-fatal: the analyzer downgrades it to a warning and continues with
    an empty language set.
    """

    def __init__(self, root: str | Path, message: str | None = None) -> None:
        self.root = Path(root)
        if message is None:
            message = f"could not detect languages: {self.root} is not a readable directory"
        super().__init__(message)


class UnsupportedOutputFormatError(GitInsightError):
    """Raised for an output format other than the supported ones."""

    def __init__(self, fmt: str, supported: tuple[str, ...] = ()) -> None:
        self.fmt = fmt
        self.supported = supported
        message = f"unsupported format: {fmt}"
        if supported:
            message = f"{message} (expected one of: {', '.join(supported)})"
        super().__init__(message)
