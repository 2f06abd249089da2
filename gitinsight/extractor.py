"""Structure extractor — HEAD, latest commit, bounded history walk, branches."""

from __future__ import annotations

import logging

from git import Repo
from git.exc import BadName, BadObject, GitCommandError

from .config import ScanSettings
from .errors import NoHeadError, StructuralExtractionError
from .models import RepositorySnapshot

logger = logging.getLogger(__name__)

_GIT_ERRORS = (BadName, BadObject, GitCommandError, ValueError)


def first_line(message: str | bytes) -> str:
    """First line of a commit message; '' for an empty message."""
    if isinstance(message, bytes):
        message = message.decode("utf-8", errors="replace")
    return message.split("\n", 1)[0]


def walk_history(repo: Repo, rev: str, max_commits: int) -> tuple[int, tuple[str, ...]]:
    """Visit at most max_commits commits from rev. Returns (count, unique author names)."""
    count = 0
    contributors: dict[str, None] = {}
    for commit in repo.iter_commits(rev, max_count=max_commits):
        count += 1
        contributors.setdefault(commit.author.name or "", None)
    return count, tuple(contributors)


def count_branches(repo: Repo) -> int:
    """Local branch count; 1 when enumeration fails or finds nothing."""
    try:
        branches = repo.branches
    except (GitCommandError, OSError, ValueError) as e:
        logger.warning("Could not count branches: %s", e)
        return 1
    return max(len(branches), 1)


def extract_structure(repo: Repo, url: str, settings: ScanSettings | None = None) -> RepositorySnapshot:
    """Read HEAD, the tip commit, history and branches into a snapshot (no languages yet)."""
    settings = settings or ScanSettings()

    try:
        head_sha = repo.head.commit.hexsha
    except _GIT_ERRORS as e:
        raise NoHeadError(url) from e

    try:
        commit = repo.commit(head_sha)
        author = commit.author.name or ""
        authored = commit.authored_datetime
        message = first_line(commit.message)
    except _GIT_ERRORS as e:
        raise StructuralExtractionError(url, e) from e

    try:
        commit_count, contributors = walk_history(repo, head_sha, settings.max_commits)
    except _GIT_ERRORS as e:
        raise StructuralExtractionError(url, e) from e
    logger.debug("Visited %d commit(s), %d contributor(s)", commit_count, len(contributors))

    return RepositorySnapshot(
        url=url,
        last_commit_hash=head_sha,
        last_commit_date=authored,
        last_commit_author=author,
        last_commit_message=message,
        branch_count=count_branches(repo),
        commit_count=commit_count,
        contributors=contributors,
    )
