"""Repository fetcher — shallow clone into a scratch directory, always removed."""

from __future__ import annotations

import logging
import os
import shutil
import stat
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

from git import Repo
from git.exc import GitCommandError

from .config import ScanSettings
from .errors import FetchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedRepository:
    """A cloned working copy, valid only inside fetch_repository()."""

    url: str
    path: Path
    repo: Repo


def _remove_readonly(func: Callable[[str], None], path: str, excinfo) -> None:
    """Clear the read-only bit git sets on pack files, then retry."""
    try:
        os.chmod(path, stat.S_IWUSR)
    except OSError:
        pass
    func(path)


def rmtree_force(path: Path) -> None:
    if not path.exists():
        return
    try:
        shutil.rmtree(path)
    except PermissionError:
        shutil.rmtree(path, onexc=_remove_readonly)


@contextmanager
def fetch_repository(url: str, settings: ScanSettings | None = None) -> Iterator[FetchedRepository]:
    """
    Shallow-clone url into a fresh directory under settings.work_root.

    Yields a FetchedRepository. The directory is removed when the block
    exits, whether the clone, the caller or nothing at all failed.
    """
    settings = settings or ScanSettings()
    settings.work_root.mkdir(parents=True, exist_ok=True)
    clone_dir = Path(tempfile.mkdtemp(prefix="repo-", dir=settings.work_root))
    try:
        logger.info("Cloning %s (depth %d) into %s", url, settings.clone_depth, clone_dir)
        try:
            repo = Repo.clone_from(url, clone_dir, depth=settings.clone_depth)
        except (GitCommandError, OSError) as e:
            raise FetchError(url, e) from e
        logger.info("Repository cloned successfully")
        try:
            yield FetchedRepository(url=url, path=clone_dir, repo=repo)
        finally:
            repo.close()
    finally:
        rmtree_force(clone_dir)
        logger.debug("Removed clone directory %s", clone_dir)
