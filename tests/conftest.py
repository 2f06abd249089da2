"""Shared fixtures: small git repositories built with GitPython."""

import logging
from pathlib import Path

import pytest
from git import Actor, Repo

from gitinsight.config import ScanSettings


def _commit(repo: Repo, root: Path, author: str, message: str, files: dict[str, str] | None = None):
    files = files or {f"file{len(list(root.iterdir()))}.txt": message}
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    repo.index.add(list(files))
    actor = Actor(author, f"{author.lower().replace(' ', '.')}@example.com")
    return repo.index.commit(message, author=actor, committer=actor)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo configure_logging() so handlers never outlive a CliRunner stream."""
    yield
    logger = logging.getLogger("gitinsight")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_repo(tmp_path):
    """Factory: make_repo([(author, message), ...], files=...) -> Repo with those commits, oldest first."""
    counter = {"n": 0}

    def _make(commits, files: dict[str, str] | None = None) -> Repo:
        counter["n"] += 1
        root = tmp_path / f"src{counter['n']}"
        repo = Repo.init(root)
        for i, (author, message) in enumerate(commits):
            extra = files if (files and i == 0) else None
            _commit(repo, root, author, message, extra)
        return repo

    return _make


@pytest.fixture
def settings(tmp_path) -> ScanSettings:
    """Settings whose clone directories land under tmp_path/work."""
    return ScanSettings(work_root=tmp_path / "work")
