"""Language classifier — extension lookup over the working tree."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import ScanSettings
from .errors import LanguageWalkError

logger = logging.getLogger(__name__)


def _should_skip_dir(name: str, skip_dirs: frozenset[str]) -> bool:
    return name.startswith(".") or name in skip_dirs


def _log_walk_error(err: OSError) -> None:
    logger.debug("Skipping unreadable entry %s: %s", err.filename, err.strerror)


def detect_languages(root: str | Path, settings: ScanSettings | None = None) -> tuple[str, ...]:
    """
    Walk root and return the sorted set of language labels found.

    Hidden and excluded directories are pruned. Unreadable entries are
    skipped; a missing or non-directory root raises LanguageWalkError.
    """
    settings = settings or ScanSettings()
    root_path = Path(root)
    if not root_path.is_dir():
        raise LanguageWalkError(root_path)
    try:
        with os.scandir(root_path):
            pass
    except OSError as e:
        raise LanguageWalkError(root_path, f"could not detect languages: {e}") from e

    table = settings.extension_languages
    found: set[str] = set()
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_log_walk_error):
        # Prune in place so os.walk never descends into them
        dirnames[:] = [d for d in dirnames if not _should_skip_dir(d, settings.skip_dirs)]
        for name in filenames:
            ext = os.path.splitext(name)[1].lower()
            lang = table.get(ext)
            if lang is None:
                continue
            if not os.path.isfile(os.path.join(dirpath, name)):
                continue  # broken symlink, socket, etc.
            found.add(lang)
    return tuple(sorted(found))
