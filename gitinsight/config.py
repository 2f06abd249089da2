"""Scan settings — history cap, clone depth, skip dirs, extension table."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

MAX_COMMITS = 100  # History walk cap
CLONE_DEPTH = 50  # Shallow clone depth

# Directories never descended into (dot-prefixed dirs are skipped as well)
SKIP_DIRS = frozenset({"node_modules", "vendor", "target", "build", "dist", "__pycache__", "venv"})

EXTENSION_LANGUAGES: Mapping[str, str] = MappingProxyType({
    ".go": "Go",
    ".js": "JavaScript",
    ".mjs": "JavaScript",
    ".cjs": "JavaScript",
    ".jsx": "JavaScript",
    ".ts": "TypeScript",
    ".tsx": "TypeScript",
    ".py": "Python",
    ".pyi": "Python",
    ".java": "Java",
    ".cpp": "C++",
    ".cc": "C++",
    ".cxx": "C++",
    ".hpp": "C++",
    ".c": "C",
    ".h": "C",
    ".cs": "C#",
    ".php": "PHP",
    ".rb": "Ruby",
    ".rs": "Rust",
    ".kt": "Kotlin",
    ".kts": "Kotlin",
    ".swift": "Swift",
    ".scala": "Scala",
    ".sh": "Shell",
    ".bash": "Shell",
    ".zsh": "Shell",
    ".yaml": "YAML",
    ".yml": "YAML",
    ".json": "JSON",
    ".toml": "TOML",
    ".xml": "XML",
    ".html": "HTML",
    ".htm": "HTML",
    ".css": "CSS",
    ".scss": "CSS",
    ".md": "Markdown",
})


def _default_work_root() -> Path:
    return Path(tempfile.gettempdir()) / "gitinsight"


@dataclass(frozen=True)
class ScanSettings:
    """Tunables for one analysis run. Pass explicitly; never mutated."""

    max_commits: int = MAX_COMMITS
    clone_depth: int = CLONE_DEPTH
    work_root: Path = field(default_factory=_default_work_root)
    skip_dirs: frozenset[str] = SKIP_DIRS
    extension_languages: Mapping[str, str] = field(default_factory=lambda: EXTENSION_LANGUAGES)

    def __post_init__(self) -> None:
        for name in ("max_commits", "clone_depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


def load_settings(path: Path | None = None) -> ScanSettings:
    """
    Load settings from an optional YAML file.

    Keys: max_commits, clone_depth, work_root, skip_dirs (list),
    extra_extensions (mapping of ".ext" -> label, merged over the defaults).
    Missing file or no path -> defaults.
    """
    if not path or not Path(path).exists():
        return ScanSettings()
    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")

    skip_dirs = data.get("skip_dirs")
    if skip_dirs is not None and not isinstance(skip_dirs, list):
        raise ValueError("skip_dirs must be a list of directory names")
    extra = data.get("extra_extensions") or {}
    if not isinstance(extra, dict):
        raise ValueError("extra_extensions must be a mapping of extension to language")

    table = dict(EXTENSION_LANGUAGES)
    for ext, label in extra.items():
        ext = str(ext).lower()
        table[ext if ext.startswith(".") else f".{ext}"] = str(label)

    work_root = data.get("work_root")
    if work_root is not None and not isinstance(work_root, str):
        raise ValueError(f"work_root must be a path string, got {work_root!r}")
    return ScanSettings(
        max_commits=data.get("max_commits", MAX_COMMITS),
        clone_depth=data.get("clone_depth", CLONE_DEPTH),
        work_root=Path(work_root).expanduser() if work_root else _default_work_root(),
        skip_dirs=frozenset(str(d) for d in skip_dirs) if skip_dirs is not None else SKIP_DIRS,
        extension_languages=MappingProxyType(table),
    )
