"""Tests for the language classifier."""

import os
from pathlib import Path

import pytest

from gitinsight.config import ScanSettings
from gitinsight.errors import LanguageWalkError
from gitinsight.languages import detect_languages


def _tree(root: Path, files: list[str]) -> None:
    for rel in files:
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("x", encoding="utf-8")


def test_detects_by_extension_case_insensitive(tmp_path):
    """Extensions map to labels regardless of case; unknown ones are ignored."""
    _tree(tmp_path, ["main.py", "web/APP.JS", "README.md", "notes.xyz", "Makefile"])
    assert detect_languages(tmp_path) == ("JavaScript", "Markdown", "Python")


def test_excluded_directories_never_contribute(tmp_path):
    """Hidden, vendor and build directories are pruned."""
    _tree(tmp_path, [
        "main.go",
        "node_modules/pkg/index.ts",
        "vendor/lib.rb",
        "target/out.java",
        ".hidden/tool.rs",
        "src/.cache/gen.kt",
        "build/gen.swift",
    ])
    langs = detect_languages(tmp_path)
    assert langs == ("Go",)


def test_yaml_aliases_collapse(tmp_path):
    """.yml and .yaml map to one label."""
    _tree(tmp_path, ["a.yml", "b.yaml"])
    assert detect_languages(tmp_path) == ("YAML",)


def test_idempotent(tmp_path):
    """Same tree, same result."""
    _tree(tmp_path, ["a.c", "b.cpp", "c.cs", "d.sh", "e.html", "f.css"])
    first = detect_languages(tmp_path)
    assert first == detect_languages(tmp_path)
    assert set(first) == {"C", "C++", "C#", "Shell", "HTML", "CSS"}


def test_empty_tree(tmp_path):
    """No recognised files -> empty tuple."""
    assert detect_languages(tmp_path) == ()


def test_missing_root_raises(tmp_path):
    """A missing root is reported to the caller."""
    with pytest.raises(LanguageWalkError) as exc:
        detect_languages(tmp_path / "nope")
    assert exc.value.root == tmp_path / "nope"


def test_file_root_raises(tmp_path):
    """A file is not a walkable root."""
    f = tmp_path / "single.py"
    f.write_text("x")
    with pytest.raises(LanguageWalkError):
        detect_languages(f)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_broken_symlink_skipped(tmp_path):
    """Broken links are skipped; the walk continues."""
    _tree(tmp_path, ["ok.py"])
    try:
        os.symlink(tmp_path / "missing.rs", tmp_path / "dangling.rs")
    except OSError:
        pytest.skip("cannot create symlinks here")
    assert detect_languages(tmp_path) == ("Python",)


def test_custom_settings(tmp_path):
    """Skip set and extension table come from settings."""
    _tree(tmp_path, ["app.vue", "generated/x.py", "build/y.go"])
    settings = ScanSettings(
        skip_dirs=frozenset({"generated"}),
        extension_languages={".vue": "Vue", ".py": "Python", ".go": "Go"},
    )
    assert detect_languages(tmp_path, settings) == ("Go", "Vue")


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root ignores directory permissions")
def test_unreadable_subdirectory_skipped(tmp_path):
    """A directory that cannot be listed is skipped; siblings still count."""
    _tree(tmp_path, ["ok.py", "locked/secret.rs"])
    locked = tmp_path / "locked"
    locked.chmod(0o000)
    try:
        assert detect_languages(tmp_path) == ("Python",)
    finally:
        locked.chmod(0o755)
