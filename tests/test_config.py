"""Tests for settings and logging setup."""

import logging

import pytest

from gitinsight.config import CLONE_DEPTH, EXTENSION_LANGUAGES, MAX_COMMITS, SKIP_DIRS, ScanSettings, load_settings
from gitinsight.log import configure_logging


def test_defaults():
    """Named constants back the default settings."""
    s = ScanSettings()
    assert s.max_commits == MAX_COMMITS == 100
    assert s.clone_depth == CLONE_DEPTH == 50
    assert s.skip_dirs == SKIP_DIRS
    assert {"node_modules", "vendor", "target"} <= s.skip_dirs
    assert s.extension_languages[".go"] == "Go"


def test_load_settings_without_file(tmp_path):
    """No path or a missing file -> defaults."""
    assert load_settings(None) == ScanSettings()
    assert load_settings(tmp_path / "absent.yaml").max_commits == MAX_COMMITS


def test_load_settings_overrides(tmp_path):
    """YAML keys override defaults; extra extensions merge over the table."""
    cfg = tmp_path / "s.yaml"
    cfg.write_text(
        "max_commits: 10\n"
        "clone_depth: 5\n"
        f"work_root: {tmp_path / 'clones'}\n"
        "skip_dirs: [third_party]\n"
        "extra_extensions:\n"
        "  vue: Vue\n"
        "  .PY: Python3\n"
    )
    s = load_settings(cfg)
    assert s.max_commits == 10
    assert s.clone_depth == 5
    assert s.work_root == tmp_path / "clones"
    assert s.skip_dirs == frozenset({"third_party"})
    assert s.extension_languages[".vue"] == "Vue"
    assert s.extension_languages[".py"] == "Python3"
    assert s.extension_languages[".go"] == "Go"
    assert ".vue" not in EXTENSION_LANGUAGES


@pytest.mark.parametrize("body", ["max_commits: 0\n", "clone_depth: -1\n", "max_commits: many\n", "skip_dirs: vendor\n", "- a\n", "work_root: 5\n"])
def test_load_settings_rejects_bad_values(tmp_path, body):
    """Invalid values raise ValueError."""
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(body)
    with pytest.raises(ValueError):
        load_settings(cfg)


def test_configure_logging_idempotent():
    """Repeated setup keeps a single handler; verbose switches to DEBUG."""
    configure_logging(False)
    logger = configure_logging(True)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert configure_logging(False).level == logging.WARNING
