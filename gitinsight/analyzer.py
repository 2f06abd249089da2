"""Analysis pipeline — fetch, extract, classify, assemble; batch over URLs."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from .config import ScanSettings
from .errors import GitInsightError, LanguageWalkError
from .extractor import extract_structure
from .fetcher import fetch_repository
from .languages import detect_languages
from .models import AnalysisReport
from .report import build_report

logger = logging.getLogger(__name__)

SAMPLE_REPOSITORIES = (
    "https://github.com/go-git/go-git",
    "https://github.com/spf13/cobra",
    "https://github.com/fatih/color",
)


@dataclass(frozen=True)
class BatchResult:
    """Outcome for one URL in a batch: exactly one of report/error is set."""

    url: str
    report: AnalysisReport | None = None
    error: GitInsightError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def analyze_repository(url: str, settings: ScanSettings | None = None) -> AnalysisReport:
    """Clone url, scan it, and return the assembled report. Clone dir is always removed."""
    settings = settings or ScanSettings()
    with fetch_repository(url, settings) as fetched:
        snapshot = extract_structure(fetched.repo, url, settings)
        try:
            languages = detect_languages(fetched.path, settings)
        except LanguageWalkError as e:
            logger.warning("%s", e)
            languages = ()
    snapshot = dataclasses.replace(snapshot, languages=languages)
    return build_report(snapshot)


def analyze_many(
    urls: Iterable[str],
    settings: ScanSettings | None = None,
    on_start: Callable[[int, int, str], None] | None = None,
) -> Iterator[BatchResult]:
    """
    Analyze each URL in turn; a failure is recorded and the batch continues.

    on_start(index, total, url) is called before each analysis (1-based index).
    """
    settings = settings or ScanSettings()
    urls = list(urls)
    for i, url in enumerate(urls, start=1):
        if on_start is not None:
            on_start(i, len(urls), url)
        try:
            report = analyze_repository(url, settings)
        except GitInsightError as e:
            logger.debug("Failed to analyze %s: %s", url, e)
            yield BatchResult(url=url, error=e)
            continue
        yield BatchResult(url=url, report=report)
