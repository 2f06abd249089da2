"""Report assembler — snapshot + static advisory + timestamp + tool info."""

from __future__ import annotations

from datetime import datetime

from . import __version__
from .advisory import ADVISORY
from .models import AnalysisReport, RepositorySnapshot, ToolInfo, VulnerabilityDescriptor

TOOL_INFO = ToolInfo(
    name="Git Repository Security Analyzer",
    version=__version__,
    description="Demonstrates CVE-2023-49568 vulnerability in go-git library",
)


def build_report(
    snapshot: RepositorySnapshot,
    vulnerability: VulnerabilityDescriptor = ADVISORY,
    now: datetime | None = None,
) -> AnalysisReport:
    """Pure construction; `now` defaults to the current local time (tz-aware)."""
    return AnalysisReport(
        repository_info=snapshot,
        vulnerability_info=vulnerability,
        timestamp=now or datetime.now().astimezone(),
        tool_info=TOOL_INFO,
    )
