"""Structured values for a scanned repository and its report."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class RepositorySnapshot:
    """Facts extracted from one cloned repository."""

    url: str
    last_commit_hash: str  # 40-char hex
    last_commit_date: datetime  # author timestamp, tz-aware
    last_commit_author: str
    last_commit_message: str  # first line only
    branch_count: int = 1
    commit_count: int = 0  # capped at ScanSettings.max_commits
    contributors: tuple[str, ...] = ()  # first-encounter order, no duplicates
    languages: tuple[str, ...] = ()


@dataclass(frozen=True)
class VulnerabilityDescriptor:
    """Static advisory record; not derived from the scanned repository."""

    cve: str
    severity: str
    affected_library: str
    current_version: str
    fixed_in_version: str
    description: str


@dataclass(frozen=True)
class ToolInfo:
    name: str
    version: str
    description: str


@dataclass(frozen=True)
class AnalysisReport:
    """Snapshot + advisory + generation time + tool metadata."""

    repository_info: RepositorySnapshot
    vulnerability_info: VulnerabilityDescriptor
    timestamp: datetime
    tool_info: ToolInfo = field(default_factory=lambda: ToolInfo("", "", ""))

    def to_dict(self) -> dict[str, Any]:
        repo = asdict(self.repository_info)
        repo["last_commit_date"] = self.repository_info.last_commit_date.isoformat()
        repo["contributors"] = list(self.repository_info.contributors)
        repo["languages"] = list(self.repository_info.languages)
        repo["vulnerability_info"] = asdict(self.vulnerability_info)
        return {
            "repository_info": repo,
            "timestamp": self.timestamp.isoformat(),
            "tool_info": asdict(self.tool_info),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisReport:
        """Rebuild a report from to_dict() output (e.g. a saved JSON file)."""
        repo = dict(data["repository_info"])
        vuln = repo.pop("vulnerability_info")
        snapshot = RepositorySnapshot(
            url=repo["url"],
            last_commit_hash=repo["last_commit_hash"],
            last_commit_date=datetime.fromisoformat(repo["last_commit_date"]),
            last_commit_author=repo["last_commit_author"],
            last_commit_message=repo["last_commit_message"],
            branch_count=repo.get("branch_count", 1),
            commit_count=repo.get("commit_count", 0),
            contributors=tuple(repo.get("contributors", [])),
            languages=tuple(repo.get("languages", [])),
        )
        return cls(
            repository_info=snapshot,
            vulnerability_info=VulnerabilityDescriptor(**vuln),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            tool_info=ToolInfo(**data.get("tool_info", {"name": "", "version": "", "description": ""})),
        )

    @classmethod
    def from_json(cls, text: str) -> AnalysisReport:
        return cls.from_dict(json.loads(text))
