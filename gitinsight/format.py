"""Terminal and JSON output — sectioned layout, optional colors, width control."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

import click

from .advisory import POTENTIAL_IMPACT, REMEDIATION, RENOVATE_INTEGRATION, AdvisoryDetails
from .errors import UnsupportedOutputFormatError
from .models import AnalysisReport

OUTPUT_FORMATS = ("console", "json")
SAVE_FORMATS = ("json", "text")
MAX_CONTRIBUTORS_SHOWN = 5
MIN_WIDTH = 40  # _wrap needs room for indent + text


def _get_width() -> int:
    try:
        return max(MIN_WIDTH, min(72, shutil.get_terminal_size((72, 24)).columns))
    except OSError:
        return 72


def _style(text: str, color: bool, **styles) -> str:
    """click.style when color output is wanted, plain text otherwise."""
    return click.style(text, **styles) if color else text


def _wrap(text: str, indent: int = 0, width: int = 72) -> List[str]:
    """Wrap text to width, first line has indent, following lines +2."""
    prefix = " " * indent
    extra = "  "
    lines = []
    rest = text
    first = True
    while rest:
        max_len = max(1, width - (indent if first else indent + len(extra)))
        if len(rest) <= max_len:
            lines.append(prefix + rest)
            break
        break_at = rest.rfind(" ", 0, max_len + 1)
        if break_at <= 0:
            break_at = max_len
        chunk = rest[:break_at].strip()
        rest = rest[break_at:].strip()
        lines.append(prefix + chunk)
        prefix = " " * indent + extra
        first = False
    return lines


def _heading(title: str, color: bool, fg: str, width: int) -> List[str]:
    return [
        _style(f" {title}", color, fg=fg, bold=True),
        _style("═" * width, color, fg=fg),
    ]


def _short_hash(sha: str) -> str:
    return sha[:12] + "..." if len(sha) > 12 else sha


def format_console(report: AnalysisReport, color: bool = True) -> str:
    """Build the human-readable report as a single string."""
    width = _get_width()
    info = report.repository_info
    vuln = report.vulnerability_info
    lines: List[str] = []

    lines.append("┌" + "─" * (width - 2) + "┐")
    lines.append(_style(" Git Repository Analysis Report", color, fg="blue", bold=True))
    lines.append("─" * width)

    lines.append(_style(" Repository Information", color, fg="cyan", bold=True))
    lines.extend(_wrap(f"URL: {info.url}", indent=3, width=width))
    lines.append(f"   Branches: {_style(str(info.branch_count), color, fg='green', bold=True)}")
    lines.append(f"   Commits Analyzed: {_style(str(info.commit_count), color, fg='green', bold=True)}")
    lines.append(f"   Contributors: {_style(str(len(info.contributors)), color, fg='green', bold=True)}")
    lines.append("")

    lines.append(_style(" Latest Commit", color, fg="magenta", bold=True))
    lines.append(f"   Hash: {_short_hash(info.last_commit_hash)}")
    lines.append(f"   Author: {info.last_commit_author}")
    lines.append(f"   Date: {info.last_commit_date.strftime('%Y-%m-%d %H:%M:%S')}")
    lines.extend(_wrap(f"Message: {info.last_commit_message}", indent=3, width=width))
    lines.append("")

    if info.languages:
        lines.append(_style(" Programming Languages Detected", color, fg="blue", bold=True))
        for lang in info.languages:
            lines.append(f"   • {lang}")
        lines.append("")

    if info.contributors:
        lines.append(_style(" Contributors", color, fg="green", bold=True))
        for name in info.contributors[:MAX_CONTRIBUTORS_SHOWN]:
            lines.append(f"   • {name}")
        hidden = len(info.contributors) - MAX_CONTRIBUTORS_SHOWN
        if hidden > 0:
            lines.append(_style(f"   ... and {hidden} more", color, dim=True))
        lines.append("")

    lines.extend(_heading("SECURITY VULNERABILITY", color, "red", width))
    lines.append(f" Vulnerability: {_style(vuln.cve, color, fg='red', bold=True)}")
    lines.append(f" Severity: {_style(vuln.severity, color, fg='red', bold=True)}")
    lines.append(f" Affected Library: {vuln.affected_library}")
    lines.append(f" Current Version: {vuln.current_version} {_style('(VULNERABLE)', color, fg='red', bold=True)}")
    lines.append(f" Fixed in Version: {vuln.fixed_in_version} {_style('(SECURE)', color, fg='green', bold=True)}")
    lines.append("")
    lines.append(" Description:")
    lines.extend(_wrap(vuln.description, indent=3, width=width))
    lines.append("")
    lines.append(_style(" Potential Impact:", color, fg="red", bold=True))
    for item in POTENTIAL_IMPACT:
        lines.extend(_wrap(f"• {item}", indent=3, width=width))
    lines.append("")
    lines.append(_style(" Remediation:", color, fg="green", bold=True))
    for item in REMEDIATION:
        lines.extend(_wrap(f"• {item}", indent=3, width=width))
    lines.append("")

    lines.extend(_heading("Renovate Integration", color, "cyan", width))
    lines.append(_style(" This project demonstrates how Renovate can help:", color, fg="green"))
    for item in RENOVATE_INTEGRATION:
        lines.extend(_wrap(f"• {item}", indent=3, width=width))
    lines.append("")

    lines.append("─" * width)
    lines.append(_style(" Analysis Metadata", color, fg="blue", bold=True))
    lines.append(f"   Tool: {report.tool_info.name} v{report.tool_info.version}")
    lines.append(f"   Timestamp: {report.timestamp.strftime('%Y-%m-%d %H:%M:%S %Z').rstrip()}")
    lines.extend(_wrap(f"Purpose: {report.tool_info.description}", indent=3, width=width))
    lines.append("└" + "─" * (width - 2) + "┘")

    return "\n".join(lines)


def format_json(report: AnalysisReport) -> str:
    return report.to_json()


def check_format(fmt: str, supported: tuple[str, ...] = OUTPUT_FORMATS) -> str:
    """Normalize fmt; raise UnsupportedOutputFormatError if it is not supported."""
    normalized = (fmt or "").strip().lower()
    if normalized not in supported:
        raise UnsupportedOutputFormatError(fmt, supported)
    return normalized


def render(report: AnalysisReport, fmt: str = "console", color: bool = True) -> str:
    """Render report as console text or JSON."""
    fmt = check_format(fmt)
    if fmt == "json":
        return format_json(report)
    return format_console(report, color=color)


def save_report(report: AnalysisReport, path: Path, fmt: str = "json") -> Path:
    """Write report to path as json or plain text. Format is checked before the file is created."""
    fmt = check_format(fmt, SAVE_FORMATS)
    text = format_json(report) if fmt == "json" else format_console(report, color=False)
    path = Path(path)
    path.write_text(text + "\n", encoding="utf-8")
    return path


def format_advisory(details: AdvisoryDetails, color: bool = True) -> str:
    """Text for the `vulnerability` command; no I/O."""
    d = details.descriptor
    bullet = _style("•", color, fg="red", bold=True)
    lines = [
        f"{_style(d.cve, color, fg='red', bold=True)} - {details.title}",
        "",
        f"{bullet} Severity: {d.severity}",
        f"{bullet} CVSS Score: {details.cvss_score}",
        f"{bullet} Affected Versions: {details.affected_versions}",
        f"{bullet} Current Version: {d.current_version} (VULNERABLE)",
        "",
        _style("Description:", color, fg="blue", bold=True),
    ]
    lines.extend(f"  {ln}" for ln in details.summary)
    lines.append("")
    lines.append(_style("Impact:", color, fg="yellow", bold=True))
    lines.extend(f"  • {ln}" for ln in details.impact)
    lines.append("")
    lines.append(_style("Mitigation:", color, fg="green", bold=True))
    lines.extend(f"  {ln}" for ln in details.mitigation)
    lines.append("")
    lines.append(f"{_style('Reference:', color, fg='blue', bold=True)} {details.reference}")
    return "\n".join(lines)
