"""Static advisory for the git library this tool is pinned against."""

from dataclasses import dataclass

from .models import VulnerabilityDescriptor

ADVISORY = VulnerabilityDescriptor(
    cve="CVE-2023-49568",
    severity="HIGH",
    affected_library="github.com/go-git/go-git/v5",
    current_version="5.4.2",
    fixed_in_version="5.11.0",
    description="Path traversal vulnerability allowing unauthorized file system access during Git operations",
)


@dataclass(frozen=True)
class AdvisoryDetails:
    """Long-form advisory shown by the `vulnerability` command."""

    descriptor: VulnerabilityDescriptor
    title: str
    cvss_score: float
    affected_versions: str
    summary: tuple[str, ...]
    impact: tuple[str, ...]
    mitigation: tuple[str, ...]
    reference: str


ADVISORY_DETAILS = AdvisoryDetails(
    descriptor=ADVISORY,
    title="Path Traversal Vulnerability in go-git",
    cvss_score=7.5,
    affected_versions="< 5.11.0",
    summary=(
        "The go-git library is vulnerable to path traversal attacks when",
        "processing Git repositories. An attacker could potentially access",
        "files outside the intended directory structure during Git operations.",
    ),
    impact=(
        "Unauthorized file system access",
        "Potential data exfiltration",
        "Directory traversal attacks",
    ),
    mitigation=(
        "Update go-git to version 5.11.0 or later",
        "This vulnerability demonstrates why automated dependency",
        "updates with tools like Renovate are crucial for security.",
    ),
    reference="https://cve.mitre.org/cgi-bin/cvename.cgi?name=CVE-2023-49568",
)

# Shown in the report's vulnerability section
POTENTIAL_IMPACT = (
    "Unauthorized file system access during Git operations",
    "Potential data exfiltration through path traversal",
    "Compromise of application security boundaries",
)
REMEDIATION = (
    "Update go-git library to version 5.11.0 or later",
    "Enable Renovate to automatically detect and fix such vulnerabilities",
    "Implement regular security audits of dependencies",
)
RENOVATE_INTEGRATION = (
    "Automatically detect vulnerable dependencies",
    "Create pull requests to update to secure versions",
    "Maintain up-to-date security posture",
    "Reduce manual overhead of dependency management",
)
