"""Pydantic data models for sca-report."""

from sca_report.models.config import (
    Excludes,
    HowToFixRule,
    IssueResolution,
    LicenseChoices,
    PathExclude,
    ReporterConfig,
    RepositoryConfiguration,
    Resolutions,
    RuleViolationResolution,
    ScopeExclude,
)
from sca_report.models.identifier import Identifier
from sca_report.models.issue import Issue, RuleViolation, Severity
from sca_report.models.license import (
    LicenseChoice,
    LicenseSource,
    LicenseView,
    PackageLicenseChoice,
    ResolvedLicense,
)
from sca_report.models.options import Verbosity
from sca_report.models.result import (
    AnalysisResult,
    AnalyzerResult,
    EvaluatorRun,
    LicenseFinding,
    Package,
    PackageReference,
    Project,
    RemoteArtifact,
    Repository,
    ScannerRun,
    ScanResult,
    ScanSummary,
    Scope,
    VcsInfo,
)
from sca_report.models.table import (
    DependencyRow,
    IssueRow,
    IssueTable,
    ProjectTable,
    ReportTableModel,
    ResolvableIssue,
    ResolvableViolation,
)

__all__ = [
    "AnalysisResult",
    "AnalyzerResult",
    "DependencyRow",
    "EvaluatorRun",
    "Excludes",
    "HowToFixRule",
    "Identifier",
    "Issue",
    "IssueResolution",
    "IssueRow",
    "IssueTable",
    "LicenseChoice",
    "LicenseChoices",
    "LicenseFinding",
    "LicenseSource",
    "LicenseView",
    "Package",
    "PackageLicenseChoice",
    "PackageReference",
    "PathExclude",
    "Project",
    "ProjectTable",
    "RemoteArtifact",
    "ReportTableModel",
    "ReporterConfig",
    "Repository",
    "RepositoryConfiguration",
    "ResolvableIssue",
    "ResolvableViolation",
    "ResolvedLicense",
    "Resolutions",
    "RuleViolation",
    "RuleViolationResolution",
    "ScanResult",
    "ScanSummary",
    "ScannerRun",
    "Scope",
    "ScopeExclude",
    "Severity",
    "VcsInfo",
    "Verbosity",
]
