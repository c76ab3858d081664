"""Report table model: the normalized, sorted view of an analysis result.

The report table model is what renderers consume. All tables are built fresh
from one analysis result and are not modified afterwards.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, computed_field

from sca_report.models.config import PathExclude, RepositoryConfiguration, ScopeExclude
from sca_report.models.identifier import Identifier
from sca_report.models.issue import RuleViolation, Severity
from sca_report.models.license import ResolvedLicense
from sca_report.models.result import Project, RemoteArtifact, VcsInfo


class ResolvableIssue(BaseModel):
    """An issue together with its resolution status."""

    model_config = {"frozen": True, "extra": "forbid"}

    source: str = Field(description="Tool or component that raised the issue")
    description: str = Field(description="Human readable issue description")
    resolution_description: str = Field(
        default="",
        description="Text describing the matching resolutions, empty if unresolved",
    )
    is_resolved: bool = Field(default=False, description="True if any resolution matched")
    severity: Severity = Field(default=Severity.ERROR, description="Issue severity")
    how_to_fix: str = Field(default="", description="Remediation text")

    def sort_key(self) -> tuple[int, str, str, str]:
        """Most severe first, then by source, description and resolution text."""
        return (
            -self.severity.rank,
            self.source,
            self.description,
            self.resolution_description,
        )


class ResolvableViolation(BaseModel):
    """A rule violation together with its resolution status."""

    model_config = {"frozen": True, "extra": "forbid"}

    violation: RuleViolation
    resolution_description: str = ""
    is_resolved: bool = False


class DependencyRow(BaseModel):
    """One row of a project table, describing a single dependency or the project itself."""

    model_config = {"frozen": True, "extra": "forbid"}

    id: Identifier
    source_artifact: RemoteArtifact = Field(default_factory=RemoteArtifact)
    vcs_info: VcsInfo = Field(default_factory=VcsInfo)
    scopes: Dict[str, List[ScopeExclude]] = Field(
        default_factory=dict,
        description="Scope excludes by scope name, sorted by scope name",
    )
    concluded_license: Optional[str] = None
    declared_licenses: List[ResolvedLicense] = Field(default_factory=list)
    detected_licenses: List[ResolvedLicense] = Field(default_factory=list)
    effective_license: Optional[str] = None
    analyzer_issues: List[ResolvableIssue] = Field(default_factory=list)
    scan_issues: List[ResolvableIssue] = Field(default_factory=list)


def _merge_issue_maps(
    left: Dict[Identifier, List[ResolvableIssue]],
    right: Dict[Identifier, List[ResolvableIssue]],
) -> Dict[Identifier, List[ResolvableIssue]]:
    merged: Dict[Identifier, List[ResolvableIssue]] = {}
    for key in sorted(left.keys() | right.keys()):
        if key in left and key in right:
            issues = set(left[key]) | set(right[key])
            merged[key] = sorted(issues, key=ResolvableIssue.sort_key)
        else:
            merged[key] = list(left[key] if key in left else right[key])
    return merged


class IssueRow(BaseModel):
    """Unresolved issues of one package, grouped by the projects that depend on it."""

    model_config = {"frozen": True, "extra": "forbid"}

    id: Identifier
    analyzer_issues: Dict[Identifier, List[ResolvableIssue]] = Field(default_factory=dict)
    scan_issues: Dict[Identifier, List[ResolvableIssue]] = Field(default_factory=dict)

    def merge(self, other: IssueRow) -> IssueRow:
        """Merge two rows of the same package.

        Per project, the issue lists of both rows are united. The merge is
        commutative and associative.

        Raises:
            ValueError: If the rows belong to different packages.
        """
        if other.id != self.id:
            raise ValueError(f"Cannot merge issue rows of '{self.id}' and '{other.id}'")

        return IssueRow(
            id=self.id,
            analyzer_issues=_merge_issue_maps(self.analyzer_issues, other.analyzer_issues),
            scan_issues=_merge_issue_maps(self.scan_issues, other.scan_issues),
        )


class ProjectTable(BaseModel):
    """Dependency rows of a single project."""

    model_config = {"frozen": True, "extra": "forbid"}

    rows: List[DependencyRow] = Field(default_factory=list)
    full_definition_file_path: str = Field(
        default="",
        description="Definition file path relative to the analysis root",
    )
    path_excludes: List[PathExclude] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_excluded(self) -> bool:
        """True if the project's definition file is excluded."""
        return len(self.path_excludes) > 0


class IssueTable(BaseModel):
    """Cross-project summary of unresolved issues, sorted by package id."""

    model_config = {"frozen": True, "extra": "forbid"}

    rows: List[IssueRow] = Field(default_factory=list)

    @property
    def analyzer_issue_count(self) -> int:
        return sum(
            len(issues) for row in self.rows for issues in row.analyzer_issues.values()
        )

    @property
    def scan_issue_count(self) -> int:
        return sum(len(issues) for row in self.rows for issues in row.scan_issues.values())


class ReportTableModel(BaseModel):
    """Top-level report table model handed to renderers."""

    model_config = {"frozen": True, "extra": "forbid"}

    vcs_info: VcsInfo = Field(default_factory=VcsInfo)
    config: RepositoryConfiguration = Field(default_factory=RepositoryConfiguration)
    rule_violations: List[ResolvableViolation] = Field(default_factory=list)
    issue_summary: IssueTable = Field(default_factory=IssueTable)
    project_dependencies: Dict[Project, ProjectTable] = Field(
        default_factory=dict,
        description="Project tables keyed by project, ordered by project id",
    )
    labels: Dict[str, str] = Field(default_factory=dict)

    @property
    def unresolved_violation_count(self) -> int:
        return sum(1 for violation in self.rule_violations if not violation.is_resolved)

    @property
    def has_unresolved_findings(self) -> bool:
        """True if any unresolved issue or rule violation remains."""
        return bool(self.issue_summary.rows) or self.unresolved_violation_count > 0
