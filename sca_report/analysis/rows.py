"""Dependency row construction for project tables.

Building a row is a pure function of the reporter input: it returns the row
and, if the dependency carries unresolved issues and is not excluded, the
issue row candidate that feeds the cross-project issue summary.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from sca_report.analysis.exclusion import path_excludes_for_project, scopes_for_dependencies
from sca_report.analysis.reporter_input import ReporterInput
from sca_report.analysis.resolvable import (
    ResolvableBuilder,
    filter_unresolved,
    to_resolvable_issue,
)
from sca_report.models.config import ScopeExclude
from sca_report.models.identifier import Identifier
from sca_report.models.issue import Issue
from sca_report.models.license import LicenseSource, LicenseView
from sca_report.models.result import Project, RemoteArtifact, VcsInfo
from sca_report.models.table import DependencyRow, IssueRow, ProjectTable, ResolvableIssue

logger = logging.getLogger(__name__)


class RowResult(NamedTuple):
    """A dependency row and its issue summary candidate, if any."""

    row: DependencyRow
    issue_row: Optional[IssueRow]


class ProjectTableResult(NamedTuple):
    """A project table and the issue summary candidates of its rows."""

    table: ProjectTable
    issue_rows: list[IssueRow]


def _resolvable_issues(
    issues: list[Issue], builder: ResolvableBuilder[Issue]
) -> list[ResolvableIssue]:
    resolvable = [to_resolvable_issue(issue, builder) for issue in issues]
    return sorted(resolvable, key=ResolvableIssue.sort_key)


def build_dependency_row(
    id: Identifier,
    project: Project,
    reporter_input: ReporterInput,
    builder: ResolvableBuilder[Issue],
    scopes: dict[str, list[ScopeExclude]],
    project_issues: list[Issue],
) -> RowResult:
    """Build the row of a single id within a project.

    Args:
        id: The dependency (or project) id the row describes.
        project: The project whose table the row belongs to.
        reporter_input: Analysis result and services.
        builder: Resolvable builder for issues.
        scopes: Scope excludes by scope name for this id within the project.
        project_issues: Issues attached to this id in the project's graph.

    Returns:
        RowResult with the row and, when the id has unresolved issues and is
        not excluded, an issue row attributing them to the project.
    """
    result = reporter_input.result
    resolved_license_info = reporter_input.license_info_resolver.resolve_license_info(id)

    declared_licenses = sorted(
        resolved_license_info.filter(lambda lic: LicenseSource.DECLARED in lic.sources),
        key=str,
    )
    detected_licenses = sorted(
        resolved_license_info.filter(lambda lic: LicenseSource.DETECTED in lic.sources),
        key=str,
    )
    effective_license = resolved_license_info.filter_excluded().effective_license(
        LicenseView.CONCLUDED_OR_DECLARED_AND_DETECTED,
        result.get_package_license_choices(id),
        result.get_repository_license_choices(),
    )

    analyzer_result_issues = result.analyzer.issues.get(id, []) if result.analyzer else []
    analyzer_issues = list(project_issues) + list(analyzer_result_issues)

    scan_issues: set[Issue] = set()
    for scan_result in result.get_scan_results_for_id(id):
        scan_issues.update(scan_result.summary.issues)

    package = result.get_package(id)
    row = DependencyRow(
        id=id,
        source_artifact=package.source_artifact if package else RemoteArtifact.EMPTY,
        vcs_info=package.vcs_processed if package else VcsInfo.EMPTY,
        scopes=dict(sorted(scopes.items())),
        concluded_license=resolved_license_info.concluded_license,
        declared_licenses=declared_licenses,
        detected_licenses=detected_licenses,
        effective_license=effective_license,
        analyzer_issues=_resolvable_issues(analyzer_issues, builder),
        scan_issues=_resolvable_issues(list(scan_issues), builder),
    )

    unresolved_analyzer_issues = filter_unresolved(row.analyzer_issues)
    unresolved_scan_issues = filter_unresolved(row.scan_issues)
    if not unresolved_analyzer_issues and not unresolved_scan_issues:
        return RowResult(row, None)

    if result.is_excluded(id):
        logger.debug("Not summarizing issues of excluded '%s'", id)
        return RowResult(row, None)

    issue_row = IssueRow(
        id=id,
        analyzer_issues={project.id: unresolved_analyzer_issues} if unresolved_analyzer_issues else {},
        scan_issues={project.id: unresolved_scan_issues} if unresolved_scan_issues else {},
    )
    return RowResult(row, issue_row)


def build_project_table(
    project: Project,
    reporter_input: ReporterInput,
    builder: ResolvableBuilder[Issue],
) -> ProjectTableResult:
    """Build the table of a project and collect its issue summary candidates.

    The table has one row per distinct id of the project and its transitive
    dependencies, in ascending id order.

    Args:
        project: The project to build the table for.
        reporter_input: Analysis result and services.
        builder: Resolvable builder for issues.

    Returns:
        ProjectTableResult with the table and the issue row candidates.
    """
    result = reporter_input.result
    navigator = result.dependency_navigator

    scopes_by_id = scopes_for_dependencies(project, result.get_excludes(), navigator)
    path_excludes = path_excludes_for_project(project, result)
    issues_by_id = navigator.project_issues(project)

    all_ids = sorted({project.id} | navigator.project_dependencies(project))

    rows: list[DependencyRow] = []
    issue_rows: list[IssueRow] = []
    for id in all_ids:
        row, issue_row = build_dependency_row(
            id,
            project,
            reporter_input,
            builder,
            scopes_by_id.get(id, {}),
            issues_by_id.get(id, []),
        )
        rows.append(row)
        if issue_row is not None:
            issue_rows.append(issue_row)

    logger.debug(
        "Built table for project '%s' with %d rows and %d issue rows",
        project.id,
        len(rows),
        len(issue_rows),
    )

    table = ProjectTable(
        rows=rows,
        full_definition_file_path=result.get_definition_file_path_relative_to_analyzer_root(project),
        path_excludes=path_excludes,
    )
    return ProjectTableResult(table, issue_rows)
