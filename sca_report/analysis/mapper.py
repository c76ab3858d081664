"""Map an analysis result to the report table model."""

from __future__ import annotations

import logging
from typing import Any

from sca_report.analysis.aggregation import build_issue_table
from sca_report.analysis.reporter_input import ReporterInput
from sca_report.analysis.resolvable import (
    issue_builder,
    to_resolvable_violation,
    violation_builder,
)
from sca_report.analysis.rows import build_project_table
from sca_report.constants import LABEL_PREFIX_SEPARATOR
from sca_report.models.result import Project
from sca_report.models.table import (
    IssueRow,
    ProjectTable,
    ReportTableModel,
    ResolvableViolation,
)

logger = logging.getLogger(__name__)


def violation_sort_key(resolvable: ResolvableViolation) -> tuple[Any, ...]:
    """Sort key for rule violations.

    Unresolved violations come first, then the most severe ones. Remaining
    ties are broken by rule name, package id (absent first), license,
    message and resolution description.
    """
    violation = resolvable.violation
    return (
        resolvable.is_resolved,
        -violation.severity.rank,
        violation.rule,
        (violation.pkg is not None, violation.pkg.sort_key() if violation.pkg else ()),
        violation.license or "",
        violation.message,
        resolvable.resolution_description,
    )


def strip_label_prefixes(labels: dict[str, str]) -> dict[str, str]:
    """Drop everything up to and including the first '.' from each label key.

    Keys without a '.' are kept as they are. If stripped keys collide, the
    label inserted last wins.
    """
    stripped: dict[str, str] = {}
    for key, value in labels.items():
        _, separator, rest = key.partition(LABEL_PREFIX_SEPARATOR)
        new_key = rest if separator else key
        if new_key in stripped:
            logger.debug("Label '%s' overwrites an earlier label with the same name", key)
        stripped[new_key] = value
    return stripped


def map_report_table_model(reporter_input: ReporterInput) -> ReportTableModel:
    """Map the analysis result of the input to a report table model.

    Project tables are built first; their issue row candidates are then
    folded into the issue summary. All sorting happens after every project
    has been processed.

    Args:
        reporter_input: Analysis result and the services used to map it.

    Returns:
        ReportTableModel with sorted project tables, issue summary and rule
        violations.
    """
    result = reporter_input.result
    issues = issue_builder(
        reporter_input.resolution_provider, reporter_input.how_to_fix_text_provider
    )

    project_tables: dict[Project, ProjectTable] = {}
    candidates: list[IssueRow] = []
    for project in result.projects:
        table, issue_rows = build_project_table(project, reporter_input, issues)
        project_tables[project] = table
        candidates.extend(issue_rows)

    sorted_tables = {
        project: project_tables[project]
        for project in sorted(project_tables, key=lambda project: project.id)
    }

    violations = violation_builder(reporter_input.resolution_provider)
    rule_violations = sorted(
        (to_resolvable_violation(violation, violations) for violation in result.get_rule_violations()),
        key=violation_sort_key,
    )

    logger.debug(
        "Mapped %d projects, %d issue row candidates and %d rule violations",
        len(sorted_tables),
        len(candidates),
        len(rule_violations),
    )

    return ReportTableModel(
        vcs_info=result.repository.vcs_processed,
        config=result.repository.config,
        rule_violations=rule_violations,
        issue_summary=build_issue_table(candidates),
        project_dependencies=sorted_tables,
        labels=strip_label_prefixes(result.labels),
    )
