"""Report table mapping logic for sca-report."""
from sca_report.analysis.aggregation import IssueSummaryAggregator, build_issue_table
from sca_report.analysis.exclusion import (
    path_excludes_for_project,
    scopes_for_dependencies,
)
from sca_report.analysis.mapper import (
    map_report_table_model,
    strip_label_prefixes,
    violation_sort_key,
)
from sca_report.analysis.reporter_input import ReporterInput
from sca_report.analysis.resolvable import (
    ResolutionStatus,
    ResolvableBuilder,
    describe_resolutions,
    filter_unresolved,
    issue_builder,
    to_resolvable_issue,
    to_resolvable_violation,
    violation_builder,
)
from sca_report.analysis.rows import (
    ProjectTableResult,
    RowResult,
    build_dependency_row,
    build_project_table,
)

__all__ = [
    "IssueSummaryAggregator",
    "ProjectTableResult",
    "ReporterInput",
    "ResolutionStatus",
    "ResolvableBuilder",
    "RowResult",
    "build_dependency_row",
    "build_issue_table",
    "build_project_table",
    "describe_resolutions",
    "filter_unresolved",
    "issue_builder",
    "map_report_table_model",
    "path_excludes_for_project",
    "scopes_for_dependencies",
    "strip_label_prefixes",
    "to_resolvable_issue",
    "to_resolvable_violation",
    "violation_builder",
    "violation_sort_key",
]
