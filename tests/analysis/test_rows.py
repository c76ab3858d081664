"""Tests for dependency row and project table construction."""

from sca_report.analysis.reporter_input import ReporterInput
from sca_report.analysis.resolvable import issue_builder
from sca_report.analysis.rows import build_dependency_row, build_project_table
from sca_report.models.identifier import Identifier
from sca_report.models.issue import Issue, Severity
from sca_report.models.license import LicenseSource
from sca_report.models.result import AnalysisResult, Project, RemoteArtifact, VcsInfo

APP_ID = Identifier.from_coordinates("Maven:com.example:app:1.0")
DEMO_ID = Identifier.from_coordinates("Maven:com.example:demo:1.0")
LIB_A_ID = Identifier.from_coordinates("Maven:org.lib:a:1.0")
LIB_B_ID = Identifier.from_coordinates("Maven:org.lib:b:2.0")
JUNIT_ID = Identifier.from_coordinates("Maven:junit:junit:4.13")


def _input(result: AnalysisResult) -> ReporterInput:
    return ReporterInput.create(result)


def _builder(reporter_input: ReporterInput):
    return issue_builder(reporter_input.resolution_provider, reporter_input.how_to_fix_text_provider)


def _project(result: AnalysisResult, id: Identifier) -> Project:
    project = result.get_project(id)
    assert project is not None
    return project


class TestBuildDependencyRow:
    """Tests for build_dependency_row."""

    def test_package_row(self, analysis_result: AnalysisResult) -> None:
        """Test the licenses, artifacts and scopes of a package row."""
        reporter_input = _input(analysis_result)
        project = _project(analysis_result, APP_ID)

        row, issue_row = build_dependency_row(
            LIB_A_ID, project, reporter_input, _builder(reporter_input), {"compile": []}, []
        )

        assert row.id == LIB_A_ID
        assert row.source_artifact.url == "https://repo.example.com/a-1.0-sources.jar"
        assert row.vcs_info.url == "https://example.com/a.git"
        assert row.scopes == {"compile": []}
        assert [str(license) for license in row.declared_licenses] == ["MIT"]
        assert row.detected_licenses == []
        assert row.effective_license == "MIT"
        assert row.concluded_license is None
        # The only issue of lib-a is resolved
        assert issue_row is None

    def test_resolved_analyzer_issue(self, analysis_result: AnalysisResult) -> None:
        """Test that analyzer result issues are resolved and described."""
        reporter_input = _input(analysis_result)
        project = _project(analysis_result, APP_ID)

        row, _ = build_dependency_row(
            LIB_A_ID, project, reporter_input, _builder(reporter_input), {}, []
        )

        assert len(row.analyzer_issues) == 1
        issue = row.analyzer_issues[0]
        assert issue.is_resolved
        assert issue.severity is Severity.WARNING
        assert issue.resolution_description == "\nResolved by: CANT_FIX_ISSUE - known"

    def test_unresolved_issues_create_issue_row(self, analysis_result: AnalysisResult) -> None:
        """Test that unresolved issues are attributed to the project."""
        reporter_input = _input(analysis_result)
        project = _project(analysis_result, APP_ID)
        checksum = Issue(source="Maven", message="Checksum mismatch")

        row, issue_row = build_dependency_row(
            LIB_B_ID, project, reporter_input, _builder(reporter_input), {"compile": []}, [checksum]
        )

        assert [issue.description for issue in row.analyzer_issues] == ["Maven - Checksum mismatch"]
        assert [issue.description for issue in row.scan_issues] == ["ScanCode - Timeout after 300s"]
        assert issue_row is not None
        assert issue_row.id == LIB_B_ID
        assert list(issue_row.analyzer_issues) == [APP_ID]
        assert list(issue_row.scan_issues) == [APP_ID]

    def test_effective_license_applies_package_choice(self, analysis_result: AnalysisResult) -> None:
        """Test that package license choices and detected licenses shape the effective license."""
        reporter_input = _input(analysis_result)
        project = _project(analysis_result, APP_ID)

        row, _ = build_dependency_row(
            LIB_B_ID, project, reporter_input, _builder(reporter_input), {}, []
        )

        assert [str(license) for license in row.detected_licenses] == ["BSD-3-Clause"]
        assert all(LicenseSource.DETECTED in license.sources for license in row.detected_licenses)
        assert row.effective_license == "BSD-3-Clause AND MIT"

    def test_excluded_package_creates_no_issue_row(self, analysis_result: AnalysisResult) -> None:
        """Test that unresolved issues of excluded packages are not summarized."""
        reporter_input = _input(analysis_result)
        project = _project(analysis_result, APP_ID)
        download = Issue(source="Maven", message="Could not download")

        row, issue_row = build_dependency_row(
            JUNIT_ID, project, reporter_input, _builder(reporter_input), {}, [download]
        )

        assert not row.analyzer_issues[0].is_resolved
        assert issue_row is None

    def test_project_row_has_empty_artifacts(self, analysis_result: AnalysisResult) -> None:
        """Test that the project's own row has no source artifact or VCS info."""
        reporter_input = _input(analysis_result)
        project = _project(analysis_result, APP_ID)

        row, issue_row = build_dependency_row(
            APP_ID, project, reporter_input, _builder(reporter_input), {}, []
        )

        assert row.source_artifact == RemoteArtifact.EMPTY
        assert row.vcs_info == VcsInfo.EMPTY
        assert row.effective_license == "Apache-2.0"
        assert issue_row is None

    def test_issues_sorted_by_severity(self, analysis_result: AnalysisResult) -> None:
        """Test that row issues are ordered most severe first."""
        reporter_input = _input(analysis_result)
        project = _project(analysis_result, APP_ID)
        issues = [
            Issue(source="Maven", message="hint", severity=Severity.HINT),
            Issue(source="Maven", message="error", severity=Severity.ERROR),
        ]

        row, _ = build_dependency_row(
            JUNIT_ID, project, reporter_input, _builder(reporter_input), {}, issues
        )

        assert [issue.severity for issue in row.analyzer_issues] == [Severity.ERROR, Severity.HINT]


class TestBuildProjectTable:
    """Tests for build_project_table."""

    def test_rows_sorted_by_id(self, analysis_result: AnalysisResult) -> None:
        """Test that the project and all dependencies get one row each, in id order."""
        reporter_input = _input(analysis_result)
        project = _project(analysis_result, APP_ID)

        table, _ = build_project_table(project, reporter_input, _builder(reporter_input))

        assert [row.id for row in table.rows] == [APP_ID, JUNIT_ID, LIB_A_ID, LIB_B_ID]
        assert table.full_definition_file_path == "pom.xml"
        assert not table.is_excluded

    def test_scope_excludes_on_rows(self, analysis_result: AnalysisResult) -> None:
        """Test that rows carry the excludes of their scopes."""
        reporter_input = _input(analysis_result)
        project = _project(analysis_result, APP_ID)

        table, _ = build_project_table(project, reporter_input, _builder(reporter_input))
        rows = {row.id: row for row in table.rows}

        assert rows[APP_ID].scopes == {}
        assert list(rows[JUNIT_ID].scopes) == ["test"]
        assert rows[JUNIT_ID].scopes["test"][0].reason == "TEST_DEPENDENCY_OF"

    def test_issue_rows_of_project(self, analysis_result: AnalysisResult) -> None:
        """Test that only unresolved issues of included packages are collected."""
        reporter_input = _input(analysis_result)
        project = _project(analysis_result, APP_ID)

        _, issue_rows = build_project_table(project, reporter_input, _builder(reporter_input))

        assert [row.id for row in issue_rows] == [LIB_B_ID]

    def test_excluded_project_table(self, analysis_result: AnalysisResult) -> None:
        """Test that projects in excluded paths are flagged."""
        reporter_input = _input(analysis_result)
        project = _project(analysis_result, DEMO_ID)

        table, issue_rows = build_project_table(project, reporter_input, _builder(reporter_input))

        assert table.is_excluded
        assert table.full_definition_file_path == "examples/demo/pom.xml"
        assert [row.id for row in table.rows] == [DEMO_ID, LIB_B_ID]
        # lib-b is still included through the app project
        assert [row.id for row in issue_rows] == [LIB_B_ID]
