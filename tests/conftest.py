"""Shared fixtures for sca-report tests."""

import pytest
from click.testing import CliRunner

from sca_report.models.config import (
    Excludes,
    IssueResolution,
    LicenseChoices,
    PathExclude,
    RepositoryConfiguration,
    Resolutions,
    RuleViolationResolution,
    ScopeExclude,
)
from sca_report.models.identifier import Identifier
from sca_report.models.issue import Issue, RuleViolation, Severity
from sca_report.models.license import LicenseChoice, PackageLicenseChoice
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

APP_ID = Identifier.from_coordinates("Maven:com.example:app:1.0")
DEMO_ID = Identifier.from_coordinates("Maven:com.example:demo:1.0")
LIB_A_ID = Identifier.from_coordinates("Maven:org.lib:a:1.0")
LIB_B_ID = Identifier.from_coordinates("Maven:org.lib:b:2.0")
JUNIT_ID = Identifier.from_coordinates("Maven:junit:junit:4.13")

CHECKSUM_ISSUE = Issue(source="Maven", message="Checksum mismatch")
DOWNLOAD_ISSUE = Issue(source="Maven", message="Could not download")
RESOLVE_ISSUE = Issue(source="Maven", message="Timeout while resolving", severity=Severity.WARNING)
SCAN_ISSUE = Issue(source="ScanCode", message="Timeout after 300s")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def analysis_result() -> AnalysisResult:
    """Provide an analysis result with an included and an excluded project.

    The app project depends on lib-a and lib-b in its compile scope and on
    junit in its excluded test scope. The demo project lives in an excluded
    path and depends on lib-b.
    """
    app = Project(
        id=APP_ID,
        definition_file_path="pom.xml",
        declared_licenses=["Apache-2.0"],
        scopes=[
            Scope(
                name="compile",
                dependencies=[
                    PackageReference(
                        id=LIB_A_ID,
                        dependencies=[PackageReference(id=LIB_B_ID, issues=[CHECKSUM_ISSUE])],
                    )
                ],
            ),
            Scope(
                name="test",
                dependencies=[PackageReference(id=JUNIT_ID, issues=[DOWNLOAD_ISSUE])],
            ),
        ],
    )
    demo = Project(
        id=DEMO_ID,
        definition_file_path="examples/demo/pom.xml",
        scopes=[Scope(name="compile", dependencies=[PackageReference(id=LIB_B_ID)])],
    )
    packages = [
        Package(
            id=LIB_A_ID,
            declared_licenses=["MIT"],
            source_artifact=RemoteArtifact(url="https://repo.example.com/a-1.0-sources.jar"),
            vcs_processed=VcsInfo(type="Git", url="https://example.com/a.git", revision="1.0"),
        ),
        Package(id=LIB_B_ID, declared_licenses=["MIT OR Apache-2.0"]),
        Package(id=JUNIT_ID, declared_licenses=["EPL-1.0"]),
    ]
    config = RepositoryConfiguration(
        excludes=Excludes(
            paths=[PathExclude(pattern="examples/**", reason="EXAMPLE_OF", comment="demo code")],
            scopes=[ScopeExclude(pattern="test", reason="TEST_DEPENDENCY_OF", comment="tests only")],
        ),
        resolutions=Resolutions(
            issues=[IssueResolution(message="Timeout while resolving", reason="CANT_FIX_ISSUE", comment="known")],
            rule_violations=[
                RuleViolationResolution(message=".*GPL.*", reason="CANT_FIX_EXCEPTION", comment="approved")
            ],
        ),
        license_choices=LicenseChoices(
            package_license_choices=[
                PackageLicenseChoice(
                    package_id=LIB_B_ID,
                    license_choices=[LicenseChoice(given="MIT OR Apache-2.0", choice="MIT")],
                )
            ]
        ),
    )
    violations = [
        RuleViolation(rule="B_RULE", pkg=LIB_A_ID, severity=Severity.WARNING, message="warn"),
        RuleViolation(rule="A_RULE", severity=Severity.ERROR, message="Copyleft GPL"),
        RuleViolation(rule="Z_RULE", pkg=LIB_B_ID, license="MIT", severity=Severity.ERROR, message="err"),
        RuleViolation(rule="A_RULE", pkg=LIB_B_ID, severity=Severity.HINT, message="hint"),
    ]

    return AnalysisResult(
        repository=Repository(
            vcs_processed=VcsInfo(type="Git", url="https://example.com/app.git", revision="main"),
            config=config,
        ),
        analyzer=AnalyzerResult(
            # Projects in reverse id order to check sorting
            projects=[demo, app],
            packages=packages,
            issues={LIB_A_ID: [RESOLVE_ISSUE]},
        ),
        scanner=ScannerRun(
            scan_results={
                LIB_B_ID: [
                    ScanResult(
                        scanner="ScanCode",
                        summary=ScanSummary(
                            license_findings=[LicenseFinding(license="BSD-3-Clause", path="LICENSE")],
                            issues=[SCAN_ISSUE],
                        ),
                    )
                ]
            }
        ),
        evaluator=EvaluatorRun(violations=violations),
        labels={"ort.cli.version": "1.0", "version": "2"},
    )
