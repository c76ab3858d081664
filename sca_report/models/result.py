"""Analysis result snapshot models.

The analysis result is the immutable input of the report table mapper. It
bundles the repository information, the analyzer's projects and packages, the
scanner's results and the evaluator's rule violations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Dict, List, Optional

from pydantic import BaseModel, Field, PrivateAttr

from sca_report.models.config import Excludes, RepositoryConfiguration
from sca_report.models.identifier import Identifier
from sca_report.models.issue import Issue, RuleViolation
from sca_report.models.license import LicenseChoice

if TYPE_CHECKING:
    from sca_report.resolvers.navigator import DependencyNavigator


class VcsInfo(BaseModel):
    """Version control information."""

    model_config = {"frozen": True, "extra": "forbid"}

    EMPTY: ClassVar[VcsInfo]

    type: str = Field(default="", description="VCS type, e.g. 'Git'")
    url: str = Field(default="", description="Repository URL")
    revision: str = Field(default="", description="Revision or commit")
    path: str = Field(default="", description="Path inside the repository")

    def matches_repository(self, other: VcsInfo) -> bool:
        """Check if both refer to the same repository, ignoring revision and path."""
        return (
            self.type.lower() == other.type.lower()
            and self.url.rstrip("/") == other.url.rstrip("/")
        )


class RemoteArtifact(BaseModel):
    """A remotely stored artifact, e.g. a source archive."""

    model_config = {"frozen": True, "extra": "forbid"}

    EMPTY: ClassVar[RemoteArtifact]

    url: str = Field(default="", description="Download URL")
    hash: str = Field(default="", description="Checksum of the artifact")


VcsInfo.EMPTY = VcsInfo()
RemoteArtifact.EMPTY = RemoteArtifact()


class PackageReference(BaseModel):
    """A node in a scope's dependency tree."""

    model_config = {"extra": "forbid"}

    id: Identifier
    dependencies: List[PackageReference] = Field(default_factory=list)
    issues: List[Issue] = Field(default_factory=list)


class Scope(BaseModel):
    """A named group of dependencies, e.g. 'compile' or 'test'."""

    model_config = {"extra": "forbid"}

    name: str
    dependencies: List[PackageReference] = Field(default_factory=list)


class Project(BaseModel):
    """A project found by the analyzer.

    Projects hash by their identifier so they can key the report's project
    tables.
    """

    model_config = {"extra": "forbid"}

    id: Identifier
    definition_file_path: str = Field(
        default="",
        description="Path of the definition file relative to the project's VCS root",
    )
    declared_licenses: List[str] = Field(default_factory=list)
    vcs_processed: VcsInfo = Field(default_factory=VcsInfo)
    scopes: List[Scope] = Field(default_factory=list)

    def __hash__(self) -> int:
        return hash(self.id)


class Package(BaseModel):
    """A package the projects depend on."""

    model_config = {"extra": "forbid"}

    id: Identifier
    declared_licenses: List[str] = Field(default_factory=list)
    concluded_license: Optional[str] = None
    source_artifact: RemoteArtifact = Field(default_factory=RemoteArtifact)
    vcs_processed: VcsInfo = Field(default_factory=VcsInfo)


class LicenseFinding(BaseModel):
    """A license detected by a scanner in a file."""

    model_config = {"frozen": True, "extra": "forbid"}

    license: str
    path: str = ""


class ScanSummary(BaseModel):
    """Summary of a single scan."""

    model_config = {"extra": "forbid"}

    license_findings: List[LicenseFinding] = Field(default_factory=list)
    issues: List[Issue] = Field(default_factory=list)


class ScanResult(BaseModel):
    """Result of scanning the source code of a package or project."""

    model_config = {"extra": "forbid"}

    scanner: str = Field(default="", description="Name of the scanner")
    summary: ScanSummary = Field(default_factory=ScanSummary)


class AnalyzerResult(BaseModel):
    """Projects, packages and issues found by the analyzer."""

    model_config = {"extra": "forbid"}

    projects: List[Project] = Field(default_factory=list)
    packages: List[Package] = Field(default_factory=list)
    issues: Dict[Identifier, List[Issue]] = Field(default_factory=dict)


class ScannerRun(BaseModel):
    """Scan results of all scanned packages and projects."""

    model_config = {"extra": "forbid"}

    scan_results: Dict[Identifier, List[ScanResult]] = Field(default_factory=dict)


class EvaluatorRun(BaseModel):
    """Rule violations found by the evaluator."""

    model_config = {"extra": "forbid"}

    violations: List[RuleViolation] = Field(default_factory=list)


class Repository(BaseModel):
    """The analyzed repository."""

    model_config = {"extra": "forbid"}

    vcs_processed: VcsInfo = Field(default_factory=VcsInfo)
    nested_repositories: Dict[str, VcsInfo] = Field(
        default_factory=dict,
        description="Nested repositories by their path relative to the root",
    )
    config: RepositoryConfiguration = Field(default_factory=RepositoryConfiguration)

    def get_relative_path(self, vcs: VcsInfo) -> str:
        """Return the path of the repository described by vcs relative to the root.

        The root repository and unknown repositories map to the empty path.
        """
        if vcs.matches_repository(self.vcs_processed):
            return ""
        for path, nested in self.nested_repositories.items():
            if vcs.matches_repository(nested):
                return path
        return ""


class AnalysisResult(BaseModel):
    """Immutable snapshot of a software-composition-analysis run."""

    model_config = {"extra": "forbid"}

    repository: Repository = Field(default_factory=Repository)
    analyzer: Optional[AnalyzerResult] = None
    scanner: Optional[ScannerRun] = None
    evaluator: Optional[EvaluatorRun] = None
    labels: Dict[str, str] = Field(default_factory=dict)

    _navigator: Optional[DependencyNavigator] = PrivateAttr(default=None)
    _packages: Optional[dict[Identifier, Package]] = PrivateAttr(default=None)
    _excluded_ids: Optional[frozenset[Identifier]] = PrivateAttr(default=None)

    @property
    def projects(self) -> list[Project]:
        return self.analyzer.projects if self.analyzer is not None else []

    @property
    def dependency_navigator(self) -> DependencyNavigator:
        """Navigator over the dependency trees of the analyzer's projects."""
        if self._navigator is None:
            # Lazy import to avoid circular dependency
            from sca_report.resolvers.navigator import TreeDependencyNavigator

            self._navigator = TreeDependencyNavigator()
        return self._navigator

    def get_excludes(self) -> Excludes:
        return self.repository.config.excludes

    def get_project(self, id: Identifier) -> Optional[Project]:
        for project in self.projects:
            if project.id == id:
                return project
        return None

    def get_package(self, id: Identifier) -> Optional[Package]:
        """Return the package with the given id, or None for projects and unknown ids."""
        if self._packages is None:
            packages = self.analyzer.packages if self.analyzer is not None else []
            self._packages = {package.id: package for package in packages}
        return self._packages.get(id)

    def get_scan_results_for_id(self, id: Identifier) -> list[ScanResult]:
        if self.scanner is None:
            return []
        return self.scanner.scan_results.get(id, [])

    def get_rule_violations(self) -> list[RuleViolation]:
        if self.evaluator is None:
            return []
        return self.evaluator.violations

    def get_package_license_choices(self, id: Identifier) -> list[LicenseChoice]:
        choices = self.repository.config.license_choices.package_license_choices
        return [
            choice
            for package_choice in choices
            if package_choice.package_id == id
            for choice in package_choice.license_choices
        ]

    def get_repository_license_choices(self) -> list[LicenseChoice]:
        return self.repository.config.license_choices.repository_license_choices

    def get_definition_file_path_relative_to_analyzer_root(self, project: Project) -> str:
        """Return the project's definition file path relative to the analysis root.

        Projects inside nested repositories get the nested repository's path
        as prefix.
        """
        vcs_path = self.repository.get_relative_path(project.vcs_processed)
        return f"{vcs_path}/{project.definition_file_path}".lstrip("/")

    def is_project_excluded(self, project: Project) -> bool:
        path = self.get_definition_file_path_relative_to_analyzer_root(project)
        return self.get_excludes().is_path_excluded(path)

    def is_excluded(self, id: Identifier) -> bool:
        """Check if the id is excluded by the repository's excludes.

        A project is excluded if its definition file matches a path exclude. A
        package is excluded if every reference to it lies in an excluded
        project or is reached only through excluded scopes. Ids that are not
        referenced by any project are not excluded.
        """
        project = self.get_project(id)
        if project is not None:
            return self.is_project_excluded(project)

        return id in self._package_exclusions()

    def _package_exclusions(self) -> frozenset[Identifier]:
        if self._excluded_ids is not None:
            return self._excluded_ids

        excludes = self.get_excludes()
        navigator = self.dependency_navigator
        referenced: set[Identifier] = set()
        included: set[Identifier] = set()

        for project in self.projects:
            project_excluded = self.is_project_excluded(project)
            for scope_name, ids in navigator.scope_dependencies(project).items():
                referenced.update(ids)
                if not project_excluded and not excludes.is_scope_excluded(scope_name):
                    included.update(ids)

        self._excluded_ids = frozenset(referenced - included)
        return self._excluded_ids
