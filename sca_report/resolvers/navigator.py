"""Navigation of project dependency graphs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from sca_report.models.identifier import Identifier
from sca_report.models.issue import Issue
from sca_report.models.result import PackageReference, Project


class DependencyNavigator(ABC):
    """Abstract base class for dependency graph queries."""

    @abstractmethod
    def scope_dependencies(self, project: Project) -> dict[str, set[Identifier]]:
        """Return all ids reachable in each of the project's scopes."""

    @abstractmethod
    def project_issues(self, project: Project) -> dict[Identifier, list[Issue]]:
        """Return the issues attached to the project's dependency graph, by id."""

    def project_dependencies(self, project: Project) -> set[Identifier]:
        """Return the transitive dependencies of the project, without the project itself."""
        result: set[Identifier] = set()
        for ids in self.scope_dependencies(project).values():
            result.update(ids)
        result.discard(project.id)
        return result


class TreeDependencyNavigator(DependencyNavigator):
    """Navigator over the dependency trees stored in the projects' scopes.

    Results are cached per project id, the navigator is meant to live no
    longer than the analysis result it navigates.
    """

    def __init__(self) -> None:
        """Initialize navigator with empty caches."""
        self._scope_cache: dict[Identifier, dict[str, set[Identifier]]] = {}
        self._issue_cache: dict[Identifier, dict[Identifier, list[Issue]]] = {}

    def scope_dependencies(self, project: Project) -> dict[str, set[Identifier]]:
        if project.id not in self._scope_cache:
            self._scope_cache[project.id] = {
                scope.name: {ref.id for ref in _walk(scope.dependencies)}
                for scope in project.scopes
            }
        return self._scope_cache[project.id]

    def project_issues(self, project: Project) -> dict[Identifier, list[Issue]]:
        if project.id not in self._issue_cache:
            issues: dict[Identifier, list[Issue]] = {}
            for scope in project.scopes:
                for ref in _walk(scope.dependencies):
                    for issue in ref.issues:
                        collected = issues.setdefault(ref.id, [])
                        if issue not in collected:
                            collected.append(issue)
            self._issue_cache[project.id] = issues
        return self._issue_cache[project.id]


def _walk(references: Iterable[PackageReference]) -> Iterator[PackageReference]:
    """Yield all references of a dependency tree, depth first."""
    stack = list(reversed(list(references)))
    while stack:
        ref = stack.pop()
        yield ref
        stack.extend(reversed(ref.dependencies))
