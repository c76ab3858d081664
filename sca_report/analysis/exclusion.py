"""Scope and path exclusion lookups for a single project."""

from __future__ import annotations

from sca_report.models.config import Excludes, PathExclude, ScopeExclude
from sca_report.models.identifier import Identifier
from sca_report.models.result import AnalysisResult, Project
from sca_report.resolvers.navigator import DependencyNavigator


def scopes_for_dependencies(
    project: Project,
    excludes: Excludes,
    navigator: DependencyNavigator,
) -> dict[Identifier, dict[str, list[ScopeExclude]]]:
    """Map each dependency of a project to its scopes and their scope excludes.

    The scope excludes of each scope name are looked up only once.

    Args:
        project: Project whose scopes are walked.
        excludes: Exclusion rules of the repository.
        navigator: Navigator over the project's dependency graph.

    Returns:
        Dict mapping dependency id to a dict of scope name to the scope
        excludes matching that scope (empty list if the scope is included).
    """
    result: dict[Identifier, dict[str, list[ScopeExclude]]] = {}
    scope_excludes: dict[str, list[ScopeExclude]] = {}

    for scope_name, dependencies in navigator.scope_dependencies(project).items():
        if scope_name not in scope_excludes:
            scope_excludes[scope_name] = excludes.find_scope_excludes(scope_name)
        for dependency in dependencies:
            result.setdefault(dependency, {})[scope_name] = scope_excludes[scope_name]

    return result


def path_excludes_for_project(project: Project, result: AnalysisResult) -> list[PathExclude]:
    """Return the path excludes matching the project's definition file."""
    path = result.get_definition_file_path_relative_to_analyzer_root(project)
    return result.get_excludes().find_path_excludes(path)
