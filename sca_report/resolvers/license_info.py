"""License information resolution for packages and projects.

Combines declared, concluded and detected licenses of an id and computes the
effective license under a license view and license choices. Uses the
license-expression library for SPDX parsing and normalization.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Callable, Iterator, Optional, Sequence

from license_expression import ExpressionError, LicenseSymbol, get_spdx_licensing
from pydantic import BaseModel, Field

from sca_report.models.identifier import Identifier
from sca_report.models.license import (
    LicenseChoice,
    LicenseSource,
    LicenseView,
    ResolvedLicense,
)
from sca_report.models.result import AnalysisResult
from sca_report.resolvers.base import LicenseInfoResolver

if TYPE_CHECKING:
    from boolean import Expression as LicenseExpression

logger = logging.getLogger(__name__)

# Initialize SPDX licensing for parsing
_licensing = get_spdx_licensing()

_INVALID_KEY_CHARS = re.compile(r"[^-:\w\s.+]")


def parse_license(expression: str) -> LicenseExpression:
    """Parse a license expression, keeping non-SPDX strings as a single license.

    Args:
        expression: SPDX expression or free-form license name.

    Returns:
        Parsed license expression.
    """
    try:
        parsed = _licensing.parse(expression)
    except ExpressionError:
        parsed = None
    if parsed is None:
        return LicenseSymbol(_INVALID_KEY_CHARS.sub("-", expression.strip()))
    return parsed


def _canonical(expression: LicenseExpression) -> str:
    return expression.simplify().render()


def _subterms(expression: LicenseExpression) -> Iterator[LicenseExpression]:
    yield expression
    if not expression.isliteral:
        for arg in expression.args:
            yield from _subterms(arg)


def _alternatives(expression: LicenseExpression) -> set[str]:
    # Disjunctive normal form lists every license combination one may pick
    normalized = _licensing.dnf(expression)
    if isinstance(normalized, _licensing.OR):
        return {_canonical(arg) for arg in normalized.args}
    return {_canonical(normalized)}


def _substitute(
    expression: LicenseExpression, target: str, replacement: LicenseExpression
) -> LicenseExpression:
    if _canonical(expression) == target:
        return replacement
    if expression.isliteral:
        return expression
    return expression.__class__(
        *(_substitute(arg, target, replacement) for arg in expression.args)
    )


def apply_license_choices(
    expression: LicenseExpression, choices: Sequence[LicenseChoice]
) -> LicenseExpression:
    """Apply license choices to an expression, in order.

    A choice without ``given`` applies to the whole expression. A choice
    applies only if its ``given`` expression is part of the current expression
    and every alternative of the chosen expression is one of the alternatives
    offered by ``given``; other choices are ignored.

    Args:
        expression: Expression to choose from.
        choices: Choices to apply.

    Returns:
        The expression with all applicable choices applied.
    """
    for choice in choices:
        given = parse_license(choice.given) if choice.given else expression
        given_key = _canonical(given)
        if not any(_canonical(term) == given_key for term in _subterms(expression)):
            continue

        chosen = parse_license(choice.choice)
        if not _alternatives(chosen) <= _alternatives(given):
            logger.debug("Ignoring invalid license choice '%s' for '%s'", choice.choice, given_key)
            continue

        expression = _substitute(expression, given_key, chosen)
    return expression


class ResolvedLicenseInfo(BaseModel):
    """All licenses of a single package or project."""

    model_config = {"frozen": True, "extra": "forbid"}

    id: Identifier
    licenses: list[ResolvedLicense] = Field(default_factory=list)
    concluded_license: Optional[str] = None

    def filter(self, predicate: Callable[[ResolvedLicense], bool]) -> list[ResolvedLicense]:
        """Return the licenses matching the predicate."""
        return [license for license in self.licenses if predicate(license)]

    def filter_excluded(self) -> ResolvedLicenseInfo:
        """Return a copy without detected licenses whose findings are all excluded."""
        licenses: list[ResolvedLicense] = []
        for resolved in self.licenses:
            if resolved.is_detected_excluded:
                remaining = resolved.sources - {LicenseSource.DETECTED}
                if not remaining:
                    continue
                resolved = ResolvedLicense(license=resolved.license, sources=remaining)
            licenses.append(resolved)
        return self.model_copy(update={"licenses": licenses})

    def effective_license(
        self, view: LicenseView, *license_choices: Sequence[LicenseChoice]
    ) -> Optional[str]:
        """Compute the effective license under a view and license choices.

        Args:
            view: Which license sources to take into account.
            *license_choices: Choice lists applied one after the other, e.g.
                package choices followed by repository choices.

        Returns:
            The sorted, normalized effective license expression, or None if
            the view selects no license.
        """
        selected = self._licenses_for_view(view)
        if not selected:
            return None

        parsed = [parse_license(license) for license in selected]
        expression = parsed[0] if len(parsed) == 1 else _licensing.AND(*parsed)
        for choices in license_choices:
            expression = apply_license_choices(expression, choices)
        return _canonical(expression)

    def _licenses_for_view(self, view: LicenseView) -> list[str]:
        if view is LicenseView.ALL:
            return sorted(license.license for license in self.licenses)

        if self.concluded_license:
            return [self.concluded_license]
        if view is LicenseView.ONLY_CONCLUDED:
            return []

        return sorted(
            license.license
            for license in self.licenses
            if LicenseSource.DECLARED in license.sources
            or LicenseSource.DETECTED in license.sources
        )


class DefaultLicenseInfoResolver(LicenseInfoResolver):
    """Resolve license information from an analysis result.

    Detected licenses of projects whose findings all lie in excluded paths are
    flagged as excluded. Results are cached per id.
    """

    def __init__(self, result: AnalysisResult) -> None:
        self._result = result
        self._cache: dict[Identifier, ResolvedLicenseInfo] = {}

    def resolve_license_info(self, id: Identifier) -> ResolvedLicenseInfo:
        if id not in self._cache:
            self._cache[id] = self._resolve(id)
        return self._cache[id]

    def _resolve(self, id: Identifier) -> ResolvedLicenseInfo:
        package = self._result.get_package(id)
        project = self._result.get_project(id) if package is None else None

        concluded: Optional[str] = None
        declared: list[str] = []
        if package is not None:
            concluded = package.concluded_license
            if concluded is not None and not concluded.strip():
                concluded = None
            declared = package.declared_licenses
        elif project is not None:
            declared = project.declared_licenses

        sources: dict[str, set[LicenseSource]] = {}
        finding_exclusions: dict[str, list[bool]] = {}

        for license in declared:
            if license.strip():
                sources.setdefault(license, set()).add(LicenseSource.DECLARED)
        if concluded:
            sources.setdefault(concluded, set()).add(LicenseSource.CONCLUDED)

        path_prefix = None
        if project is not None:
            path_prefix = self._result.repository.get_relative_path(project.vcs_processed)
        excludes = self._result.get_excludes()

        for scan_result in self._result.get_scan_results_for_id(id):
            for finding in scan_result.summary.license_findings:
                if not finding.license.strip():
                    continue
                sources.setdefault(finding.license, set()).add(LicenseSource.DETECTED)
                excluded = path_prefix is not None and excludes.is_path_excluded(
                    f"{path_prefix}/{finding.path}".lstrip("/")
                )
                finding_exclusions.setdefault(finding.license, []).append(excluded)

        licenses = [
            ResolvedLicense(
                license=license,
                sources=frozenset(license_sources),
                is_detected_excluded=all(finding_exclusions.get(license, [False])),
            )
            for license, license_sources in sorted(sources.items())
        ]
        return ResolvedLicenseInfo(id=id, licenses=licenses, concluded_license=concluded)
