"""Attach resolution status to issues and rule violations."""

from __future__ import annotations

from typing import Callable, Generic, NamedTuple, Optional, Sequence, TypeVar

from sca_report.constants import RESOLUTION_SEPARATOR, RESOLVED_BY_PREFIX
from sca_report.models.issue import Issue, RuleViolation
from sca_report.models.table import ResolvableIssue, ResolvableViolation
from sca_report.resolvers.base import (
    HowToFixTextProvider,
    Resolution,
    ResolutionProvider,
)

T = TypeVar("T")


class ResolutionStatus(NamedTuple):
    """Resolution status of a single issue or violation.

    Attributes:
        is_resolved: True if at least one resolution matched.
        resolution_description: Text listing the matching resolutions, empty if none.
        extra_text: Additional text such as remediation hints, empty if none.
    """

    is_resolved: bool
    resolution_description: str
    extra_text: str


def describe_resolutions(resolutions: Sequence[Resolution]) -> str:
    """Describe resolutions as ``"\\nResolved by: <reason> - <comment>, ..."``.

    Returns:
        The description, or an empty string if there are no resolutions.
    """
    if not resolutions:
        return ""
    return RESOLVED_BY_PREFIX + RESOLUTION_SEPARATOR.join(
        f"{resolution.reason} - {resolution.comment}" for resolution in resolutions
    )


class ResolvableBuilder(Generic[T]):
    """Compute the resolution status of items of one kind.

    The builder is parameterized by how resolutions are looked up for an item
    and, optionally, by how extra text for an item is found.
    """

    def __init__(
        self,
        lookup: Callable[[T], Sequence[Resolution]],
        extra_text: Optional[Callable[[T], Optional[str]]] = None,
    ) -> None:
        self._lookup = lookup
        self._extra_text = extra_text

    def status(self, item: T) -> ResolutionStatus:
        resolutions = self._lookup(item)
        extra = self._extra_text(item) if self._extra_text is not None else None
        return ResolutionStatus(
            is_resolved=len(resolutions) > 0,
            resolution_description=describe_resolutions(resolutions),
            extra_text=extra or "",
        )


def issue_builder(
    resolution_provider: ResolutionProvider,
    how_to_fix_text_provider: HowToFixTextProvider,
) -> ResolvableBuilder[Issue]:
    """Create a builder for issues, with remediation text as extra text."""
    return ResolvableBuilder(
        resolution_provider.get_issue_resolutions_for,
        how_to_fix_text_provider.get_how_to_fix_text,
    )


def violation_builder(resolution_provider: ResolutionProvider) -> ResolvableBuilder[RuleViolation]:
    """Create a builder for rule violations, without extra text."""
    return ResolvableBuilder(resolution_provider.get_rule_violation_resolutions_for)


def to_resolvable_issue(issue: Issue, builder: ResolvableBuilder[Issue]) -> ResolvableIssue:
    status = builder.status(issue)
    return ResolvableIssue(
        source=issue.source,
        description=str(issue),
        resolution_description=status.resolution_description,
        is_resolved=status.is_resolved,
        severity=issue.severity,
        how_to_fix=status.extra_text,
    )


def to_resolvable_violation(
    violation: RuleViolation, builder: ResolvableBuilder[RuleViolation]
) -> ResolvableViolation:
    status = builder.status(violation)
    return ResolvableViolation(
        violation=violation,
        resolution_description=status.resolution_description,
        is_resolved=status.is_resolved,
    )


def filter_unresolved(issues: Sequence[ResolvableIssue]) -> list[ResolvableIssue]:
    """Return the issues without a matching resolution."""
    return [issue for issue in issues if not issue.is_resolved]
