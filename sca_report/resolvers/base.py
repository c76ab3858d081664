"""Base interfaces of the services the report table mapper queries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Protocol

from sca_report.models.identifier import Identifier
from sca_report.models.issue import Issue, RuleViolation

if TYPE_CHECKING:
    from sca_report.resolvers.license_info import ResolvedLicenseInfo


class Resolution(Protocol):
    """Anything that explains why an issue or violation is suppressed."""

    reason: str
    comment: str


class ResolutionProvider(ABC):
    """Abstract base class for resolution lookups."""

    @abstractmethod
    def get_issue_resolutions_for(self, issue: Issue) -> list[Resolution]:
        """Return the resolutions matching the issue, empty if unresolved."""

    @abstractmethod
    def get_rule_violation_resolutions_for(
        self, violation: RuleViolation
    ) -> list[Resolution]:
        """Return the resolutions matching the rule violation, empty if unresolved."""


class HowToFixTextProvider(ABC):
    """Abstract base class for remediation text lookups."""

    @abstractmethod
    def get_how_to_fix_text(self, issue: Issue) -> Optional[str]:
        """Return remediation text for the issue, or None if there is none."""


class LicenseInfoResolver(ABC):
    """Abstract base class for license information lookups."""

    @abstractmethod
    def resolve_license_info(self, id: Identifier) -> ResolvedLicenseInfo:
        """Return the resolved license information of a package or project.

        Unknown ids resolve to license information without any licenses.
        """
