"""Resolution lookup backed by configured resolutions."""

from __future__ import annotations

import logging
from typing import Optional

from sca_report.models.config import ReporterConfig, Resolutions
from sca_report.models.issue import Issue, RuleViolation
from sca_report.models.result import AnalysisResult
from sca_report.resolvers.base import Resolution, ResolutionProvider

logger = logging.getLogger(__name__)


class DefaultResolutionProvider(ResolutionProvider):
    """Match issues and rule violations against configured resolutions."""

    def __init__(self, resolutions: Optional[Resolutions] = None) -> None:
        """Initialize the provider.

        Args:
            resolutions: Resolutions to match against. Defaults to none.
        """
        self._resolutions = resolutions if resolutions is not None else Resolutions()

    @classmethod
    def create(
        cls, result: AnalysisResult, config: Optional[ReporterConfig] = None
    ) -> DefaultResolutionProvider:
        """Create a provider from the repository's and the reporter's resolutions.

        Args:
            result: Analysis result carrying the repository configuration.
            config: Optional reporter configuration with additional resolutions.

        Returns:
            Provider matching against the union of both resolution sets.
        """
        resolutions = result.repository.config.resolutions
        if config is not None and config.resolutions is not None:
            resolutions = resolutions.merge(config.resolutions)

        logger.debug(
            "Using %d issue and %d rule violation resolutions",
            len(resolutions.issues),
            len(resolutions.rule_violations),
        )
        return cls(resolutions)

    def get_issue_resolutions_for(self, issue: Issue) -> list[Resolution]:
        return [
            resolution
            for resolution in self._resolutions.issues
            if resolution.matches(issue)
        ]

    def get_rule_violation_resolutions_for(
        self, violation: RuleViolation
    ) -> list[Resolution]:
        return [
            resolution
            for resolution in self._resolutions.rule_violations
            if resolution.matches(violation)
        ]
