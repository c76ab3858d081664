"""Configuration Pydantic models for sca-report."""
from __future__ import annotations

import re
from fnmatch import fnmatchcase
from typing import List, Optional

from pydantic import BaseModel, Field

from sca_report.models.issue import Issue, RuleViolation
from sca_report.models.license import LicenseChoice, PackageLicenseChoice


def _collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


class ScopeExclude(BaseModel):
    """Rule excluding dependency scopes whose name matches a regular expression."""

    model_config = {"frozen": True, "extra": "forbid"}

    pattern: str = Field(description="Regular expression matched against scope names")
    reason: str = Field(description="Reason for the exclusion")
    comment: str = Field(default="", description="Free text explanation")

    def matches(self, scope_name: str) -> bool:
        """Check if the scope name fully matches the pattern."""
        return re.fullmatch(self.pattern, scope_name) is not None


class PathExclude(BaseModel):
    """Rule excluding paths that match a glob pattern.

    Patterns are matched with fnmatch semantics against paths relative to the
    analysis root, so ``*`` also crosses directory separators.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    pattern: str = Field(description="Glob pattern matched against paths")
    reason: str = Field(description="Reason for the exclusion")
    comment: str = Field(default="", description="Free text explanation")

    def matches(self, path: str) -> bool:
        """Check if the path matches the pattern."""
        return fnmatchcase(path, self.pattern)


class Excludes(BaseModel):
    """Path and scope exclusion rules of a repository."""

    model_config = {"extra": "forbid"}

    paths: List[PathExclude] = Field(default_factory=list)
    scopes: List[ScopeExclude] = Field(default_factory=list)

    def find_scope_excludes(self, scope_name: str) -> list[ScopeExclude]:
        """Return the scope excludes matching the given scope name."""
        return [exclude for exclude in self.scopes if exclude.matches(scope_name)]

    def find_path_excludes(self, path: str) -> list[PathExclude]:
        """Return the path excludes matching the given path."""
        return [exclude for exclude in self.paths if exclude.matches(path)]

    def is_scope_excluded(self, scope_name: str) -> bool:
        return any(exclude.matches(scope_name) for exclude in self.scopes)

    def is_path_excluded(self, path: str) -> bool:
        return any(exclude.matches(path) for exclude in self.paths)


class IssueResolution(BaseModel):
    """Resolution suppressing issues whose message matches a regular expression."""

    model_config = {"frozen": True, "extra": "forbid"}

    message: str = Field(description="Regular expression matched against issue messages")
    reason: str = Field(description="Resolution reason, e.g. CANT_FIX_ISSUE")
    comment: str = Field(default="", description="Free text explanation")

    def matches(self, issue: Issue) -> bool:
        """Check if the resolution applies to the issue.

        Whitespace in the issue message is collapsed before matching.
        """
        return re.fullmatch(self.message, _collapse_whitespace(issue.message)) is not None


class RuleViolationResolution(BaseModel):
    """Resolution suppressing rule violations whose message matches a regular expression."""

    model_config = {"frozen": True, "extra": "forbid"}

    message: str = Field(description="Regular expression matched against violation messages")
    reason: str = Field(description="Resolution reason, e.g. CANT_FIX_EXCEPTION")
    comment: str = Field(default="", description="Free text explanation")

    def matches(self, violation: RuleViolation) -> bool:
        """Check if the resolution applies to the violation."""
        return (
            re.fullmatch(self.message, _collapse_whitespace(violation.message))
            is not None
        )


class Resolutions(BaseModel):
    """Collection of issue and rule violation resolutions."""

    model_config = {"extra": "forbid"}

    issues: List[IssueResolution] = Field(default_factory=list)
    rule_violations: List[RuleViolationResolution] = Field(default_factory=list)

    def merge(self, other: Resolutions) -> Resolutions:
        """Return the union of both resolution collections, keeping order."""
        return Resolutions(
            issues=_unique(self.issues + other.issues),
            rule_violations=_unique(self.rule_violations + other.rule_violations),
        )


def _unique(items: list) -> list:
    return list(dict.fromkeys(items))


class LicenseChoices(BaseModel):
    """License choices configured for a repository."""

    model_config = {"extra": "forbid"}

    repository_license_choices: List[LicenseChoice] = Field(default_factory=list)
    package_license_choices: List[PackageLicenseChoice] = Field(default_factory=list)


class RepositoryConfiguration(BaseModel):
    """Configuration stored in the analyzed repository itself."""

    model_config = {"extra": "forbid"}

    excludes: Excludes = Field(default_factory=Excludes)
    resolutions: Resolutions = Field(default_factory=Resolutions)
    license_choices: LicenseChoices = Field(default_factory=LicenseChoices)


class HowToFixRule(BaseModel):
    """Remediation text for issues whose message matches a regular expression."""

    model_config = {"extra": "forbid"}

    message: str = Field(description="Regular expression matched against issue messages")
    text: str = Field(description="Remediation text, usually Markdown")


class ReporterConfig(BaseModel):
    """Configuration for sca-report.

    All fields are optional with None defaults to allow partial configuration.
    """

    model_config = {"extra": "forbid"}

    resolutions: Optional[Resolutions] = Field(
        default=None,
        description="Resolutions applied in addition to the repository's own.",
    )
    how_to_fix: Optional[List[HowToFixRule]] = Field(
        default=None,
        description="Remediation texts for issues, first matching rule wins.",
    )
