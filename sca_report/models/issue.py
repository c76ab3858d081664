"""Issue and rule violation models for sca-report."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from sca_report.models.identifier import Identifier


class Severity(Enum):
    """Severity of an issue or rule violation, ordered HINT < WARNING < ERROR."""

    HINT = "HINT"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        """Numeric rank of the severity, higher is more severe."""
        return _SEVERITY_RANKS[self]


_SEVERITY_RANKS = {
    Severity.HINT: 0,
    Severity.WARNING: 1,
    Severity.ERROR: 2,
}


class Issue(BaseModel):
    """An issue raised by the analyzer or a scanner."""

    model_config = {"frozen": True, "extra": "forbid"}

    source: str = Field(description="Tool or component that raised the issue")
    message: str = Field(description="Human readable issue message")
    severity: Severity = Field(default=Severity.ERROR, description="Issue severity")
    affected_path: Optional[str] = Field(
        default=None,
        description="Path the issue relates to, if any",
    )

    def __str__(self) -> str:
        return f"{self.source} - {self.message}"


class RuleViolation(BaseModel):
    """A violation of a policy rule found by the evaluator."""

    model_config = {"frozen": True, "extra": "forbid"}

    rule: str = Field(description="Name of the violated rule")
    pkg: Optional[Identifier] = Field(
        default=None,
        description="Package the violation relates to, if any",
    )
    license: Optional[str] = Field(
        default=None,
        description="License expression the violation relates to, if any",
    )
    license_sources: frozenset[str] = Field(
        default_factory=frozenset,
        description="Sources of the license, e.g. DECLARED or DETECTED",
    )
    severity: Severity = Field(description="Violation severity")
    message: str = Field(description="Human readable violation message")
    how_to_fix: str = Field(default="", description="Remediation hint")
