"""License-related models for sca-report."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from sca_report.models.identifier import Identifier


class LicenseSource(Enum):
    """Where a license was found."""

    DECLARED = "DECLARED"
    DETECTED = "DETECTED"
    CONCLUDED = "CONCLUDED"


class LicenseView(Enum):
    """Which license sources take part in the effective license."""

    ALL = "all"
    ONLY_CONCLUDED = "only_concluded"
    CONCLUDED_OR_DECLARED_AND_DETECTED = "concluded_or_declared_and_detected"


class ResolvedLicense(BaseModel):
    """A single license of a package together with the sources it came from."""

    model_config = {"frozen": True, "extra": "forbid"}

    license: str = Field(description="License identifier or expression")
    sources: frozenset[LicenseSource] = Field(description="Sources of the license")
    is_detected_excluded: bool = Field(
        default=False,
        description="True if every detected finding lies in an excluded path",
    )

    def __str__(self) -> str:
        return self.license


class LicenseChoice(BaseModel):
    """Choice of a license from a license expression offering alternatives."""

    model_config = {"frozen": True, "extra": "forbid"}

    given: Optional[str] = Field(
        default=None,
        description="Expression the choice applies to; None means the whole expression",
    )
    choice: str = Field(description="The chosen license expression")


class PackageLicenseChoice(BaseModel):
    """License choices that apply to a single package."""

    model_config = {"extra": "forbid"}

    package_id: Identifier = Field(description="Package the choices apply to")
    license_choices: list[LicenseChoice] = Field(default_factory=list)
