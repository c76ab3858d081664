"""Input bundle of the report table mapper."""

from __future__ import annotations

from typing import Optional

from sca_report.models.config import ReporterConfig
from sca_report.models.result import AnalysisResult
from sca_report.resolvers.base import (
    HowToFixTextProvider,
    LicenseInfoResolver,
    ResolutionProvider,
)
from sca_report.resolvers.how_to_fix import (
    ConfiguredHowToFixTextProvider,
    NoHowToFixTextProvider,
)
from sca_report.resolvers.license_info import DefaultLicenseInfoResolver
from sca_report.resolvers.resolution import DefaultResolutionProvider


class ReporterInput:
    """An analysis result together with the services used to map it."""

    def __init__(
        self,
        result: AnalysisResult,
        license_info_resolver: LicenseInfoResolver,
        resolution_provider: ResolutionProvider,
        how_to_fix_text_provider: HowToFixTextProvider,
    ) -> None:
        self.result = result
        self.license_info_resolver = license_info_resolver
        self.resolution_provider = resolution_provider
        self.how_to_fix_text_provider = how_to_fix_text_provider

    @classmethod
    def create(
        cls, result: AnalysisResult, config: Optional[ReporterConfig] = None
    ) -> ReporterInput:
        """Create an input wired with the default services.

        Args:
            result: The analysis result to map.
            config: Optional reporter configuration with additional
                resolutions and remediation texts.

        Returns:
            ReporterInput using the default license, resolution and
            remediation text services.
        """
        how_to_fix: HowToFixTextProvider = NoHowToFixTextProvider()
        if config is not None and config.how_to_fix:
            how_to_fix = ConfiguredHowToFixTextProvider(config.how_to_fix)

        return cls(
            result=result,
            license_info_resolver=DefaultLicenseInfoResolver(result),
            resolution_provider=DefaultResolutionProvider.create(result, config),
            how_to_fix_text_provider=how_to_fix,
        )
