"""Services queried by the report table mapper."""

from sca_report.resolvers.base import (
    HowToFixTextProvider,
    LicenseInfoResolver,
    Resolution,
    ResolutionProvider,
)
from sca_report.resolvers.how_to_fix import (
    ConfiguredHowToFixTextProvider,
    NoHowToFixTextProvider,
)
from sca_report.resolvers.license_info import (
    DefaultLicenseInfoResolver,
    ResolvedLicenseInfo,
)
from sca_report.resolvers.navigator import DependencyNavigator, TreeDependencyNavigator
from sca_report.resolvers.resolution import DefaultResolutionProvider

__all__ = [
    "ConfiguredHowToFixTextProvider",
    "DefaultLicenseInfoResolver",
    "DefaultResolutionProvider",
    "DependencyNavigator",
    "HowToFixTextProvider",
    "LicenseInfoResolver",
    "NoHowToFixTextProvider",
    "Resolution",
    "ResolutionProvider",
    "ResolvedLicenseInfo",
    "TreeDependencyNavigator",
]
