"""Default configuration values for sca-report."""

from __future__ import annotations

from sca_report.models.config import ReporterConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".sca-report.yaml", ".sca-report.yml"]


def get_default_config() -> ReporterConfig:
    """Get the default configuration.

    Returns:
        ReporterConfig with all defaults (all fields None).
    """
    return ReporterConfig()
