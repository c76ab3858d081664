"""Configuration handling for sca-report."""
from __future__ import annotations

from sca_report.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from sca_report.config.loader import find_config_file, load_config, load_config_file
from sca_report.documents import format_validation_errors
from sca_report.models.config import HowToFixRule, ReporterConfig, Resolutions

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "HowToFixRule",
    "ReporterConfig",
    "Resolutions",
    "find_config_file",
    "format_validation_errors",
    "get_default_config",
    "load_config",
    "load_config_file",
]
