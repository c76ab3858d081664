"""sca-report - Report table model for software-composition-analysis results."""

__version__ = "0.1.0"
