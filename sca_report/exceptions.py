"""Custom exceptions for sca-report."""


class ReportError(Exception):
    """Base exception for all sca-report errors."""

    pass


class ConfigurationError(ReportError):
    """Exception raised when configuration is invalid."""

    pass


class InputError(ReportError):
    """Exception raised when an analysis result cannot be loaded."""

    pass
