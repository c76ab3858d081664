"""Output formatters for sca-report."""

from sca_report.output.terminal import TerminalFormatter

__all__ = [
    "TerminalFormatter",
]
