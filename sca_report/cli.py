"""CLI entry point for sca-report."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from sca_report import __version__
from sca_report.analysis.mapper import map_report_table_model
from sca_report.analysis.reporter_input import ReporterInput
from sca_report.config import load_config
from sca_report.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from sca_report.exceptions import ReportError
from sca_report.loader import load_analysis_result
from sca_report.models.options import Verbosity
from sca_report.output.terminal import TerminalFormatter

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """SCA Report - Build report tables from software-composition-analysis results.

    Turns projects, dependency graphs, licenses, issues and rule violations
    into sorted, deduplicated tables ready for rendering.

    \b
    Examples:
        sca-report summary analysis-result.json
        sca-report summary analysis-result.yml --verbose
    """
    pass


@main.command()
@click.argument(
    "result_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show resolved violations and debug logging.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Show only the status line.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
def summary(
    result_file: Path,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
) -> None:
    """Summarize the report tables of an analysis result.

    Loads the analysis result, applies resolutions and excludes, and shows
    the project tables, the issue summary and the rule violations.

    \b
    Examples:
        sca-report summary analysis-result.json
        sca-report summary analysis-result.yml --quiet
        sca-report summary analysis-result.json --config custom-config.yaml
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    logging.basicConfig(
        level=logging.DEBUG if verbose_flag else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(config_path)
        result = load_analysis_result(result_file)

        model = map_report_table_model(ReporterInput.create(result, config))
        TerminalFormatter(console=_console, verbosity=verbosity).format_model(model)

        if model.has_unresolved_findings:
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except ReportError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)


def _display_error(error: ReportError) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
    """
    _error_console.print(
        f"[red bold]Error: {type(error).__name__}: {escape(str(error))}[/red bold]",
        highlight=False,
    )


if __name__ == "__main__":
    main()
