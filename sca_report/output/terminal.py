"""Terminal summary of a report table model using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sca_report.models.options import Verbosity
from sca_report.models.table import ReportTableModel

_SEVERITY_STYLES = {
    "ERROR": "red",
    "WARNING": "yellow",
    "HINT": "blue",
}


class TerminalFormatter:
    """Print a diagnostic summary of a report table model.

    Shows the project tables, the cross-project issue summary and the rule
    violations. Resolved violations are only listed in verbose mode.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_model(self, model: ReportTableModel) -> None:
        """Display the report table model.

        Args:
            model: The report table model to display.
        """
        if self._verbosity == Verbosity.QUIET:
            self._print_status_line(model)
            return

        if not model.project_dependencies:
            self._console.print("[yellow]No projects found[/yellow]")
        else:
            self._print_projects(model)

        self._print_issue_summary(model)
        self._print_rule_violations(model)
        self._console.print("")
        self._print_status_line(model)

    def _print_status_line(self, model: ReportTableModel) -> None:
        if model.has_unresolved_findings:
            self._console.print(
                f"[red]ISSUES FOUND[/red] - "
                f"{len(model.issue_summary.rows)} package(s) with unresolved issues, "
                f"{model.unresolved_violation_count} unresolved rule violation(s)",
                highlight=False,
            )
        else:
            self._console.print("[green]PASS[/green] - No unresolved issues or violations")

    def _print_projects(self, model: ReportTableModel) -> None:
        table = Table(title="Projects")
        table.add_column("Project", style="cyan", no_wrap=True)
        table.add_column("Definition File", style="magenta")
        table.add_column("Dependencies", justify="right")
        table.add_column("Excluded")

        for project, project_table in model.project_dependencies.items():
            table.add_row(
                str(project.id),
                project_table.full_definition_file_path,
                # The project's own row is not a dependency
                str(len(project_table.rows) - 1),
                "yes" if project_table.is_excluded else "",
            )

        self._console.print(table)

    def _print_issue_summary(self, model: ReportTableModel) -> None:
        rows = model.issue_summary.rows
        if not rows:
            return

        table = Table(title="Issue Summary")
        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("Project", style="magenta")
        table.add_column("Issue")

        for row in rows:
            for kind, issues_by_project in (
                ("analyzer", row.analyzer_issues),
                ("scan", row.scan_issues),
            ):
                for project_id, issues in issues_by_project.items():
                    for issue in issues:
                        style = _SEVERITY_STYLES[issue.severity.value]
                        table.add_row(
                            str(row.id),
                            str(project_id),
                            f"[{style}]{escape(issue.description)}[/{style}] ({kind})",
                        )

        self._console.print(table)

    def _print_rule_violations(self, model: ReportTableModel) -> None:
        violations = model.rule_violations
        if self._verbosity != Verbosity.VERBOSE:
            violations = [violation for violation in violations if not violation.is_resolved]
        if not violations:
            return

        table = Table(title="Rule Violations")
        table.add_column("Severity")
        table.add_column("Rule", style="cyan")
        table.add_column("Package", style="magenta")
        table.add_column("License", style="green")
        table.add_column("Message")

        for resolvable in violations:
            violation = resolvable.violation
            style = _SEVERITY_STYLES[violation.severity.value]
            message = escape(violation.message)
            if resolvable.is_resolved:
                message += f" [blue]{escape(resolvable.resolution_description.strip())}[/blue]"
            table.add_row(
                f"[{style}]{violation.severity.value}[/{style}]",
                violation.rule,
                str(violation.pkg) if violation.pkg else "-",
                violation.license or "-",
                message,
            )

        self._console.print(table)
