"""Reporters that render lint results for people (rich tables) or tools (JSON)."""

import json

from rich.console import Console
from rich.table import Table
from rich.text import Text

from frontend_rules.domain.entities import LintResult
from frontend_rules.domain.rules import Severity

SEVERITY_STYLES: dict[Severity, str] = {
    Severity.ERROR: "bold red",
    Severity.WARN: "yellow",
}


class TerminalViolationReporter:
    """One table per file with problems, then an ESLint-style summary line."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def report(self, results: list[LintResult]) -> None:
        errors = warnings = fixable = applied = 0
        for result in results:
            errors += result.error_count
            warnings += result.warning_count
            fixable += result.fixable_count
            applied += result.applied_fixes
            if result.violations:
                self.console.print(self._table(result))

        if applied:
            self.console.print(f"[green]Applied {applied} fix(es).[/green]")
        problems = errors + warnings
        if not problems:
            self.console.print("[green]✅ No problems found.[/green]")
            return
        style = "bold red" if errors else "yellow"
        self.console.print(
            f"[{style}]✖ {problems} problem(s) ({errors} error(s), {warnings} warning(s))[/{style}]"
        )
        if fixable:
            self.console.print(f"  {fixable} problem(s) fixable with the `--fix` option.")

    @staticmethod
    def _table(result: LintResult) -> Table:
        table = Table(title=Text(result.filename), title_justify="left", header_style="bold #007BFF")
        table.add_column("Line:Col", style="dim", no_wrap=True)
        table.add_column("Severity", no_wrap=True)
        table.add_column("Rule", style="#00EEFF", no_wrap=True)
        table.add_column("Message")
        for violation in result.violations:
            table.add_row(
                f"{violation.line}:{violation.column}",
                Text(violation.severity.value, style=SEVERITY_STYLES.get(violation.severity, "")),
                violation.rule_id,
                Text(violation.message),
            )
        return table


class JsonViolationReporter:
    """Machine-readable report: one object per file, printed as a JSON array."""

    def report(self, results: list[LintResult]) -> None:
        print(json.dumps([result.to_dict() for result in results], indent=2))
