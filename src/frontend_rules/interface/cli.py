"""CLI entry points for frontend-rules - Thin Controller using Typer."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from frontend_rules.domain.config import LintConfiguration
from frontend_rules.domain.constants import (
    EXIT_CLEAN,
    EXIT_USAGE_ERROR,
    EXIT_VIOLATIONS,
    RECOMMENDED_PRESET,
)
from frontend_rules.domain.errors import FrontendRulesError
from frontend_rules.domain.protocols import (
    AstSourceProtocol,
    FileSystemProtocol,
    ViolationReporterProtocol,
)
from frontend_rules.domain.registry import PLUGIN
from frontend_rules.use_cases.check_files import CheckFilesUseCase

# B008: avoid function call in default; use module-level singletons for Typer params
_CHECK_PATHS = typer.Argument(..., help="AST JSON files or directories containing them")
_RULE_OVERRIDES = typer.Option(
    None, "--rule", "-r", help="Override a rule: NAME=SEVERITY or NAME='[\"error\", {...}]'"
)


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_dict: dict[str, object]
    ast_source: AstSourceProtocol
    filesystem: FileSystemProtocol
    reporters: dict[str, ViolationReporterProtocol]
    console: Console


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def parse_rule_overrides(values: Optional[list[str]]) -> dict[str, object]:
        """Turn `name=warn`, `name=2` or `name=[...json...]` into config rule entries."""
        overrides: dict[str, object] = {}
        for item in values or []:
            name, sep, raw = item.partition("=")
            if not sep or not name.strip() or not raw.strip():
                raise typer.BadParameter(f"expected NAME=SEVERITY, got {item!r}", param_hint="--rule")
            raw = raw.strip()
            value: object = raw
            if raw.startswith("["):
                try:
                    value = json.loads(raw)
                except json.JSONDecodeError as exc:
                    raise typer.BadParameter(f"invalid JSON setting for {name}: {exc}", param_hint="--rule") from exc
            elif raw.isdigit():
                value = int(raw)
            overrides[name.strip()] = value
        return overrides

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="frontend-rules",
            help="Frontend lint rules for React / TypeScript code, run over ESTree JSON.",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
        ) -> None:
            """Frontend lint rules for React / TypeScript code."""
            if verbose:
                logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

        @app.command()
        def check(
            paths: list[Path] = _CHECK_PATHS,
            output_format: str = typer.Option("terminal", "--format", "-f", help="terminal or json"),
            fix: bool = typer.Option(False, "--fix", help="Apply automatic fixes to the source files"),
            rule: Optional[list[str]] = _RULE_OVERRIDES,
        ) -> None:
            """Lint serialized syntax trees and report violations."""
            reporter = deps.reporters.get(output_format)
            if reporter is None:
                raise typer.BadParameter(
                    f"unknown format {output_format!r}; choose from {', '.join(deps.reporters)}",
                    param_hint="--format",
                )
            overrides = CLIAppFactory.parse_rule_overrides(rule)
            try:
                configuration = LintConfiguration(deps.config_dict)
                if overrides:
                    configuration = configuration.with_overrides(overrides)
                use_case = CheckFilesUseCase(
                    configuration=configuration,
                    ast_source=deps.ast_source,
                    filesystem=deps.filesystem,
                )
                results = use_case.execute([str(p) for p in paths], fix=fix, cwd=str(Path.cwd()))
            except FrontendRulesError as exc:
                deps.console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
                raise typer.Exit(code=EXIT_USAGE_ERROR) from exc

            reporter.report(results)
            if any(result.has_errors() for result in results):
                raise typer.Exit(code=EXIT_VIOLATIONS)
            raise typer.Exit(code=EXIT_CLEAN)

        @app.command("rules")
        def list_rules() -> None:
            """List every rule with its type, recommended severity and description."""
            recommended = PLUGIN.preset(RECOMMENDED_PRESET)
            table = Table(title="eslint-frontend-rules", header_style="bold #007BFF")
            table.add_column("Rule", style="#00EEFF", no_wrap=True)
            table.add_column("Type")
            table.add_column("Recommended")
            table.add_column("Fixable")
            table.add_column("Description")
            for name, rule_impl in PLUGIN.rules.items():
                table.add_row(
                    name,
                    rule_impl.meta.type,
                    recommended[name].value,
                    "yes" if rule_impl.meta.fixable else "",
                    rule_impl.meta.description,
                )
            deps.console.print(table)

        @app.command("config")
        def show_config(
            preset: str = typer.Argument(RECOMMENDED_PRESET, help="Preset name"),
        ) -> None:
            """Print a named severity bundle as JSON."""
            bundle = PLUGIN.configs.get(preset)
            if bundle is None:
                deps.console.print(f"[bold red]Error:[/bold red] unknown preset {escape(repr(preset))}", highlight=False)
                raise typer.Exit(code=EXIT_USAGE_ERROR)
            print(json.dumps({"rules": dict(bundle)}, indent=2))

        return app
