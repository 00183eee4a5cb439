"""CLI entry points for namecheck - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from naming_convention_linter.domain.config import ConfigurationError, ConfigurationLoader
from naming_convention_linter.domain.constants import ALL_CODES, NAMECHECK_BANNER
from naming_convention_linter.domain.protocols import (
    DeclarationSourceProtocol,
    FileSystemProtocol,
    GuidanceServiceProtocol,
)
from naming_convention_linter.domain.rule_msgs import RuleMsgBuilder
from naming_convention_linter.interface.reporters import AuditReporter
from naming_convention_linter.use_cases.check_audit import CheckAuditUseCase


class OutputFormat(str, Enum):
    TERMINAL = "terminal"
    JSON = "json"


class AuditView(str, Enum):
    BY_FILE = "by_file"
    BY_CODE = "by_code"


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    declaration_source: DeclarationSourceProtocol
    filesystem: FileSystemProtocol
    guidance_service: GuidanceServiceProtocol
    terminal_reporter: AuditReporter
    json_reporter: AuditReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_path(path: Optional[Path]) -> str:
        """Resolve target path: explicit path, else src/ if exists, else '.'."""
        if path and str(path) != ".":
            return str(path)
        src_dir = Path.cwd() / "src"
        if src_dir.exists() and src_dir.is_dir():
            return "src"
        return "."

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            force=True,
        )

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="namecheck",
            help="namecheck: advisory naming convention checks for Python declarations.",
            add_completion=False,
        )

        @app.command()
        def check(
            path: Optional[Path] = typer.Argument(None, help="File or directory to scan (default: src/ if present, else .)"),  # noqa: B008, RUF100
            output_format: OutputFormat = typer.Option(
                OutputFormat.TERMINAL, "--format", help="Output format"),
            view: AuditView = typer.Option(
                AuditView.BY_FILE, help="Terminal view: advisories per file or counts per rule"),
            strict_config: bool = typer.Option(
                False, "--strict-config", help="Reject invalid [tool.naming-conventions] values"),
            verbose: bool = typer.Option(
                False, "--verbose", "-v", help="Debug logging"),
        ) -> None:
            """Scan declarations and report naming advisories. Always exits 0 after a scan."""
            CLIAppFactory.configure_logging(verbose)
            config_loader = deps.config_loader
            if strict_config:
                try:
                    config_loader = ConfigurationLoader(
                        deps.config_loader.config, strict=True)
                except ConfigurationError as exc:
                    typer.echo(f"Configuration error: {exc}", err=True)
                    raise typer.Exit(code=2) from exc

            target_path = CLIAppFactory.resolve_target_path(path)
            if not deps.filesystem.exists(target_path):
                typer.echo(f"Path not found: {target_path}", err=True)
                raise typer.Exit(code=2)

            if output_format is not OutputFormat.JSON:
                print(NAMECHECK_BANNER)
            use_case = CheckAuditUseCase(
                declaration_source=deps.declaration_source,
                filesystem=deps.filesystem,
                config_loader=config_loader,
                registry=deps.guidance_service.get_registry(),
            )
            audit_result = use_case.execute(target_path)
            reporter = (
                deps.json_reporter if output_format is OutputFormat.JSON
                else deps.terminal_reporter
            )
            reporter.report_audit(audit_result, view=view.value)

        @app.command()
        def rules() -> None:
            """List the naming rules with their symbols and descriptions."""
            registry = deps.guidance_service.get_registry()
            table = Table(title="Naming convention rules")
            table.add_column("Code", style="cyan", no_wrap=True)
            table.add_column("Symbol", style="bold", no_wrap=True)
            table.add_column("Message")
            for code in ALL_CODES:
                template, symbol, _ = RuleMsgBuilder.get_message_tuple(registry, code)
                table.add_row(code, symbol, template.replace("%s", "<name>"))
            Console().print(table)

        return app
