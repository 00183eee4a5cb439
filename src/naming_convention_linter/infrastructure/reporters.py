"""Audit reporters: rich terminal tables and JSON."""

import json
from collections import defaultdict
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from naming_convention_linter.domain.entities import Advisory, AuditResult

if TYPE_CHECKING:
    from naming_convention_linter.domain.protocols import GuidanceServiceProtocol


class TerminalAuditReporter:
    """Terminal reporter using rich for audit tables."""

    def __init__(
        self,
        guidance_service: "GuidanceServiceProtocol",
        console: Console | None = None,
    ) -> None:
        self._guidance = guidance_service
        self.console = console or Console()

    def report_audit(self, audit_result: AuditResult, view: str = "by_file") -> None:
        """Print advisories by file (default) or a per-code summary."""
        for failed in audit_result.parse_failures:
            self.console.print(f"[yellow]Skipped (could not parse):[/yellow] {failed}")

        if not audit_result.has_advisories():
            self.console.print(
                f"\n[green]No naming advisories in {audit_result.files_scanned} file(s).[/green]")
            return

        if view == "by_code":
            self._report_by_code(audit_result)
        else:
            self._report_by_file(audit_result.advisories)
        self.console.print(
            f"\n{len(audit_result.advisories)} advisory(ies) in "
            f"{audit_result.files_scanned} file(s). Advisories never fail the build.")

    def _report_by_file(self, advisories: list[Advisory]) -> None:
        by_file: dict[str, list[Advisory]] = defaultdict(list)
        for advisory in advisories:
            path, _ = self._split_location(advisory.location)
            by_file[path or "<unknown>"].append(advisory)

        for path, items in by_file.items():
            table = Table(title=path, title_justify="left")
            table.add_column("Line", justify="right", style="dim")
            table.add_column("Code", style="cyan")
            table.add_column("Severity")
            table.add_column("Message")
            for advisory in items:
                table.add_row(
                    self._split_location(advisory.location)[1],
                    advisory.code,
                    self._severity_markup(advisory),
                    advisory.message,
                )
            self.console.print(table)

    def _report_by_code(self, audit_result: AuditResult) -> None:
        table = Table(title="Naming advisories by rule")
        table.add_column("Code", style="cyan")
        table.add_column("Count", justify="right", style="bold")
        table.add_column("How to fix")
        for code, count in sorted(audit_result.counts_by_code().items()):
            table.add_row(code, str(count), self._guidance.get_manual_instructions(code))
        self.console.print(table)

    @staticmethod
    def _split_location(location: str) -> tuple[str, str]:
        """Split "path:line:col" into (path, line). Paths may contain colons."""
        parts = location.rsplit(":", 2)
        if len(parts) < 3:
            return location, ""
        return parts[0], parts[1]

    @staticmethod
    def _severity_markup(advisory: Advisory) -> str:
        label = advisory.severity.value
        return f"[yellow]{label}[/yellow]" if label == "warning" else f"[blue]{label}[/blue]"


class JsonAuditReporter:
    """Writes the audit as a JSON document to stdout (or the given console)."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(soft_wrap=True)

    def report_audit(self, audit_result: AuditResult, view: str = "by_file") -> None:
        payload = {
            "files_scanned": audit_result.files_scanned,
            "parse_failures": list(audit_result.parse_failures),
            "counts_by_code": audit_result.counts_by_code(),
            "advisories": [self._advisory_to_dict(a) for a in audit_result.advisories],
        }
        self.console.print_json(json.dumps(payload))

    @staticmethod
    def _advisory_to_dict(advisory: Advisory) -> dict[str, object]:
        return {
            "code": advisory.code,
            "severity": advisory.severity.value,
            "message": advisory.message,
            "name": advisory.node.simple_name,
            "kind": advisory.node.kind.value,
            "location": advisory.location,
        }
