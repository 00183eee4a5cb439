"""Tests for the namecheck Typer CLI."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from naming_convention_linter.domain.config import ConfigurationLoader
from naming_convention_linter.domain.entities import AuditResult
from naming_convention_linter.infrastructure.gateways.astroid_gateway import (
    AstroidDeclarationGateway,
)
from naming_convention_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from naming_convention_linter.infrastructure.reporters import JsonAuditReporter
from naming_convention_linter.infrastructure.services.guidance_service import GuidanceService
from naming_convention_linter.interface.cli import CLIAppFactory, CLIDependencies

runner = CliRunner()


def _deps(config: dict[str, object] | None = None, **overrides: object) -> CLIDependencies:
    values: dict[str, object] = {
        "config_loader": ConfigurationLoader(config or {}),
        "declaration_source": AstroidDeclarationGateway(),
        "filesystem": FileSystemGateway(),
        "guidance_service": GuidanceService(),
        "terminal_reporter": MagicMock(),
        "json_reporter": JsonAuditReporter(),
    }
    values.update(overrides)
    return CLIDependencies(**values)  # type: ignore[arg-type]


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "bad.py").write_text("class lower:\n    def Run(self): pass\n")
    return tmp_path


class TestCheckCommand:

    def test_terminal_report_receives_audit(self, project: Path) -> None:
        deps = _deps()
        result = runner.invoke(CLIAppFactory.create_app(deps), ["check", str(project)])
        assert result.exit_code == 0
        deps.terminal_reporter.report_audit.assert_called_once()
        audit = deps.terminal_reporter.report_audit.call_args.args[0]
        assert isinstance(audit, AuditResult)
        assert [a.code for a in audit.advisories] == ["W9502", "W9501"]
        assert deps.terminal_reporter.report_audit.call_args.kwargs == {"view": "by_file"}

    def test_view_is_passed_through(self, project: Path) -> None:
        deps = _deps()
        runner.invoke(CLIAppFactory.create_app(deps), ["check", str(project), "--view", "by_code"])
        assert deps.terminal_reporter.report_audit.call_args.kwargs == {"view": "by_code"}

    def test_json_output_has_no_banner(self, project: Path) -> None:
        result = runner.invoke(
            CLIAppFactory.create_app(_deps()), ["check", str(project), "--format", "json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["counts_by_code"] == {"W9501": 1, "W9502": 1}
        assert [a["name"] for a in payload["advisories"]] == ["lower", "Run"]

    def test_advisories_never_fail_the_run(self, project: Path) -> None:
        for _ in range(3):
            (project / f"worse{_}.py").write_text("class x: pass\n")
        result = runner.invoke(CLIAppFactory.create_app(_deps()), ["check", str(project)])
        assert result.exit_code == 0

    @pytest.mark.parametrize("option", [["--format", "xml"], ["--view", "by_rule"]])
    def test_unknown_choice_exits_2(self, project: Path, option: list[str]) -> None:
        deps = _deps()
        result = runner.invoke(CLIAppFactory.create_app(deps), ["check", str(project), *option])
        assert result.exit_code == 2
        deps.terminal_reporter.report_audit.assert_not_called()

    def test_missing_path_exits_2(self, tmp_path: Path) -> None:
        result = runner.invoke(
            CLIAppFactory.create_app(_deps()), ["check", str(tmp_path / "missing")])
        assert result.exit_code == 2
        assert "Path not found" in result.output

    def test_strict_config_rejects_bad_severity(self, project: Path) -> None:
        deps = _deps({"severity": "fatal"})
        app = CLIAppFactory.create_app(deps)

        lenient = runner.invoke(app, ["check", str(project)])
        strict = runner.invoke(app, ["check", str(project), "--strict-config"])

        assert lenient.exit_code == 0
        assert strict.exit_code == 2
        assert "unknown severity" in strict.output

    def test_configured_severity_reaches_advisories(self, project: Path) -> None:
        result = runner.invoke(
            CLIAppFactory.create_app(_deps({"severity": "info"})),
            ["check", str(project), "--format", "json"])
        severities = {a["severity"] for a in json.loads(result.stdout)["advisories"]}
        assert severities == {"info"}


class TestRulesCommand:

    def test_lists_every_rule(self) -> None:
        result = runner.invoke(CLIAppFactory.create_app(_deps()), ["rules"])
        assert result.exit_code == 0
        for symbol in ("name-should-start-lowercase", "method-named-like-type",
                       "constant-not-all-caps"):
            assert symbol in result.output


class TestResolveTargetPath:

    def test_explicit_path_wins(self) -> None:
        assert CLIAppFactory.resolve_target_path(Path("pkg")) == "pkg"

    def test_defaults_to_src_when_present(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert CLIAppFactory.resolve_target_path(None) == "."
        (tmp_path / "src").mkdir()
        assert CLIAppFactory.resolve_target_path(None) == "src"
