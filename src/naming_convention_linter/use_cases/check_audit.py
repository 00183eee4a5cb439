"""CheckAuditUseCase: scan Python files and collect naming advisories."""

import logging
from collections.abc import Mapping

from naming_convention_linter.domain.config import ConfigurationLoader
from naming_convention_linter.domain.entities import AuditResult
from naming_convention_linter.domain.protocols import (
    DeclarationSourceProtocol,
    FileSystemProtocol,
)
from naming_convention_linter.domain.registry_types import RuleRegistryEntry
from naming_convention_linter.use_cases.declaration_scanner import (
    CollectingSink,
    DeclarationScanner,
)

logger = logging.getLogger(__name__)


class CheckAuditUseCase:
    """Parses every file under a target, scans its declarations, and returns one AuditResult."""

    def __init__(
        self,
        declaration_source: DeclarationSourceProtocol,
        filesystem: FileSystemProtocol,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.declaration_source = declaration_source
        self.filesystem = filesystem
        self.config_loader = config_loader
        self.registry = registry

    def execute(self, target_path: str) -> AuditResult:
        files = [
            f for f in self.filesystem.glob_python_files(target_path)
            if not self.config_loader.is_excluded(f)
        ]
        logger.debug("Scanning %d file(s) under %s", len(files), target_path)

        sink = CollectingSink()
        scanner = DeclarationScanner(
            sink, registry=self.registry, severity=self.config_loader.severity)
        parse_failures: list[str] = []
        for file_path in files:
            module = self.declaration_source.parse_file(file_path)
            if module is None:
                parse_failures.append(file_path)
                continue
            scanner.check_all(self.declaration_source.build_declarations(module))

        return AuditResult(
            files_scanned=len(files) - len(parse_failures),
            advisories=sink.advisories,
            parse_failures=parse_failures,
        )
