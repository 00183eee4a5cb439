from typing import TYPE_CHECKING, Optional, Protocol

from naming_convention_linter.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    import astroid

    from naming_convention_linter.domain.entities import Advisory, DeclarationNode


class AdvisorySink(Protocol):
    """Append-only consumer of advisories. The scanner writes, never reads."""

    def emit(self, advisory: "Advisory") -> None:
        ...


class DeclarationSourceProtocol(Protocol):
    """Front-end that turns parsed source into a forest of declaration nodes."""

    def parse_file(self, file_path: str) -> Optional["astroid.nodes.Module"]:
        """Parse a file and return the astroid Module node, or None on failure."""
        ...

    def build_declarations(
        self, module: "astroid.nodes.Module"
    ) -> tuple["DeclarationNode", ...]:
        """Return the module's root declarations in source order."""
        ...


class FileSystemProtocol(Protocol):
    def exists(self, path: str) -> bool:
        ...

    def glob_python_files(self, path: str) -> list[str]:
        ...


class GuidanceServiceProtocol(Protocol):
    """Read access to the rule registry (message templates and guidance)."""

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        ...

    def get_naming_entry(self, rule_code: str) -> Optional[RuleRegistryEntry]:
        ...

    def get_manual_instructions(self, rule_code: str) -> str:
        ...
