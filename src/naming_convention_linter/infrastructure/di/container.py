from typing import TYPE_CHECKING, Any, Optional, TypeVar, cast

from naming_convention_linter.domain.config import ConfigurationLoader
from naming_convention_linter.infrastructure.config_file_loader import ConfigFileLoader
from naming_convention_linter.infrastructure.gateways.astroid_gateway import (
    AstroidDeclarationGateway,
)
from naming_convention_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from naming_convention_linter.infrastructure.reporters import (
    JsonAuditReporter,
    TerminalAuditReporter,
)
from naming_convention_linter.infrastructure.services.guidance_service import GuidanceService

if TYPE_CHECKING:
    from naming_convention_linter.domain.protocols import (
        DeclarationSourceProtocol,
        FileSystemProtocol,
    )
    from naming_convention_linter.interface.reporters import AuditReporter

T = TypeVar("T")


class NamingContainer:
    """Dependency Injection Container for the naming convention linter."""

    _instance: Optional["NamingContainer"] = None

    def __init__(self, config_loader: ConfigurationLoader | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader)

    def _register_defaults(self, config_loader: ConfigurationLoader | None) -> None:
        """Register default implementations for protocols."""
        if config_loader is None:
            config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)

        guidance_service = GuidanceService()
        self.register_singleton("GuidanceService", guidance_service)
        self.register_singleton(
            "AstroidDeclarationGateway",
            AstroidDeclarationGateway(check_parameters=config_loader.check_parameters),
        )
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton(
            "TerminalAuditReporter", TerminalAuditReporter(guidance_service))
        self.register_singleton("JsonAuditReporter", JsonAuditReporter())

    @classmethod
    def get_instance(cls) -> "NamingContainer":
        """Process-wide container, used by the pylint plugin."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        if key not in self._singletons:
            raise KeyError(f"No singleton registered for {key!r}")
        return self._singletons[key]

    def get_typed(self, key: str, _type: type[T]) -> T:
        return cast(T, self.get(key))

    def get_config_loader(self) -> ConfigurationLoader:
        return self.get_typed("ConfigurationLoader", ConfigurationLoader)

    def get_guidance_service(self) -> GuidanceService:
        return self.get_typed("GuidanceService", GuidanceService)

    def get_declaration_source(self) -> "DeclarationSourceProtocol":
        return cast("DeclarationSourceProtocol", self.get("AstroidDeclarationGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_reporter(self, output_format: str = "terminal") -> "AuditReporter":
        key = "JsonAuditReporter" if output_format == "json" else "TerminalAuditReporter"
        return cast("AuditReporter", self.get(key))
