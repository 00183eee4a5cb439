"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from naming_convention_linter.infrastructure.di.container import NamingContainer
from naming_convention_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = NamingContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        declaration_source=container.get_declaration_source(),
        filesystem=container.get_filesystem_gateway(),
        guidance_service=container.get_guidance_service(),
        terminal_reporter=container.get_reporter("terminal"),
        json_reporter=container.get_reporter("json"),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
