"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

    pylint --load-plugins=naming_convention_linter.infrastructure.checker src/
"""

from pylint.lint import PyLinter

from naming_convention_linter.infrastructure.di.container import NamingContainer
from naming_convention_linter.use_cases.checks.naming import NamingConventionChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = NamingContainer.get_instance()
    linter.register_checker(
        NamingConventionChecker(
            linter,
            declaration_source=container.get_declaration_source(),
            config_loader=container.get_config_loader(),
            registry=container.get_guidance_service().get_registry(),
        )
    )
