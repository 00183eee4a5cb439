"""Tests for the pylint plugin entry point."""

from unittest.mock import MagicMock, patch

from naming_convention_linter.infrastructure import checker
from naming_convention_linter.use_cases.checks.naming import NamingConventionChecker


def test_register_adds_naming_checker() -> None:
    container = MagicMock()
    container.get_guidance_service.return_value.get_registry.return_value = {}
    linter = MagicMock()

    with patch.object(checker.NamingContainer, "get_instance", return_value=container):
        checker.register(linter)

    linter.register_checker.assert_called_once()
    registered = linter.register_checker.call_args.args[0]
    assert isinstance(registered, NamingConventionChecker)
    assert registered.declaration_source is container.get_declaration_source.return_value
