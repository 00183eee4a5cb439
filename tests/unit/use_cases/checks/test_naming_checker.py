"""Unit tests for NamingConventionChecker (pylint integration)."""

import unittest
from unittest.mock import MagicMock, patch

import astroid

from naming_convention_linter.domain.config import ConfigurationLoader
from naming_convention_linter.domain.constants import ALL_CODES
from naming_convention_linter.domain.entities import DeclarationKind, DeclarationNode
from naming_convention_linter.infrastructure.gateways.astroid_gateway import (
    AstroidDeclarationGateway,
)
from naming_convention_linter.use_cases.checks.naming import NamingConventionChecker


class TestNamingConventionChecker(unittest.TestCase):

    def setUp(self) -> None:
        self.linter = MagicMock()
        self.checker = NamingConventionChecker(
            self.linter,
            declaration_source=AstroidDeclarationGateway(),
            config_loader=ConfigurationLoader({}),
            registry={},
        )

    def test_msgs_cover_all_codes(self) -> None:
        self.assertEqual(set(self.checker.msgs), set(ALL_CODES))
        self.assertEqual(self.checker.msgs["W9505"][1], "method-named-like-type")

    def test_visit_module_reports_at_declaration_nodes(self) -> None:
        module = astroid.parse(
            "class widget:\n"
            "    def widget(self, Other): pass\n"
        )
        with patch.object(self.checker, "add_message") as add_message:
            self.checker.visit_module(module)

        calls = [(c.args[0], c.kwargs["args"]) for c in add_message.call_args_list]
        self.assertEqual(calls, [
            ("W9502", ("widget",)),
            ("W9505", ("widget",)),
            ("W9501", ("Other",)),
        ])
        class_node = module.body[0]
        self.assertIs(add_message.call_args_list[0].kwargs["node"], class_node)
        self.assertIs(add_message.call_args_list[1].kwargs["node"], class_node.body[0])

    def test_falls_back_to_module_node_without_origin(self) -> None:
        source = MagicMock()
        source.build_declarations.return_value = (
            DeclarationNode(kind=DeclarationKind.CLASS, simple_name="bad"),)
        checker = NamingConventionChecker(
            self.linter, declaration_source=source,
            config_loader=ConfigurationLoader({}), registry={})
        module = astroid.parse("")
        with patch.object(checker, "add_message") as add_message:
            checker.visit_module(module)
        add_message.assert_called_once_with("W9502", node=module, args=("bad",))

    def test_conventional_module_adds_nothing(self) -> None:
        module = astroid.parse("class Parser:\n    def parseLine(self, line): pass\n")
        with patch.object(self.checker, "add_message") as add_message:
            self.checker.visit_module(module)
        add_message.assert_not_called()

    def test_info_severity_still_reports_warning_codes(self) -> None:
        checker = NamingConventionChecker(
            self.linter, declaration_source=AstroidDeclarationGateway(),
            config_loader=ConfigurationLoader({"severity": "info"}), registry={})
        module = astroid.parse("class lower: pass\n")
        with patch.object(checker, "add_message") as add_message:
            checker.visit_module(module)
        add_message.assert_called_once_with("W9502", node=module.body[0], args=("lower",))
