"""Naming convention checks (W9501, W9502, W9503, W9504, W9505)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid
from pylint.checkers import BaseChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from naming_convention_linter.domain.config import ConfigurationLoader
from naming_convention_linter.domain.constants import ALL_CODES
from naming_convention_linter.domain.entities import Advisory
from naming_convention_linter.domain.protocols import AdvisorySink, DeclarationSourceProtocol
from naming_convention_linter.domain.registry_types import RuleRegistryEntry
from naming_convention_linter.domain.rule_msgs import RuleMsgBuilder
from naming_convention_linter.use_cases.declaration_scanner import DeclarationScanner


class _PylintSink(AdvisorySink):
    """
    Forwards each advisory to pylint, anchored at the declaration's astroid node.

    pylint takes the message category from the code, so advisory severity is
    not forwarded.
    """

    def __init__(self, checker: BaseChecker, fallback_node: astroid.nodes.NodeNG) -> None:
        self._checker = checker
        self._fallback_node = fallback_node

    def emit(self, advisory: Advisory) -> None:
        node = advisory.node.origin
        if not isinstance(node, astroid.nodes.NodeNG):
            node = self._fallback_node
        self._checker.add_message(
            advisory.code, node=node, args=advisory.message_args)


class NamingConventionChecker(BaseChecker):
    """
    W9501-W9505: declaration names against UpperCamelCase, lowerCamelCase
    and ALL_CAPS conventions. Thin: builds declarations per module and
    delegates to DeclarationScanner.
    """

    name: str = "naming-conventions"
    CODES = ALL_CODES

    def __init__(
        self,
        linter: "PyLinter",
        declaration_source: DeclarationSourceProtocol,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self.declaration_source = declaration_source
        self.config_loader = config_loader
        self.registry = registry

    def visit_module(self, node: astroid.nodes.Module) -> None:
        scanner = DeclarationScanner(
            _PylintSink(self, node),
            registry=self.registry,
            severity=self.config_loader.severity,
        )
        scanner.check_all(self.declaration_source.build_declarations(node))
