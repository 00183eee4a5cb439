"""Depth-first scan of a declaration forest, dispatching each node to its naming rule."""

from collections.abc import Iterable, Mapping

from naming_convention_linter.domain.entities import (
    Advisory,
    ConventionKind,
    DeclarationKind,
    DeclarationNode,
    Severity,
)
from naming_convention_linter.domain.protocols import AdvisorySink
from naming_convention_linter.domain.registry_types import RuleRegistryEntry
from naming_convention_linter.domain.rule_msgs import RuleMsgBuilder
from naming_convention_linter.domain.rules import Finding
from naming_convention_linter.domain.rules.all_caps import AllCapsRule
from naming_convention_linter.domain.rules.camel_case import CamelCaseRule
from naming_convention_linter.domain.rules.classification import ConventionResolver
from naming_convention_linter.domain.rules.method_type_name import MethodTypeNameRule


class CollectingSink(AdvisorySink):
    """Sink that keeps advisories in emission order."""

    def __init__(self) -> None:
        self.advisories: list[Advisory] = []

    def emit(self, advisory: Advisory) -> None:
        self.advisories.append(advisory)


class DeclarationScanner:
    """
    Visits every declaration once, parent before children, siblings in order.

    Types get UpperCamelCase, ordinary methods get the type-name check and
    lowerCamelCase, variables get ALL_CAPS or lowerCamelCase depending on
    classification. Constructors and special methods are not checked, but
    their parameters are. Advisories go to the sink as soon as they are
    found; nothing is kept between check_all calls.
    """

    def __init__(
        self,
        sink: AdvisorySink,
        registry: Mapping[str, RuleRegistryEntry] | None = None,
        severity: Severity = Severity.WARNING,
    ) -> None:
        self._sink = sink
        self._registry: Mapping[str, RuleRegistryEntry] = registry or {}
        self._severity = severity
        self._camel_case_rule = CamelCaseRule()
        self._all_caps_rule = AllCapsRule()
        self._method_type_name_rule = MethodTypeNameRule()

    def check_all(self, roots: Iterable[DeclarationNode]) -> None:
        for root in roots:
            self._scan(root, None)

    def _scan(self, node: DeclarationNode, enclosing: DeclarationNode | None) -> None:
        if node.kind is DeclarationKind.METHOD:
            self._report(node, self._method_type_name_rule.check(node, enclosing))
        convention = ConventionResolver.resolve(node)
        if convention is ConventionKind.UPPER_CAMEL_CASE:
            self._report(node, self._camel_case_rule.check(
                node.simple_name, require_initial_upper=True))
        elif convention is ConventionKind.LOWER_CAMEL_CASE:
            self._report(node, self._camel_case_rule.check(
                node.simple_name, require_initial_upper=False))
        elif convention is ConventionKind.ALL_CAPS_UNDERSCORE:
            self._report(node, self._all_caps_rule.check(node.simple_name))
        for child in node.children:
            self._scan(child, node)

    def _report(self, node: DeclarationNode, finding: Finding | None) -> None:
        if finding is None:
            return
        self._sink.emit(
            Advisory(
                code=finding.code,
                message=RuleMsgBuilder.format_message(
                    self._registry, finding.code, finding.message_args),
                node=node,
                severity=self._severity,
                message_args=finding.message_args,
            )
        )
