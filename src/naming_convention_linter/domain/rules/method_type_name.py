"""Method named like its type (W9505)."""

from naming_convention_linter.domain.constants import CODE_METHOD_NAMED_LIKE_TYPE
from naming_convention_linter.domain.entities import DeclarationNode
from naming_convention_linter.domain.rules import Finding, NameRule


class MethodTypeNameRule(NameRule):
    """An ordinary method sharing its enclosing type's name reads like a constructor."""

    code: str = CODE_METHOD_NAMED_LIKE_TYPE

    def check(self, method: DeclarationNode, enclosing: DeclarationNode | None) -> Finding | None:
        if enclosing is None or not enclosing.kind.is_type:
            return None
        if method.simple_name != enclosing.simple_name:
            return None
        return Finding(self.code, method.simple_name)
