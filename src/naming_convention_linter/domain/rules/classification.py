"""Decides which naming convention a declaration is held to."""

from naming_convention_linter.domain.entities import (
    ConventionKind,
    DeclarationKind,
    DeclarationNode,
    Modifier,
)


class ConstantClassifier:
    """Heuristic for variables that count as constants. First matching rule wins."""

    @staticmethod
    def is_heuristically_constant(node: DeclarationNode) -> bool:
        # Interface members are implicitly constant.
        if node.enclosing_kind is DeclarationKind.INTERFACE:
            return True
        if node.kind is DeclarationKind.FIELD and node.has_modifiers(
            Modifier.PUBLIC, Modifier.STATIC, Modifier.FINAL
        ):
            return True
        return node.constant_value_known


class ConventionResolver:
    """Maps a declaration to its ConventionKind, or None when its name is not checked."""

    @staticmethod
    def resolve(node: DeclarationNode) -> ConventionKind | None:
        kind = node.kind
        if kind.is_type:
            return ConventionKind.UPPER_CAMEL_CASE
        if kind is DeclarationKind.METHOD:
            return ConventionKind.LOWER_CAMEL_CASE
        if kind.is_variable:
            if kind is DeclarationKind.ENUM_CONSTANT or ConstantClassifier.is_heuristically_constant(node):
                return ConventionKind.ALL_CAPS_UNDERSCORE
            return ConventionKind.LOWER_CAMEL_CASE
        return None
