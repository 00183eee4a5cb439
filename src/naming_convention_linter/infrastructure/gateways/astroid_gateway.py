"""Astroid Gateway - builds declaration trees from astroid modules."""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

import astroid

from naming_convention_linter.domain.constants import (
    CONSTRUCTOR_NAMES,
    ENUM_BASE_NAMES,
    INTERFACE_BASE_NAMES,
)
from naming_convention_linter.domain.entities import (
    DeclarationKind,
    DeclarationNode,
    Modifier,
)
from naming_convention_linter.domain.protocols import DeclarationSourceProtocol

logger = logging.getLogger(__name__)

_BLOCK_STATEMENTS = (
    astroid.nodes.If,
    astroid.nodes.For,
    astroid.nodes.While,
    astroid.nodes.With,
)


class AstroidDeclarationGateway(DeclarationSourceProtocol):
    """
    Python front-end for the declaration scanner.

    Module-level classes, functions and assignments become the roots, including
    those under if/try/with/for/while blocks. Class bodies contribute nested
    types, methods, fields and enum constants the same way; functions
    contribute their parameters. Statements inside function bodies are not
    declarations. A field name assigned twice in one scope is declared once.

    Leading underscores are Python's visibility marker: they decide PUBLIC and
    are dropped from the simple name. Dunder variables and `_` are skipped,
    dunder methods are constructors or special methods.
    """

    def __init__(self, check_parameters: bool = True) -> None:
        self._check_parameters = check_parameters

    def parse_file(self, file_path: str) -> Optional[astroid.nodes.Module]:
        """Parse a file and return the astroid Module node."""
        path = Path(file_path)
        try:
            source = path.read_text(encoding="utf-8")
            return astroid.parse(source, module_name=path.stem, path=str(path))
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", file_path, exc)
        except astroid.AstroidBuildingError as exc:
            logger.warning("Could not parse %s: %s", file_path, exc)
        return None

    def build_declarations(self, module: astroid.nodes.Module) -> tuple[DeclarationNode, ...]:
        """Return the module's root declarations in source order."""
        return tuple(self._build_body(module.body, DeclarationKind.MODULE, in_enum=False))

    # -- scopes ---------------------------------------------------------------

    def _build_body(
        self,
        body: list[astroid.nodes.NodeNG],
        enclosing_kind: DeclarationKind,
        in_enum: bool,
    ) -> list[DeclarationNode]:
        declarations: list[DeclarationNode] = []
        seen_fields: set[str] = set()
        for statement in self._declaration_statements(body):
            if isinstance(statement, astroid.nodes.ClassDef):
                declarations.append(self._build_class(statement, enclosing_kind))
            elif isinstance(statement, astroid.nodes.FunctionDef):
                declarations.append(self._build_function(statement, enclosing_kind))
            elif isinstance(statement, (astroid.nodes.Assign, astroid.nodes.AnnAssign)):
                for raw_name, field_node in self._build_assignment(
                    statement, enclosing_kind, in_enum
                ):
                    if raw_name in seen_fields:
                        continue
                    seen_fields.add(raw_name)
                    declarations.append(field_node)
        return declarations

    @classmethod
    def _declaration_statements(
        cls, body: list[astroid.nodes.NodeNG]
    ) -> Iterator[astroid.nodes.NodeNG]:
        """Statements of a scope in source order, including those nested in if/try/with/loops."""
        for statement in body:
            if isinstance(statement, (astroid.nodes.Try, astroid.nodes.TryStar)):
                yield from cls._declaration_statements(statement.body)
                for handler in statement.handlers:
                    yield from cls._declaration_statements(handler.body)
                yield from cls._declaration_statements(statement.orelse)
                yield from cls._declaration_statements(statement.finalbody)
            elif isinstance(statement, _BLOCK_STATEMENTS):
                yield from cls._declaration_statements(statement.body)
                yield from cls._declaration_statements(getattr(statement, "orelse", []))
            else:
                yield statement

    def _build_class(
        self, node: astroid.nodes.ClassDef, enclosing_kind: DeclarationKind
    ) -> DeclarationNode:
        kind = self._class_kind(node)
        simple_name, is_public = self._split_name(node.name) or (node.name, True)
        modifiers = set()
        if is_public:
            modifiers.add(Modifier.PUBLIC)
        if self._has_decorator(node, {"final"}):
            modifiers.add(Modifier.FINAL)
        if enclosing_kind is not DeclarationKind.MODULE:
            modifiers.add(Modifier.STATIC)

        members = self._build_body(node.body, kind, in_enum=kind is DeclarationKind.ENUM)
        members.extend(self._build_instance_attributes(node, kind, members))
        return DeclarationNode(
            kind=kind,
            simple_name=simple_name,
            modifiers=frozenset(modifiers),
            enclosing_kind=enclosing_kind,
            children=tuple(members),
            location=self._location(node),
            origin=node,
        )

    def _build_function(
        self, node: astroid.nodes.FunctionDef, enclosing_kind: DeclarationKind
    ) -> DeclarationNode:
        raw_name = node.name
        if raw_name in CONSTRUCTOR_NAMES:
            kind, simple_name, is_public = DeclarationKind.CONSTRUCTOR, raw_name, True
        elif self._is_dunder(raw_name):
            kind, simple_name, is_public = DeclarationKind.SPECIAL_METHOD, raw_name, True
        else:
            kind = DeclarationKind.METHOD
            simple_name, is_public = self._split_name(raw_name) or (raw_name, False)

        modifiers = set()
        if is_public:
            modifiers.add(Modifier.PUBLIC)
        if self._has_decorator(node, {"staticmethod", "classmethod"}):
            modifiers.add(Modifier.STATIC)
        if self._has_decorator(node, {"final"}):
            modifiers.add(Modifier.FINAL)

        parameters = self._build_parameters(node, kind) if self._check_parameters else []
        return DeclarationNode(
            kind=kind,
            simple_name=simple_name,
            modifiers=frozenset(modifiers),
            enclosing_kind=enclosing_kind,
            children=tuple(parameters),
            location=self._location(node),
            origin=node,
        )

    # -- variables ------------------------------------------------------------

    def _build_assignment(
        self,
        statement: astroid.nodes.Assign | astroid.nodes.AnnAssign,
        enclosing_kind: DeclarationKind,
        in_enum: bool,
    ) -> list[tuple[str, DeclarationNode]]:
        """(raw name, declaration) per assigned name; the raw name keys deduplication."""
        if isinstance(statement, astroid.nodes.AnnAssign):
            targets = [statement.target]
            is_final = self._is_final_annotation(statement.annotation)
        else:
            targets = list(statement.targets)
            is_final = False
        names = [name for target in targets for name in self._assigned_names(target)]
        single_literal = (
            len(names) == 1 and isinstance(statement.value, astroid.nodes.Const)
        )

        declarations = []
        for name_node in names:
            split = self._split_name(name_node.name)
            if split is None:
                continue
            simple_name, is_public = split
            is_member = in_enum and is_public and statement.value is not None
            modifiers = {Modifier.STATIC}
            if is_public:
                modifiers.add(Modifier.PUBLIC)
            if is_final or is_member:
                modifiers.add(Modifier.FINAL)
            declarations.append((
                name_node.name,
                DeclarationNode(
                    kind=DeclarationKind.ENUM_CONSTANT if is_member else DeclarationKind.FIELD,
                    simple_name=simple_name,
                    modifiers=frozenset(modifiers),
                    enclosing_kind=enclosing_kind,
                    constant_value_known=is_final and single_literal,
                    location=self._location(name_node),
                    origin=name_node,
                ),
            ))
        return declarations

    def _build_instance_attributes(
        self,
        node: astroid.nodes.ClassDef,
        kind: DeclarationKind,
        members: list[DeclarationNode],
    ) -> list[DeclarationNode]:
        declared = {
            m.origin.name for m in members
            if m.kind.is_variable and isinstance(m.origin, astroid.nodes.AssignName)
        }
        attributes = []
        for raw_name, assignments in node.instance_attrs.items():
            split = self._split_name(raw_name)
            if split is None or raw_name in declared or not assignments:
                continue
            simple_name, is_public = split
            first = assignments[0]
            attributes.append(
                DeclarationNode(
                    kind=DeclarationKind.FIELD,
                    simple_name=simple_name,
                    modifiers=frozenset({Modifier.PUBLIC} if is_public else ()),
                    enclosing_kind=kind,
                    location=self._location(first),
                    origin=first,
                )
            )
        return attributes

    def _build_parameters(
        self, node: astroid.nodes.FunctionDef, enclosing_kind: DeclarationKind
    ) -> list[DeclarationNode]:
        arguments = node.args
        if arguments is None or arguments.args is None:
            return []
        named: list[tuple[str, astroid.nodes.NodeNG]] = []
        for arg in [*arguments.posonlyargs, *arguments.args]:
            named.append((arg.name, arg))
        if arguments.vararg:
            named.append((arguments.vararg, getattr(arguments, "vararg_node", None) or arguments))
        for arg in arguments.kwonlyargs:
            named.append((arg.name, arg))
        if arguments.kwarg:
            named.append((arguments.kwarg, getattr(arguments, "kwarg_node", None) or arguments))

        parameters = []
        for raw_name, origin in named:
            split = self._split_name(raw_name)
            if split is None:
                continue
            parameters.append(
                DeclarationNode(
                    kind=DeclarationKind.PARAMETER,
                    simple_name=split[0],
                    enclosing_kind=enclosing_kind,
                    location=self._location(origin),
                    origin=origin,
                )
            )
        return parameters

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _is_dunder(name: str) -> bool:
        return len(name) > 4 and name.startswith("__") and name.endswith("__")

    @classmethod
    def _split_name(cls, raw_name: str) -> tuple[str, bool] | None:
        """Return (simple_name, is_public), or None for names that are not declarations."""
        if cls._is_dunder(raw_name):
            return None
        stripped = raw_name.lstrip("_")
        if not stripped:
            return None
        return stripped, stripped == raw_name

    @staticmethod
    def _assigned_names(target: astroid.nodes.NodeNG) -> list[astroid.nodes.AssignName]:
        if isinstance(target, astroid.nodes.AssignName):
            return [target]
        if isinstance(target, astroid.nodes.Starred):
            return AstroidDeclarationGateway._assigned_names(target.value)
        if isinstance(target, (astroid.nodes.Tuple, astroid.nodes.List)):
            return [
                name
                for element in target.elts
                for name in AstroidDeclarationGateway._assigned_names(element)
            ]
        return []

    @staticmethod
    def _simple_ref_name(node: astroid.nodes.NodeNG | None) -> str | None:
        """'Protocol' for `Protocol`, `typing.Protocol` and `Protocol[T]`."""
        if isinstance(node, astroid.nodes.Subscript):
            node = node.value
        if isinstance(node, astroid.nodes.Name):
            return node.name
        if isinstance(node, astroid.nodes.Attribute):
            return node.attrname
        return None

    @classmethod
    def _class_kind(cls, node: astroid.nodes.ClassDef) -> DeclarationKind:
        base_names = {cls._simple_ref_name(base) for base in node.bases}
        if base_names & INTERFACE_BASE_NAMES:
            return DeclarationKind.INTERFACE
        if base_names & ENUM_BASE_NAMES:
            return DeclarationKind.ENUM
        return DeclarationKind.CLASS

    @classmethod
    def _is_final_annotation(cls, annotation: astroid.nodes.NodeNG | None) -> bool:
        return cls._simple_ref_name(annotation) == "Final"

    @classmethod
    def _has_decorator(
        cls, node: astroid.nodes.ClassDef | astroid.nodes.FunctionDef, names: set[str]
    ) -> bool:
        decorators = node.decorators
        if decorators is None:
            return False
        return any(cls._simple_ref_name(d) in names for d in decorators.nodes)

    @staticmethod
    def _location(node: astroid.nodes.NodeNG) -> str:
        """Compute path:lineno:col_offset from an astroid node."""
        root = node.root()
        path = getattr(root, "file", "") or ""
        lineno = getattr(node, "lineno", 0) or 0
        col_offset = getattr(node, "col_offset", 0) or 0
        return f"{path}:{lineno}:{col_offset}"
