from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class DeclarationKind(Enum):
    """Closed set of declaration kinds the scanner dispatches on."""
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    SPECIAL_METHOD = "special_method"
    FIELD = "field"
    ENUM_CONSTANT = "enum_constant"
    PARAMETER = "parameter"
    MODULE = "module"

    @property
    def is_type(self) -> bool:
        return self in (DeclarationKind.CLASS, DeclarationKind.INTERFACE, DeclarationKind.ENUM)

    @property
    def is_variable(self) -> bool:
        return self in (
            DeclarationKind.FIELD,
            DeclarationKind.ENUM_CONSTANT,
            DeclarationKind.PARAMETER,
        )


class Modifier(Enum):
    PUBLIC = "public"
    STATIC = "static"
    FINAL = "final"


class ConventionKind(Enum):
    """Naming pattern expected for a declaration's role."""
    UPPER_CAMEL_CASE = "UpperCamelCase"
    LOWER_CAMEL_CASE = "lowerCamelCase"
    ALL_CAPS_UNDERSCORE = "ALL_CAPS_WITH_UNDERSCORES"


class Severity(Enum):
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class DeclarationNode:
    """
    One named program declaration, as supplied by a front-end.

    The checker only reads these. `location` and `origin` belong to the
    front-end: `location` is a display string ("path:line:col") and `origin`
    is whatever handle the front-end needs to map an advisory back (for the
    astroid front-end, the astroid node).
    """
    kind: DeclarationKind
    simple_name: str
    modifiers: frozenset[Modifier] = frozenset()
    enclosing_kind: Optional[DeclarationKind] = None
    constant_value_known: bool = False
    children: tuple["DeclarationNode", ...] = ()
    location: str = field(default="", compare=False)
    origin: Any = field(default=None, compare=False, repr=False)

    def has_modifiers(self, *required: Modifier) -> bool:
        return self.modifiers.issuperset(required)


@dataclass(frozen=True)
class Advisory:
    """A non-fatal finding attached to the offending declaration."""
    code: str
    message: str
    node: DeclarationNode
    severity: Severity = Severity.WARNING
    message_args: tuple[str, ...] = ()

    @property
    def location(self) -> str:
        return self.node.location


@dataclass(frozen=True)
class AuditResult:
    """Outcome of one CLI scan over a set of files."""
    files_scanned: int
    advisories: list[Advisory] = field(default_factory=list)
    parse_failures: list[str] = field(default_factory=list)

    def has_advisories(self) -> bool:
        return bool(self.advisories)

    def counts_by_code(self) -> dict[str, int]:
        return dict(Counter(a.code for a in self.advisories))
