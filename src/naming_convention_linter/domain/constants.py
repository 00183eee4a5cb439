"""
Naming Convention Linter: shared constants
"""

# ANSI Cyan (\033[36m)
_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_NAMECHECK_ART: str = r"""
    _   __                     ________              __
   / | / /___ _____ ___  ___  / ____/ /_  ___  _____/ /__
  /  |/ / __ `/ __ `__ \/ _ \/ /   / __ \/ _ \/ ___/ //_/
 / /|  / /_/ / / / / / /  __/ /___/ / / /  __/ /__/ ,<
/_/ |_/\__,_/_/ /_/ /_/\___/\____/_/ /_/\___/\___/_/|_|
"""
NAMECHECK_BANNER = _CYAN + _NAMECHECK_ART + _RESET

# Registry keys are NAMING_PREFIX + code, e.g. "naming.W9501"
NAMING_PREFIX: str = "naming."

CODE_START_LOWERCASE: str = "W9501"
CODE_START_UPPERCASE: str = "W9502"
CODE_NOT_CAMEL_CASE: str = "W9503"
CODE_NOT_ALL_CAPS: str = "W9504"
CODE_METHOD_NAMED_LIKE_TYPE: str = "W9505"

ALL_CODES: list[str] = [
    CODE_START_LOWERCASE,
    CODE_START_UPPERCASE,
    CODE_NOT_CAMEL_CASE,
    CODE_NOT_ALL_CAPS,
    CODE_METHOD_NAMED_LIKE_TYPE,
]

# Used when the registry file is missing or an entry lacks a template.
FALLBACK_MESSAGES: dict[str, tuple[str, str, str]] = {
    CODE_START_LOWERCASE: (
        "Name '%s' should start with a lowercase letter",
        "name-should-start-lowercase",
        "lowerCamelCase name starts with an uppercase letter",
    ),
    CODE_START_UPPERCASE: (
        "Name '%s' should start with an uppercase letter",
        "name-should-start-uppercase",
        "UpperCamelCase name starts with a lowercase letter",
    ),
    CODE_NOT_CAMEL_CASE: (
        "Name '%s' should follow camelCase",
        "name-not-camel-case",
        "Name is not camelCase",
    ),
    CODE_NOT_ALL_CAPS: (
        "Constant '%s' should be all caps with single underscores and start with a letter",
        "constant-not-all-caps",
        "Constant is not ALL_CAPS_WITH_UNDERSCORES",
    ),
    CODE_METHOD_NAMED_LIKE_TYPE: (
        "Ordinary method '%s' should not share its type's name; it may be confused with a constructor",
        "method-named-like-type",
        "Method named like its enclosing type",
    ),
}

PYPROJECT_SECTION: str = "naming-conventions"

# Python names that map to a nominal interface / enumeration declaration.
INTERFACE_BASE_NAMES: frozenset[str] = frozenset({"Protocol"})
ENUM_BASE_NAMES: frozenset[str] = frozenset(
    {"Enum", "IntEnum", "StrEnum", "Flag", "IntFlag"}
)
CONSTRUCTOR_NAMES: frozenset[str] = frozenset({"__init__", "__new__"})
