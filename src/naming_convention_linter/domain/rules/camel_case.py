"""CamelCase rule (W9501, W9502, W9503): UpperCamelCase for types, lowerCamelCase otherwise."""

from naming_convention_linter.domain.constants import (
    CODE_NOT_CAMEL_CASE,
    CODE_START_LOWERCASE,
    CODE_START_UPPERCASE,
)
from naming_convention_linter.domain.rules import Finding, NameRule


class CamelCaseRule(NameRule):
    """
    Character scan for camelCase names.

    The first code point decides the start: a wrong case ends the check with
    W9501/W9502, an uncased start (digit, underscore, ...) is W9503. After that,
    two uppercase code points in a row are W9503, so acronym runs such as
    `parseURL` or `HTTPServer` are rejected.
    """

    code: str = CODE_NOT_CAMEL_CASE

    def check(self, name: str, require_initial_upper: bool) -> Finding | None:
        if not name:
            return Finding(CODE_NOT_CAMEL_CASE, name)

        first = name[0]
        if first.isupper():
            if not require_initial_upper:
                return Finding(CODE_START_LOWERCASE, name)
            previous_upper = True
        elif first.islower():
            if require_initial_upper:
                return Finding(CODE_START_UPPERCASE, name)
            previous_upper = False
        else:
            return Finding(CODE_NOT_CAMEL_CASE, name)

        for char in name[1:]:
            if char.isupper():
                if previous_upper:
                    return Finding(CODE_NOT_CAMEL_CASE, name)
                previous_upper = True
            else:
                previous_upper = False
        return None
