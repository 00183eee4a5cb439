"""ALL_CAPS rule (W9504): constants are uppercase letters, digits and single underscores."""

from naming_convention_linter.domain.constants import CODE_NOT_ALL_CAPS
from naming_convention_linter.domain.rules import Finding, NameRule


class AllCapsRule(NameRule):
    """Rule for W9504: constant names must start with an uppercase letter."""

    code: str = CODE_NOT_ALL_CAPS

    def check(self, name: str) -> Finding | None:
        if not name or not name[0].isupper():
            return Finding(self.code, name)

        previous_underscore = False
        for char in name[1:]:
            if char == "_":
                if previous_underscore:
                    return Finding(self.code, name)
                previous_underscore = True
                continue
            previous_underscore = False
            # isdecimal() is the Unicode Nd category
            if not (char.isupper() or char.isdecimal()):
                return Finding(self.code, name)
        return None
