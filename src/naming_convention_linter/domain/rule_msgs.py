"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Mapping
from typing import cast

from naming_convention_linter.domain.constants import FALLBACK_MESSAGES, NAMING_PREFIX
from naming_convention_linter.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """Builds Pylint msgs tuples and advisory text from a registry mapping."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> RuleRegistryEntry | None:
        """Return registry entry for a naming rule by code or symbol."""
        entry = registry.get(f"{NAMING_PREFIX}{rule_code}")
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in registry.items():
            if not rid.startswith(NAMING_PREFIX):
                continue
            if isinstance(e, dict) and e.get("symbol") == rule_code:
                return cast(RuleRegistryEntry, dict(e))
        return None

    @staticmethod
    def get_message_tuple(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> tuple[str, str, str]:
        """Return (message_template, symbol, description); falls back to built-in text."""
        fallback = FALLBACK_MESSAGES.get(
            rule_code, ("%s", rule_code, rule_code))
        entry = RuleMsgBuilder.get_entry(registry, rule_code)
        if not entry or not entry.get("message_template"):
            return fallback
        symbol = entry.get("symbol") or fallback[1]
        desc = entry.get("display_name") or entry.get(
            "short_description") or fallback[2]
        return (str(entry["message_template"]), str(symbol), str(desc))

    @staticmethod
    def build_msgs_for_codes(
        registry: Mapping[str, RuleRegistryEntry], codes: list[str]
    ) -> dict[str, tuple[str, str, str]]:
        """Build Pylint msgs dict: { code: (message_template, symbol, description) }."""
        return {
            code: RuleMsgBuilder.get_message_tuple(registry, code) for code in codes
        }

    @staticmethod
    def format_message(
        registry: Mapping[str, RuleRegistryEntry],
        rule_code: str,
        args: tuple[str, ...],
    ) -> str:
        """Render the %-style template for rule_code with args."""
        template = RuleMsgBuilder.get_message_tuple(registry, rule_code)[0]
        try:
            return template % args
        except (TypeError, ValueError):
            return f"{template} {' '.join(args)}".strip()
