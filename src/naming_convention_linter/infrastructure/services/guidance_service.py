"""GuidanceService: loads the rule registry and serves message templates and fix guidance."""

from pathlib import Path
from typing import cast

import yaml

from naming_convention_linter.domain.protocols import GuidanceServiceProtocol
from naming_convention_linter.domain.registry_types import RuleRegistryEntry
from naming_convention_linter.domain.rule_msgs import RuleMsgBuilder


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and exposes it to checkers, the CLI and reporters."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if self._path.exists():
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
                self._registry = (
                    cast(dict[str, RuleRegistryEntry],
                         data) if isinstance(data, dict) else {}
                )
        else:
            self._registry = {}

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry for use by domain/use_cases."""
        return dict(self._registry)

    def get_naming_entry(self, rule_code: str) -> RuleRegistryEntry | None:
        """Return the full registry entry for a naming rule by code or symbol."""
        return RuleMsgBuilder.get_entry(self._registry, rule_code)

    def get_manual_instructions(self, rule_code: str) -> str:
        entry = self.get_naming_entry(rule_code)
        if not entry:
            return ""
        return str(entry.get("manual_instructions", "")).strip()
