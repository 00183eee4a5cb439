"""Configuration for linter settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from naming_convention_linter.domain.entities import Severity

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised for invalid configuration when validation is strict."""


class ConfigurationLoader:
    """
    Immutable configuration for the naming checker.

    Created by Infrastructure from the [tool.naming-conventions] table. Domain
    does not read the filesystem; ConfigFileLoader.load_config_from_fs()
    supplies the dict at the composition root. None of the settings changes what a
    naming convention means.
    """

    DEFAULT_SEVERITY = Severity.WARNING

    def __init__(
        self,
        config_dict: dict[str, object],
        strict: bool = False,
    ) -> None:
        self._config = dict(config_dict)
        self._strict = strict
        if self._config:
            self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about (or, when strict, reject) values the loader cannot use."""
        raw_severity = config.get("severity")
        if raw_severity is not None and not self._parse_severity(raw_severity):
            problem = (
                f"Configuration Warning: unknown severity {raw_severity!r}; "
                f"expected one of {[s.value for s in Severity]}."
            )
            self._reject_or_warn(problem)

        raw_excludes = config.get("exclude_paths")
        if raw_excludes is not None and not isinstance(raw_excludes, list):
            logger.warning(
                "Configuration Warning: 'exclude_paths' should be a list of strings.")

        raw_check_parameters = config.get("check_parameters")
        if raw_check_parameters is not None and not isinstance(raw_check_parameters, bool):
            self._reject_or_warn(
                "Configuration Warning: 'check_parameters' should be true or false, "
                f"got {raw_check_parameters!r}; using true.")

    def _reject_or_warn(self, problem: str) -> None:
        if self._strict:
            raise ConfigurationError(problem)
        logger.warning(problem)

    @staticmethod
    def _parse_severity(raw: object) -> Severity | None:
        if not isinstance(raw, str):
            return None
        try:
            return Severity(raw.strip().lower())
        except ValueError:
            return None

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def severity(self) -> Severity:
        """Severity stamped on every advisory. Never an error."""
        return self._parse_severity(self._config.get("severity")) or self.DEFAULT_SEVERITY

    @property
    def exclude_paths(self) -> list[str]:
        """Path fragments the CLI skips."""
        raw = self._config.get("exclude_paths", [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []

    @property
    def check_parameters(self) -> bool:
        """Whether the front-end reports function parameters as declarations."""
        raw = self._config.get("check_parameters", True)
        return raw if isinstance(raw, bool) else True

    def is_excluded(self, file_path: str) -> bool:
        normalized = file_path.replace("\\", "/")
        return any(fragment and fragment in normalized for fragment in self.exclude_paths)
