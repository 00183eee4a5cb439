"""Load [tool.naming-conventions] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

from naming_convention_linter.domain.constants import PYPROJECT_SECTION

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml, searching upward from start."""

    @staticmethod
    def load_config_from_fs(
        start: Path | None = None,
    ) -> dict[str, object]:
        """Return the [tool.naming-conventions] table; empty when nothing is found."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError) as exc:
                logger.warning("Ignoring unreadable %s: %s", config_file, exc)
                continue
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(PYPROJECT_SECTION, {}) or {}
            logger.debug("Loaded configuration from %s", config_file)
            return config_dict
        return {}
