"""Load [tool.forbid-imports] from pyproject.toml. Infrastructure I/O only."""

import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml."""

    SECTION = "forbid-imports"

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Walk up from ``start`` (default: cwd) and return the first [tool.forbid-imports] table."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
            tool_section = data.get("tool", {}) or {}
            section = tool_section.get(ConfigFileLoader.SECTION, {}) or {}
            return dict(section) if isinstance(section, dict) else {}
        return {}
