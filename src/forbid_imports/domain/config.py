"""Configuration for forbid-imports rules. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from forbid_imports.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleOptions:
    """Raw pattern text for one rule instance. None means the option was not supplied."""

    package_name_regexp: str | None = ""
    class_name_regexp: str | None = ""
    forbidden_imports_regexp: str | None = None
    forbidden_imports_excludes_regexp: str | None = None


class ConfigurationLoader:
    """
    Immutable view over the [tool.forbid-imports] table of pyproject.toml.

    Infrastructure reads the file (ConfigFileLoader.load_config_from_fs) and
    constructs ConfigurationLoader(config_dict) at the composition root.
    Each entry of ``rules`` becomes one rule instance; option keys given at
    the top level of the table form one more.
    """

    OPTION_KEYS: dict[str, str] = {
        "package_name_regexp": "package_name_regexp",
        "packageNameRegexp": "package_name_regexp",
        "class_name_regexp": "class_name_regexp",
        "classNameRegexp": "class_name_regexp",
        "forbidden_imports_regexp": "forbidden_imports_regexp",
        "forbiddenImportsRegexp": "forbidden_imports_regexp",
        "forbidden_imports_excludes_regexp": "forbidden_imports_excludes_regexp",
        "forbiddenImportsExcludesRegexp": "forbidden_imports_excludes_regexp",
    }

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._config: dict[str, object] = dict(config_dict or {})
        self._rule_options = self._parse_rules(self._config)

    @property
    def rule_options(self) -> list[RuleOptions]:
        """One RuleOptions per configured rule instance, in declaration order."""
        return list(self._rule_options)

    @classmethod
    def normalize_key(cls, key: str) -> str | None:
        """Map snake_case, kebab-case or camelCase option names to RuleOptions fields."""
        return cls.OPTION_KEYS.get(key) or cls.OPTION_KEYS.get(key.replace("-", "_"))

    @classmethod
    def _parse_rules(cls, config: dict[str, object]) -> list[RuleOptions]:
        result: list[RuleOptions] = []
        raw_rules = config.get("rules", [])
        if not isinstance(raw_rules, list):
            raise ConfigurationError("[tool.forbid-imports] 'rules' must be an array of tables")
        for index, raw in enumerate(raw_rules):
            if not isinstance(raw, dict):
                raise ConfigurationError(f"[tool.forbid-imports] rules[{index}] must be a table")
            result.append(cls._parse_one(raw, f"rules[{index}]"))

        top_level = {k: v for k, v in config.items() if k != "rules"}
        if any(cls.normalize_key(k) for k in top_level):
            result.append(cls._parse_one(top_level, "top-level"))
        elif top_level:
            cls._warn_unknown(top_level, "top-level")
        return result

    @classmethod
    def _parse_one(cls, raw: dict[str, object], where: str) -> RuleOptions:
        values: dict[str, str] = {}
        for key, value in raw.items():
            field_name = cls.normalize_key(key)
            if field_name is None:
                continue
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"[tool.forbid-imports] {where}: '{key}' must be a string, got {type(value).__name__}"
                )
            values[field_name] = value
        cls._warn_unknown(raw, where)
        return RuleOptions(**values)

    @classmethod
    def _warn_unknown(cls, raw: dict[str, object], where: str) -> None:
        for key in raw:
            if cls.normalize_key(key) is None:
                logger.warning("Configuration Warning: unknown key '%s' in [tool.forbid-imports] %s.", key, where)
