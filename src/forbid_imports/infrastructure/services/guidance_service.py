"""GuidanceService: loads the rule registry and provides manual instructions."""

import logging
from pathlib import Path
from typing import cast

import yaml

from forbid_imports.domain.registry_types import RuleRegistryEntry
from forbid_imports.domain.rule_msgs import RuleMsgBuilder

logger = logging.getLogger(__name__)


class GuidanceService:
    """Loads rule_registry.yaml and serves registry entries by message key."""

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
        if not self._path.exists():
            logger.warning("Rule registry not found at %s; using built-in messages.", self._path)
            self._registry = {}
            return
        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        self._registry = cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry."""
        return dict(self._registry)

    def get_entry(self, message_key: str) -> RuleRegistryEntry | None:
        return RuleMsgBuilder.get_entry(self._registry, message_key)

    def get_manual_instructions(self, message_key: str) -> str:
        entry = self.get_entry(message_key)
        if not entry:
            return ""
        return str(entry.get("manual_instructions", ""))
