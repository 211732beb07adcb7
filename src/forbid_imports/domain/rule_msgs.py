"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Mapping
from typing import cast

from forbid_imports.domain.constants import (
    DEFAULT_DISPLAY_NAME,
    DEFAULT_MESSAGE_TEMPLATE,
    MESSAGE_SYMBOL,
    REGISTRY_PREFIX,
)
from forbid_imports.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """Builds the pylint msgs dict from a registry mapping."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], message_key: str
    ) -> RuleRegistryEntry | None:
        """Return the registry entry for a message key, code or symbol."""
        entry = registry.get(f"{REGISTRY_PREFIX}{message_key}")
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in registry.items():
            if not rid.startswith(REGISTRY_PREFIX) or not isinstance(e, dict):
                continue
            if message_key in (e.get("symbol"), e.get("code")):
                return cast(RuleRegistryEntry, dict(e))
        return None

    @staticmethod
    def build_msgs(
        registry: Mapping[str, RuleRegistryEntry], message_key: str, code: str
    ) -> dict[str, tuple[str, str, str]]:
        """Build ``{code: (template, symbol, description)}`` for checker.msgs.

        Missing registry entries fall back to the built-in template so the
        plugin still loads from a broken install.
        """
        entry = RuleMsgBuilder.get_entry(registry, message_key) or {}
        template = entry.get("message_template") or DEFAULT_MESSAGE_TEMPLATE
        symbol = entry.get("symbol") or MESSAGE_SYMBOL
        desc = entry.get("display_name") or entry.get("short_description") or DEFAULT_DISPLAY_NAME
        return {code: (str(template), str(symbol), str(desc))}
