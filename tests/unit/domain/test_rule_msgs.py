"""Unit tests for RuleMsgBuilder (domain/rule_msgs.py)."""

import unittest

from forbid_imports.domain.constants import (
    DEFAULT_MESSAGE_TEMPLATE,
    MESSAGE_CODE,
    MESSAGE_KEY,
    MESSAGE_SYMBOL,
    REGISTRY_PREFIX,
)
from forbid_imports.domain.rule_msgs import RuleMsgBuilder

ENTRY = {
    "code": "W9601",
    "symbol": "forbid-certain-imports",
    "display_name": "Forbidden import",
    "message_template": "Pattern %s forbids %s",
}


class TestRuleMsgBuilder(unittest.TestCase):
    def test_get_entry_by_message_key(self) -> None:
        entry = RuleMsgBuilder.get_entry({f"{REGISTRY_PREFIX}{MESSAGE_KEY}": ENTRY}, MESSAGE_KEY)
        self.assertEqual(entry.get("symbol"), "forbid-certain-imports")

    def test_get_entry_by_symbol_or_code(self) -> None:
        registry = {f"{REGISTRY_PREFIX}{MESSAGE_KEY}": ENTRY}
        self.assertIsNotNone(RuleMsgBuilder.get_entry(registry, "forbid-certain-imports"))
        self.assertIsNotNone(RuleMsgBuilder.get_entry(registry, "W9601"))
        self.assertIsNone(RuleMsgBuilder.get_entry(registry, "W0000"))

    def test_build_msgs_from_registry(self) -> None:
        msgs = RuleMsgBuilder.build_msgs({f"{REGISTRY_PREFIX}{MESSAGE_KEY}": ENTRY}, MESSAGE_KEY, MESSAGE_CODE)
        self.assertEqual(msgs, {"W9601": ("Pattern %s forbids %s", "forbid-certain-imports", "Forbidden import")})

    def test_build_msgs_falls_back_when_registry_empty(self) -> None:
        msgs = RuleMsgBuilder.build_msgs({}, MESSAGE_KEY, MESSAGE_CODE)
        template, symbol, _desc = msgs[MESSAGE_CODE]
        self.assertEqual(template, DEFAULT_MESSAGE_TEMPLATE)
        self.assertEqual(symbol, MESSAGE_SYMBOL)
        self.assertEqual(template % ("p", "n"), "Import matching forbidden pattern 'p' in this scope: 'n'.")
