"""Domain models for rules and violations."""

from dataclasses import dataclass, field

__all__ = [
    "Violation",
]

import astroid

from forbid_imports.domain.constants import MESSAGE_CODE, MESSAGE_KEY


@dataclass(frozen=True)
class Violation:
    """A forbidden import or instantiation found in scope."""

    line: int
    pattern_text: str
    qualified_name: str
    node: astroid.nodes.NodeNG | None = field(default=None, compare=False, repr=False)
    code: str = MESSAGE_CODE
    message_key: str = MESSAGE_KEY

    @property
    def message_args(self) -> tuple[str, str]:
        """Positional args for the message template: (pattern, offending name)."""
        return (self.pattern_text, self.qualified_name)
