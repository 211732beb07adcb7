"""Per-file scope state: the scope tracker and the deferred import registry."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from forbid_imports.domain.nodes import ImportDeclaration

logger = logging.getLogger(__name__)


class DeferredImportRegistry:
    """
    Forbidden imports seen before the file's class scope was known.

    Entries are kept in encounter order. ``flush`` hands every entry out once
    and empties the queue.
    """

    def __init__(self) -> None:
        self._pending: list[ImportDeclaration] = []

    def defer(self, record: ImportDeclaration) -> None:
        logger.debug("Deferring forbidden import %s (line %d)", record.name, record.line)
        self._pending.append(record)

    def flush(self) -> list[ImportDeclaration]:
        """Return all pending imports in encounter order and clear the registry."""
        flushed, self._pending = self._pending, []
        return flushed

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    def __iter__(self) -> Iterator[ImportDeclaration]:
        return iter(list(self._pending))


@dataclass
class FileScope:
    """Scope tracker for one file. Both flags start False at every file boundary."""

    package_matches: bool = False
    class_matches: bool = False
    deferred: DeferredImportRegistry = field(default_factory=DeferredImportRegistry)

    @property
    def in_scope(self) -> bool:
        return self.package_matches and self.class_matches
