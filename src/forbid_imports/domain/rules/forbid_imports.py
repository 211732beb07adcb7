"""Forbid certain imports (W9601) in certain packages and/or classes.

Configuration variants:

* only a package pattern: every class of a matching package is checked;
* only a class pattern: calls are checked inside matching classes, imports
  in every module that declares a matching class;
* both: only matching classes inside matching packages are checked.

Package and class patterns are full-matched against the bare dotted package
name and the simple class name. Several rule instances can run side by side
to express more involved policies.
"""

import logging
from collections.abc import Callable

from forbid_imports.domain.errors import UnsupportedNodeError
from forbid_imports.domain.nodes import (
    ClassDeclaration,
    ImportDeclaration,
    Instantiation,
    NodeKind,
    NodeRecord,
    PackageDeclaration,
)
from forbid_imports.domain.patterns import PatternSet
from forbid_imports.domain.rules import Violation
from forbid_imports.domain.scope import FileScope

logger = logging.getLogger(__name__)


class ForbidCertainImportsRule:
    """Decision engine for one configured rule instance.

    The rule itself is stateless across files: all per-file state lives in the
    FileScope returned by ``begin_file``, which the caller passes back into
    every ``visit``.
    """

    def __init__(self, patterns: PatternSet) -> None:
        self._patterns = patterns
        self._handlers: dict[type, Callable[[NodeRecord, FileScope], list[Violation]]] = {
            PackageDeclaration: self._visit_package,
            ClassDeclaration: self._visit_class,
            ImportDeclaration: self._visit_import,
            Instantiation: self._visit_instantiation,
        }

    @property
    def is_active(self) -> bool:
        """Fully configured or inert: every pattern must be set."""
        return self._patterns.is_complete

    @property
    def subscribed_kinds(self) -> frozenset[NodeKind]:
        if not self.is_active:
            return frozenset()
        return frozenset(NodeKind)

    @property
    def forbidden_imports_regexp(self) -> str | None:
        forbid = self._patterns.forbid
        return forbid.pattern if forbid is not None else None

    @property
    def forbidden_imports_excludes_regexp(self) -> str | None:
        exclude = self._patterns.exclude
        return exclude.pattern if exclude is not None else None

    def begin_file(self) -> FileScope:
        """Fresh scope state for the next file."""
        return FileScope()

    def end_file(self, scope: FileScope) -> None:
        """Drop imports whose class scope never matched; they are not reported."""
        for record in scope.deferred.flush():
            logger.debug("Discarding deferred import %s (line %d): no class in scope", record.name, record.line)

    def forbidden(self, name: str) -> bool:
        """True when ``name`` fully matches the forbid pattern and not the exclude pattern."""
        forbid, exclude = self._patterns.forbid, self._patterns.exclude
        if forbid is None or exclude is None:
            return False
        return forbid.fullmatch(name) is not None and exclude.fullmatch(name) is None

    def visit(self, record: NodeRecord, scope: FileScope) -> list[Violation]:
        """Update ``scope`` for one node and return the violations it produces."""
        handler = self._handlers.get(type(record))
        if handler is None or record.kind not in self.subscribed_kinds:
            raise UnsupportedNodeError(
                f"{type(self).__name__} got the wrong input node: "
                f"{getattr(record, 'kind', type(record).__name__)} ({record!r})"
            )
        return handler(record, scope)

    def _visit_package(self, record: NodeRecord, scope: FileScope) -> list[Violation]:
        package_scope = self._patterns.package_scope
        if package_scope is not None:
            scope.package_matches = package_scope.fullmatch(record.name) is not None
        return []

    def _visit_class(self, record: NodeRecord, scope: FileScope) -> list[Violation]:
        class_scope = self._patterns.class_scope
        if class_scope is None:
            return []
        scope.class_matches = class_scope.fullmatch(record.name) is not None
        if not (scope.in_scope and scope.deferred):
            return []
        flushed = scope.deferred.flush()
        logger.debug("Class %s is in scope; reporting %d deferred import(s)", record.name, len(flushed))
        return [self._violation(pending.line, pending.name, pending.node) for pending in flushed]

    def _visit_import(self, record: NodeRecord, scope: FileScope) -> list[Violation]:
        if not self.forbidden(record.name):
            return []
        if scope.in_scope:
            return [self._violation(record.line, record.name, record.node)]
        scope.deferred.defer(record)
        return []

    def _visit_instantiation(self, record: NodeRecord, scope: FileScope) -> list[Violation]:
        # Simple names carry no package information.
        if not (scope.in_scope and record.dotted and record.name):
            return []
        if self.forbidden(record.name):
            return [self._violation(record.line, record.name, record.node)]
        return []

    def _violation(self, line: int, name: str, node: object) -> Violation:
        return Violation(
            line=line,
            pattern_text=self.forbidden_imports_regexp or "",
            qualified_name=name,
            node=node,
        )
