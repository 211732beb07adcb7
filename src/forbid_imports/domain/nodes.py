"""Node-kind records fed to the forbid-imports rule.

The checker translates astroid nodes into one of four records. The rule only
ever sees these, so it can be driven without a parser in tests.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

import astroid


class NodeKind(Enum):
    """The four node kinds the rule subscribes to."""

    PACKAGE = "package"
    CLASS = "class"
    IMPORT = "import"
    INSTANTIATION = "instantiation"


@dataclass(frozen=True)
class PackageDeclaration:
    """Package that owns the module being checked."""

    kind: ClassVar[NodeKind] = NodeKind.PACKAGE

    line: int
    name: str
    node: astroid.nodes.NodeNG | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ClassDeclaration:
    """A class definition; ``name`` is its simple name."""

    kind: ClassVar[NodeKind] = NodeKind.CLASS

    line: int
    name: str
    node: astroid.nodes.NodeNG | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ImportDeclaration:
    """One imported qualified name. ``import a, b`` yields two records."""

    kind: ClassVar[NodeKind] = NodeKind.IMPORT

    line: int
    name: str
    node: astroid.nodes.NodeNG | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Instantiation:
    """A call expression.

    ``dotted`` is True when the callee is a qualified path such as ``a.b.C``;
    ``name`` is then the rebuilt path. Simple callees carry their bare name
    (or None when no name can be recovered) and are never checked.
    """

    kind: ClassVar[NodeKind] = NodeKind.INSTANTIATION

    line: int
    name: str | None
    dotted: bool
    node: astroid.nodes.NodeNG | None = field(default=None, compare=False, repr=False)


NodeRecord = Union[PackageDeclaration, ClassDeclaration, ImportDeclaration, Instantiation]
