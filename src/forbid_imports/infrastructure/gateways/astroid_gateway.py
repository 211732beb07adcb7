"""Translate astroid nodes into the rule's node records."""

import astroid
from astroid.exceptions import TooManyLevelsError

from forbid_imports.domain.nodes import (
    ClassDeclaration,
    ImportDeclaration,
    Instantiation,
    PackageDeclaration,
)


class AstroidGateway:
    """Name extraction for modules, imports, classes and calls."""

    @staticmethod
    def package_name(module: astroid.nodes.Module) -> str:
        """Dotted package owning ``module``; '' for a top-level module."""
        name: str = module.name or ""
        if module.package:
            return name
        return name.rpartition(".")[0]

    def package_declaration(self, module: astroid.nodes.Module) -> PackageDeclaration:
        return PackageDeclaration(line=module.fromlineno or 0, name=self.package_name(module), node=module)

    def class_declaration(self, node: astroid.nodes.ClassDef) -> ClassDeclaration:
        return ClassDeclaration(line=node.lineno, name=node.name or "", node=node)

    def import_declarations(
        self, node: astroid.nodes.Import | astroid.nodes.ImportFrom
    ) -> list[ImportDeclaration]:
        """One record per imported name. Wildcard imports yield nothing."""
        return [
            ImportDeclaration(line=node.lineno, name=name, node=node)
            for name in self.imported_names(node)
        ]

    def imported_names(self, node: astroid.nodes.Import | astroid.nodes.ImportFrom) -> list[str]:
        if isinstance(node, astroid.nodes.ImportFrom):
            base = self._absolute_modname(node)
            return [
                f"{base}.{name}" if base else name
                for name, _alias in node.names
                if name != "*"
            ]
        return [name for name, _alias in node.names]

    def _absolute_modname(self, node: astroid.nodes.ImportFrom) -> str:
        modname: str = node.modname or ""
        if not node.level:
            return modname
        try:
            return node.root().relative_to_absolute_name(modname, node.level)
        except TooManyLevelsError:
            return modname

    def instantiation(self, node: astroid.nodes.Call) -> Instantiation:
        func = node.func
        if isinstance(func, astroid.nodes.Attribute):
            return Instantiation(
                line=node.lineno, name=self.qualified_call_name(node), dotted=True, node=node
            )
        simple = func.name if isinstance(func, astroid.nodes.Name) else None
        return Instantiation(line=node.lineno, name=simple, dotted=False, node=node)

    def qualified_call_name(self, node: astroid.nodes.Call) -> str | None:
        """Rebuild ``a.b.C`` from the callee of ``a.b.C(...)``.

        Returns None when the chain is not rooted at a plain name, e.g.
        ``factory().Thing()``.
        """
        func = node.func
        if isinstance(func, astroid.nodes.Name):
            return func.name
        if not isinstance(func, astroid.nodes.Attribute):
            return None
        parts: list[str] = []
        expr: astroid.nodes.NodeNG = func
        while isinstance(expr, astroid.nodes.Attribute):
            parts.append(expr.attrname)
            expr = expr.expr
        if not isinstance(expr, astroid.nodes.Name):
            return None
        parts.append(expr.name)
        parts.reverse()
        return ".".join(parts)
