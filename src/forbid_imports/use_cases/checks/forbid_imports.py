"""Forbidden imports check (W9601)."""

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

import astroid

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from forbid_imports.domain.config import ConfigurationLoader, RuleOptions
from forbid_imports.domain.constants import CHECKER_NAME, MESSAGE_CODE, MESSAGE_KEY
from forbid_imports.domain.nodes import NodeRecord
from forbid_imports.domain.patterns import PatternSet
from forbid_imports.domain.registry_types import RuleRegistryEntry
from forbid_imports.domain.rule_msgs import RuleMsgBuilder
from forbid_imports.domain.rules.forbid_imports import ForbidCertainImportsRule
from forbid_imports.domain.scope import FileScope
from forbid_imports.infrastructure.gateways.astroid_gateway import AstroidGateway


class ForbidCertainImportsChecker(BaseChecker):
    """W9601: Forbidden imports in scoped packages/classes. Thin: delegates to ForbidCertainImportsRule.

    One rule instance comes from the checker options below; every
    ``[[tool.forbid-imports.rules]]`` entry in pyproject.toml adds another.
    """

    name: str = CHECKER_NAME
    options = (
        (
            "package-name-regexp",
            {
                "default": "",
                "type": "string",
                "metavar": "<regexp>",
                "help": "Packages to check (full match). Empty matches every package.",
            },
        ),
        (
            "class-name-regexp",
            {
                "default": "",
                "type": "string",
                "metavar": "<regexp>",
                "help": "Class names to check (full match). Empty matches every class.",
            },
        ),
        (
            "forbidden-imports-regexp",
            {
                "default": None,
                "type": "string",
                "metavar": "<regexp>",
                "help": "Qualified names that may not be imported or instantiated. Unset disables the check.",
            },
        ),
        (
            "forbidden-imports-excludes-regexp",
            {
                "default": None,
                "type": "string",
                "metavar": "<regexp>",
                "help": "Qualified names exempted from forbidden-imports-regexp. "
                "Unset disables the check; an empty value excludes nothing.",
            },
        ),
    )

    def __init__(
        self,
        linter: "PyLinter",
        ast_gateway: AstroidGateway,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs(
            registry, MESSAGE_KEY, MESSAGE_CODE)  # type: ignore[assignment]
        super().__init__(linter)
        self._ast_gateway = ast_gateway
        self.config_loader = config_loader
        self._rules: list[ForbidCertainImportsRule] = []
        self._scopes: list[tuple[ForbidCertainImportsRule, FileScope]] = []

    def open(self) -> None:
        """Compile patterns once per run; bad regexps fail here, before any file is walked."""
        self._rules = [
            ForbidCertainImportsRule(PatternSet.from_options(options))
            for options in self._configured_options()
        ]

    def _configured_options(self) -> list[RuleOptions]:
        config = self.linter.config
        from_linter = RuleOptions(
            package_name_regexp=getattr(config, "package_name_regexp", ""),
            class_name_regexp=getattr(config, "class_name_regexp", ""),
            forbidden_imports_regexp=getattr(config, "forbidden_imports_regexp", None),
            forbidden_imports_excludes_regexp=getattr(config, "forbidden_imports_excludes_regexp", None),
        )
        return [from_linter, *self.config_loader.rule_options]

    @property
    def rules(self) -> list[ForbidCertainImportsRule]:
        return list(self._rules)

    def visit_module(self, node: astroid.nodes.Module) -> None:
        """File boundary: fresh scope for every rule, then the package declaration."""
        self._scopes = [(rule, rule.begin_file()) for rule in self._rules]
        self._dispatch([self._ast_gateway.package_declaration(node)])

    def leave_module(self, node: astroid.nodes.Module) -> None:
        for rule, scope in self._scopes:
            rule.end_file(scope)
        self._scopes = []

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        self._dispatch([self._ast_gateway.class_declaration(node)])

    def visit_import(self, node: astroid.nodes.Import) -> None:
        self._dispatch(self._ast_gateway.import_declarations(node))

    def visit_importfrom(self, node: astroid.nodes.ImportFrom) -> None:
        self._dispatch(self._ast_gateway.import_declarations(node))

    def visit_call(self, node: astroid.nodes.Call) -> None:
        self._dispatch([self._ast_gateway.instantiation(node)])

    def _dispatch(self, records: Iterable[NodeRecord]) -> None:
        """Send each record to the rules subscribed to its kind; report what they find."""
        records = list(records)
        for rule, scope in self._scopes:
            kinds = rule.subscribed_kinds
            for record in records:
                if record.kind not in kinds:
                    continue
                for v in rule.visit(record, scope):
                    self.add_message(
                        v.code,
                        line=v.line,
                        node=v.node,
                        args=v.message_args,
                    )
