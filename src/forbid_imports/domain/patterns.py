"""Compiled pattern set for one forbid-imports rule instance."""

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from forbid_imports.domain.constants import MATCH_ALL_REGEXP
from forbid_imports.domain.errors import InvalidPatternError

if TYPE_CHECKING:
    from forbid_imports.domain.config import RuleOptions


@dataclass(frozen=True)
class PatternSet:
    """
    Four optional regular expressions: package scope, class scope, forbidden
    imports and forbidden-import excludes.

    A pattern left as None disables the rule as a whole (see
    ForbidCertainImportsRule.is_active). Instances are immutable; the
    ``with_*`` methods return an updated copy.
    """

    package_scope: re.Pattern[str] | None = None
    class_scope: re.Pattern[str] | None = None
    forbid: re.Pattern[str] | None = None
    exclude: re.Pattern[str] | None = None

    @staticmethod
    def compile_scope(option: str, text: str | None) -> re.Pattern[str] | None:
        """Compile a scope pattern. Empty text matches every name."""
        if text is None:
            return None
        return PatternSet.compile_literal(option, text or MATCH_ALL_REGEXP)

    @staticmethod
    def compile_literal(option: str, text: str | None) -> re.Pattern[str] | None:
        """Compile ``text`` as given. An empty string matches only the empty name."""
        if text is None:
            return None
        try:
            return re.compile(text)
        except re.error as exc:
            raise InvalidPatternError(option, text, str(exc)) from exc

    def with_package_scope(self, text: str | None) -> "PatternSet":
        return replace(self, package_scope=self.compile_scope("package-name-regexp", text))

    def with_class_scope(self, text: str | None) -> "PatternSet":
        return replace(self, class_scope=self.compile_scope("class-name-regexp", text))

    def with_forbidden_imports(self, text: str | None) -> "PatternSet":
        return replace(self, forbid=self.compile_literal("forbidden-imports-regexp", text))

    def with_forbidden_imports_excludes(self, text: str | None) -> "PatternSet":
        return replace(
            self, exclude=self.compile_literal("forbidden-imports-excludes-regexp", text)
        )

    @classmethod
    def from_options(cls, options: "RuleOptions") -> "PatternSet":
        """Build a pattern set from raw option text, failing on bad regexps."""
        return (
            cls()
            .with_package_scope(options.package_name_regexp)
            .with_class_scope(options.class_name_regexp)
            .with_forbidden_imports(options.forbidden_imports_regexp)
            .with_forbidden_imports_excludes(options.forbidden_imports_excludes_regexp)
        )

    @property
    def is_complete(self) -> bool:
        """True when all four patterns are set."""
        return None not in (self.package_scope, self.class_scope, self.forbid, self.exclude)
