"""Exceptions raised by the forbid-imports rule."""


class ForbidImportsError(Exception):
    """Base class for every error raised by this package."""


class InvalidPatternError(ForbidImportsError, ValueError):
    """A configured regular expression failed to compile."""

    def __init__(self, option: str, pattern: str, reason: str) -> None:
        self.option = option
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regular expression for '{option}': {pattern!r} ({reason})")


class UnsupportedNodeError(ForbidImportsError, TypeError):
    """The traversal driver handed the rule a node kind it did not subscribe to."""


class ConfigurationError(ForbidImportsError, ValueError):
    """A [tool.forbid-imports] entry has the wrong shape or value type."""
