"""
Pylint plugin entry point - composition root for the checker plugin.

Load with ``pylint --load-plugins=forbid_imports.infrastructure.checker``.
"""

from pylint.lint import PyLinter

from forbid_imports.infrastructure.di.container import ForbidImportsContainer
from forbid_imports.use_cases.checks.forbid_imports import ForbidCertainImportsChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = ForbidImportsContainer.get_instance()
    registry = container.get_guidance_service().get_registry()

    linter.register_checker(
        ForbidCertainImportsChecker(
            linter,
            ast_gateway=container.get_astroid_gateway(),
            config_loader=container.get_config_loader(),
            registry=registry,
        )
    )
