"""Drive a checker over astroid-parsed source without a real PyLinter."""

import astroid

from forbid_imports.domain.config import ConfigurationLoader
from forbid_imports.infrastructure.gateways.astroid_gateway import AstroidGateway
from forbid_imports.use_cases.checks.forbid_imports import ForbidCertainImportsChecker


class MockLinter:
    def __init__(self, **options: object) -> None:
        self.messages: list[tuple[str, int | None, tuple[str, ...] | None]] = []
        self.config = type("config", (), {})()
        for key, value in options.items():
            setattr(self.config, key, value)

    def add_message(self, msg_id, line=None, node=None, args=None, *_args, **_kwargs):
        if line is None and node is not None:
            line = node.fromlineno
        self.messages.append((msg_id, line, args))

    def _register_options_provider(self, provider):
        pass


def make_checker(
    config_dict: dict[str, object] | None = None,
    **options: object,
) -> ForbidCertainImportsChecker:
    """Build an opened checker. ``options`` become linter.config attributes."""
    checker = ForbidCertainImportsChecker(
        MockLinter(**options),
        ast_gateway=AstroidGateway(),
        config_loader=ConfigurationLoader(config_dict),
        registry={},
    )
    checker.open()
    return checker


def run_checker(checker, code: str, module_name: str = "test_module") -> list:
    tree = astroid.parse(code, module_name=module_name)

    def _walk(node):
        node_name = node.__class__.__name__.lower()

        if hasattr(checker, f"visit_{node_name}"):
            getattr(checker, f"visit_{node_name}")(node)

        for child in node.get_children():
            _walk(child)

        if hasattr(checker, f"leave_{node_name}"):
            getattr(checker, f"leave_{node_name}")(node)

    _walk(tree)
    return checker.linter.messages
