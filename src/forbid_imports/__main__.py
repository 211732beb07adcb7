"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from forbid_imports.infrastructure.adapters.pylint_adapter import PylintAdapter
from forbid_imports.infrastructure.di.container import ForbidImportsContainer
from forbid_imports.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = ForbidImportsContainer.get_instance()
    deps = CLIDependencies(
        pylint_adapter=PylintAdapter(),
        guidance_service=container.get_guidance_service(),
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
