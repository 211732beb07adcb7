"""CLI entry points for forbid-imports - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path

import typer

from forbid_imports.domain.constants import MESSAGE_CODE, MESSAGE_KEY, MESSAGE_SYMBOL
from forbid_imports.infrastructure.adapters.pylint_adapter import PylintAdapter
from forbid_imports.infrastructure.services.guidance_service import GuidanceService


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    pylint_adapter: PylintAdapter
    guidance_service: GuidanceService


class CLIAppFactory:
    """Builds the Typer app from injected dependencies."""

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        app = typer.Typer(
            name="forbid-imports",
            help="Forbid certain imports in certain packages and classes.",
            no_args_is_help=True,
        )

        @app.command()
        def check(
            paths: list[Path] = typer.Argument(..., help="Files or packages to lint"),  # noqa: B008
            package_name_regexp: str | None = typer.Option(
                None, help="Packages to check (full match). Empty matches all."),
            class_name_regexp: str | None = typer.Option(
                None, help="Class names to check (full match). Empty matches all."),
            forbidden_imports_regexp: str | None = typer.Option(
                None, help="Qualified names that may not be imported or instantiated."),
            forbidden_imports_excludes_regexp: str | None = typer.Option(
                None, help="Qualified names exempted from the forbidden pattern."),
        ) -> None:
            """Lint PATHS with the forbid-certain-imports check only."""
            options = {
                "package-name-regexp": package_name_regexp,
                "class-name-regexp": class_name_regexp,
                "forbidden-imports-regexp": forbidden_imports_regexp,
                "forbidden-imports-excludes-regexp": forbidden_imports_excludes_regexp,
            }
            status = deps.pylint_adapter.run([str(p) for p in paths], options)
            raise typer.Exit(code=status)

        @app.command()
        def explain() -> None:
            """Show what the check reports and how to fix it."""
            entry = deps.guidance_service.get_entry(MESSAGE_KEY) or {}
            typer.echo(f"{MESSAGE_CODE} ({MESSAGE_SYMBOL}): {entry.get('display_name', '')}")
            instructions = deps.guidance_service.get_manual_instructions(MESSAGE_KEY)
            if instructions:
                typer.echo("")
                typer.echo(instructions)

        return app
