"""Unit tests for Typer-based CLI interface."""

from unittest.mock import Mock

from typer.testing import CliRunner

from forbid_imports.interface.cli import CLIAppFactory, CLIDependencies

runner = CliRunner()


def _make_app(status: int = 0, entry: dict | None = None, instructions: str = ""):
    adapter = Mock()
    adapter.run.return_value = status
    guidance = Mock()
    guidance.get_entry.return_value = entry
    guidance.get_manual_instructions.return_value = instructions
    deps = CLIDependencies(pylint_adapter=adapter, guidance_service=guidance)
    return CLIAppFactory.create_app(deps), adapter


class TestCheckCommand:
    def test_forwards_paths_and_options(self) -> None:
        app, adapter = _make_app()
        result = runner.invoke(
            app,
            ["check", "src", "lib", "--forbidden-imports-regexp", r".+\.api\..+",
             "--forbidden-imports-excludes-regexp", ""],
        )
        assert result.exit_code == 0, result.output
        paths, options = adapter.run.call_args.args
        assert paths == ["src", "lib"]
        assert options == {
            "package-name-regexp": None,
            "class-name-regexp": None,
            "forbidden-imports-regexp": r".+\.api\..+",
            "forbidden-imports-excludes-regexp": "",
        }

    def test_exit_code_is_pylint_status(self) -> None:
        app, _adapter = _make_app(status=4)
        result = runner.invoke(app, ["check", "src"])
        assert result.exit_code == 4


class TestExplainCommand:
    def test_prints_registry_guidance(self) -> None:
        app, _adapter = _make_app(
            entry={"display_name": "Forbidden import in scoped package/class."},
            instructions="Depend on an abstraction.",
        )
        result = runner.invoke(app, ["explain"])
        assert result.exit_code == 0
        assert "W9601 (forbid-certain-imports)" in result.output
        assert "Depend on an abstraction." in result.output

    def test_missing_entry(self) -> None:
        app, _adapter = _make_app(entry=None)
        result = runner.invoke(app, ["explain"])
        assert result.exit_code == 0
        assert "W9601" in result.output
