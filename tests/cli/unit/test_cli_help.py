"""CLI smoke tests."""

from click.testing import CliRunner
from container_typecheck.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "describe" in result.output
    assert "check-elements" in result.output
    assert "check-structure" in result.output
    assert "generate-config" in result.output
