"""Test main CLI functionality."""

from typer.testing import CliRunner

from publishing_bot.cli.main import app

runner = CliRunner()


def test_version_command() -> None:
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "Publishing Bot v" in result.output


def test_verbose_flag() -> None:
    """Test that the verbose flag is accepted before a command."""
    result = runner.invoke(app, ["--verbose", "version"])
    assert result.exit_code == 0


def test_help_lists_commands() -> None:
    """Test that every command is registered."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("report", "close", "format", "version"):
        assert command in result.output
