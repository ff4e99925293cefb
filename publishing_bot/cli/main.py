"""Main CLI entry point."""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console

from .report import close, format_logs, report

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="publishing-bot",
    help="Report publishing failures on GitHub issues",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log GitHub API calls"
    ),
) -> None:
    """Report publishing failures on GitHub issues."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


app.command(name="report", context_settings={"help_option_names": ["-h", "--help"]})(
    report
)
app.command(name="close", context_settings={"help_option_names": ["-h", "--help"]})(
    close
)
app.command(name="format", context_settings={"help_option_names": ["-h", "--help"]})(
    format_logs
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from publishing_bot import __version__

    console.print(f"Publishing Bot v{__version__}")


if __name__ == "__main__":
    app()
