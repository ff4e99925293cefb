"""Standardized CLI option definitions for consistent shorthand mappings.

Issue location options default to None so values from the environment
(see ReporterConfig) apply when they are not given on the command line.
"""

from pathlib import Path

import typer

ORG_OPTION = typer.Option(None, "--org", "-o", help="GitHub organization name")

REPO_OPTION = typer.Option(None, "--repo", "-r", help="GitHub repository name")

ISSUE_NUMBER_OPTION = typer.Option(
    None, "--issue-number", "-i", help="Tracking issue number"
)

ERROR_OPTION = typer.Option(
    ..., "--error", "-e", help="Failure message shown above the logs"
)

LOG_FILE_OPTION = typer.Option(
    None,
    "--log-file",
    "-f",
    exists=True,
    dir_okay=False,
    readable=True,
    help="File with the run's logs (reads stdin when omitted)",
)

MAX_LINES_OPTION = typer.Option(
    None,
    "--max-lines",
    "-n",
    min=0,
    help="Number of '+' lines to keep, counted from the end of the log",
)

HEADING_OPTION = typer.Option(
    None, "--heading", help="Heading line above the logs (can be used multiple times)"
)


def read_logs(log_file: Path | None) -> str:
    """Read logs from ``log_file`` or from stdin."""
    if log_file is not None:
        return log_file.read_text(encoding="utf-8", errors="replace")
    return typer.get_text_stream("stdin").read()
