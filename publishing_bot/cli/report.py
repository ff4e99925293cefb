"""CLI commands for reporting on and closing the tracking issue."""

from pathlib import Path

import typer
from rich.console import Console

from ..config import ReporterConfig, max_lines_from_env
from ..github_client.errors import CommentCleanupError, GitHubOperationError
from ..logs.builder import transform_log_to_github_format
from ..reporter import close_issue, report_on_issue
from .options import (
    ERROR_OPTION,
    HEADING_OPTION,
    ISSUE_NUMBER_OPTION,
    LOG_FILE_OPTION,
    MAX_LINES_OPTION,
    ORG_OPTION,
    REPO_OPTION,
    read_logs,
)

console = Console()


def _load_config(
    org: str | None, repo: str | None, issue_number: int | None
) -> ReporterConfig:
    """Merge command line options over the environment and validate."""
    try:
        config = ReporterConfig()
        config.org = org or config.org
        config.repo = repo or config.repo
        if issue_number is not None:
            config.issue_number = issue_number
        config.validate()
    except ValueError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)
    return config


def report(
    error: str = ERROR_OPTION,
    log_file: Path | None = LOG_FILE_OPTION,
    org: str | None = ORG_OPTION,
    repo: str | None = REPO_OPTION,
    issue_number: int | None = ISSUE_NUMBER_OPTION,
) -> None:
    """Post a failed run's logs on the tracking issue.

    Older comments written by the same account are deleted so only the
    latest failure stays on the issue.

    Examples:
        # Report a failure with logs from a file
        publishing-bot report --org kubernetes --repo publishing-bot \
            --issue-number 42 --error "exit status 1" --log-file run.log

        # Pipe logs in
        ./publish.sh 2>&1 | publishing-bot report -o myorg -r myrepo -i 7 \
            -e "publish failed"
    """
    config = _load_config(org, repo, issue_number)
    logs = read_logs(log_file)

    try:
        result = report_on_issue(
            error,
            logs,
            config.token,
            config.org,
            config.repo,
            config.issue_number,
            max_lines=config.max_lines,
        )
    except CommentCleanupError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        if e.deleted_comment_ids:
            console.print(
                f"⚠️  [yellow]Already deleted comments: "
                f"{', '.join(str(i) for i in e.deleted_comment_ids)}[/yellow]"
            )
        raise typer.Exit(1)
    except GitHubOperationError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)

    issue_ref = f"{result.org}/{result.repo}#{result.issue_number}"
    console.print(
        f"✅ [green]Posted comment {result.comment_id} on {issue_ref}[/green]"
    )
    for comment_id in result.deleted_comment_ids:
        console.print(f"🗑️  Deleted comment {comment_id}")
    if result.skipped_comment_ids:
        console.print(
            f"[dim]Skipped {len(result.skipped_comment_ids)} comment(s) "
            f"by other users[/dim]"
        )


def close(
    org: str | None = ORG_OPTION,
    repo: str | None = REPO_OPTION,
    issue_number: int | None = ISSUE_NUMBER_OPTION,
) -> None:
    """Close the tracking issue after a successful run."""
    config = _load_config(org, repo, issue_number)
    try:
        close_issue(config.token, config.org, config.repo, config.issue_number)
    except GitHubOperationError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        f"✅ [green]Closed {config.org}/{config.repo}#{config.issue_number}[/green]"
    )


def format_logs(
    log_file: Path | None = LOG_FILE_OPTION,
    max_lines: int | None = MAX_LINES_OPTION,
    heading: list[str] | None = HEADING_OPTION,
) -> None:
    """Print logs formatted as a GitHub comment without posting anything."""
    if max_lines is None:
        try:
            max_lines = max_lines_from_env()
        except ValueError as e:
            console.print(f"❌ [red]Error: {e}[/red]")
            raise typer.Exit(1)

    body = transform_log_to_github_format(
        read_logs(log_file), max_lines, *(heading or [])
    )
    # plain echo, rich markup would eat brackets in the logs
    typer.echo(body)
