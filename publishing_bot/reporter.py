"""Report failed publishing runs on a GitHub issue."""

from .github_client.client import GitHubClient
from .github_client.errors import CommentCleanupError, GitHubOperationError
from .github_client.models import IssueReport
from .logs.builder import DEFAULT_MAX_LINES, transform_log_to_github_format

REDACTED = "X" * 32


def redact_token(text: str, token: str) -> str:
    """Replace every exact occurrence of ``token`` in ``text``."""
    if not token:
        return text
    return text.replace(token, REDACTED)


def report_on_issue(
    error: object,
    logs: str,
    token: str,
    org: str,
    repo: str,
    issue_number: int,
    client: GitHubClient | None = None,
    max_lines: int = DEFAULT_MAX_LINES,
) -> IssueReport:
    """Post the logs of a failed run and remove the bot's older reports.

    The body starts with ``/reopen`` so a closed tracking issue is reopened
    by the repository's bot. After posting, every other comment on the issue
    written by the same account is deleted. Deletion stops at the first
    failure; comments removed before it stay removed.

    Args:
        error: The failure to report, rendered with ``str()``
        logs: Raw output of the publishing run
        token: GitHub token, also scrubbed from the posted text
        org: Organization name
        repo: Repository name
        issue_number: Tracking issue number
        client: Client to use instead of one built from ``token``
        max_lines: Number of ``+`` lines to keep, counted from the end

    Returns:
        What was posted and which comments were deleted or skipped

    Raises:
        GitHubOperationError: If any API call fails
        CommentCleanupError: If deleting an older comment fails
    """
    if client is None:
        client = GitHubClient(token)
        # an empty token falls back to GITHUB_TOKEN inside the client
        token = client.token

    # the token should never be in the logs, but scrub it anyway
    logs = redact_token(logs, token)
    reason = redact_token(str(error), token)

    myself = client.get_authenticated_user()

    body = transform_log_to_github_format(
        logs,
        max_lines,
        f"/reopen\n\nThe last publishing run failed: {reason}",
    )
    new_comment = client.create_issue_comment(org, repo, issue_number, body)

    report = IssueReport(
        org=org, repo=repo, issue_number=issue_number, comment_id=new_comment.id
    )
    for comment in client.list_issue_comments(org, repo, issue_number):
        if comment.user.id != myself.id:
            report.skipped_comment_ids.append(comment.id)
            continue
        if comment.id == new_comment.id:
            continue

        try:
            client.delete_issue_comment(org, repo, issue_number, comment.id)
        except GitHubOperationError as e:
            raise CommentCleanupError(
                e.operation,
                e.cause,
                comment.id,
                report.deleted_comment_ids,
                e.status,
            ) from e
        report.deleted_comment_ids.append(comment.id)

    return report


def close_issue(
    token: str,
    org: str,
    repo: str,
    issue_number: int,
    client: GitHubClient | None = None,
) -> None:
    """Close the tracking issue after a successful run.

    Raises:
        GitHubOperationError: If the issue cannot be closed
    """
    client = client or GitHubClient(token)
    client.close_issue(org, repo, issue_number)
