"""Errors raised while talking to the GitHub API."""

from github.GithubException import GithubException


class GitHubOperationError(Exception):
    """A GitHub API call failed or returned a non-success status."""

    def __init__(
        self, operation: str, cause: Exception | str, status: int | None = None
    ):
        self.operation = operation
        self.cause = cause
        self.status = status
        if status is None and isinstance(cause, GithubException):
            self.status = cause.status
        super().__init__(f"failed to {operation}: {_describe(cause)}")


class CommentCleanupError(GitHubOperationError):
    """Deleting a stale comment failed part-way through the cleanup.

    Comments listed in ``deleted_comment_ids`` were already removed and are
    not restored.
    """

    def __init__(
        self,
        operation: str,
        cause: Exception | str,
        comment_id: int,
        deleted_comment_ids: list[int],
        status: int | None = None,
    ):
        super().__init__(operation, cause, status)
        self.comment_id = comment_id
        self.deleted_comment_ids = list(deleted_comment_ids)


def _describe(cause: Exception | str) -> str:
    if isinstance(cause, GithubException):
        message = None
        if isinstance(cause.data, dict):
            message = cause.data.get("message")
        return f"HTTP code {cause.status}" + (f" ({message})" if message else "")
    return str(cause)
