"""GitHub client package for API interaction."""

from .client import GitHubClient
from .errors import CommentCleanupError, GitHubOperationError
from .models import GitHubComment, GitHubUser, IssueReport

__all__ = [
    "GitHubClient",
    "GitHubComment",
    "GitHubOperationError",
    "GitHubUser",
    "CommentCleanupError",
    "IssueReport",
]
