"""GitHub API client using PyGitHub."""

import logging
import os

from github import Auth, Github
from github.AuthenticatedUser import AuthenticatedUser
from github.GithubException import GithubException
from github.Issue import Issue
from github.IssueComment import IssueComment
from github.NamedUser import NamedUser
from github.Repository import Repository
from requests.exceptions import RequestException

from .errors import GitHubOperationError
from .models import GitHubComment, GitHubUser

logger = logging.getLogger(__name__)

COMMENTS_PER_PAGE = 100

# Transport failures surface from requests, HTTP status failures from PyGithub.
API_ERRORS = (GithubException, RequestException)


class GitHubClient:
    """GitHub API client for the issue comments the bot manages."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(auth=Auth.Token(self.token), per_page=COMMENTS_PER_PAGE)

    def _convert_user(self, github_user: NamedUser | AuthenticatedUser) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(login=github_user.login, id=github_user.id)

    def _convert_comment(self, github_comment: IssueComment) -> GitHubComment:
        """Convert PyGitHub comment to our model."""
        return GitHubComment(
            id=github_comment.id,
            user=self._convert_user(github_comment.user),
            body=github_comment.body,
            created_at=github_comment.created_at,
            updated_at=github_comment.updated_at,
        )

    def get_repository(self, org: str, repo: str) -> Repository:
        """Get repository object without fetching it."""
        return self.github.get_repo(f"{org}/{repo}", lazy=True)

    def _get_issue(self, org: str, repo: str, issue_number: int) -> Issue:
        return self.get_repository(org, repo).get_issue(issue_number)

    def get_authenticated_user(self) -> GitHubUser:
        """Get the account the token belongs to.

        Raises:
            GitHubOperationError: If the identity lookup fails
        """
        try:
            return self._convert_user(self.github.get_user())
        except API_ERRORS as e:
            raise GitHubOperationError("get own user", e) from e

    def create_issue_comment(
        self, org: str, repo: str, issue_number: int, body: str
    ) -> GitHubComment:
        """Post a new comment on an issue.

        Args:
            org: Organization name
            repo: Repository name
            issue_number: Issue number
            body: Markdown comment text

        Returns:
            The created comment

        Raises:
            GitHubOperationError: If the issue cannot be fetched or the
                comment is rejected
        """
        logger.debug("Commenting on %s/%s#%d", org, repo, issue_number)
        try:
            github_issue = self._get_issue(org, repo, issue_number)
            return self._convert_comment(github_issue.create_comment(body))
        except API_ERRORS as e:
            raise GitHubOperationError(f"comment on issue #{issue_number}", e) from e

    def list_issue_comments(
        self, org: str, repo: str, issue_number: int
    ) -> list[GitHubComment]:
        """Get every comment on an issue, oldest first.

        Raises:
            GitHubOperationError: If any page of comments cannot be fetched
        """
        try:
            github_issue = self._get_issue(org, repo, issue_number)
            return [
                self._convert_comment(comment)
                for comment in github_issue.get_comments()
            ]
        except API_ERRORS as e:
            raise GitHubOperationError(
                f"get github comments of issue #{issue_number}", e
            ) from e

    def delete_issue_comment(
        self, org: str, repo: str, issue_number: int, comment_id: int
    ) -> None:
        """Delete a single issue comment.

        Raises:
            GitHubOperationError: If the comment cannot be deleted
        """
        logger.debug("Deleting comment %d on %s/%s", comment_id, org, repo)
        try:
            repository = self.get_repository(org, repo)
            repository.get_issue_comment(comment_id).delete()
        except API_ERRORS as e:
            raise GitHubOperationError(
                f"delete github comment {comment_id} of issue #{issue_number}", e
            ) from e

    def close_issue(self, org: str, repo: str, issue_number: int) -> None:
        """Set an issue's state to closed.

        Raises:
            GitHubOperationError: If the issue cannot be edited
        """
        logger.debug("Closing %s/%s#%d", org, repo, issue_number)
        try:
            self._get_issue(org, repo, issue_number).edit(state="closed")
        except API_ERRORS as e:
            raise GitHubOperationError(f"close issue #{issue_number}", e) from e
