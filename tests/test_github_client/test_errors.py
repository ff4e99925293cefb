"""Tests for GitHub error wrapping."""

from github.GithubException import GithubException

from publishing_bot.github_client.errors import (
    CommentCleanupError,
    GitHubOperationError,
)


class TestGitHubOperationError:
    """Test GitHubOperationError messages."""

    def test_from_github_exception(self) -> None:
        """Test that the HTTP status is taken from PyGitHub."""
        cause = GithubException(422, {"message": "Validation Failed"}, None)
        error = GitHubOperationError("comment on issue #5", cause)

        assert str(error) == (
            "failed to comment on issue #5: HTTP code 422 (Validation Failed)"
        )
        assert error.status == 422
        assert error.cause is cause

    def test_from_github_exception_without_message(self) -> None:
        """Test a response body without a message."""
        error = GitHubOperationError("close issue #5", GithubException(502))
        assert str(error) == "failed to close issue #5: HTTP code 502"

    def test_from_plain_text(self) -> None:
        """Test a cause given as text with an explicit status."""
        error = GitHubOperationError("close issue #5", "unexpected response", 302)
        assert str(error) == "failed to close issue #5: unexpected response"
        assert error.status == 302


class TestCommentCleanupError:
    """Test CommentCleanupError."""

    def test_carries_progress(self) -> None:
        """Test that already deleted comments are reported."""
        deleted = [1, 2]
        error = CommentCleanupError(
            "delete github comment 3 of issue #5", GithubException(500), 3, deleted
        )
        deleted.append(99)

        assert isinstance(error, GitHubOperationError)
        assert error.comment_id == 3
        assert error.deleted_comment_ids == [1, 2]
        assert error.status == 500
        assert str(error).startswith("failed to delete github comment 3 of issue #5")

    def test_explicit_status(self) -> None:
        """Test that a status passed alongside a text cause is kept."""
        error = CommentCleanupError(
            "delete github comment 3 of issue #5", "unexpected response", 3, [], 302
        )

        assert error.status == 302
        assert str(error) == (
            "failed to delete github comment 3 of issue #5: unexpected response"
        )
