"""Pydantic models for GitHub data structures.

These models map directly to GitHub's REST API v3 response structures.
API Reference: https://docs.github.com/en/rest/issues
"""

from datetime import datetime

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")
    id: int = Field(..., description="Unique user identifier (integer)")


class GitHubComment(BaseModel):
    """GitHub comment model representing issue comments.

    Maps to GitHub REST API Issue Comment object.
    API Reference: https://docs.github.com/en/rest/issues/comments
    """

    id: int = Field(..., description="Unique comment identifier (integer)")
    user: GitHubUser = Field(..., description="Comment author details")
    body: str = Field(..., description="Text content of the comment (string)")
    created_at: datetime = Field(
        ..., description="Timestamp of comment creation (ISO 8601)"
    )
    updated_at: datetime = Field(
        ..., description="Timestamp of last comment update (ISO 8601)"
    )


class IssueReport(BaseModel):
    """Outcome of reporting a failed run on an issue.

    Custom model not mapped to the GitHub API. Records the comment that was
    posted and what happened to the earlier comments on the issue.
    """

    org: str = Field(..., description="GitHub organization name")
    repo: str = Field(..., description="GitHub repository name")
    issue_number: int = Field(..., description="Issue the report was posted to")
    comment_id: int = Field(..., description="Identifier of the new comment")
    deleted_comment_ids: list[int] = Field(
        default_factory=list,
        description="Earlier comments by the bot that were removed",
    )
    skipped_comment_ids: list[int] = Field(
        default_factory=list,
        description="Comments left alone because other users wrote them",
    )
