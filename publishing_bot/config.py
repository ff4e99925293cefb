"""Configuration for reporting on GitHub issues."""

import os
from typing import Optional

from .logs.builder import DEFAULT_MAX_LINES


class ReporterConfig:
    """Configuration class for the issue reporter, read from the environment."""

    def __init__(self) -> None:
        """Initialize reporter configuration from environment variables."""
        self.token: Optional[str] = os.getenv("GITHUB_TOKEN")
        self.org: Optional[str] = os.getenv("PUBLISHING_BOT_ORG")
        self.repo: Optional[str] = os.getenv("PUBLISHING_BOT_REPO")
        self.issue_number: Optional[int] = _int_env("PUBLISHING_BOT_ISSUE")
        self.max_lines: int = max_lines_from_env()

    def is_configured(self) -> bool:
        """Check if everything needed to reach an issue is set."""
        return all(
            [self.token, self.org, self.repo, self.issue_number is not None]
        )

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        missing = []
        if not self.token:
            missing.append("GITHUB_TOKEN")
        if not self.org:
            missing.append("PUBLISHING_BOT_ORG")
        if not self.repo:
            missing.append("PUBLISHING_BOT_REPO")
        if self.issue_number is None:
            missing.append("PUBLISHING_BOT_ISSUE")

        if missing:
            raise ValueError(
                f"Environment variables required for issue reporting: "
                f"{', '.join(missing)}"
            )


def _int_env(name: str) -> Optional[int]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got '{value}'") from e


def max_lines_from_env() -> int:
    """Read the '+' line limit, defaulting to DEFAULT_MAX_LINES."""
    max_lines = _int_env("PUBLISHING_BOT_MAX_LINES")
    return DEFAULT_MAX_LINES if max_lines is None else max_lines
