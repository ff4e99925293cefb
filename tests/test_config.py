"""Tests for reporter configuration."""

import os
from unittest.mock import patch

import pytest

from publishing_bot.config import ReporterConfig, max_lines_from_env

FULL_ENV = {
    "GITHUB_TOKEN": "token",
    "PUBLISHING_BOT_ORG": "kubernetes",
    "PUBLISHING_BOT_REPO": "publishing-bot",
    "PUBLISHING_BOT_ISSUE": "42",
}


class TestReporterConfig:
    """Test ReporterConfig."""

    @patch.dict(os.environ, FULL_ENV, clear=True)
    def test_reads_environment(self) -> None:
        """Test that every setting comes from the environment."""
        config = ReporterConfig()

        assert config.token == "token"
        assert config.org == "kubernetes"
        assert config.repo == "publishing-bot"
        assert config.issue_number == 42
        assert config.max_lines == 50
        assert config.is_configured()
        config.validate()

    @patch.dict(os.environ, {**FULL_ENV, "PUBLISHING_BOT_MAX_LINES": "10"}, clear=True)
    def test_max_lines_override(self) -> None:
        """Test the line limit override."""
        assert ReporterConfig().max_lines == 10

    @patch.dict(os.environ, {}, clear=True)
    def test_validate_lists_missing_variables(self) -> None:
        """Test that every missing variable is named."""
        config = ReporterConfig()

        assert not config.is_configured()
        with pytest.raises(ValueError) as exc_info:
            config.validate()

        message = str(exc_info.value)
        for name in FULL_ENV:
            assert name in message

    @patch.dict(os.environ, {**FULL_ENV, "PUBLISHING_BOT_ISSUE": "abc"}, clear=True)
    def test_invalid_issue_number(self) -> None:
        """Test that a non-numeric issue number is rejected."""
        with pytest.raises(ValueError, match="PUBLISHING_BOT_ISSUE must be an integer"):
            ReporterConfig()

    @patch.dict(os.environ, {**FULL_ENV, "PUBLISHING_BOT_ISSUE": "abc"}, clear=True)
    def test_invalid_integer_keeps_cause(self) -> None:
        """Test that the parsing error is chained."""
        with pytest.raises(ValueError) as exc_info:
            ReporterConfig()
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestMaxLinesFromEnv:
    """Test reading the line limit on its own."""

    @patch.dict(os.environ, {}, clear=True)
    def test_default(self) -> None:
        """Test the default limit."""
        assert max_lines_from_env() == 50

    @patch.dict(
        os.environ,
        {"PUBLISHING_BOT_MAX_LINES": "5", "PUBLISHING_BOT_ISSUE": "abc"},
        clear=True,
    )
    def test_ignores_other_settings(self) -> None:
        """Test that unrelated invalid settings do not matter."""
        assert max_lines_from_env() == 5
