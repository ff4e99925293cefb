"""Report publishing-bot failures on GitHub issues."""

__version__ = "0.1.0"
