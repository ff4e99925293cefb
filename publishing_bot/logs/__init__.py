"""Log formatting for GitHub comments."""

from .builder import (
    DEFAULT_MAX_LINES,
    MAX_COMMENT_BYTES,
    LogBuilder,
    transform_log_to_github_format,
)

__all__ = [
    "DEFAULT_MAX_LINES",
    "MAX_COMMENT_BYTES",
    "LogBuilder",
    "transform_log_to_github_format",
]
