"""Build GitHub-flavoured Markdown from raw publishing logs.

GitHub rejects comments above 65536 characters, so logs are cut from the
front before anything else happens. The most recent output is the most
useful part of a failed run, which is why every step biases towards the
tail of the log.
"""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

MAX_COMMENT_BYTES = 65000
DEFAULT_MAX_LINES = 50
CODE_FENCE = "```"


class LogBuilder(BaseModel):
    """Immutable pipeline state for turning a log into a comment body.

    Every transformation returns a new builder. ``log()`` renders the
    headings, the working lines and the tailing lines joined by newlines.
    """

    model_config = ConfigDict(frozen=True)

    original: str = Field(..., description="Log text as handed to the builder")
    max_bytes: int = Field(..., gt=0, description="Byte budget for the log text")
    headings: tuple[str, ...] = Field(
        default=(), description="Lines rendered before the log content"
    )
    tailings: tuple[str, ...] = Field(
        default=(), description="Lines rendered after the log content"
    )
    lines: tuple[str, ...] = Field(
        default=(), description="Working sequence of log content"
    )

    @classmethod
    def new(cls, original: str, max_bytes: int = MAX_COMMENT_BYTES) -> "LogBuilder":
        """Create a builder holding at most the last ``max_bytes`` of the log."""
        return cls(
            original=original,
            max_bytes=max_bytes,
            lines=(tail_bytes(original, max_bytes),),
        )

    def add_heading(self, *headings: str) -> "LogBuilder":
        return self.model_copy(update={"headings": self.headings + headings})

    def add_tailing(self, *tailings: str) -> "LogBuilder":
        return self.model_copy(update={"tailings": self.tailings + tailings})

    def trim(self, cutset: str) -> "LogBuilder":
        """Strip any characters in ``cutset`` from both ends of every line."""
        return self.model_copy(
            update={"lines": tuple(line.strip(cutset) for line in self.lines)}
        )

    def split(self, sep: str) -> "LogBuilder":
        split_lines: list[str] = []
        for line in self.lines:
            split_lines.extend(line.split(sep))
        return self.model_copy(update={"lines": tuple(split_lines)})

    def reverse(self) -> "LogBuilder":
        return self.model_copy(update={"lines": self.lines[::-1]})

    def filter(self, keep: Callable[[str], bool]) -> "LogBuilder":
        """Keep the lines for which ``keep`` returns True, in order."""
        return self.model_copy(
            update={"lines": tuple(line for line in self.lines if keep(line))}
        )

    def join(self, sep: str) -> "LogBuilder":
        return self.model_copy(update={"lines": (sep.join(self.lines),)})

    def log(self) -> str:
        """Render the final text."""
        return "\n".join(self.headings + self.lines + self.tailings)


def tail_bytes(text: str, max_bytes: int) -> str:
    """Return the longest suffix of ``text`` whose UTF-8 form fits ``max_bytes``.

    A multi-byte character split by the cut is dropped rather than mangled.
    """
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text
    return encoded[-max_bytes:].decode("utf-8", errors="ignore")


def transform_log_to_github_format(
    original: str, max_lines: int, *headings: str
) -> str:
    """Format a raw log as a fenced Markdown block for a GitHub comment.

    Lines are scanned from the end of the log. Each line starting with ``+``
    counts towards ``max_lines``; the line that reaches the limit is kept and
    everything before it is dropped.

    Args:
        original: Raw log text
        max_lines: Number of ``+`` lines to keep, counted from the end
        *headings: Lines placed above the code fence

    Returns:
        Markdown text ready to post as a comment body
    """
    plus_lines = 0

    def within_budget(line: str) -> bool:
        nonlocal plus_lines
        if plus_lines >= max_lines:
            return False
        if line.startswith("+"):
            plus_lines += 1
        return True

    return (
        LogBuilder.new(original, MAX_COMMENT_BYTES)
        .add_heading(*headings)
        .add_heading(CODE_FENCE)
        .trim("\n")
        .split("\n")
        .reverse()
        .filter(within_budget)
        .reverse()
        .join("\n")
        .add_tailing(CODE_FENCE)
        .log()
    )
