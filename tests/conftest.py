"""Test configuration and fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    """Write a small publishing run log."""
    path = tmp_path / "run.log"
    path.write_text(
        "+ git fetch origin\nfetching...\n+ git push origin master\n"
        "error: failed to push some refs\n",
        encoding="utf-8",
    )
    return path
