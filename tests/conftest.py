"""
Pytest fixtures for folder organizer tests.

Provides reusable test fixtures for creating temporary directories,
test files, and output capture.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from folder_organizer.config import Config


def set_mtime(path: Path, moment: datetime) -> None:
    """Set both access and modification time of a file."""
    timestamp = moment.timestamp()
    os.utime(path, (timestamp, timestamp))


def snapshot_tree(root: Path) -> Dict[str, Optional[bytes]]:
    """Map every path under root to its contents (None for directories)."""
    return {
        p.relative_to(root).as_posix(): (p.read_bytes() if p.is_file() else None)
        for p in sorted(root.rglob("*"))
    }


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def dry_run_config() -> Config:
    """Create a configuration that only previews changes."""
    return Config(dry_run=True)


@pytest.fixture
def sample_files(temp_dir: Path) -> Dict[str, List[Path]]:
    """
    Create sample files of different types for testing.

    Returns a dict mapping category to list of created files.
    """
    files = {
        "images": [],
        "documents": [],
        "audio": [],
        "code": [],
        "others": [],
    }

    for i, ext in enumerate([".jpg", ".png", ".gif"]):
        f = temp_dir / f"image{ext}"
        f.write_text(f"fake image content {i} {ext}")
        files["images"].append(f)

    for i, ext in enumerate([".pdf", ".txt", ".docx"]):
        f = temp_dir / f"document{ext}"
        f.write_text(f"fake document content {i} {ext}")
        files["documents"].append(f)

    for i, ext in enumerate([".mp3", ".wav"]):
        f = temp_dir / f"audio{ext}"
        f.write_text(f"fake audio content {i} {ext}")
        files["audio"].append(f)

    for i, ext in enumerate([".py", ".js"]):
        f = temp_dir / f"code{ext}"
        f.write_text(f"# fake code {i} {ext}")
        files["code"].append(f)

    f = temp_dir / "unknown.xyz"
    f.write_text("unknown content")
    files["others"].append(f)

    return files


@pytest.fixture
def hidden_file(temp_dir: Path) -> Path:
    """Create a hidden file (starts with dot)."""
    f = temp_dir / ".secret"
    f.write_text("hidden content")
    return f


@pytest.fixture
def march_file(temp_dir: Path) -> Path:
    """Create a file last modified in March 2024."""
    f = temp_dir / "notes.txt"
    f.write_text("march notes")
    set_mtime(f, datetime(2024, 3, 15, 12, 0, 0))
    return f


@pytest.fixture
def capture_output() -> list:
    """Create a list to capture output from operations."""
    return []


@pytest.fixture
def output_callback(capture_output: list):
    """Create an output callback that captures messages."""
    def callback(message: str) -> None:
        capture_output.append(message)
    return callback


@pytest.fixture
def touch_mtime():
    """Provide set_mtime to tests."""
    return set_mtime


@pytest.fixture
def tree_snapshot():
    """Provide snapshot_tree to tests."""
    return snapshot_tree
