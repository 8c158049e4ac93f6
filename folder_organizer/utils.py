"""
Pure utility functions for the folder organizer.

These functions are stateless and have no side effects (except reading file metadata).
They are easy to unit test in isolation.
"""

from datetime import datetime
from pathlib import Path

from .config import DEFAULT_CATEGORY, EXTENSION_CATEGORIES


def get_extension(file_path: Path) -> str:
    """
    Get the lowercased extension of a file, including the dot.

    Args:
        file_path: Path to the file

    Returns:
        Extension like ".jpg", or "" when the name has none
    """
    return file_path.suffix.lower()


def get_category(extension: str) -> str:
    """
    Determine the category for a file extension.

    Args:
        extension: File extension including dot (e.g., ".jpg"), any case

    Returns:
        Category name (e.g., "images", "documents", "others")
    """
    return EXTENSION_CATEGORIES.get(extension.lower(), DEFAULT_CATEGORY)


def get_file_mtime(file_path: Path) -> datetime:
    """
    Get the modification time of a file as a local datetime object.

    Args:
        file_path: Path to the file

    Returns:
        Datetime of last modification
    """
    return datetime.fromtimestamp(file_path.stat().st_mtime)


def get_file_size_bytes(file_path: Path) -> int:
    """Get the size of a file in bytes."""
    return file_path.stat().st_size


def get_date_key(moment: datetime) -> str:
    """
    Build the year-month key used for date folders and report entries.

    Example:
        >>> get_date_key(datetime(2024, 3, 15))
        '2024-03'
    """
    return f"{moment.year:04d}-{moment.month:02d}"


def format_file_size(size_bytes: int) -> str:
    """
    Convert bytes to human-readable format (KB, MB, GB).

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable string like "1.5 GB" or "256 MB"

    Example:
        >>> format_file_size(1536000000)
        '1.43 GB'
    """
    size = float(size_bytes)
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024:
            return f"{size:.2f} {unit}" if unit != 'B' else f"{int(size)} {unit}"
        size /= 1024
    return f"{size:.2f} PB"


def generate_unique_filename(destination: Path) -> Path:
    """
    Generate a free filename by appending a counter before the extension.

    ``report.pdf`` becomes ``report_1.pdf``, then ``report_2.pdf``, and so on
    until a name is found that does not exist yet.

    Args:
        destination: Proposed destination path

    Returns:
        Original path if it doesn't exist, or the first free numbered variant
    """
    if not destination.exists():
        return destination

    counter = 1
    while True:
        candidate = destination.parent / f"{destination.stem}_{counter}{destination.suffix}"
        if not candidate.exists():
            return candidate
        counter += 1
