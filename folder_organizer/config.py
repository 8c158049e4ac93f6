"""
Configuration for the folder organizer.

Uses a frozen dataclass so a configuration cannot change halfway through a run.
The extension table is plain data: edit the dictionary to add extensions.
"""

from dataclasses import dataclass
from typing import Dict, List


# File extension to category mapping.
# Keys are lowercase extensions including the dot, values are folder names.
EXTENSION_CATEGORIES: Dict[str, str] = {
    # Images
    ".jpg": "images",
    ".jpeg": "images",
    ".png": "images",
    ".gif": "images",
    ".bmp": "images",
    ".svg": "images",
    ".webp": "images",
    ".ico": "images",
    # Videos
    ".mp4": "videos",
    ".avi": "videos",
    ".mov": "videos",
    ".wmv": "videos",
    ".flv": "videos",
    ".webm": "videos",
    ".mkv": "videos",
    ".m4v": "videos",
    # Audio
    ".mp3": "audio",
    ".wav": "audio",
    ".flac": "audio",
    ".aac": "audio",
    ".ogg": "audio",
    ".wma": "audio",
    ".m4a": "audio",
    # Documents
    ".pdf": "documents",
    ".doc": "documents",
    ".docx": "documents",
    ".txt": "documents",
    ".rtf": "documents",
    ".odt": "documents",
    # Spreadsheets
    ".xls": "spreadsheets",
    ".xlsx": "spreadsheets",
    ".csv": "spreadsheets",
    ".ods": "spreadsheets",
    # Presentations
    ".ppt": "presentations",
    ".pptx": "presentations",
    ".odp": "presentations",
    # Archives
    ".zip": "archives",
    ".rar": "archives",
    ".7z": "archives",
    ".tar": "archives",
    ".gz": "archives",
    ".bz2": "archives",
    ".xz": "archives",
    # Code
    ".js": "code",
    ".ts": "code",
    ".py": "code",
    ".java": "code",
    ".cpp": "code",
    ".c": "code",
    ".cs": "code",
    ".php": "code",
    ".rb": "code",
    ".go": "code",
    ".rs": "code",
    ".swift": "code",
    ".html": "code",
    ".css": "code",
    ".scss": "code",
    ".json": "code",
    ".xml": "code",
    ".yaml": "code",
    ".yml": "code",
    # Executables
    ".exe": "executables",
    ".msi": "executables",
    ".deb": "executables",
    ".rpm": "executables",
    ".dmg": "executables",
    ".app": "executables",
}

# Category for unrecognized (or missing) extensions
DEFAULT_CATEGORY = "others"

# Every folder name category mode can create, in table order
CATEGORY_NAMES: List[str] = list(dict.fromkeys(EXTENSION_CATEGORIES.values())) + [DEFAULT_CATEGORY]


@dataclass(frozen=True)
class Config:
    """
    Options for one organizer.

    Instances are immutable; derive a variant with ``dataclasses.replace``.

    Example:
        # Use defaults
        config = Config()

        # Preview only, hidden files included
        config = Config(dry_run=True, skip_hidden_files=False)
    """

    # Create category subfolders (category mode skips every file without them)
    create_subfolders: bool = True

    # Reserved, not used by any operation yet
    preserve_original_structure: bool = False

    # Leave dot-files out of the scan entirely
    skip_hidden_files: bool = True

    # Report what would happen without touching the filesystem
    dry_run: bool = False

    def is_hidden(self, name: str) -> bool:
        """Check if a file name is hidden (starts with dot)."""
        return name.startswith(".")


# Default configuration instance
DEFAULT_CONFIG = Config()
