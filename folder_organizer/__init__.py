"""
Folder Organizer - Sort the files of a directory into subfolders.

This package moves files into category folders by extension, or into
year/month folders by modification time, and reports what it did.
"""

from .config import Config, DEFAULT_CATEGORY, EXTENSION_CATEGORIES
from .operations import (
    FileOrganizer,
    FileRecord,
    OrganizeError,
    organize_by_category,
    organize_by_date,
    scan_directory,
)
from .report import OrganizationReport, format_report, print_report

__version__ = "1.0.0"
__all__ = [
    "Config",
    "DEFAULT_CATEGORY",
    "EXTENSION_CATEGORIES",
    "FileOrganizer",
    "FileRecord",
    "OrganizationReport",
    "OrganizeError",
    "organize_by_category",
    "organize_by_date",
    "scan_directory",
    "format_report",
    "print_report",
]
