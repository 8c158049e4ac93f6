#!/usr/bin/env python3
"""
Folder Organizer - Sort the files of a directory into subfolders.

Files directly inside the directory are moved into category folders based on
their extension (images/, documents/, code/, ...), or into year/month folders
based on their modification time. Subdirectories are left alone.

SAFETY POLICY:
    This script NEVER deletes or overwrites files. It only moves them.
    - If a file already exists at the destination, "_1", "_2", ... is added
      before the extension
    - Use --dry-run to preview changes before applying them

Usage:
    python organize.py <directory>                   # Organize by category
    python organize.py <directory> --dry-run         # Preview without moving files
    python organize.py <directory> --by-date         # Organize into YYYY/YYYY-MM/
    python organize.py <directory> --include-hidden  # Also organize dot-files
    python organize.py <directory> --no-subfolders   # Category mode skips every file

Example:
    python organize.py ~/Downloads --dry-run  # See what would happen
    python organize.py ~/Downloads            # Actually organize the files
"""

import sys

from folder_organizer.cli import main


if __name__ == "__main__":
    sys.exit(main())
