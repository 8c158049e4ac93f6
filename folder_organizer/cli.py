"""
Command-line interface for the folder organizer.

Handles argument parsing and orchestrates operations.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .config import Config, DEFAULT_CONFIG
from .operations import OrganizeError, organize_by_category, organize_by_date
from .report import print_report


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    The directory is optional so that running without arguments can print
    usage instead of failing.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="organize",
        description="Organize files into category or date subfolders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Categories:
  images        - jpg, png, gif, svg, webp, etc.
  videos        - mp4, avi, mkv, mov, etc.
  audio         - mp3, wav, flac, etc.
  documents     - pdf, doc, docx, txt, etc.
  spreadsheets  - xls, xlsx, csv, ods
  presentations - ppt, pptx, odp
  archives      - zip, rar, 7z, tar, etc.
  code          - py, js, html, css, json, etc.
  executables   - exe, msi, dmg, deb, etc.
  others        - everything else

Date mode (--by-date) moves files to <directory>/<YYYY>/<YYYY>-<MM>/
based on their last modification time.

Use --dry-run to preview changes before applying.
        """
    )

    parser.add_argument(
        "directory",
        nargs="?",
        type=str,
        help="Directory to organize"
    )

    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Preview changes without moving files"
    )

    parser.add_argument(
        "--by-date",
        action="store_true",
        help="Organize by modification date instead of category"
    )

    parser.add_argument(
        "--include-hidden",
        action="store_true",
        help="Include hidden files (names starting with .)"
    )

    parser.add_argument(
        "--no-subfolders",
        action="store_true",
        help="Don't create category subfolders (category mode then skips every file)"
    )

    return parser


def config_from_args(args: argparse.Namespace, base: Config = DEFAULT_CONFIG) -> Config:
    """Build the run configuration from parsed flags."""
    return replace(
        base,
        create_subfolders=not args.no_subfolders,
        skip_hidden_files=not args.include_hidden,
        dry_run=args.dry_run,
    )


def run(args: argparse.Namespace, config: Optional[Config] = None) -> int:
    """
    Run the folder organizer with the given arguments.

    Args:
        args: Parsed command-line arguments
        config: Configuration to use (default: built from the flags)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if config is None:
        config = config_from_args(args)

    directory = Path(args.directory).expanduser().resolve()

    try:
        if args.by_date:
            report = organize_by_date(directory, config=config)
        else:
            report = organize_by_category(directory, config=config)
    except OrganizeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_report(report)
    if config.dry_run:
        print("\n[DRY RUN] No files were moved. Run without --dry-run to apply changes.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.directory is None:
        parser.print_help()
        return 0
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
