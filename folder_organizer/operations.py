"""
Core file operations for the folder organizer.

These functions perform the actual file system operations (scan, move).
They use a callback pattern for output to separate concerns from the CLI.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple, TypeVar, Union

from .config import Config, DEFAULT_CONFIG
from .report import OrganizationReport, print_report
from .utils import (
    format_file_size,
    generate_unique_filename,
    get_category,
    get_date_key,
    get_extension,
    get_file_mtime,
    get_file_size_bytes,
)


@dataclass(frozen=True)
class FileRecord:
    """A file found by a scan. Built once, never changed."""
    name: str
    path: Path
    extension: str
    size_bytes: int
    category: str


class OrganizeError(ValueError):
    """
    Raised when a whole run cannot proceed (missing or unreadable directory).

    The partially filled report, with the failure already in its error list,
    is available as ``report``.
    """

    def __init__(self, message: str, report: OrganizationReport):
        super().__init__(message)
        self.report = report


# Type alias for output callback
OutputCallback = Callable[[str], None]

T = TypeVar("T")


def _default_output(message: str) -> None:
    """Default output callback that prints to stdout."""
    print(message)


def get_file_info(file_path: Path) -> FileRecord:
    """
    Build a FileRecord for a single file.

    Args:
        file_path: Path to an existing file

    Returns:
        FileRecord with extension, size and category filled in
    """
    file_path = Path(file_path)
    extension = get_extension(file_path)
    return FileRecord(
        name=file_path.name,
        path=file_path,
        extension=extension,
        size_bytes=get_file_size_bytes(file_path),
        category=get_category(extension),
    )


def scan_directory(directory: Path, config: Config = DEFAULT_CONFIG) -> List[FileRecord]:
    """
    List the files directly inside a directory (no recursion).

    Hidden files are dropped entirely when ``config.skip_hidden_files`` is set.
    Records are sorted by name so runs are reproducible.

    Args:
        directory: Directory to scan
        config: Configuration to use

    Returns:
        List of FileRecord, one per regular file

    Raises:
        FileNotFoundError: If directory does not exist
        NotADirectoryError: If directory is not a directory
    """
    directory = Path(directory)
    if not directory.exists():
        raise FileNotFoundError(f"Directory does not exist: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    files = sorted(
        (f for f in directory.iterdir() if f.is_file() and not f.is_symlink()),
        key=lambda f: f.name,
    )
    return [
        get_file_info(f)
        for f in files
        if not (config.skip_hidden_files and config.is_hidden(f.name))
    ]


def place_by_category(
    record: FileRecord,
    base_directory: Path,
    config: Config = DEFAULT_CONFIG,
    output: OutputCallback = _default_output,
) -> bool:
    """
    Move one file into its category subfolder.

    Name collisions are resolved as ``name_1.ext``, ``name_2.ext``, ... so an
    existing file is never overwritten. In dry run the collision probe still
    looks at the real folder, but nothing is created or moved.

    Args:
        record: File to place
        base_directory: Directory holding the category subfolders
        config: Configuration to use
        output: Callback for output messages

    Returns:
        True if the file was (or would be) moved, False if skipped because
        subfolders are disabled

    Raises:
        OSError: If the folder cannot be created or the move fails
    """
    if not config.create_subfolders:
        output(f"  [SKIPPED] {record.name} (subfolders disabled)")
        return False

    category_dir = Path(base_directory) / record.category
    if not config.dry_run:
        category_dir.mkdir(parents=True, exist_ok=True)

    destination = generate_unique_filename(category_dir / record.name)
    action = f"{record.name} ({format_file_size(record.size_bytes)}) -> {record.category}/{destination.name}"

    if config.dry_run:
        output(f"  [DRY RUN] {action}")
    else:
        shutil.move(str(record.path), str(destination))
        output(f"  [MOVED] {action}")
    return True


def place_by_date(
    record: FileRecord,
    base_directory: Path,
    config: Config = DEFAULT_CONFIG,
    output: OutputCallback = _default_output,
) -> str:
    """
    Move one file into ``<base>/<YYYY>/<YYYY>-<MM>`` based on its modification time.

    Uses the same collision naming as category mode.

    Args:
        record: File to place
        base_directory: Directory holding the year folders
        config: Configuration to use
        output: Callback for output messages

    Returns:
        The ``YYYY-MM`` key of the target folder

    Raises:
        OSError: If the file cannot be read, the folder cannot be created or
            the move fails
    """
    modified = get_file_mtime(record.path)
    date_key = get_date_key(modified)
    month_dir = Path(base_directory) / f"{modified.year:04d}" / date_key
    if not config.dry_run:
        month_dir.mkdir(parents=True, exist_ok=True)

    destination = generate_unique_filename(month_dir / record.name)
    action = f"{record.name} ({format_file_size(record.size_bytes)}) -> {modified.year:04d}/{date_key}/{destination.name}"

    if config.dry_run:
        output(f"  [DRY RUN] {action}")
    else:
        shutil.move(str(record.path), str(destination))
        output(f"  [MOVED] {action}")
    return date_key


def _attempt(
    place: Callable[[FileRecord], T],
    record: FileRecord,
) -> Tuple[Optional[T], Optional[str]]:
    """Run one placement, turning an OSError into an error line."""
    try:
        return place(record), None
    except OSError as e:
        return None, f"Failed to organize {record.name}: {e}"


def _scan_for_run(
    directory: Path,
    report: OrganizationReport,
    context: str,
    config: Config,
) -> List[FileRecord]:
    """Scan the run's directory, or record the failure and raise OrganizeError."""
    try:
        return scan_directory(directory, config)
    except OSError as e:
        message = f"{context}: {e}"
        report.errors.append(message)
        raise OrganizeError(message, report) from e


def _start_run(files: List[FileRecord], directory: Path, config: Config, output: OutputCallback) -> None:
    prefix = "[DRY RUN] " if config.dry_run else ""
    output(f"\n{prefix}Found {len(files)} files to organize in: {directory}\n")
    output("-" * 60)


def organize_by_category(
    directory: Union[str, Path],
    config: Config = DEFAULT_CONFIG,
    output: OutputCallback = _default_output,
) -> OrganizationReport:
    """
    Organize the files of a directory into category subfolders.

    A failure on one file is recorded in the report and the run goes on
    with the next file.

    Args:
        directory: Path to the directory to organize
        config: Configuration to use
        output: Callback for output messages

    Returns:
        OrganizationReport with statistics

    Raises:
        OrganizeError: If the directory is missing or cannot be listed
    """
    directory = Path(directory)
    report = OrganizationReport()
    files = _scan_for_run(directory, report, "Failed to organize directory", config)
    report.total_files = len(files)
    _start_run(files, directory, config, output)

    for record in files:
        placed, error = _attempt(
            lambda r: place_by_category(r, directory, config=config, output=output),
            record,
        )
        if error is not None:
            output(f"  [ERROR] {error}")
            report.errors.append(error)
        elif placed:
            report.record_organized(record.category)
        else:
            report.skipped_files += 1

    output("-" * 60)
    return report


def organize_by_date(
    directory: Union[str, Path],
    config: Config = DEFAULT_CONFIG,
    output: OutputCallback = _default_output,
) -> OrganizationReport:
    """
    Organize the files of a directory into year/month subfolders.

    There is no skipped outcome in this mode: each file is either organized
    or recorded as an error.

    Args:
        directory: Path to the directory to organize
        config: Configuration to use
        output: Callback for output messages

    Returns:
        OrganizationReport keyed by ``YYYY-MM``

    Raises:
        OrganizeError: If the directory is missing or cannot be listed
    """
    directory = Path(directory)
    report = OrganizationReport()
    files = _scan_for_run(directory, report, "Failed to organize by date", config)
    report.total_files = len(files)
    _start_run(files, directory, config, output)

    for record in files:
        date_key, error = _attempt(
            lambda r: place_by_date(r, directory, config=config, output=output),
            record,
        )
        if error is not None:
            output(f"  [ERROR] {error}")
            report.errors.append(error)
        else:
            report.record_organized(date_key)

    output("-" * 60)
    return report


class FileOrganizer:
    """
    An organizer bound to one configuration and output callback.

    The configuration is frozen, so one instance can serve any number of runs.

    Example:
        organizer = FileOrganizer(Config(dry_run=True))
        report = organizer.organize_directory("~/Downloads")
        organizer.print_report(report)
    """

    def __init__(self, config: Config = DEFAULT_CONFIG, output: OutputCallback = _default_output):
        self.config = config
        self.output = output

    def organize_directory(self, directory: Union[str, Path]) -> OrganizationReport:
        return organize_by_category(directory, config=self.config, output=self.output)

    def organize_by_date(self, directory: Union[str, Path]) -> OrganizationReport:
        return organize_by_date(directory, config=self.config, output=self.output)

    def get_file_info(self, file_path: Union[str, Path]) -> FileRecord:
        return get_file_info(Path(file_path))

    def print_report(self, report: OrganizationReport) -> None:
        print_report(report, output=self.output)
