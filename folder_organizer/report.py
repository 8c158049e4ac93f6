"""Organization reports and their text rendering."""

from dataclasses import dataclass, field
from typing import Callable, Dict, List


@dataclass
class OrganizationReport:
    """Outcome of one organize run."""
    total_files: int = 0
    organized_files: int = 0
    skipped_files: int = 0
    categories: Dict[str, int] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    def record_organized(self, key: str) -> None:
        self.organized_files += 1
        self.categories[key] = self.categories.get(key, 0) + 1


def format_report(report: OrganizationReport) -> str:
    """
    Render a report as the summary shown after a run.

    Categories are listed in the order they were first seen; the category
    and error sections are left out when empty.
    """
    lines: List[str] = ["=== File Organization Report ==="]
    lines.append(f"Total files: {report.total_files}")
    lines.append(f"Organized: {report.organized_files}")
    lines.append(f"Skipped: {report.skipped_files}")

    if report.categories:
        lines.append("")
        lines.append("Categories:")
        for category, count in report.categories.items():
            lines.append(f"  {category}: {count} files")

    if report.errors:
        lines.append("")
        lines.append("Errors:")
        for error in report.errors:
            lines.append(f"  - {error}")

    return "\n".join(lines)


def print_report(report: OrganizationReport, output: Callable[[str], None] = print) -> None:
    output("\n" + format_report(report))
