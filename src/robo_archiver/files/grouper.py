"""Group parsed issue files into periodicals."""

import logging
from collections.abc import Iterable
from pathlib import Path

from schemas.issue_file import IssueFileData, PeriodicalGroup

from .filename_parser import parse_file_name

logger = logging.getLogger(__name__)


def group_issues(issues: Iterable[IssueFileData]) -> list[PeriodicalGroup]:
    """Group issues by title and sort each group by date.

    Groups come out in the order their title was first seen. Within a group
    issues are stable-sorted by original_date using plain string comparison,
    so dates are only ordered chronologically when they share one width
    (e.g. all yyyy-mm).

    Args:
        issues: Parsed issue file data, in listing order

    Returns:
        One PeriodicalGroup per distinct title
    """
    by_title: dict[str, list[IssueFileData]] = {}
    for issue in issues:
        by_title.setdefault(issue.title, []).append(issue)

    return [
        PeriodicalGroup(
            title=title,
            issues=sorted(members, key=lambda i: i.original_date),
        )
        for title, members in by_title.items()
    ]


def process_files(file_paths: Iterable[Path | str]) -> list[PeriodicalGroup]:
    """Parse every file name and group the results into periodicals.

    Args:
        file_paths: Candidate issue files

    Returns:
        Ordered list of PeriodicalGroup

    Raises:
        UnparseableFileNameError: On the first file name that cannot be parsed
    """
    issues = [parse_file_name(path) for path in file_paths]
    groups = group_issues(issues)
    logger.info(f"Found {len(groups)} periodical(s) in {len(issues)} file(s)")
    return groups
