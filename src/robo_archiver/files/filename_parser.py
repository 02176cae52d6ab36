"""Infer issue metadata from scanned file names.

File names encode the periodical title and the issue date:

    An_Arizona_Desert-ation_1967-04.pdf

The date is the longest run of digits and hyphens at the end of the base
name; everything before it (minus trailing underscores) is the title.
"""

import logging
from pathlib import Path

from robo_archiver.exceptions import DateParseError, UnparseableFileNameError
from schemas.issue_file import DigitalFormat, IssueFileData

from .dates import date_to_date_range

logger = logging.getLogger(__name__)


def _is_date_char(char: str) -> bool:
    return char.isdecimal() or char == "-"


def split_title_and_date(base_name: str) -> tuple[str, str]:
    """Split a base name (no extension) into title and trailing date.

    Args:
        base_name: File name with the extension removed

    Returns:
        Tuple of (title, date); either may be empty

    Examples:
        >>> split_title_and_date("A_Gazette_1930-01")
        ('A Gazette', '1930-01')
        >>> split_title_and_date("NoDate")
        ('NoDate', '')
    """
    end = len(base_name)
    start = end
    while start > 0 and _is_date_char(base_name[start - 1]):
        start -= 1

    date_original = base_name[start:]
    title = base_name[:start].rstrip("_").replace("_", " ")
    return title, date_original


def parse_file_name(file_path: Path | str) -> IssueFileData:
    """Transform a file name into an IssueFileData.

    Args:
        file_path: Path to a scanned issue file

    Returns:
        IssueFileData with title, date, date range and format

    Raises:
        UnparseableFileNameError: If the name has no extension, or the title
            or date comes out empty
    """
    file_path = Path(file_path)
    base_name, dot, extension = file_path.name.rpartition(".")
    if not dot:
        raise UnparseableFileNameError(str(file_path))

    title, date_original = split_title_and_date(base_name)
    if not title or not date_original:
        raise UnparseableFileNameError(str(file_path))

    try:
        date_range = date_to_date_range(date_original)
    except DateParseError as e:
        raise UnparseableFileNameError(str(file_path)) from e

    logger.debug(f"Parsed {file_path.name} as {title!r} {date_original}")
    return IssueFileData(
        title=title,
        original_date=date_original,
        date_range=date_range,
        format=DigitalFormat.from_extension(extension),
    )
