"""Writers for the archive ingestion spreadsheet."""

from .csv_writer import (
    DEFAULT_FILE_NAME,
    HEADERS,
    issue_to_row,
    periodical_to_rows,
    resolve_output_path,
    write_periodicals,
)

__all__ = [
    "DEFAULT_FILE_NAME",
    "HEADERS",
    "issue_to_row",
    "periodical_to_rows",
    "resolve_output_path",
    "write_periodicals",
]
