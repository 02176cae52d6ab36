"""File-name inference: listing, parsing and grouping issue files."""

from .dates import date_to_date_range
from .filename_parser import parse_file_name, split_title_and_date
from .grouper import group_issues, process_files
from .loader import load_directory

__all__ = [
    "date_to_date_range",
    "group_issues",
    "load_directory",
    "parse_file_name",
    "process_files",
    "split_title_and_date",
]
