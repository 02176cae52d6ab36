"""CSV writer for the archive ingestion spreadsheet.

The spreadsheet has a fixed 56-column header. Most columns are placeholders
filled in later by the ingestion system and are written blank.
"""

import csv
import logging
import re
from pathlib import Path

from schemas.periodical import Issue, Periodical

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "archive.csv"

HEADERS = [
    "NODE_TITLE",
    "ASSETS",
    "ATTACHMENTS",
    "#REDACT",
    "Part Of",
    "Previous Issue",
    "Next Issue",
    "Creator",
    "Contributor",
    "Publisher",
    "Volume",
    "Issue",
    "Description",
    "Subject",
    "Date Original",
    "Date Range",
    "Type",
    "Original Format",
    "Language",
    "Contributing Institution",
    "Collection",
    "Subcollection",
    "Rights Statement",
    "State Agency",
    "State Sub-Agency",
    "Federal Legislative Branch Agency",
    "Federal Executive Department",
    "Federal Executive Department Sub-Agency or Bureau",
    "Federal Independent Agency",
    "Federal Board, Commission, or Committee",
    "Federal Quasi-Official Agency",
    "Federal Court or Judicial Agency",
    "City or Town",
    "Geographic Feature",
    "Tribal Homeland",
    "Road",
    "County",
    "State",
    "Country",
    "Agency",
    "Event",
    "Oral History",
    "Person",
    "Place",
    "Topic",
    "Acquisition Note",
    "Call Number",
    "Vertical File",
    "OCLC Number",
    "Date Digitized",
    "Digital Format",
    "File Size",
    "Digitizing Institution",
    "Date Ingested",
    "Batch Number",
    "Admin Notes",
]

MULTI_VALUE_SEPARATOR = "|"
DATE_ORIGINAL_SEPARATOR = "--"

_NUMBERED_STEM = re.compile(r"^(?P<stem>.*) \((?P<n>\d+)\)$")


def issue_to_row(periodical: Periodical, issue: Issue, first: bool) -> list[str]:
    """Build one spreadsheet row for an issue.

    Description, contributing institution, collection and topics are only
    written on the first row of each periodical.

    Args:
        periodical: Periodical the issue belongs to
        issue: Issue to write
        first: Whether this is the periodical's first issue

    Returns:
        Row values aligned with HEADERS
    """
    bib = issue.bibliographic
    values = {
        "NODE_TITLE": issue.node_title,
        "Previous Issue": issue.previous_issue or "",
        "Next Issue": issue.next_issue or "",
        "Creator": MULTI_VALUE_SEPARATOR.join(bib.creators),
        "Contributor": MULTI_VALUE_SEPARATOR.join(issue.contributors),
        "Publisher": bib.publisher,
        "Volume": issue.volume or "",
        "Issue": issue.issue_number or "",
        "Subject": MULTI_VALUE_SEPARATOR.join(bib.subject_headings),
        "Date Original": DATE_ORIGINAL_SEPARATOR.join(issue.date_original),
        "Date Range": MULTI_VALUE_SEPARATOR.join(issue.date_range),
        "Type": issue.item_type,
        "Original Format": issue.original_format,
        "Language": MULTI_VALUE_SEPARATOR.join(issue.languages),
        "Subcollection": issue.subcollection,
        "Rights Statement": issue.rights_statement,
        "Call Number": str(bib.call_number),
        "OCLC Number": bib.identifier,
        "Digital Format": str(issue.digital_format),
        "Digitizing Institution": issue.digitizing_institution,
    }
    if first:
        values["Description"] = periodical.description
        values["Contributing Institution"] = periodical.contributing_institution
        values["Collection"] = periodical.collection
        values["Topic"] = MULTI_VALUE_SEPARATOR.join(periodical.topics)

    return [values.get(header, "") for header in HEADERS]


def periodical_to_rows(periodical: Periodical) -> list[list[str]]:
    return [
        issue_to_row(periodical, issue, first=(i == 0))
        for i, issue in enumerate(periodical.issues)
    ]


def resolve_output_path(out_path: Path | str | None = None) -> Path:
    """Find a free output path, numbering the name if it already exists.

    "archive.csv" becomes "archive (1).csv", then "archive (2).csv", and so
    on. A name that already carries a number, such as "archive (3).csv",
    continues counting from that number.

    Args:
        out_path: Requested output path (default: archive.csv)

    Returns:
        A path that does not exist yet
    """
    path = Path(out_path) if out_path else Path(DEFAULT_FILE_NAME)
    if not path.exists():
        return path

    stem, start = path.stem, 0
    match = _NUMBERED_STEM.match(stem)
    if match:
        stem, start = match.group("stem"), int(match.group("n"))

    n = start + 1
    while True:
        candidate = path.with_name(f"{stem} ({n}){path.suffix}")
        if not candidate.exists():
            return candidate
        n += 1


def write_periodicals(
    periodicals: list[Periodical], out_path: Path | str | None = None
) -> Path:
    """Write periodicals to a new CSV file.

    Args:
        periodicals: Periodicals to write, in order
        out_path: Requested output path; numbered if it already exists

    Returns:
        Path the spreadsheet was written to
    """
    path = resolve_output_path(out_path)
    logger.info(f"Saving to: {path}")

    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(HEADERS)
        for periodical in periodicals:
            writer.writerows(periodical_to_rows(periodical))

    return path
