"""Assembled periodical and issue schemas.

These are the objects written to the ingestion spreadsheet, one row per
Issue, grouped under their Periodical.
"""

from pydantic import BaseModel

from .catalog import BibliographicData
from .issue_file import DigitalFormat


class Issue(BaseModel):
    """A single issue row of the ingestion spreadsheet.

    Attributes:
        node_title: "Title, yyyy-mm-dd", "Title, yyyy-mm" or "Title, yyyy"
        previous_issue: node_title of the previous issue, if any
        next_issue: node_title of the next issue, if any
        contributors: Editors, staff and authors
        volume: Volume number, if known
        issue_number: Issue number or season, if known
        date_original: Issue dates
        date_range: Decade labels for the issue dates
        item_type: Item type, always "Text"
        original_format: Original format, always "Periodical"
        languages: Languages of the issue
        subcollection: Title of the parent periodical
        bibliographic: Catalog data shared by every issue of the periodical
        rights_statement: Copyright statement
        digital_format: Format of the scanned file
        digitizing_institution: Institution that scanned the issue
    """

    node_title: str
    previous_issue: str | None = None
    next_issue: str | None = None
    contributors: list[str] = []
    volume: str | None = None
    issue_number: str | None = None
    date_original: list[str] = []
    date_range: list[str] = []
    item_type: str = "Text"
    original_format: str = "Periodical"
    languages: list[str] = []
    subcollection: str
    bibliographic: BibliographicData
    rights_statement: str
    digital_format: DigitalFormat
    digitizing_institution: str


class Periodical(BaseModel):
    """A periodical and its issues, in date order.

    Attributes:
        description: Operator-supplied summary, 1-3 sentences
        collection: Collection the periodical belongs to
        contributing_institution: Institution holding the periodical
        issues: Issues in date order
        topics: Exactly three operator-chosen topics
    """

    description: str = ""
    collection: str
    contributing_institution: str
    issues: list[Issue] = []
    topics: list[str] = []
