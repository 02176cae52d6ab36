"""Schema definitions for robo-archiver."""

from .catalog import BibliographicData, CallNumber, CatalogRecord, Subfield
from .issue_file import DigitalFormat, IssueFileData, PeriodicalGroup
from .periodical import Issue, Periodical

__all__ = [
    "BibliographicData",
    "CallNumber",
    "CatalogRecord",
    "DigitalFormat",
    "Issue",
    "IssueFileData",
    "Periodical",
    "PeriodicalGroup",
    "Subfield",
]
