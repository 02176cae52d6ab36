"""Schemas for data inferred from scanned issue file names."""

from pydantic import BaseModel


class DigitalFormat(BaseModel):
    """The digital format of a scanned issue file.

    Either PDF or some other format identified by its raw extension.

    Attributes:
        extension: File extension as it appeared on disk (no leading dot)
    """

    extension: str

    model_config = {"frozen": True}

    @classmethod
    def from_extension(cls, extension: str) -> "DigitalFormat":
        return cls(extension=extension)

    @property
    def is_pdf(self) -> bool:
        return self.extension.lower() == "pdf"

    def __str__(self) -> str:
        return "PDF" if self.is_pdf else self.extension


class IssueFileData(BaseModel):
    """Data extracted from a single issue file name.

    Example:
        An_Arizona_Desert-ation_1967-04.pdf ->
        title="An Arizona Desert-ation", original_date="1967-04",
        date_range="1960s (1960-1969)", format=PDF

    Attributes:
        title: Periodical title with underscores replaced by spaces
        original_date: Trailing date run from the file name (yyyy, yyyy-mm or yyyy-mm-dd)
        date_range: Decade label derived from the year
        format: Digital format inferred from the extension
    """

    title: str
    original_date: str
    date_range: str
    format: DigitalFormat

    model_config = {"frozen": True}

    @property
    def title_with_date(self) -> str:
        """Title followed by the issue date, e.g. "A Gazette, 1930-01"."""
        return f"{self.title}, {self.original_date}"


class PeriodicalGroup(BaseModel):
    """Issues sharing one inferred periodical title, in date order.

    Attributes:
        title: The shared periodical title
        issues: Issues sorted by original_date (plain string comparison)
    """

    title: str
    issues: list[IssueFileData] = []
