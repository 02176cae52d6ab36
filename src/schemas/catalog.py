"""Catalog record schemas.

Catalog records are pasted from a MARC view as tab-separated lines:

    100<TAB>1 <TAB>$aSmith, John A.
    001<TAB>  <TAB>ocn893691141

Each line becomes a CatalogRecord; the folded result of all records is a
BibliographicData.
"""

from pydantic import BaseModel, Field

SENTINEL_CODE = "_"


class Subfield(BaseModel):
    """A single coded part of a catalog field.

    The sentinel code "_" marks a line with no $-delimited subfields, whose
    whole remainder is kept as one opaque value.
    """

    code: str = Field(min_length=1, max_length=1)
    value: str


class CatalogRecord(BaseModel):
    """One tagged line of a catalog record.

    Attributes:
        tag: Three-digit field tag (e.g. "650")
        indicator: Indicator column, kept verbatim
        subfields: Subfields in the order they appear on the line
    """

    tag: str
    indicator: str
    subfields: list[Subfield] = []


class CallNumber(BaseModel):
    """The call number of a periodical.

    A call number with no shelf value is a plain PERIODICAL, which is
    written to the spreadsheet as a blank cell.

    Attributes:
        shelf: Shelf locator (e.g. "AZ CATTLELOG 1945-1976"), None for PERIODICAL
    """

    shelf: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_input(cls, value: str | None) -> "CallNumber":
        value = (value or "").strip()
        return cls(shelf=value or None)

    @property
    def is_periodical(self) -> bool:
        return self.shelf is None

    def __str__(self) -> str:
        return self.shelf or ""


class BibliographicData(BaseModel):
    """Bibliographic fields extracted from a catalog record.

    Attributes:
        creators: Creator names (fields 100, 110, 700, 710)
        publisher: Publisher name (260/264 subfield b)
        subject_headings: Subject headings (610, 650)
        call_number: Call number supplied by the operator
        identifier: 9-digit, zero-padded OCLC number (001/003)
    """

    creators: list[str] = []
    publisher: str = ""
    subject_headings: list[str] = []
    call_number: CallNumber = Field(default_factory=CallNumber)
    identifier: str = Field(min_length=1)
