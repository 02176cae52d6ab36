"""Extract bibliographic fields from tokenized catalog records.

Records are folded in their original order through a table of handlers
keyed by field tag. Order matters twice: the last 260/264 record sets the
publisher, and the first 001/003 control field sets the identifier.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from robo_archiver.exceptions import MissingIdentifierError
from schemas.catalog import (
    SENTINEL_CODE,
    BibliographicData,
    CallNumber,
    CatalogRecord,
)

logger = logging.getLogger(__name__)

GRAMMATICAL_PUNCTUATION = ".,; "
IDENTIFIER_WIDTH = 9

# Separator placed before each subject subfield value; "a" starts the heading.
SUBJECT_SEPARATORS = {
    "a": "",
    "x": "--",
    "v": "--",
    "z": "--",
    "d": ", ",
}


def trim_punctuation(value: str) -> str:
    """Strip trailing periods, commas, semicolons and spaces.

    Examples:
        >>> trim_punctuation("Arizona Cattle Growers' Association.")
        "Arizona Cattle Growers' Association"
    """
    return value.rstrip(GRAMMATICAL_PUNCTUATION)


def invert_name(name: str) -> str:
    """Reorder a "Last, First" personal name as "First Last".

    Names that do not split into exactly two parts on ", " are returned
    unchanged.

    Examples:
        >>> invert_name("Smith, John A.")
        'John A. Smith'
        >>> invert_name("Smith, John, 1900-1970")
        'Smith, John, 1900-1970'
    """
    parts = name.split(", ")
    if len(parts) == 2:
        return f"{parts[1]} {parts[0]}"
    return name


def normalize_identifier(value: str) -> str:
    """Strip a control number's prefix and zero-pad it to nine digits.

    Examples:
        >>> normalize_identifier("ocn893691141")
        '893691141'
        >>> normalize_identifier("4")
        '000000004'
    """
    index = 0
    while index < len(value) and not value[index].isdecimal():
        index += 1
    return value[index:].rjust(IDENTIFIER_WIDTH, "0")


@dataclass
class _Fold:
    """Fields accumulated while folding one catalog's records."""

    creators: list[str] = field(default_factory=list)
    publisher: str = ""
    subject_headings: list[str] = field(default_factory=list)
    identifier: str | None = None


def _fold_creator(state: _Fold, record: CatalogRecord) -> None:
    state.creators.extend(
        trim_punctuation(sf.value) for sf in record.subfields if sf.code == "a"
    )


def _fold_added_personal_name(state: _Fold, record: CatalogRecord) -> None:
    state.creators.extend(
        trim_punctuation(invert_name(sf.value))
        for sf in record.subfields
        if sf.code == "a"
    )


def _fold_publisher(state: _Fold, record: CatalogRecord) -> None:
    names = [trim_punctuation(sf.value) for sf in record.subfields if sf.code == "b"]
    state.publisher = trim_punctuation(" ".join(names))


def _fold_subject(state: _Fold, record: CatalogRecord) -> None:
    parts = []
    for sf in record.subfields:
        separator = SUBJECT_SEPARATORS.get(sf.code)
        if separator is None:
            logger.warning(
                f"Unknown subfield code for subjects in field {record.tag}, "
                f"ignoring: {sf.code}"
            )
            continue
        parts.append(separator)
        parts.append(sf.value)
    state.subject_headings.append(trim_punctuation("".join(parts)))


def _fold_control_number(state: _Fold, record: CatalogRecord) -> None:
    if state.identifier is not None:
        return
    if not record.subfields or record.subfields[0].code != SENTINEL_CODE:
        return
    state.identifier = normalize_identifier(record.subfields[0].value)


FIELD_HANDLERS: dict[str, Callable[[_Fold, CatalogRecord], None]] = {
    "100": _fold_creator,
    "110": _fold_creator,
    "710": _fold_creator,
    "700": _fold_added_personal_name,
    "260": _fold_publisher,
    "264": _fold_publisher,
    "610": _fold_subject,
    "650": _fold_subject,
    "001": _fold_control_number,
    "003": _fold_control_number,
}


def extract_bibliographic_data(
    call_number: CallNumber,
    records: Iterable[CatalogRecord],
) -> BibliographicData:
    """Fold catalog records into bibliographic fields.

    Args:
        call_number: Call number supplied by the operator
        records: Tokenized catalog records, in textual order

    Returns:
        BibliographicData for the periodical

    Raises:
        MissingIdentifierError: If no 001/003 control field yields an identifier
    """
    state = _Fold()
    for record in records:
        handler = FIELD_HANDLERS.get(record.tag)
        if handler is not None:
            handler(state, record)

    if not state.identifier:
        raise MissingIdentifierError()

    return BibliographicData(
        creators=state.creators,
        publisher=state.publisher,
        subject_headings=state.subject_headings,
        call_number=call_number,
        identifier=state.identifier,
    )
