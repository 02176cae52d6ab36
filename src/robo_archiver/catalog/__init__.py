"""Catalog record parsing: tokenizing tagged lines and extracting fields."""

from collections.abc import Iterable

from schemas.catalog import BibliographicData, CallNumber

from .extractor import (
    FIELD_HANDLERS,
    extract_bibliographic_data,
    invert_name,
    normalize_identifier,
    trim_punctuation,
)
from .tokenizer import parse_line, parse_subfields, tokenize


def parse_catalog(lines: Iterable[str], call_number: CallNumber) -> BibliographicData:
    """Tokenize catalog lines and extract their bibliographic fields.

    Raises:
        MissingIdentifierError: If the record has no identifier
    """
    return extract_bibliographic_data(call_number, tokenize(lines))


__all__ = [
    "FIELD_HANDLERS",
    "extract_bibliographic_data",
    "invert_name",
    "normalize_identifier",
    "parse_catalog",
    "parse_line",
    "parse_subfields",
    "tokenize",
    "trim_punctuation",
]
