"""Tokenizer for pasted catalog records.

Each catalog line has three tab-separated columns: the field tag, the
indicators, and the field content. Field content is split into subfields
on "$", where the first character after each "$" is the subfield code:

    650<TAB> 0<TAB>$aWater rights$zArizona.

Lines without subfield markup (control fields such as 001) keep their whole
content under the sentinel code "_".
"""

import logging
from collections.abc import Iterable

from schemas.catalog import SENTINEL_CODE, CatalogRecord, Subfield

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "\t"
SUBFIELD_DELIMITER = "$"


def parse_subfields(content: str) -> list[Subfield]:
    """Split a field's content into subfields.

    Args:
        content: Third column of a catalog line

    Returns:
        Subfields in line order, or a single sentinel subfield holding the
        whole content when no "$" subfields are present
    """
    subfields = []
    # Text before the first "$" is not part of any subfield.
    for fragment in content.split(SUBFIELD_DELIMITER)[1:]:
        if not fragment:
            continue
        subfields.append(Subfield(code=fragment[0], value=fragment[1:]))

    if not subfields:
        subfields.append(Subfield(code=SENTINEL_CODE, value=content))
    return subfields


def parse_line(line: str) -> CatalogRecord | None:
    """Parse one catalog line, or return None if it is not a field line."""
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(parts) != 3:
        return None

    tag, indicator, content = parts
    return CatalogRecord(
        tag=tag,
        indicator=indicator,
        subfields=parse_subfields(content),
    )


def tokenize(lines: Iterable[str]) -> list[CatalogRecord]:
    """Parse catalog lines into records, preserving input order.

    Lines that do not have exactly three tab-separated columns are skipped;
    catalog exports routinely contain blank or separator lines.

    Args:
        lines: Lines of catalog text

    Returns:
        List of CatalogRecord
    """
    records = []
    for number, line in enumerate(lines, start=1):
        record = parse_line(line)
        if record is None:
            logger.debug(f"Skipping catalog line {number}: not a tagged field")
            continue
        records.append(record)
    return records
