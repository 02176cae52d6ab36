"""Date helpers for issue file names."""

from robo_archiver.exceptions import DateParseError


def date_to_date_range(date_string: str) -> str:
    """Convert an issue date into a decade-range label.

    Only the year (the first hyphen-separated segment) is used; months and
    days are not validated.

    Args:
        date_string: Date in the form yyyy, yyyy-mm or yyyy-mm-dd

    Returns:
        Label of the form "1960s (1960-1969)"

    Raises:
        DateParseError: If the year segment is not an integer

    Examples:
        >>> date_to_date_range("1967-04")
        '1960s (1960-1969)'
        >>> date_to_date_range("1845")
        '1840s (1840-1849)'
    """
    year_segment = date_string.split("-")[0]
    if not year_segment.isdecimal():
        raise DateParseError(date_string)

    year = int(year_segment)
    decade = year - (year % 10)
    return f"{decade}s ({decade}-{decade + 9})"
