"""Tests for the file name parser."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from robo_archiver.exceptions import DateParseError, UnparseableFileNameError
from robo_archiver.files.filename_parser import parse_file_name, split_title_and_date


class TestSplitTitleAndDate:
    """Tests for split_title_and_date."""

    def test_title_and_month(self):
        """Trailing yyyy-mm is split from the title."""
        assert split_title_and_date("A_Gazette_1930-01") == ("A Gazette", "1930-01")

    def test_hyphen_inside_title_is_kept(self):
        """Hyphens followed by letters stay in the title."""
        assert split_title_and_date("An_Arizona_Desert-ation_1967-04") == (
            "An Arizona Desert-ation",
            "1967-04",
        )

    def test_no_date(self):
        """A name without trailing digits has an empty date."""
        assert split_title_and_date("NoDate") == ("NoDate", "")

    def test_only_date(self):
        """A name that is only a date has an empty title."""
        assert split_title_and_date("1967-04") == ("", "1967-04")

    def test_multiple_trailing_underscores(self):
        """All underscores between title and date are removed."""
        assert split_title_and_date("Gazette__1930") == ("Gazette", "1930")

    def test_date_without_separator(self):
        """Digits directly after the title are still the date."""
        assert split_title_and_date("Gazette1930") == ("Gazette", "1930")


class TestParseFileName:
    """Tests for parse_file_name."""

    def test_parse_pdf(self):
        """A well-formed PDF name yields all issue fields."""
        data = parse_file_name(Path("scans/An_Arizona_Desert-ation_1967-04.pdf"))

        assert data.title == "An Arizona Desert-ation"
        assert data.original_date == "1967-04"
        assert data.date_range == "1960s (1960-1969)"
        assert data.format.is_pdf
        assert str(data.format) == "PDF"

    def test_parse_accepts_str_path(self):
        """String paths are accepted."""
        data = parse_file_name("A_Gazette_1930-01-15.pdf")

        assert data.original_date == "1930-01-15"

    def test_pdf_extension_is_case_insensitive(self):
        """An upper-case PDF extension is still PDF."""
        data = parse_file_name("A_Gazette_1930.PDF")

        assert data.format.is_pdf
        assert str(data.format) == "PDF"

    def test_other_extension_is_kept_raw(self):
        """Non-PDF extensions are kept as they appear."""
        data = parse_file_name("A_Gazette_1930.TIF")

        assert not data.format.is_pdf
        assert str(data.format) == "TIF"

    def test_dots_in_title(self):
        """Only the last dot separates the extension."""
        data = parse_file_name("St._Johns_Herald_1901.pdf")

        assert data.title == "St. Johns Herald"

    @pytest.mark.parametrize(
        "title, date",
        [
            ("A Gazette", "1930-01"),
            ("The Arizona Cattlelog", "1945"),
            ("Desert-ation Monthly", "1967-04-22"),
        ],
    )
    def test_round_trip(self, title, date):
        """Parsing a constructed name returns its title and date."""
        name = f"{title.replace(' ', '_')}_{date}.pdf"

        data = parse_file_name(name)

        assert (data.title, data.original_date) == (title, date)

    def test_title_with_date(self):
        """title_with_date joins title and date with a comma."""
        data = parse_file_name("A_Gazette_1930-01.pdf")

        assert data.title_with_date == "A Gazette, 1930-01"

    def test_empty_title_raises(self):
        """A name that is only a date cannot be parsed."""
        with pytest.raises(UnparseableFileNameError) as exc_info:
            parse_file_name("1967-04.pdf")

        assert exc_info.value.path == "1967-04.pdf"
        assert "Unparseable file name: 1967-04.pdf" in str(exc_info.value)

    def test_empty_date_raises(self):
        """A name without a trailing date cannot be parsed."""
        with pytest.raises(UnparseableFileNameError):
            parse_file_name("NoDate.pdf")

    def test_missing_extension_raises(self):
        """A name without an extension cannot be parsed."""
        with pytest.raises(UnparseableFileNameError):
            parse_file_name("A_Gazette_1930-01")

    def test_hyphen_only_date_raises(self):
        """A date run of only hyphens passes the scan but has no year."""
        with pytest.raises(UnparseableFileNameError) as exc_info:
            parse_file_name("A_Gazette_--.pdf")

        assert isinstance(exc_info.value.__cause__, DateParseError)

    def test_error_keeps_full_path(self, tmp_path):
        """The error reports the full path of the offending file."""
        path = tmp_path / "NoDate.pdf"

        with pytest.raises(UnparseableFileNameError) as exc_info:
            parse_file_name(path)

        assert exc_info.value.path == str(path)

    def test_result_is_immutable(self):
        """Parsed issue data cannot be modified."""
        data = parse_file_name("A_Gazette_1930-01.pdf")

        with pytest.raises(ValidationError):
            data.title = "Other"
