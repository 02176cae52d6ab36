"""Pytest fixtures for robo-archiver tests."""

import io

import pytest
from rich.console import Console

from schemas.catalog import BibliographicData, CallNumber


@pytest.fixture
def sample_catalog_lines():
    """Sample catalog record as pasted from a MARC view.

    Includes a malformed separator line and a blank line, both of which are
    expected in real exports.
    """
    return [
        "LDR\t00000cas a2200000 a 4500",
        "001\t \tocn893691141",
        "003\t \tOCoLC",
        "100\t1 \t$aSmith, John A.,$eeditor.",
        "110\t2 \t$aArizona Cattle Growers' Association.",
        "245\t10\t$aThe cattlelog /$cArizona Cattle Growers' Association.",
        "260\t  \t$aPhoenix, Ariz. :$bArizona Cattle Growers' Association,$c1945-1976.",
        "650\t 0\t$aCattle$zArizona$vPeriodicals.",
        "650\t 0\t$aWater rights$zArizona.",
        "700\t1 \t$aDoe, Jane",
        "710\t2 \t$aArizona State Library, Archives and Public Records.",
        "-------------------------------------------",
        "",
    ]


@pytest.fixture
def sample_bibliographic_data():
    """BibliographicData matching sample_catalog_lines."""
    return BibliographicData(
        creators=[
            "Smith, John A",
            "Arizona Cattle Growers' Association",
            "Jane Doe",
            "Arizona State Library, Archives and Public Records",
        ],
        publisher="Arizona Cattle Growers' Association",
        subject_headings=["Cattle--Arizona--Periodicals", "Water rights--Arizona"],
        call_number=CallNumber(shelf="AZ CATTLELOG 1945-1976"),
        identifier="893691141",
    )


@pytest.fixture
def issue_dir(tmp_path):
    """Directory of scanned issue files for two periodicals, plus debris."""
    scans = tmp_path / "scans"
    scans.mkdir()
    for name in [
        "A_Gazette_1930-12.pdf",
        "The_Cattlelog_1945-02.PDF",
        "A_Gazette_1930-01.pdf",
        "The_Cattlelog_1945-01.tif",
        ".DS_Store",
        "Cargo.toml",
    ]:
        (scans / name).write_bytes(b"")
    (scans / "__MACOSX").mkdir()
    (scans / "__MACOSX" / "A_Gazette_1930-01.pdf").write_bytes(b"")
    return scans


@pytest.fixture
def console():
    """A rich console that records output instead of writing to a terminal."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def answers():
    """Build an input stream from operator answers, one per line."""

    def _answers(*lines: str) -> io.StringIO:
        return io.StringIO("".join(f"{line}\n" for line in lines))

    return _answers
