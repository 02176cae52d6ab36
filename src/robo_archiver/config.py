"""Run configuration for robo-archiver."""

from pydantic import BaseModel, Field

DEFAULT_COLLECTION = "Arizona Collection|Arizona Periodicals and Magazines"
DEFAULT_CONTRIBUTING_INSTITUTION = (
    "State of Arizona Research Library- Arizona State Library, Archives and Public Records"
)
DEFAULT_DIGITIZING_INSTITUTION = "FamilySearch International"
DEFAULT_RIGHTS_STATEMENT = (
    "NO COPYRIGHT - UNITED STATES. The organization that has made the Item "
    "available believes that the Item is in the Public Domain under the laws "
    "of the United States, but a determination was not made as to its "
    "copyright status under the copyright laws of other countries. The Item "
    "may not be in the Public Domain under the laws of other countries. "
    "Please refer to the organization that has made the Item available for "
    "more information. http://rightsstatements.org/vocab/NoC-US/1.0/"
)
DEFAULT_LANGUAGES = ["English"]


class ArchiveConfig(BaseModel):
    """Values applied to every periodical in a run.

    Attributes:
        collection: Collection the periodicals belong to
        contributing_institution: Institution that owns the periodicals
        digitizing_institution: Institution that scanned the issues
        rights_statement: Copyright statement written on every issue
        languages: Languages of the issues
        call_number: Call number to use for every periodical instead of
            prompting; "" means PERIODICAL
    """

    collection: str = DEFAULT_COLLECTION
    contributing_institution: str = DEFAULT_CONTRIBUTING_INSTITUTION
    digitizing_institution: str = DEFAULT_DIGITIZING_INSTITUTION
    rights_statement: str = DEFAULT_RIGHTS_STATEMENT
    languages: list[str] = Field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    call_number: str | None = None
