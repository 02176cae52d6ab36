"""Metadata Assembler for building periodical spreadsheet records."""

import logging

from robo_archiver.catalog import parse_catalog
from robo_archiver.config import ArchiveConfig
from robo_archiver.prompts import OperatorPrompts
from schemas.catalog import BibliographicData, CallNumber
from schemas.issue_file import PeriodicalGroup
from schemas.periodical import Issue, Periodical

logger = logging.getLogger(__name__)


class MetadataAssembler:
    """Assembles grouped issue files and catalog data into Periodicals.

    For each periodical the assembler asks the operator for the call number
    (unless one is configured), the catalog record, a description and three
    topics, then links the issues into a previous/next chain.

    Example:
        assembler = MetadataAssembler(ArchiveConfig(), OperatorPrompts())
        periodicals = assembler.assemble(process_files(paths))
    """

    def __init__(self, config: ArchiveConfig, prompts: OperatorPrompts):
        self.config = config
        self.prompts = prompts

    def assemble(self, groups: list[PeriodicalGroup]) -> list[Periodical]:
        """Build one Periodical per group, in group order.

        Raises:
            MissingIdentifierError: If a pasted catalog record has no identifier
        """
        return [self.assemble_periodical(group) for group in groups]

    def assemble_periodical(self, group: PeriodicalGroup) -> Periodical:
        logger.info(f"Assembling {group.title!r} ({len(group.issues)} issues)")
        bibliographic = self.collect_bibliographic_data(group.title)
        issues = self.build_issues(group, bibliographic)

        return Periodical(
            description=self.prompts.prompt_description(group.title),
            collection=self.config.collection,
            contributing_institution=self.config.contributing_institution,
            issues=issues,
            topics=self.prompts.select_topics_with_retries(group.title),
        )

    def collect_bibliographic_data(self, title: str) -> BibliographicData:
        """Get the call number and catalog record for one periodical."""
        if self.config.call_number is not None:
            call_number = CallNumber.from_input(self.config.call_number)
        else:
            call_number = self.prompts.prompt_call_number(title)

        lines = self.prompts.accept_catalog()
        return parse_catalog(lines, call_number)

    def build_issues(
        self, group: PeriodicalGroup, bibliographic: BibliographicData
    ) -> list[Issue]:
        """Build issue rows for a group, linking neighbours by title.

        Args:
            group: Issues of one periodical, in date order
            bibliographic: Catalog data shared by every issue

        Returns:
            Issues in the same order as the group
        """
        issues = []
        for i, data in enumerate(group.issues):
            previous_issue = group.issues[i - 1].title_with_date if i > 0 else None
            next_issue = (
                group.issues[i + 1].title_with_date
                if i + 1 < len(group.issues)
                else None
            )
            issues.append(
                Issue(
                    node_title=data.title_with_date,
                    previous_issue=previous_issue,
                    next_issue=next_issue,
                    date_original=[data.original_date],
                    date_range=[data.date_range],
                    languages=list(self.config.languages),
                    subcollection=data.title,
                    bibliographic=bibliographic,
                    rights_statement=self.config.rights_statement,
                    digital_format=data.format,
                    digitizing_institution=self.config.digitizing_institution,
                )
            )
        return issues
