"""Command-line interface for robo-archiver."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from robo_archiver.assembler import MetadataAssembler
from robo_archiver.catalog import parse_catalog
from robo_archiver.config import (
    DEFAULT_COLLECTION,
    DEFAULT_CONTRIBUTING_INSTITUTION,
    DEFAULT_DIGITIZING_INSTITUTION,
    DEFAULT_LANGUAGES,
    DEFAULT_RIGHTS_STATEMENT,
    ArchiveConfig,
)
from robo_archiver.exceptions import ArchiveError
from robo_archiver.files import load_directory, process_files
from robo_archiver.prompts import OperatorPrompts, load_topics
from robo_archiver.writers import DEFAULT_FILE_NAME, write_periodicals
from schemas.catalog import CallNumber

DEFAULT_FILE_DIR = Path(".")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build(args: argparse.Namespace) -> int:
    """Execute the build command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    config = ArchiveConfig(
        collection=args.collection,
        contributing_institution=args.contributing_institution,
        digitizing_institution=args.digitization_institution,
        rights_statement=args.rights_statement,
        languages=args.languages,
        call_number=args.call_number,
    )

    try:
        file_paths = load_directory(args.file_dir, args.recursive, args.file_ext)
        groups = process_files(file_paths)

        prompts = OperatorPrompts(topics=load_topics(args.topics_file))
        periodicals = MetadataAssembler(config, prompts).assemble(groups)
        out_path = write_periodicals(periodicals, args.out_path)

        logger.info(f"Wrote {len(periodicals)} periodical(s)")
        logger.info(f"  Issues: {sum(len(p.issues) for p in periodicals)}")
        logger.info(f"  Output: {out_path}")

        return 0

    except ArchiveError as e:
        logger.error(f"Failed to build archive spreadsheet: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1


def parse_files(args: argparse.Namespace) -> int:
    """Execute the parse-files command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        file_paths = load_directory(args.file_dir, args.recursive, args.file_ext)
        groups = process_files(file_paths)
    except ArchiveError as e:
        logger.error(f"Failed to parse files: {e}")
        return 1

    for group in groups:
        logger.info(f"Periodical: {group.title}")
        for issue in group.issues:
            logger.info(f"  - {issue.original_date} {issue.date_range} [{issue.format}]")

    return 0


def parse_catalog_command(args: argparse.Namespace) -> int:
    """Execute the parse-catalog command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if args.catalog is not None:
        catalog_path = args.catalog.resolve()
        if not catalog_path.exists():
            logger.error(f"Catalog file not found: {catalog_path}")
            return 1
        try:
            lines = catalog_path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read catalog file {catalog_path}: {e}")
            return 1
    else:
        lines = OperatorPrompts(console=Console(stderr=True), topics=[]).accept_catalog()

    try:
        data = parse_catalog(lines, CallNumber.from_input(args.call_number))
    except ArchiveError as e:
        logger.error(f"Failed to parse catalog record: {e}")
        return 1

    print(data.model_dump_json(indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="robo-archiver",
        description="Build archive ingestion spreadsheets from scanned periodical issues",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    def add_file_arguments(subparser: argparse.ArgumentParser) -> None:
        subparser.add_argument(
            "-f", "--file-dir",
            type=Path,
            default=DEFAULT_FILE_DIR,
            help="Directory containing the scanned issue files (default: current directory)",
        )
        subparser.add_argument(
            "-r", "--recursive",
            action="store_true",
            help="Search the directory recursively",
        )
        subparser.add_argument(
            "--file-ext",
            nargs="+",
            default=None,
            help="Only include files with these extensions (e.g. pdf tif)",
        )

    build_parser = subparsers.add_parser(
        "build",
        help="Build the ingestion spreadsheet interactively",
        description="Group scanned issue files into periodicals, prompt for catalog records, descriptions and topics, and write the ingestion CSV.",
    )
    add_file_arguments(build_parser)
    build_parser.add_argument(
        "-n", "--call-number",
        type=str,
        default=None,
        help="Call number for every periodical (default: prompt; blank means PERIODICAL)",
    )
    build_parser.add_argument(
        "--collection",
        type=str,
        default=DEFAULT_COLLECTION,
        help=f"Collection the periodicals belong to (default: {DEFAULT_COLLECTION})",
    )
    build_parser.add_argument(
        "-i", "--contributing-institution",
        type=str,
        default=DEFAULT_CONTRIBUTING_INSTITUTION,
        help="Institution that owns the periodicals",
    )
    build_parser.add_argument(
        "--digitization-institution",
        type=str,
        default=DEFAULT_DIGITIZING_INSTITUTION,
        help=f"Institution that digitized the periodicals (default: {DEFAULT_DIGITIZING_INSTITUTION})",
    )
    build_parser.add_argument(
        "-c", "--rights-statement",
        type=str,
        default=DEFAULT_RIGHTS_STATEMENT,
        help="Copyright statement to include per issue (default: NoC-US)",
    )
    build_parser.add_argument(
        "-l", "--languages",
        nargs="+",
        default=list(DEFAULT_LANGUAGES),
        help="Languages of the issues (default: English)",
    )
    build_parser.add_argument(
        "--topics-file",
        type=Path,
        default=None,
        help="Topic vocabulary file, one topic per line (default: bundled list)",
    )
    build_parser.add_argument(
        "-o", "--out-path",
        type=Path,
        default=Path(DEFAULT_FILE_NAME),
        help=f"Output CSV path, numbered if it exists (default: {DEFAULT_FILE_NAME})",
    )
    build_parser.set_defaults(func=build)

    files_parser = subparsers.add_parser(
        "parse-files",
        help="Show how issue files group into periodicals",
        description="Parse issue file names and list the inferred periodicals, dates and date ranges.",
    )
    add_file_arguments(files_parser)
    files_parser.set_defaults(func=parse_files)

    catalog_parser = subparsers.add_parser(
        "parse-catalog",
        help="Extract bibliographic fields from a catalog record",
        description="Parse a tab-delimited MARC record and print the extracted bibliographic fields as JSON.",
    )
    catalog_parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="File containing the catalog record (default: read stdin until a blank line)",
    )
    catalog_parser.add_argument(
        "-n", "--call-number",
        type=str,
        default=None,
        help="Call number to attach (default: PERIODICAL)",
    )
    catalog_parser.set_defaults(func=parse_catalog_command)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
