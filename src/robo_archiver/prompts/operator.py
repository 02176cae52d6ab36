"""Interactive operator prompts.

Everything the operator types is gathered here and handed to the core as
plain strings and lists. The console and input stream are injectable so the
prompts can run without a terminal.
"""

import logging
import sys
from importlib import resources
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from robo_archiver.exceptions import (
    ArchiveIOError,
    InputClosedError,
    TopicSelectionError,
)
from schemas.catalog import CallNumber

logger = logging.getLogger(__name__)

TOPIC_COUNT = 3


def load_topics(topics_file: Path | None = None) -> list[str]:
    """Load the topic vocabulary, one topic per line.

    Args:
        topics_file: Vocabulary file to use instead of the packaged list

    Returns:
        Non-blank topic lines in file order

    Raises:
        ArchiveIOError: If the vocabulary file cannot be read as UTF-8 text
    """
    if topics_file is None:
        text = resources.files(__package__).joinpath("topics.txt").read_text(encoding="utf-8")
    else:
        try:
            text = topics_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ArchiveIOError(f"Cannot read topics file {topics_file}: {e}") from e
    return [line.strip() for line in text.splitlines() if line.strip()]


class _StreamPrompt(Prompt):
    """Prompt that raises EOFError when the input stream is exhausted."""

    @classmethod
    def get_input(cls, console, prompt, password, stream=None) -> str:
        answer = super().get_input(console, prompt, password, stream=stream)
        if stream is not None and answer == "":
            raise EOFError
        return answer


class OperatorPrompts:
    """Prompts an operator for the values that cannot be inferred.

    Example:
        prompts = OperatorPrompts()
        call_number = prompts.prompt_call_number("A Gazette")
        catalog_lines = prompts.accept_catalog()
    """

    def __init__(
        self,
        console: Console | None = None,
        stream: TextIO | None = None,
        topics: list[str] | None = None,
    ):
        """Initialize the prompts.

        Args:
            console: Console to write prompts to (default: stdout console)
            stream: Stream to read answers from (default: stdin)
            topics: Topic vocabulary (default: packaged topics.txt)
        """
        self.console = console or Console()
        self._stream = stream
        self.topics = topics if topics is not None else load_topics()

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdin

    def ask(self, prompt: str, default: str = "") -> str:
        """Ask one question and return the stripped answer.

        Raises:
            InputClosedError: If input ends before a line is read
        """
        try:
            answer = _StreamPrompt.ask(
                escape(prompt),
                console=self.console,
                stream=self.stream,
                default=default,
                show_default=False,
            )
        except EOFError as e:
            raise InputClosedError() from e
        return answer.strip()

    def prompt_call_number(self, title: str) -> CallNumber:
        """Ask for the call number; a blank answer means PERIODICAL."""
        answer = self.ask(
            f'Enter the call number (or just hit [ENTER] if PERIODICAL) '
            f'for the "{title}" collection'
        )
        return CallNumber.from_input(answer)

    def prompt_description(self, title: str) -> str:
        return self.ask(f'Enter the description of the "{title}" periodical')

    def accept_catalog(self) -> list[str]:
        """Read a pasted catalog record, ending at the first blank line.

        Returns:
            Catalog lines without line terminators
        """
        self.console.print("Paste a MARC record:")
        lines = []
        for line in self.stream:
            line = line.rstrip("\r\n")
            if not line:
                break
            lines.append(line)

        self.console.print("MARC record accepted.")
        self.console.rule()
        logger.debug(f"Accepted catalog record with {len(lines)} lines")
        return lines

    def _topic_table(self, title: str) -> Table:
        heading = f'Topics for "{title}"'
        # rich wraps the title to the table width
        table = Table(title=escape(heading), min_width=len(heading) + 4)
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Topic")
        for number, topic in enumerate(self.topics, start=1):
            table.add_row(str(number), topic)
        return table

    def select_topics(self, title: str) -> list[str]:
        """Ask the operator to pick exactly three topics by number.

        Args:
            title: Periodical title shown in the prompt

        Returns:
            The chosen topics in vocabulary order

        Raises:
            TopicSelectionError: If the answer is not exactly three valid,
                distinct topic numbers
        """
        self.console.print(self._topic_table(title))
        answer = self.ask(
            f'Select {TOPIC_COUNT} topics from the vocabulary list for the '
            f'"{title}" collection (numbers separated by commas)'
        )

        choices = {part.strip() for part in answer.replace(" ", ",").split(",")}
        choices.discard("")
        indices = set()
        for choice in choices:
            if not choice.isdecimal() or not 1 <= int(choice) <= len(self.topics):
                raise TopicSelectionError(f"Not a topic number: {choice}", len(choices))
            indices.add(int(choice) - 1)

        if len(indices) < TOPIC_COUNT:
            raise TopicSelectionError(
                f"You need to select at least {TOPIC_COUNT} topics. "
                f"You selected {len(indices)}.",
                len(indices),
            )
        if len(indices) > TOPIC_COUNT:
            raise TopicSelectionError(
                f"You may select at most {TOPIC_COUNT} topics. "
                f"You selected {len(indices)}.",
                len(indices),
            )
        return [self.topics[i] for i in sorted(indices)]

    def select_topics_with_retries(self, title: str) -> list[str]:
        """Re-prompt until exactly three topics are chosen."""
        while True:
            try:
                return self.select_topics(title)
            except TopicSelectionError as e:
                logger.warning(e.message)
                self.console.print(f"[yellow]{escape(e.message)}[/yellow] Please try again.")
