"""Custom exceptions for robo-archiver."""


class ArchiveError(Exception):
    """Base exception for all archiving errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ArchiveIOError(ArchiveError):
    """Raised when an input directory or file cannot be read."""

    pass


class DateParseError(ArchiveError):
    """Raised when a date's year segment is not an integer."""

    def __init__(self, value: str, *args, **kwargs):
        self.value = value
        super().__init__(f"Unparseable date: {value!r}", *args, **kwargs)


class UnparseableFileNameError(ArchiveError):
    """Raised when a file name has no title or no trailing date.

    The offending path is kept so the operator can rename the file and rerun.
    """

    def __init__(self, path: str, *args, **kwargs):
        self.path = path
        super().__init__(f"Unparseable file name: {path}", *args, **kwargs)


class MissingIdentifierError(ArchiveError):
    """Raised when a catalog record has no usable 001/003 identifier."""

    def __init__(self, message: str = "No identifier found in catalog record"):
        super().__init__(message)


class TopicSelectionError(ArchiveError):
    """Raised when the operator does not choose exactly three topics."""

    def __init__(self, message: str, selected: int = 0, *args, **kwargs):
        self.selected = selected
        super().__init__(message, *args, **kwargs)


class InputClosedError(ArchiveError):
    """Raised when operator input ends while a prompt is waiting for an answer."""

    def __init__(self, message: str = "Operator input ended before the prompt was answered"):
        super().__init__(message)
