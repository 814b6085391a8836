"""Error kinds reported to the operator."""

from __future__ import annotations


class EmailExtractionError(Exception):
    """Base class for failures of one extraction run."""


class InputNotFoundError(EmailExtractionError, FileNotFoundError):
    """The input filename does not resolve to a readable file."""


class CsvParseError(EmailExtractionError, ValueError):
    """The input file cannot be parsed as CSV."""


class EmptyInputError(EmailExtractionError, ValueError):
    """The input file holds no records."""


class EmptySummaryError(EmailExtractionError, ZeroDivisionError):
    """A summary was requested over zero classified records."""


class OutputWriteError(EmailExtractionError, OSError):
    """An output artifact could not be written."""
