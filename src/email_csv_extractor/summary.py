"""Summary statistics over a classification result."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import EmptySummaryError
from .models import Record, ValidationSummary


def format_percentage(share: float) -> str:
    return f"{share * 100:.2f}%"


def summarize(proper: Sequence[Record], wrong: Sequence[Record]) -> ValidationSummary:
    """Compute counts and two-decimal percentage shares.

    Percentages are rounded independently, so they may not add up to exactly
    100.00%.

    Raises:
        EmptySummaryError: If both sequences are empty.
    """

    proper_count = len(proper)
    wrong_count = len(wrong)
    total = proper_count + wrong_count
    if total == 0:
        raise EmptySummaryError("Cannot summarize an empty classification: no records were processed")

    proper_share = proper_count / total
    wrong_share = 1 - proper_share
    return ValidationSummary(
        proper_count=proper_count,
        wrong_count=wrong_count,
        proper_percentage=format_percentage(proper_share),
        wrong_percentage=format_percentage(wrong_share),
    )
