"""Text rendering for extraction reports."""

from __future__ import annotations

import csv
import io

from .models import Record, ValidationSummary, record_email

SUMMARY_HEADERS = ["Proper emails number", "Wrong emails number"]


def render_csv(rows: list[list[str]], delimiter: str = ",") -> str:
    """Render rows to CSV text with unix line endings."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def summary_row(summary: ValidationSummary) -> list[str]:
    return [
        f"{summary.proper_count} ({summary.proper_percentage})",
        f"{summary.wrong_count} ({summary.wrong_percentage})",
    ]


def render_summary_message(source_name: str, summary: ValidationSummary) -> str:
    return (
        f"File {source_name} was successfully processed. "
        f"There were {summary.proper_count} proper emails and {summary.wrong_count} wrong emails"
    )


class ReportRenderer:
    """Object adapter for pipeline dependency injection."""

    def __init__(self, summary_delimiter: str = ";"):
        self.summary_delimiter = summary_delimiter

    def render_emails(self, records: list[Record]) -> str:
        return render_csv([[record_email(record)] for record in records])

    def render_summary_csv(self, summary: ValidationSummary) -> str:
        return render_csv([SUMMARY_HEADERS, summary_row(summary)], delimiter=self.summary_delimiter)

    def render_message(self, source_name: str, summary: ValidationSummary) -> str:
        return render_summary_message(source_name=source_name, summary=summary)
