"""Core data models for the email extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

Record = tuple[str, ...]


def record_email(record: Record) -> str:
    """Return the email candidate held in the first field of a record."""

    return record[0] if record else ""


@dataclass(slots=True)
class ClassificationResult:
    """Stable partition of input records into proper and wrong emails."""

    proper: list[Record] = field(default_factory=list)
    wrong: list[Record] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.proper) + len(self.wrong)

    @property
    def proper_emails(self) -> list[str]:
        return [record_email(record) for record in self.proper]

    @property
    def wrong_emails(self) -> list[str]:
        return [record_email(record) for record in self.wrong]


@dataclass(frozen=True, slots=True)
class ValidationSummary:
    """Counts and percentage shares of proper and wrong emails."""

    proper_count: int
    wrong_count: int
    proper_percentage: str
    wrong_percentage: str

    @property
    def total(self) -> int:
        return self.proper_count + self.wrong_count


@dataclass(frozen=True, slots=True)
class ReportArtifact:
    """One rendered output file."""

    filename: str
    content: str


@dataclass(slots=True)
class PipelineRunResult:
    """Outcome metadata for one pipeline run."""

    source_name: str
    summary: ValidationSummary
    message: str
    output_paths: list[str] = field(default_factory=list)
