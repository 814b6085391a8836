"""Protocol interfaces for pipeline dependency typing."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from .models import ClassificationResult, Record, ReportArtifact, ValidationSummary


class ValidatorInterface(Protocol):
    """Email candidate validator interface."""

    def is_valid(self, candidate: str) -> bool: ...


class SourceInterface(Protocol):
    """Input record source interface."""

    name: str

    def read_records(self) -> list[Record]: ...


class ClassifierInterface(Protocol):
    """Record classifier interface."""

    def classify(self, records: Iterable[Record]) -> ClassificationResult: ...


class RendererInterface(Protocol):
    """Renderer interface for report artifacts."""

    def render_emails(self, records: list[Record]) -> str: ...

    def render_summary_csv(self, summary: ValidationSummary) -> str: ...

    def render_message(self, source_name: str, summary: ValidationSummary) -> str: ...


class WriterInterface(Protocol):
    """Writer interface for report output."""

    def write(self, artifacts: list[ReportArtifact]) -> list[str]: ...
