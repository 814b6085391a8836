"""Pipeline orchestration for email extraction from CSV files."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import OutputFilenames
from .errors import EmptyInputError
from .interfaces import ClassifierInterface, RendererInterface, SourceInterface, WriterInterface
from .models import ClassificationResult, PipelineRunResult, Record, ReportArtifact, ValidationSummary
from .summary import summarize


@dataclass(slots=True)
class EmailExtractionPipeline:
    """Coordinate loading, classification, summary, and report output.

    Records and the classification are cached on the instance, so one
    pipeline object corresponds to one run over one source.
    """

    source: SourceInterface
    classifier: ClassifierInterface
    renderer: RendererInterface
    writer: WriterInterface
    filenames: OutputFilenames = field(default_factory=OutputFilenames)
    _records: list[Record] | None = field(default=None, init=False, repr=False)
    _classification: ClassificationResult | None = field(default=None, init=False, repr=False)

    @property
    def records(self) -> list[Record]:
        """Input records, loaded from the source on first access."""

        if self._records is None:
            records = self.source.read_records()
            if not records:
                raise EmptyInputError(f"Cannot extract data from given csv file {self.source.name}")
            self._records = records
        return self._records

    def classify(self) -> ClassificationResult:
        if self._classification is None:
            self._classification = self.classifier.classify(self.records)
        return self._classification

    def summarize(self) -> ValidationSummary:
        classification = self.classify()
        return summarize(classification.proper, classification.wrong)

    def build_artifacts(self) -> tuple[list[ReportArtifact], ValidationSummary, str]:
        """Render every output in memory before anything touches the disk."""

        classification = self.classify()
        summary = self.summarize()
        message = self.renderer.render_message(source_name=self.source.name, summary=summary)
        artifacts = [
            ReportArtifact(self.filenames.proper_emails, self.renderer.render_emails(classification.proper)),
            ReportArtifact(self.filenames.wrong_emails, self.renderer.render_emails(classification.wrong)),
            ReportArtifact(self.filenames.summary_csv, self.renderer.render_summary_csv(summary)),
            ReportArtifact(self.filenames.summary_txt, message),
        ]
        return artifacts, summary, message

    def run(self) -> PipelineRunResult:
        """Run the full pipeline once."""

        artifacts, summary, message = self.build_artifacts()
        output_paths = self.writer.write(artifacts)
        return PipelineRunResult(
            source_name=self.source.name,
            summary=summary,
            message=message,
            output_paths=output_paths,
        )
