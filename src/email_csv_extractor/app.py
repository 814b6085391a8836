"""Application entry point for email extraction from CSV files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .classifier import EmailClassifier
from .config import AppConfig, load_config
from .csv_source import CsvRecordSource
from .errors import EmailExtractionError
from .output_writer import ReportWriter
from .pipeline import EmailExtractionPipeline
from .renderer import ReportRenderer
from .validator import EmailValidator


def _build_runtime_log_lines(config: AppConfig, input_path: Path) -> list[str]:
    filenames = config.output.filenames
    return [
        f"  input_path={input_path}",
        f"  data_dir={config.paths.data_dir}",
        f"  result_dir={config.paths.result_dir}",
        f"  proper_emails={filenames.proper_emails}",
        f"  wrong_emails={filenames.wrong_emails}",
        f"  summary_csv={filenames.summary_csv}",
        f"  summary_txt={filenames.summary_txt}",
        f"  summary_delimiter={config.output.summary_delimiter}",
    ]


def run_pipeline(filename: str, config_path: str | None = None) -> dict:
    """Build dependencies from config and execute one run."""

    config = load_config(config_path)
    input_path = Path(config.paths.data_dir) / filename
    print(f"[STEP] Processing {input_path.resolve()}")
    for line in _build_runtime_log_lines(config, input_path):
        print(line)

    pipeline = EmailExtractionPipeline(
        source=CsvRecordSource(input_path, name=filename),
        classifier=EmailClassifier(EmailValidator()),
        renderer=ReportRenderer(summary_delimiter=config.output.summary_delimiter),
        writer=ReportWriter(config.paths.result_dir),
        filenames=config.output.filenames,
    )

    print(f"[STEP] Loaded {len(pipeline.records)} records")
    classification = pipeline.classify()
    print(f"[STEP] Classified {len(classification.proper)} proper and {len(classification.wrong)} wrong emails")

    result = pipeline.run()
    for output_path in result.output_paths:
        print(f"[STEP] Wrote {output_path}")
    return {
        "source_name": result.source_name,
        "proper_count": result.summary.proper_count,
        "wrong_count": result.summary.wrong_count,
        "proper_percentage": result.summary.proper_percentage,
        "wrong_percentage": result.summary.wrong_percentage,
        "message": result.message,
        "output_paths": result.output_paths,
    }


def main(argv: list[str] | None = None) -> int:
    """CLI main function."""

    parser = argparse.ArgumentParser(
        description=(
            "Extract email addresses from a csv file, store proper ones in proper_emails.csv "
            "and wrong ones in wrong_emails.csv inside the result directory"
        )
    )
    parser.add_argument("filename", help="Name of csv file with email addresses to be processed")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config json. Default: config/default_config.json",
    )
    args = parser.parse_args(argv)

    try:
        result = run_pipeline(filename=args.filename, config_path=args.config)
    except (EmailExtractionError, OSError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    print(result["message"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
