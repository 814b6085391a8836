import os
import stat
from pathlib import Path

import pytest

from email_csv_extractor.errors import OutputWriteError
from email_csv_extractor.models import ReportArtifact
from email_csv_extractor.output_writer import ReportWriter


def test_report_writer_creates_result_dir_and_files(tmp_path: Path) -> None:
    result_dir = tmp_path / "data" / "result"
    writer = ReportWriter(result_dir)

    paths = writer.write(
        [
            ReportArtifact("proper_emails.csv", "a@b.com\n"),
            ReportArtifact("validaion_summary.txt", "done"),
        ]
    )

    assert paths == [str(result_dir / "proper_emails.csv"), str(result_dir / "validaion_summary.txt")]
    assert (result_dir / "proper_emails.csv").read_text(encoding="utf-8") == "a@b.com\n"
    assert (result_dir / "validaion_summary.txt").read_text(encoding="utf-8") == "done"
    assert sorted(p.name for p in result_dir.iterdir()) == ["proper_emails.csv", "validaion_summary.txt"]


def test_report_writer_overwrites_previous_output(tmp_path: Path) -> None:
    (tmp_path / "wrong_emails.csv").write_text("old\n", encoding="utf-8")

    ReportWriter(tmp_path).write([ReportArtifact("wrong_emails.csv", "new\n")])

    assert (tmp_path / "wrong_emails.csv").read_text(encoding="utf-8") == "new\n"


def test_report_writer_keeps_previous_output_when_staging_fails(tmp_path: Path) -> None:
    (tmp_path / "proper_emails.csv").write_text("old\n", encoding="utf-8")
    (tmp_path / "blocked").mkdir()

    with pytest.raises(OutputWriteError):
        ReportWriter(tmp_path).write(
            [
                ReportArtifact("proper_emails.csv", "new\n"),
                ReportArtifact("blocked/nested/summary.txt", "never"),
            ]
        )

    assert (tmp_path / "proper_emails.csv").read_text(encoding="utf-8") == "old\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["blocked", "proper_emails.csv"]


def test_report_writer_fails_when_result_dir_is_a_file(tmp_path: Path) -> None:
    result_dir = tmp_path / "result"
    result_dir.write_text("", encoding="utf-8")

    with pytest.raises(OutputWriteError):
        ReportWriter(result_dir).write([ReportArtifact("proper_emails.csv", "")])


@pytest.mark.skipif(os.name != "posix", reason="file modes are posix only")
def test_report_writer_applies_umask_default_mode(tmp_path: Path) -> None:
    previous = os.umask(0o022)
    try:
        ReportWriter(tmp_path).write([ReportArtifact("proper_emails.csv", "a@b.com\n")])
    finally:
        os.umask(previous)

    assert stat.S_IMODE((tmp_path / "proper_emails.csv").stat().st_mode) == 0o644
