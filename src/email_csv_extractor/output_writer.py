"""File output adapter for extraction reports."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from .errors import OutputWriteError
from .models import ReportArtifact


class ReportWriter:
    """Write report artifacts into the result directory as one unit.

    Every artifact is first written to a temporary file next to its target.
    Targets are replaced only after all artifacts were staged, so a failed
    run leaves previous outputs untouched and no partial files behind.
    """

    def __init__(self, result_dir: str | Path):
        self.result_dir = Path(result_dir)

    def write(self, artifacts: list[ReportArtifact]) -> list[str]:
        try:
            self.result_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputWriteError(f"Cannot create result directory {self.result_dir}: {exc}") from exc

        mode = 0o666 & ~_current_umask()
        staged: list[tuple[Path, Path]] = []
        try:
            for artifact in artifacts:
                staged.append((self._stage(artifact, mode), self.result_dir / artifact.filename))
            for temp_path, target_path in staged:
                os.replace(temp_path, target_path)
        except OSError as exc:
            for temp_path, _ in staged:
                temp_path.unlink(missing_ok=True)
            raise OutputWriteError(f"Cannot write results to {self.result_dir}: {exc}") from exc

        return [str(target_path) for _, target_path in staged]

    def _stage(self, artifact: ReportArtifact, mode: int) -> Path:
        fd, temp_name = tempfile.mkstemp(prefix=f".{artifact.filename}.", suffix=".tmp", dir=self.result_dir)
        temp_path = Path(temp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(artifact.content)
            os.chmod(temp_path, mode)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
        return temp_path


def _current_umask() -> int:
    # os.umask has no read-only form.
    mask = os.umask(0)
    os.umask(mask)
    return mask
