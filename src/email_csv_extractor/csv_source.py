"""CSV input source for email candidates."""

from __future__ import annotations

import csv
from pathlib import Path

from .errors import CsvParseError, InputNotFoundError
from .models import Record


class CsvRecordSource:
    """Load every non-blank row of a one-column CSV file, no header row."""

    def __init__(self, path: str | Path, name: str | None = None, delimiter: str = ","):
        self.path = Path(path)
        self.name = self.path.name if name is None else name
        self.delimiter = delimiter

    def read_records(self) -> list[Record]:
        """Read the whole file into memory.

        Raises:
            InputNotFoundError: If the path is not a readable file.
            CsvParseError: If the file is not UTF-8 text or not valid CSV.
        """

        if not self.name:
            raise InputNotFoundError("You have to pass name of source csv file")
        if not self.path.is_file():
            raise InputNotFoundError(
                f"You have to pass name of proper csv file, something is wrong with {self.name}"
            )

        try:
            with self.path.open("r", encoding="utf-8-sig", newline="") as handle:
                reader = csv.reader(handle, delimiter=self.delimiter, strict=True)
                return [tuple(row) for row in reader if row]
        except PermissionError as exc:
            raise InputNotFoundError(f"Cannot read input file {self.name}: {exc}") from exc
        except (csv.Error, UnicodeDecodeError) as exc:
            raise CsvParseError(f"Cannot parse {self.name} as CSV: {exc}") from exc
