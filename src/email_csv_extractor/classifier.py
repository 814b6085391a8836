"""Split input records into proper and wrong email addresses."""

from __future__ import annotations

from collections.abc import Iterable

from .interfaces import ValidatorInterface
from .models import ClassificationResult, Record, record_email
from .validator import EmailValidator


class EmailClassifier:
    """Classify records by the email candidate in their first field."""

    def __init__(self, validator: ValidatorInterface | None = None):
        self.validator = validator or EmailValidator()

    def classify(self, records: Iterable[Record]) -> ClassificationResult:
        """Partition records, keeping input order inside each group."""

        result = ClassificationResult()
        for record in records:
            if self.validator.is_valid(record_email(record)):
                result.proper.append(record)
            else:
                result.wrong.append(record)
        return result
