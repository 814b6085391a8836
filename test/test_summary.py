import re

import pytest

from email_csv_extractor.errors import EmptySummaryError
from email_csv_extractor.summary import summarize

PERCENTAGE_PATTERN = re.compile(r"^\d+\.\d{2}%$")


def test_summarize_two_of_three() -> None:
    summary = summarize([("a@b.com",), ("x@y.org",)], [("not-an-email",)])

    assert summary.proper_count == 2
    assert summary.wrong_count == 1
    assert summary.proper_percentage == "66.67%"
    assert summary.wrong_percentage == "33.33%"
    assert summary.total == 3


def test_summarize_all_wrong() -> None:
    summary = summarize([], [("a",), ("b",)])

    assert summary.proper_percentage == "0.00%"
    assert summary.wrong_percentage == "100.00%"


def test_summarize_all_proper() -> None:
    summary = summarize([("a@b.com",)], [])

    assert summary.proper_percentage == "100.00%"
    assert summary.wrong_percentage == "0.00%"


@pytest.mark.parametrize(("proper", "wrong"), [(1, 2), (5, 7), (1, 999), (13, 0)])
def test_summarize_percentages_are_two_decimal_strings(proper: int, wrong: int) -> None:
    summary = summarize([("p",)] * proper, [("w",)] * wrong)

    assert summary.proper_count + summary.wrong_count == proper + wrong
    assert PERCENTAGE_PATTERN.match(summary.proper_percentage)
    assert PERCENTAGE_PATTERN.match(summary.wrong_percentage)


def test_summarize_empty_classification_raises_division_error() -> None:
    with pytest.raises(EmptySummaryError):
        summarize([], [])

    with pytest.raises(ZeroDivisionError):
        summarize([], [])
