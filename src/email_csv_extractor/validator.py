"""Syntactic email address validation."""

from __future__ import annotations

import re

from email_validator import EmailNotValidError, validate_email

FORBIDDEN_CHARS_PATTERN = re.compile(r"[\s\x00-\x1f\x7f]")


def is_valid_email(candidate: str) -> bool:
    """Return True when candidate is a syntactically valid email address.

    Only the address grammar is checked: no DNS lookup, no mailbox probe.
    Never raises; anything that is not a non-empty string is invalid.
    """

    if not isinstance(candidate, str) or not candidate:
        return False
    if FORBIDDEN_CHARS_PATTERN.search(candidate):
        return False

    try:
        validate_email(candidate, check_deliverability=False, allow_smtputf8=False)
    except EmailNotValidError:
        return False
    return True


class EmailValidator:
    """Object adapter for classifier dependency injection."""

    def is_valid(self, candidate: str) -> bool:
        return is_valid_email(candidate)
