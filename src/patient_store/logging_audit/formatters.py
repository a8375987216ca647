"""Custom log formatters for Patient Store.

This module provides specialized formatters for logging, including PII redaction.
"""

import logging
import re
from typing import List, Tuple


class PIIRedactingFormatter(logging.Formatter):
    """Formatter that redacts patient demographics from log messages.

    Masks key/value pairs for the demographic fields (name, date_of_birth,
    address, phone) and free-standing phone numbers.

    Attributes:
        redact_pii: Whether to enable PII redaction
        patterns: List of (regex_pattern, replacement_text) tuples for redaction

    Example:
        >>> formatter = PIIRedactingFormatter(redact_pii=True)
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """

    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_pii: bool = False,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_pii = redact_pii

        self.patterns: List[Tuple[re.Pattern[str], str]] = [
            # name="Jane Doe", name='Jane Doe', name=Jane
            (re.compile(r'\bname=(?:"[^"]*"|\'[^\']*\'|[^\s|,]+)'), "name=[NAME-REDACTED]"),
            (re.compile(r"\bdate_of_birth=\S+"), "date_of_birth=[DOB-REDACTED]"),
            (
                re.compile(r'\baddress=(?:"[^"]*"|\'[^\']*\'|[^\s|,]+)'),
                "address=[ADDRESS-REDACTED]",
            ),
            (re.compile(r'\bphone=(?:"[^"]*"|\'[^\']*\'|[^\s|,]+)'), "phone=[PHONE-REDACTED]"),
            # 555-555-1234, (555) 555-1234
            (re.compile(r"(?:\(\d{3}\)\s?|\b\d{3}-)\d{3}-\d{4}\b"), "[PHONE-REDACTED]"),
        ]

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional PII redaction."""
        original = super().format(record)

        if self.redact_pii:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)

        return original
