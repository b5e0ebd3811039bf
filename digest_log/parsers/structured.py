# digest_log/parsers/structured.py
import re
from datetime import datetime
from typing import Optional

from digest_log.core.errors import TimestampFormatError
from digest_log.core.log import LogRecord, Severity
from .base import LogParser


class StructuredLogParser(LogParser):
    """Parse entries like:
      2024-01-01 10:00:00.000 [ERROR] Auth - Login failed for user 42

    The message runs to the end of the entry, continuation lines included.
    """
    name = "Structured Timestamp"

    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

    LOG_PATTERN = re.compile(
        r"""
        ^
        (?P<ts>\d{4}-\d{2}-\d{2}\s\d{2}:\d{2}:\d{2}\.\d{3})
        \s+
        \[(?P<level>\w+)\]
        \s+
        (?P<source>[\w.]+)
        \s+-\s+
        (?P<msg>.*)
        """,
        re.VERBOSE | re.DOTALL,
    )

    def can_parse(self, entry: str) -> bool:
        return bool(entry) and self.LOG_PATTERN.match(entry) is not None

    def parse(self, entry: str) -> Optional[LogRecord]:
        if not entry:
            return None

        m = self.LOG_PATTERN.match(entry)
        if not m:
            return None

        try:
            timestamp = datetime.strptime(m.group("ts"), self.TIMESTAMP_FORMAT)
        except ValueError as e:
            raise TimestampFormatError(m.group("ts"), self.name) from e

        return LogRecord(
            timestamp=timestamp,
            severity=Severity.from_token(m.group("level")),
            source=m.group("source"),
            message=m.group("msg").rstrip("\r\n"),
        )
