# digest_log/parsers/fallback.py
import re
from datetime import datetime
from typing import Callable, Optional

from digest_log.core.errors import TimestampFormatError
from digest_log.core.log import LogRecord, Severity
from .base import LogParser, parse_iso_timestamp


class FallbackLogParser(LogParser):
    """Best-effort parser that accepts any non-blank entry.

    The first ISO-like timestamp and the first severity keyword found
    anywhere in the entry are used. Date-like text that is not a real
    date is skipped. Without a timestamp the record is stamped with
    ``clock()``; without a keyword it is INFO. The whole entry becomes
    the message.
    """
    name = "Fallback"

    TIMESTAMP_PATTERN = re.compile(
        r"(\d{4}-\d{2}-\d{2}[T\s]\d{2}:\d{2}:\d{2}(?:\.\d+)?)"
    )
    LEVEL_PATTERN = re.compile(
        r"\b(TRACE|DEBUG|INFO|WARN(?:ING)?|ERROR|CRITICAL|FATAL)\b",
        re.IGNORECASE,
    )

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock

    def can_parse(self, entry: str) -> bool:
        return True

    def parse(self, entry: str) -> Optional[LogRecord]:
        if not entry or not entry.strip():
            return None

        timestamp = self._find_timestamp(entry)

        level_match = self.LEVEL_PATTERN.search(entry)
        severity = Severity.from_token(level_match.group(1) if level_match else None)

        return LogRecord(
            timestamp=timestamp,
            severity=severity,
            message=entry,
        )

    def _find_timestamp(self, entry: str) -> datetime:
        """First date-like substring that is a real date, else clock()"""
        for match in self.TIMESTAMP_PATTERN.finditer(entry):
            try:
                return parse_iso_timestamp(match.group(1), self.name)
            except TimestampFormatError:
                continue
        return self.clock()
