# digest_log/parsers/access.py
import re
from datetime import datetime
from typing import Optional

from digest_log.core.errors import TimestampFormatError
from digest_log.core.log import LogRecord, Severity
from .base import LogParser


class AccessLogParser(LogParser):
    """Parse web server combined-log entries like:
      127.0.0.1 - frank [10/Oct/2000:13:55:36 -0700] "GET /a.gif HTTP/1.0" 200 2326 "http://x/"

    Access logs carry no severity. The status code is offered to the level
    mapping, which never recognises a number, so every record is INFO.
    Status, size, referrer, ident and user end up in ``properties``.
    """
    name = "Access Log"

    TIMESTAMP_FORMAT = "%d/%b/%Y:%H:%M:%S %z"

    LOG_PATTERN = re.compile(
        r"""
        ^
        (?P<host>\S+)\s+
        (?P<ident>\S+)\s+
        (?P<user>\S+)\s+
        \[(?P<ts>.*?)\]\s+
        "(?P<request>.*?)"\s+
        (?P<status>\d{3})\s+
        (?P<size>\d+|-)\s*
        "(?P<referrer>.*?)"
        """,
        re.VERBOSE,
    )

    def can_parse(self, entry: str) -> bool:
        return bool(entry) and self.LOG_PATTERN.match(entry) is not None

    def parse(self, entry: str) -> Optional[LogRecord]:
        if not entry:
            return None

        m = self.LOG_PATTERN.match(entry)
        if not m:
            return None

        timestamp = self._parse_timestamp(m.group("ts"))

        return LogRecord(
            timestamp=timestamp,
            severity=Severity.from_token(m.group("status")),
            source=m.group("host"),
            message=m.group("request"),
            properties={
                "status": m.group("status"),
                "size": m.group("size"),
                "referrer": m.group("referrer"),
                "ident": m.group("ident"),
                "user": m.group("user"),
            },
        )

    def _parse_timestamp(self, text: str) -> datetime:
        try:
            return datetime.strptime(text, self.TIMESTAMP_FORMAT)
        except ValueError:
            pass

        # Some servers omit the zone offset
        try:
            return datetime.strptime(text, self.TIMESTAMP_FORMAT[:-3])
        except ValueError as e:
            raise TimestampFormatError(text, self.name) from e
