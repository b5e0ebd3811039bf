# digest_log/parsers/base.py
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from digest_log.core.errors import TimestampFormatError
from digest_log.core.log import LogRecord


class LogParser(ABC):
    """Base class for one log format.

    ``parse`` returns None when the entry does not have this format. It
    raises TimestampFormatError only when the entry matched but its
    timestamp could not be read.
    """
    name: str = ""

    @abstractmethod
    def can_parse(self, entry: str) -> bool:
        """Check whether an entry has this parser's shape"""
        pass

    @abstractmethod
    def parse(self, entry: str) -> Optional[LogRecord]:
        """Convert an entry into a LogRecord, or None on no match"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def parse_iso_timestamp(text: str, parser_name: str) -> datetime:
    """Parse ``YYYY-MM-DD[T ]HH:MM:SS[.fraction]``

    Fractions longer than microseconds are truncated.

    Raises:
        TimestampFormatError: If the text is not a valid date and time
    """
    text = text.strip()
    base, _, fraction = (text[:10] + " " + text[11:]).partition(".")
    try:
        timestamp = datetime.strptime(base, "%Y-%m-%d %H:%M:%S")
        if fraction:
            if not fraction.isdigit():
                raise ValueError(f"invalid fraction '{fraction}'")
            timestamp = timestamp.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    except ValueError as e:
        raise TimestampFormatError(text, parser_name) from e
    return timestamp
