# digest_log/core/preprocessor.py
import logging
import re
from datetime import datetime
from typing import List, Optional

from .log import LogRecord, Severity

logger = logging.getLogger(__name__)


class LogPreprocessor:
    """Narrow parsed records down before analysis"""

    @staticmethod
    def filter_by_level(records: List[LogRecord], min_severity: Severity) -> List[LogRecord]:
        """Keep records at ``min_severity`` or above"""
        return [r for r in records if r.severity >= min_severity]

    @staticmethod
    def filter_by_pattern(records: List[LogRecord], pattern: str) -> List[LogRecord]:
        """
        Keep records whose message matches a regular expression anywhere.

        Raises:
            ValueError: If the pattern is not a valid regular expression
        """
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise ValueError(f"Invalid pattern '{pattern}': {e}") from e

        return [r for r in records if regex.search(r.message)]

    @staticmethod
    def filter_by_date(
        records: List[LogRecord],
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[LogRecord]:
        """Keep records within [start, end]; a missing bound is open

        Naive bounds are read in the zone of each zone-aware record.
        """
        return [
            r for r in records
            if (start is None or r.timestamp >= _align(start, r.timestamp))
            and (end is None or r.timestamp <= _align(end, r.timestamp))
        ]

    @classmethod
    def apply(
        cls,
        records: List[LogRecord],
        min_severity: Optional[Severity] = None,
        pattern: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[LogRecord]:
        """Apply every given filter in turn"""
        if min_severity is not None:
            logger.info("Filtering by level: %s and above", min_severity.name)
            records = cls.filter_by_level(records, min_severity)

        if pattern:
            logger.info("Filtering by pattern: %s", pattern)
            records = cls.filter_by_pattern(records, pattern)

        if start is not None:
            logger.info("Filtering by start date: %s", f"{start:%Y-%m-%d %H:%M:%S}")
            records = cls.filter_by_date(records, start=start)

        if end is not None:
            logger.info("Filtering by end date: %s", f"{end:%Y-%m-%d %H:%M:%S}")
            records = cls.filter_by_date(records, end=end)

        return records


def _align(bound: datetime, timestamp: datetime) -> datetime:
    if bound.tzinfo is None and timestamp.tzinfo is not None:
        return bound.replace(tzinfo=timestamp.tzinfo)
    if bound.tzinfo is not None and timestamp.tzinfo is None:
        return bound.replace(tzinfo=None)
    return bound
