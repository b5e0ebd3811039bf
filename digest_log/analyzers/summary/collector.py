# digest_log/analyzers/summary/collector.py
from digest_log.core import DataCollector, LogRecord, normalize
from .models import ErrorGroup, SummaryStats


class SummaryDataCollector(DataCollector):
    """Count records by severity and group errors by signature and hour.

    With ``group_errors_by_source`` errors are also keyed by source text
    instead of by hour bucket.
    """

    def __init__(self, group_errors_by_source: bool = False):
        self.stats = SummaryStats()
        self.group_errors_by_source = group_errors_by_source

    def is_interested(self, record: LogRecord) -> bool:
        """Check if a record is an error (ERROR, CRITICAL or FATAL)"""
        return record.severity.is_error

    def process_entry(self, record: LogRecord) -> None:
        """Process a record to collect summary statistics"""
        self.stats.severity_counts[record.severity] += 1

        if not self.is_interested(record):
            return

        self._add_error(record)

        bucket = record.bucket
        self.stats.errors_over_time[bucket] = self.stats.errors_over_time.get(bucket, 0) + 1

        if record.source:
            key = record.source if self.group_errors_by_source else bucket
            self.stats.errors_by_source[key] = self.stats.errors_by_source.get(key, 0) + 1

    def _add_error(self, record: LogRecord) -> None:
        signature = normalize(record.message)
        group = self.stats.error_groups.get(signature)
        if group is None:
            self.stats.error_groups[signature] = ErrorGroup(
                signature=signature,
                count=1,
                first_occurrence=record.timestamp,
                last_occurrence=record.timestamp,
            )
        else:
            group.add(record.timestamp)
