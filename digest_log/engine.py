# digest_log/engine.py
from typing import Iterable

from digest_log.analyzers.summary import (
    AnalysisResult,
    SummaryAnalyzer,
    SummaryDataCollector,
)
from digest_log.core import LogRecord


def analyze(
    records: Iterable[LogRecord], group_errors_by_source: bool = False
) -> AnalysisResult:
    """Aggregate records into summary statistics.

    Args:
        records: Parsed records; their order does not affect the result
        group_errors_by_source: Key ``errors_by_source`` by source text
            instead of by hour bucket

    Returns:
        AnalysisResult, all zero and empty when there are no records
    """
    collector = SummaryDataCollector(group_errors_by_source=group_errors_by_source)
    collector.collect(records)

    analyzer = SummaryAnalyzer(group_errors_by_source=group_errors_by_source)
    return analyzer.analyze(collector.stats)
