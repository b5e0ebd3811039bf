# digest_log/analyzers/summary/analyzer.py
from digest_log.core import Analyzer, Severity
from .models import AnalysisResult, SummaryStats


class SummaryAnalyzer(Analyzer[SummaryStats, AnalysisResult]):
    def __init__(self, group_errors_by_source: bool = False):
        self.group_errors_by_source = group_errors_by_source

    def analyze(self, stats: SummaryStats) -> AnalysisResult:
        """Order collected statistics into an AnalysisResult

        Error groups are sorted by descending count; ties keep first-seen
        order. Time buckets are ascending. Sources, when grouped by source
        text, are sorted by descending count.
        """
        counts = stats.severity_counts
        error_count = sum(counts[s] for s in Severity if s.is_error)
        warning_count = counts[Severity.WARNING]
        info_count = counts[Severity.INFO]

        top_errors = sorted(
            stats.error_groups.values(),
            key=lambda group: group.count,
            reverse=True,
        )

        errors_over_time = dict(sorted(stats.errors_over_time.items()))

        if self.group_errors_by_source:
            errors_by_source = dict(
                sorted(stats.errors_by_source.items(), key=lambda item: item[1], reverse=True)
            )
        else:
            errors_by_source = dict(sorted(stats.errors_by_source.items()))

        return AnalysisResult(
            total_entries=stats.total,
            error_count=error_count,
            warning_count=warning_count,
            info_count=info_count,
            other_count=stats.total - error_count - warning_count - info_count,
            top_errors=top_errors,
            errors_over_time=errors_over_time,
            errors_by_source=errors_by_source,
        )
