# digest_log/analyzers/summary/reporter.py
from datetime import datetime

from rich.box import ROUNDED
from rich.panel import Panel

from digest_log.config import TOP_ERRORS_DISPLAYED
from digest_log.core import Reporter
from .models import AnalysisResult


class SummaryReporter(Reporter):
    def generate_report(
        self, analysis_result: AnalysisResult, top: int = TOP_ERRORS_DISPLAYED
    ) -> None:
        """Generate a formatted report of the analysis"""
        title_panel = Panel(
            "Log Analysis", box=ROUNDED, style="title", padding=(0, 1), expand=False
        )

        self.console.print(title_panel)
        self.console.print("")

        self.console.print("Summary:", style="label")
        self.console.print(f"  Total entries: {analysis_result.total_entries}", style="total")
        self.console.print(f"  Errors: {analysis_result.error_count}", style="error_count")
        self.console.print(f"  Warnings: {analysis_result.warning_count}", style="warn_count")
        self.console.print(f"  Info: {analysis_result.info_count}", style="info_count")
        if analysis_result.other_count:
            self.console.print(f"  Other: {analysis_result.other_count}", style="other_count")
        self.console.print("")

        self.console.print(f"Top {top} Errors:", style="label")
        if not analysis_result.top_errors:
            self.console.print("  No errors found in the log file.")
        for group in analysis_result.top_errors[:top]:
            self.console.print(f"  [{group.count:>4}] ", style="error_count", end="")
            self.console.print(group.signature, style="signature", markup=False)
            self.console.print(
                f"         First: {group.first_occurrence:%Y-%m-%d %H:%M:%S}  "
                f"Last: {group.last_occurrence:%Y-%m-%d %H:%M:%S}",
                style="timestamp",
            )
        self.console.print("")

        self.console.print("Errors Over Time:", style="label")
        if not analysis_result.errors_over_time:
            self.console.print("  No errors found in the log file.")
        for bucket, count in analysis_result.errors_over_time.items():
            self.console.print(f"  {bucket:%Y-%m-%d %H:%M}", style="bucket", end="")
            self.console.print(f"  {count}")
        self.console.print("")

        self.console.print("Errors By Source:", style="label")
        if not analysis_result.errors_by_source:
            self.console.print("  No source information available in the log file.")
        for key, count in analysis_result.errors_by_source.items():
            label = f"{key:%Y-%m-%d %H:%M}" if isinstance(key, datetime) else key
            self.console.print(f"  {label}", style="bucket", end="", markup=False)
            self.console.print(f"  {count}")
