# digest_log/analyzers/summary/models.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Union

from digest_log.core import Severity

# Hour bucket by default, source text when grouping errors by source
SourceKey = Union[datetime, str]


@dataclass
class ErrorGroup:
    """Errors sharing one normalized message"""
    signature: str
    count: int
    first_occurrence: datetime
    last_occurrence: datetime

    def add(self, timestamp: datetime) -> None:
        self.count += 1
        if timestamp < self.first_occurrence:
            self.first_occurrence = timestamp
        if timestamp > self.last_occurrence:
            self.last_occurrence = timestamp


@dataclass
class SummaryStats:
    """Running totals gathered while records are collected"""
    severity_counts: Dict[Severity, int] = field(
        default_factory=lambda: {severity: 0 for severity in Severity}
    )
    # Insertion order is first-seen order
    error_groups: Dict[str, ErrorGroup] = field(default_factory=dict)
    errors_over_time: Dict[datetime, int] = field(default_factory=dict)
    errors_by_source: Dict[SourceKey, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.severity_counts.values())


@dataclass(frozen=True)
class AnalysisResult:
    """Summary of one analysis run"""
    total_entries: int = 0
    error_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    other_count: int = 0
    top_errors: List[ErrorGroup] = field(default_factory=list)
    errors_over_time: Dict[datetime, int] = field(default_factory=dict)
    errors_by_source: Dict[SourceKey, int] = field(default_factory=dict)
