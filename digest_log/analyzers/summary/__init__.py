# digest_log/analyzers/summary/__init__.py
from .analyzer import SummaryAnalyzer
from .collector import SummaryDataCollector
from .models import AnalysisResult, ErrorGroup, SummaryStats
from .reporter import SummaryReporter

__all__ = [
    'SummaryAnalyzer',
    'SummaryDataCollector',
    'AnalysisResult',
    'ErrorGroup',
    'SummaryStats',
    'SummaryReporter'
]
