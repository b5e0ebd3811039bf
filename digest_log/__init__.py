"""Multi-line log reassembly, format detection and error summaries"""

from .core import (
    DigestLogError,
    LogRecord,
    Severity,
    SourceUnreadableError,
    TimestampFormatError,
)
from .engine import analyze
from .analyzers.summary import AnalysisResult, ErrorGroup
from .parsers import FormatDetector
from .pipeline import LogPipeline, PipelineResult

__all__ = [
    'DigestLogError',
    'LogRecord',
    'Severity',
    'SourceUnreadableError',
    'TimestampFormatError',
    'analyze',
    'AnalysisResult',
    'ErrorGroup',
    'FormatDetector',
    'LogPipeline',
    'PipelineResult',
]
