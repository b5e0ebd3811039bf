# digest_log/core/__init__.py
from .errors import DigestLogError, SourceUnreadableError, TimestampFormatError
from .reassembler import EntryReassembler
from .log import LogRecord, LogReader, Severity, truncate_to_hour
from .normalize import normalize
from .collector import DataCollector
from .analyzer import Analyzer
from .reporter import Reporter
from .preprocessor import LogPreprocessor

__all__ = [
    'DigestLogError',
    'SourceUnreadableError',
    'TimestampFormatError',
    'EntryReassembler',
    'LogRecord',
    'LogReader',
    'Severity',
    'truncate_to_hour',
    'normalize',
    'DataCollector',
    'Analyzer',
    'Reporter',
    'LogPreprocessor',
]
