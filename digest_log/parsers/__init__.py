from .base import LogParser, parse_iso_timestamp
from .structured import StructuredLogParser
from .access import AccessLogParser
from .fallback import FallbackLogParser
from .detector import FormatDetector, default_parsers

__all__ = [
    'LogParser',
    'parse_iso_timestamp',
    'StructuredLogParser',
    'AccessLogParser',
    'FallbackLogParser',
    'FormatDetector',
    'default_parsers',
]
