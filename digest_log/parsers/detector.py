# digest_log/parsers/detector.py
import logging
from itertools import islice
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from digest_log.config import SAMPLE_SIZE
from digest_log.core.log import LogReader
from .access import AccessLogParser
from .base import LogParser
from .fallback import FallbackLogParser
from .structured import StructuredLogParser

logger = logging.getLogger(__name__)


def default_parsers() -> List[LogParser]:
    """Candidate parsers in priority order; the last one accepts anything"""
    return [
        StructuredLogParser(),
        AccessLogParser(),
        FallbackLogParser(),
    ]


class FormatDetector:
    """Pick the parser for a file from a sample of its first entries.

    Parsers are tried in order and the first one that can parse at least
    one sampled entry wins. The list must end with a parser that accepts
    everything; if none matches anyway the fallback parser is returned.
    """

    def __init__(
        self,
        parsers: Optional[Sequence[LogParser]] = None,
        sample_size: int = SAMPLE_SIZE,
        fallback_factory: Callable[[], LogParser] = FallbackLogParser,
    ):
        self.parsers = list(parsers) if parsers is not None else default_parsers()
        self.sample_size = sample_size
        self.fallback_factory = fallback_factory

    def detect(self, sample: Iterable[str]) -> LogParser:
        """Select a parser for the given entries (only the first ``sample_size`` are used)"""
        entries = list(islice(sample, self.sample_size))

        for parser in self.parsers:
            if any(parser.can_parse(entry) for entry in entries):
                logger.info("Using parser: %s", parser.name)
                return parser

        logger.info("No suitable parser found. Using fallback parser.")
        return self._fallback()

    def detect_file(self, file_path: Path, reader: Optional[LogReader] = None) -> LogParser:
        """Select a parser from the first entries of a file.

        A file whose sample cannot be read falls back without raising; the
        read that follows reports the actual failure.
        """
        reader = reader or LogReader()
        try:
            sample = list(islice(reader.read_entries(file_path), self.sample_size))
        except OSError as e:
            logger.warning("Could not sample %s (%s). Using fallback parser.", file_path, e)
            return self._fallback()

        return self.detect(sample)

    def _fallback(self) -> LogParser:
        for parser in self.parsers:
            if isinstance(parser, FallbackLogParser):
                return parser
        return self.fallback_factory()
