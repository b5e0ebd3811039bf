# digest_log/pipeline.py
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from digest_log.analyzers.summary import AnalysisResult
from digest_log.config import SAMPLE_SIZE
from digest_log.core import (
    LogPreprocessor,
    LogReader,
    LogRecord,
    Severity,
    TimestampFormatError,
)
from digest_log.engine import analyze
from digest_log.parsers import FormatDetector, LogParser

logger = logging.getLogger(__name__)


@dataclass
class IngestStats:
    """What happened to the entries of one file"""
    entries: int = 0
    parsed: int = 0
    skipped: int = 0
    dropped: int = 0
    filtered_out: int = 0


@dataclass
class PipelineResult:
    parser_name: str
    analysis: AnalysisResult
    stats: IngestStats = field(default_factory=IngestStats)


class LogPipeline:
    """Read, reassemble, parse, filter and analyze a single log file"""

    def __init__(
        self,
        reader: Optional[LogReader] = None,
        detector: Optional[FormatDetector] = None,
        sample_size: int = SAMPLE_SIZE,
        group_errors_by_source: bool = False,
    ):
        self.reader = reader or LogReader()
        self.detector = detector or FormatDetector(sample_size=sample_size)
        self.group_errors_by_source = group_errors_by_source

    def detect(self, file_path: Path) -> LogParser:
        return self.detector.detect_file(file_path, self.reader)

    def parse(
        self,
        entries: Iterable[str],
        parser: LogParser,
        stats: Optional[IngestStats] = None,
    ) -> List[LogRecord]:
        """Parse entries, skipping non-matching ones and dropping bad timestamps"""
        stats = stats if stats is not None else IngestStats()
        records = []

        for entry in entries:
            stats.entries += 1
            try:
                record = parser.parse(entry)
            except TimestampFormatError as e:
                stats.dropped += 1
                logger.warning("Dropping entry %d: %s", stats.entries, e)
                continue

            if record is None:
                stats.skipped += 1
                continue

            stats.parsed += 1
            records.append(record)

        return records

    def run(
        self,
        file_path: Path,
        min_severity: Optional[Severity] = None,
        pattern: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> PipelineResult:
        """Analyze one file end to end

        Raises:
            SourceUnreadableError: If the file is missing or cannot be read
            ValueError: If ``pattern`` is not a valid regular expression
        """
        file_path = Path(file_path)
        logger.info("Analyzing file: %s", file_path)

        parser = self.detect(file_path)
        stats = IngestStats()

        logger.info("Reading and parsing log entries...")
        records = self.parse(self.reader.read_entries(file_path), parser, stats)
        logger.info("Found %d log entries.", len(records))

        filtered = LogPreprocessor.apply(
            records,
            min_severity=min_severity,
            pattern=pattern,
            start=start,
            end=end,
        )
        stats.filtered_out = len(records) - len(filtered)
        if stats.filtered_out:
            logger.info("After filtering: %d log entries remain.", len(filtered))

        logger.info("Analyzing log data...")
        result = analyze(filtered, group_errors_by_source=self.group_errors_by_source)

        return PipelineResult(parser_name=parser.name, analysis=result, stats=stats)
