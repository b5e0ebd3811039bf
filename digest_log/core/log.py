# digest_log/core/log.py
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Dict, Iterator, Optional

from digest_log.config import DEFAULT_ENCODING, PROGRESS_INTERVAL
from .errors import SourceUnreadableError
from .reassembler import EntryReassembler

logger = logging.getLogger(__name__)


class Severity(IntEnum):
    """Ordered severity levels, TRACE lowest and FATAL highest"""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    FATAL = 6

    @classmethod
    def from_token(cls, token: Optional[str], default: Optional["Severity"] = None) -> "Severity":
        """Map a level token onto a severity, case-insensitively.

        WARN and WARNING are the same level. Unknown or empty tokens map to
        ``default`` (INFO when not given).
        """
        if default is None:
            default = cls.INFO
        if not token:
            return default

        name = token.strip().upper()
        if name == "WARN":
            return cls.WARNING
        return cls.__members__.get(name, default)

    @property
    def is_error(self) -> bool:
        return self >= Severity.ERROR


def truncate_to_hour(timestamp: datetime) -> datetime:
    """Round a timestamp down to the top of its hour, keeping its tzinfo"""
    return timestamp.replace(minute=0, second=0, microsecond=0)


@dataclass(frozen=True)
class LogRecord:
    """One parsed log entry"""
    timestamp: datetime
    severity: Severity
    message: str
    source: Optional[str] = None
    properties: Dict[str, str] = field(default_factory=dict)

    @property
    def bucket(self) -> datetime:
        return truncate_to_hour(self.timestamp)

    def __str__(self) -> str:
        source = self.source or "-"
        return (
            f"{self.timestamp:%Y-%m-%d %H:%M:%S} [{self.severity.name}] "
            f"{source}: {self.message}"
        )


class LogReader:
    """Line-oriented file access for the pipeline.

    This is the only place that touches the file system; everything past
    it works on plain iterables of strings.
    """

    def __init__(
        self,
        encoding: str = DEFAULT_ENCODING,
        progress_interval: int = PROGRESS_INTERVAL,
    ):
        self.encoding = encoding
        self.progress_interval = progress_interval

    def read_lines(self, file_path: Path) -> Iterator[str]:
        """Lazily yield the lines of a file without their line terminators

        Raises:
            SourceUnreadableError: If the file is missing or cannot be read
        """
        file_path = Path(file_path)
        if not file_path.is_file():
            raise SourceUnreadableError(file_path, "file not found")

        try:
            size_kb = file_path.stat().st_size // 1024
            logger.info("Processing %s (%s KB)", file_path, f"{size_kb:,}")

            line_count = 0
            with open(file_path, "r", encoding=self.encoding, errors="replace") as f:
                for line in f:
                    line_count += 1
                    yield line.rstrip("\r\n")

                    if self.progress_interval and line_count % self.progress_interval == 0:
                        logger.debug("Processed %s lines...", f"{line_count:,}")
        except OSError as e:
            raise SourceUnreadableError(file_path, str(e)) from e

        logger.info("Finished processing %s lines", f"{line_count:,}")

    def read_entries(self, file_path: Path) -> Iterator[str]:
        """Yield reassembled logical entries of a file"""
        return EntryReassembler().reassemble(self.read_lines(file_path))
