from abc import ABC, abstractmethod
from typing import Iterable

from .log import LogRecord


class DataCollector(ABC):
    """Base class for collecting statistics from log records"""
    @abstractmethod
    def process_entry(self, record: LogRecord) -> None:
        """Process a single log record"""
        pass

    @abstractmethod
    def is_interested(self, record: LogRecord) -> bool:
        """Determine if this collector is interested in the given record"""
        pass

    def collect(self, records: Iterable[LogRecord]) -> None:
        """Feed every record through process_entry"""
        for record in records:
            self.process_entry(record)
