# digest_log/core/reassembler.py
import re
from typing import Iterable, Iterator, List


class EntryReassembler:
    """Merge raw lines into logical (possibly multi-line) log entries.

    A line opens a new entry when it looks like it starts with a date.
    Lines that follow are continuation lines of that entry. Lines seen
    before the first dated line are passed through one by one.
    """

    MIN_START_LENGTH = 10

    # 2024-01-31 / 1-31-2024, 31/01/2024, 31.01.2024
    DATE_PREFIX = re.compile(r"\d{1,4}-\d|\d\d/\d|\d\d\.\d")

    @classmethod
    def is_start_of_entry(cls, line: str) -> bool:
        """Check whether a line begins with a date"""
        if not line or not line.strip() or len(line) <= cls.MIN_START_LENGTH:
            return False
        return cls.DATE_PREFIX.match(line) is not None

    def reassemble(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield one string per logical entry, consuming ``lines`` once"""
        buffer: List[str] = []
        in_multi_line_entry = False

        for line in lines:
            if self.is_start_of_entry(line):
                if buffer:
                    yield "\n".join(buffer)
                    buffer = []
                buffer.append(line)
                in_multi_line_entry = True
            elif in_multi_line_entry:
                buffer.append(line)
            else:
                yield line

        if buffer:
            yield "\n".join(buffer)
