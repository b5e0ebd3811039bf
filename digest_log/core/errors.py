# digest_log/core/errors.py


class DigestLogError(Exception):
    """Base class for all digest_log errors"""


class SourceUnreadableError(DigestLogError, OSError):
    """The log file is missing or cannot be read. Aborts the whole run."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Log file {path} could not be read: {reason}")


class TimestampFormatError(DigestLogError, ValueError):
    """A structurally matched entry carries a timestamp that does not parse.

    Only the offending entry is affected; the pipeline drops it and continues.
    """

    def __init__(self, timestamp: str, parser_name: str):
        self.timestamp = timestamp
        self.parser_name = parser_name
        super().__init__(
            f"{parser_name}: could not parse timestamp '{timestamp}'"
        )
