"""Defaults shared by the pipeline, the analyzers and the CLI"""

from digest_log.config.defaults import (
    DEFAULT_ENCODING,
    ELLIPSIS,
    MAX_SIGNATURE_LENGTH,
    PROGRESS_INTERVAL,
    REPORT_THEME,
    SAMPLE_SIZE,
    TOP_ERRORS_DISPLAYED,
)

__all__ = [
    "DEFAULT_ENCODING",
    "ELLIPSIS",
    "MAX_SIGNATURE_LENGTH",
    "PROGRESS_INTERVAL",
    "REPORT_THEME",
    "SAMPLE_SIZE",
    "TOP_ERRORS_DISPLAYED",
]
