"""Default settings for log digestion"""

# Entries sampled from the head of a file when picking a parser
SAMPLE_SIZE = 5

# Lines between progress messages while reading a file
PROGRESS_INTERVAL = 10_000

DEFAULT_ENCODING = "utf-8"

MAX_SIGNATURE_LENGTH = 200
ELLIPSIS = "..."

TOP_ERRORS_DISPLAYED = 5

REPORT_THEME = {
    "title": "magenta",
    "label": "bold",
    "total": "white",
    "error_count": "red",
    "warn_count": "yellow",
    "info_count": "green",
    "other_count": "bright_black",
    "timestamp": "bright_black",
    "signature": "cyan",
    "bucket": "blue",
}
