import re
from typing import List, Tuple

from digest_log.config import ELLIPSIS, MAX_SIGNATURE_LENGTH


UUID_PATTERN = re.compile(
    r"\b[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-"
    r"[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-"
    r"[0-9a-fA-F]{12}\b"
)

LINE_NUMBER_PATTERN = re.compile(r"\bline\s+\d+")

# Digit runs inside a UUID are left for the UUID rule, so the alternation
# consumes whole UUIDs and only bare numbers are rewritten.
NUMBER_PATTERN = re.compile(
    r"(?P<uuid>" + UUID_PATTERN.pattern + r")|\b\d+\b"
)

WINDOWS_PATH_PATTERN = re.compile(r"[A-Za-z]:\\[^\s,;:\"'<>]*")

# A word cut in half at the truncation point must not expose a bare number
CUT_WORD_PATTERN = re.compile(r"\d\w*\Z")
WORD_CHAR_PATTERN = re.compile(r"\w")


def _mask_number(match: re.Match) -> str:
    if match.group("uuid"):
        return match.group("uuid")
    return "[NUMBER]"


# Ordered normalization rules.
# Order matters: "line N" must be rewritten before bare numbers.
NORMALIZATION_RULES: List[Tuple[re.Pattern, object]] = [
    (LINE_NUMBER_PATTERN, "line [NUMBER]"),
    (NUMBER_PATTERN, _mask_number),
    (UUID_PATTERN, "[GUID]"),
    (WINDOWS_PATH_PATTERN, "[FILE_PATH]"),
]


def normalize(message: str, max_length: int = MAX_SIGNATURE_LENGTH) -> str:
    """
    Reduce a message to a signature used to group near-duplicate errors.

    Numbers, UUIDs and Windows paths are masked, then the result is cut to
    ``max_length`` characters (ellipsis included).

    This function must be:
    - deterministic
    - idempotent
    - side-effect free
    """
    if not message:
        return ""

    normalized = message

    for pattern, replacement in NORMALIZATION_RULES:
        normalized = pattern.sub(replacement, normalized)

    if len(normalized) > max_length:
        head = normalized[: max_length - len(ELLIPSIS)]
        if WORD_CHAR_PATTERN.match(normalized, len(head)):
            head = CUT_WORD_PATTERN.sub("", head)
        normalized = head + ELLIPSIS

    return normalized
