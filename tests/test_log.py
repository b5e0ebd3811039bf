from datetime import datetime, timedelta, timezone

import pytest

from digest_log.core import (
    LogReader,
    LogRecord,
    Severity,
    SourceUnreadableError,
    truncate_to_hour,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("TRACE", Severity.TRACE),
        ("debug", Severity.DEBUG),
        ("Info", Severity.INFO),
        ("WARN", Severity.WARNING),
        ("warning", Severity.WARNING),
        ("ERROR", Severity.ERROR),
        ("critical", Severity.CRITICAL),
        ("FATAL", Severity.FATAL),
        ("NOTICE", Severity.INFO),
        ("200", Severity.INFO),
        ("", Severity.INFO),
        (None, Severity.INFO),
    ],
)
def test_severity_from_token(token, expected):
    assert Severity.from_token(token) is expected


def test_severity_order():
    ordered = [
        Severity.TRACE,
        Severity.DEBUG,
        Severity.INFO,
        Severity.WARNING,
        Severity.ERROR,
        Severity.CRITICAL,
        Severity.FATAL,
    ]
    assert sorted(reversed(ordered)) == ordered
    assert [s.is_error for s in ordered] == [False] * 4 + [True] * 3


def test_truncate_to_hour_buckets():
    a = truncate_to_hour(datetime(2024, 1, 1, 10, 14, 59))
    b = truncate_to_hour(datetime(2024, 1, 1, 10, 0, 1))
    c = truncate_to_hour(datetime(2024, 1, 1, 9, 59, 59))

    assert a == b == datetime(2024, 1, 1, 10)
    assert c == datetime(2024, 1, 1, 9)
    assert c < a


def test_truncate_to_hour_keeps_timezone():
    tz = timezone(timedelta(hours=-7))
    bucket = truncate_to_hour(datetime(2000, 10, 10, 13, 55, 36, tzinfo=tz))
    assert bucket == datetime(2000, 10, 10, 13, tzinfo=tz)
    assert bucket.tzinfo is tz


def test_log_record_is_immutable():
    record = LogRecord(datetime(2024, 1, 1), Severity.INFO, "hello")
    with pytest.raises(AttributeError):
        record.message = "changed"
    assert record.properties == {}
    assert record.source is None


def test_reader_strips_line_terminators(write_log):
    path = write_log("first\r\nsecond\n\nlast")
    assert list(LogReader().read_lines(path)) == ["first", "second", "", "last"]


def test_reader_missing_file(tmp_path):
    lines = LogReader().read_lines(tmp_path / "missing.log")
    with pytest.raises(SourceUnreadableError):
        next(lines)


def test_reader_directory_is_unreadable(tmp_path):
    with pytest.raises(SourceUnreadableError) as exc_info:
        list(LogReader().read_lines(tmp_path))
    assert isinstance(exc_info.value, OSError)


def test_reader_entries_are_reassembled(write_log):
    path = write_log("2024-01-01 10:00:00.000 [ERROR] Db - boom\n  detail\n")
    assert list(LogReader().read_entries(path)) == [
        "2024-01-01 10:00:00.000 [ERROR] Db - boom\n  detail"
    ]
