from datetime import datetime, timedelta, timezone

import pytest

from digest_log.core import Severity, TimestampFormatError
from digest_log.parsers import (
    AccessLogParser,
    FallbackLogParser,
    StructuredLogParser,
    parse_iso_timestamp,
)

ACCESS_LINE = (
    '192.168.1.20 - frank [10/Oct/2000:13:55:36 -0700] '
    '"GET /apache_pb.gif HTTP/1.0" 200 2326 "http://www.example.com/start.html" "Mozilla/4.08"'
)


class TestStructuredLogParser:
    parser = StructuredLogParser()

    def test_parse(self):
        record = self.parser.parse(
            "2024-01-01 10:00:00.123 [ERROR] Auth - Login failed for user 42"
        )

        assert record.timestamp == datetime(2024, 1, 1, 10, 0, 0, 123000)
        assert record.severity is Severity.ERROR
        assert record.source == "Auth"
        assert record.message == "Login failed for user 42"

    @pytest.mark.parametrize(
        "level, expected",
        [
            ("warn", Severity.WARNING),
            ("Warning", Severity.WARNING),
            ("fatal", Severity.FATAL),
            ("VERBOSE", Severity.INFO),
        ],
    )
    def test_level_mapping(self, level, expected):
        record = self.parser.parse(f"2024-01-01 10:00:00.000 [{level}] App - hi")
        assert record.severity is expected

    def test_multi_line_message(self):
        entry = (
            "2024-01-01 10:20:00.000 [ERROR] Db - Query failed\n"
            "    at Db.Run() line 12\n"
            "    at App.Main() line 40"
        )
        record = self.parser.parse(entry)

        assert record.message.startswith("Query failed")
        assert "at Db.Run() line 12" in record.message
        assert "at App.Main() line 40" in record.message

    def test_dotted_source(self):
        record = self.parser.parse("2024-01-01 10:00:00.000 [INFO] App.Auth - ok")
        assert record.source == "App.Auth"

    @pytest.mark.parametrize(
        "entry",
        [
            "",
            "plain text",
            "2024-01-01 10:00:00 [INFO] App - missing milliseconds",
            "2024-01-01 10:00:00.000 INFO App - no brackets",
            "2024-01-01 10:00:00,000 [ERROR] App - comma separator",
        ],
    )
    def test_no_match(self, entry):
        assert not self.parser.can_parse(entry)
        assert self.parser.parse(entry) is None

    @pytest.mark.parametrize(
        "entry",
        [
            "2024-13-01 10:00:00.000 [ERROR] App - bad month",
            "2024-01-01 25:00:00.000 [ERROR] App - bad hour",
        ],
    )
    def test_malformed_timestamp_raises(self, entry):
        assert self.parser.can_parse(entry)
        with pytest.raises(TimestampFormatError):
            self.parser.parse(entry)


class TestAccessLogParser:
    parser = AccessLogParser()

    def test_parse(self):
        record = self.parser.parse(ACCESS_LINE)

        assert record.timestamp == datetime(
            2000, 10, 10, 13, 55, 36, tzinfo=timezone(timedelta(hours=-7))
        )
        assert record.severity is Severity.INFO
        assert record.source == "192.168.1.20"
        assert record.message == "GET /apache_pb.gif HTTP/1.0"
        assert record.properties["status"] == "200"
        assert record.properties["size"] == "2326"
        assert record.properties["user"] == "frank"
        assert record.properties["referrer"] == "http://www.example.com/start.html"

    def test_server_errors_are_still_info(self):
        record = self.parser.parse(
            '10.0.0.1 - - [10/Oct/2000:14:02:11 -0700] "POST /login HTTP/1.1" 500 - "-"'
        )
        assert record.severity is Severity.INFO
        assert record.properties["size"] == "-"

    def test_timestamp_without_zone(self):
        record = self.parser.parse(
            'host - - [10/Oct/2000:14:02:11] "GET / HTTP/1.1" 200 10 "-"'
        )
        assert record.timestamp == datetime(2000, 10, 10, 14, 2, 11)

    def test_no_match(self):
        entry = "2024-01-01 10:00:00.000 [INFO] App - hi"
        assert not self.parser.can_parse(entry)
        assert self.parser.parse(entry) is None

    def test_malformed_timestamp_raises(self):
        with pytest.raises(TimestampFormatError):
            self.parser.parse('host - - [yesterday] "GET / HTTP/1.1" 200 10 "-"')


class TestFallbackLogParser:
    now = datetime(2030, 6, 1, 12, 0, 0)
    parser = FallbackLogParser(clock=lambda: TestFallbackLogParser.now)

    def test_can_parse_anything(self):
        assert self.parser.can_parse("")
        assert self.parser.can_parse("whatever")

    def test_finds_timestamp_and_level_anywhere(self):
        entry = "node-3 | 2024-03-05T08:15:30.123456789 | something Warn happened"
        record = self.parser.parse(entry)

        assert record.timestamp == datetime(2024, 3, 5, 8, 15, 30, 123456)
        assert record.severity is Severity.WARNING
        assert record.message == entry
        assert record.source is None

    def test_defaults(self):
        record = self.parser.parse("no timestamp and no level here")
        assert record.timestamp == self.now
        assert record.severity is Severity.INFO

    def test_level_must_be_a_whole_word(self):
        record = self.parser.parse("ERRORS happened, then a critical one")
        assert record.severity is Severity.CRITICAL

    def test_impossible_date_is_not_a_timestamp(self):
        record = self.parser.parse("job 2024-13-45 10:00:00 ERROR disk gone")

        assert record is not None
        assert record.severity is Severity.ERROR
        assert record.timestamp == self.now

    def test_later_real_date_is_used(self):
        record = self.parser.parse(
            "retry of 2024-02-30 09:00:00 at 2024-03-01 09:00:05 failed"
        )
        assert record.timestamp == datetime(2024, 3, 1, 9, 0, 5)

    @pytest.mark.parametrize("entry", ["", "   ", "\t\n"])
    def test_blank_entries_do_not_match(self, entry):
        assert self.parser.parse(entry) is None


def test_parse_iso_timestamp_variants():
    assert parse_iso_timestamp("2024-01-01 10:00:00", "t") == datetime(2024, 1, 1, 10)
    assert parse_iso_timestamp("2024-01-01T10:00:00.5", "t") == datetime(2024, 1, 1, 10, 0, 0, 500000)
    with pytest.raises(TimestampFormatError):
        parse_iso_timestamp("2024-02-30 10:00:00", "t")
