from datetime import datetime

import pytest

from digest_log.core import LogRecord, Severity


STRUCTURED_LOG = """\
2024-01-01 10:00:00.000 [INFO] App - Service started
2024-01-01 10:00:05.250 [ERROR] Auth - Login failed for user 42
2024-01-01 10:05:00.000 [ERROR] Auth - Login failed for user 99
2024-01-01 10:20:00.000 [ERROR] Db - Query failed
    at Db.Run() line 12
    at App.Main() line 40
2024-01-01 11:00:00.000 [WARN] App - Slow response
2024-01-01 11:30:00.000 [DEBUG] App - Cache warmed
"""

ACCESS_LOG = """\
192.168.1.20 - frank [10/Oct/2000:13:55:36 -0700] "GET /apache_pb.gif HTTP/1.0" 200 2326 "http://www.example.com/start.html" "Mozilla/4.08"
192.168.1.21 - - [10/Oct/2000:14:02:11 -0700] "POST /login HTTP/1.1" 500 - "-" "curl/8.0"
"""


@pytest.fixture
def write_log(tmp_path):
    def _write(content: str, name: str = "app.log"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_record():
    def _make(
        timestamp: str = "2024-01-01 10:00:00",
        severity: Severity = Severity.ERROR,
        message: str = "Something failed",
        source: str = "App",
    ) -> LogRecord:
        return LogRecord(
            timestamp=datetime.fromisoformat(timestamp),
            severity=severity,
            message=message,
            source=source,
        )
    return _make
