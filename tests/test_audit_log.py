import json
import logging
import re
from datetime import datetime
from pathlib import Path

import pytest

from mcp_rest_apis.audit import AuditLog

LINE_RE = re.compile(r"^(?P<ts>\S+) \| (?P<tag>\w+): (?P<payload>.*)$")


def _read_lines(log: AuditLog) -> list[str]:
    return log.path.read_text(encoding="utf-8").splitlines()


def test_append_creates_directory_and_writes_line(audit_log: AuditLog) -> None:
    assert not audit_log.path.parent.exists()

    audit_log.append("request", {"type": "GET", "url": "https://example.com"})

    lines = _read_lines(audit_log)
    assert len(lines) == 1
    match = LINE_RE.match(lines[0])
    assert match is not None
    assert match["tag"] == "request"
    assert json.loads(match["payload"]) == {"type": "GET", "url": "https://example.com"}


def test_timestamp_is_iso8601_utc(audit_log: AuditLog) -> None:
    audit_log.append("response", {"status": 200})

    match = LINE_RE.match(_read_lines(audit_log)[0])
    assert match is not None
    ts = match["ts"]
    assert ts.endswith("Z")
    assert datetime.fromisoformat(ts.replace("Z", "+00:00")).utcoffset().total_seconds() == 0


def test_entries_are_appended_in_order(audit_log: AuditLog) -> None:
    audit_log.append("request", 1)
    audit_log.append("response", 2)

    tags = [LINE_RE.match(line)["tag"] for line in _read_lines(audit_log)]  # type: ignore[index]
    assert tags == ["request", "response"]


def test_payload_is_compact_single_line(audit_log: AuditLog) -> None:
    audit_log.append("request", {"text": "multi\nline", "n": [1, 2]})

    lines = _read_lines(audit_log)
    assert len(lines) == 1
    assert '{"text":"multi\\nline","n":[1,2]}' in lines[0]


def test_non_json_values_are_stringified(audit_log: AuditLog) -> None:
    audit_log.append("request", {"path": Path("/tmp/x")})
    assert '"path":"/tmp/x"' in _read_lines(audit_log)[0]


def test_failures_never_raise(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    blocker = tmp_path / "logs"
    blocker.write_text("a file where the directory should be")
    log = AuditLog(blocker / "requests.log")

    with caplog.at_level(logging.ERROR):
        log.append("request", {"a": 1})

    assert "Error writing to audit log" in caplog.text
