import json

import httpx
import pytest

from conftest import RecordingHandler
from mcp_rest_apis.audit import AuditLog
from mcp_rest_apis.exceptions import RequestError
from mcp_rest_apis.http import HttpExecutor


def _audit_entries(audit_log: AuditLog) -> list[tuple[str, object]]:
    entries = []
    for line in audit_log.path.read_text(encoding="utf-8").splitlines():
        _, rest = line.split(" | ", 1)
        tag, payload = rest.split(": ", 1)
        entries.append((tag, json.loads(payload)))
    return entries


@pytest.mark.asyncio
async def test_successful_get(executor: HttpExecutor, http_handler: RecordingHandler) -> None:
    outcome = await executor.execute("https://api.example.com/items", "GET", {"Authorization": "Bearer t"})

    assert outcome.status == 200
    assert outcome.data == '{"hello": "world"}'
    assert outcome.headers["content-type"] == "application/json"

    assert http_handler.call_count == 1
    sent = http_handler.requests[0]
    assert sent.method == "GET"
    assert str(sent.url) == "https://api.example.com/items"
    assert sent.headers["Authorization"] == "Bearer t"


@pytest.mark.asyncio
async def test_post_sends_payload_as_json(executor: HttpExecutor, http_handler: RecordingHandler) -> None:
    await executor.execute("https://api.example.com/items", "POST", {}, payload='{"name": "x"}')

    sent = http_handler.requests[0]
    assert sent.content == b'{"name": "x"}'
    assert sent.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_caller_content_type_is_kept(executor: HttpExecutor, http_handler: RecordingHandler) -> None:
    await executor.execute("https://api.example.com", "PUT", {"content-type": "application/vnd.api+json"}, payload="{}")

    assert http_handler.requests[0].headers["Content-Type"] == "application/vnd.api+json"


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "DELETE"])
async def test_get_and_delete_never_send_a_body(
    executor: HttpExecutor, http_handler: RecordingHandler, method: str
) -> None:
    await executor.execute("https://api.example.com/items/1", method, {}, payload='{"ignored": true}')

    sent = http_handler.requests[0]
    assert sent.method == method
    assert sent.content == b""
    assert "Content-Type" not in sent.headers


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [201, 202, 204])
async def test_any_2xx_is_success(audit_log: AuditLog, status: int) -> None:
    handler = RecordingHandler(status=status, text="")
    executor = HttpExecutor(audit=audit_log, transport=httpx.MockTransport(handler))

    outcome = await executor.execute("https://api.example.com", "POST", {}, payload='{"a": 1}')
    assert outcome.status == status


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [301, 400, 404, 500])
async def test_non_2xx_raises_request_error(audit_log: AuditLog, status: int) -> None:
    handler = RecordingHandler(status=status, text="nope")
    executor = HttpExecutor(audit=audit_log, transport=httpx.MockTransport(handler))

    with pytest.raises(RequestError, match=f"status: {status}") as exc_info:
        await executor.execute("https://api.example.com/missing", "GET", {})
    assert exc_info.value.status == status


@pytest.mark.asyncio
async def test_network_failure_raises_request_error(audit_log: AuditLog) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    executor = HttpExecutor(audit=audit_log, transport=httpx.MockTransport(refuse))

    with pytest.raises(RequestError, match="connection refused") as exc_info:
        await executor.execute("https://unreachable.example.com", "GET", {})
    assert exc_info.value.status is None


@pytest.mark.asyncio
async def test_request_and_response_are_audited(executor: HttpExecutor, audit_log: AuditLog) -> None:
    await executor.execute("https://api.example.com", "POST", {"X-Key": "1"}, payload='{"a": 1}', body={"a": 1})

    entries = _audit_entries(audit_log)
    assert [tag for tag, _ in entries] == ["request", "response"]
    assert entries[0][1] == {"type": "POST", "url": "https://api.example.com", "headers": {"X-Key": "1"}, "body": {"a": 1}}
    assert entries[1][1]["status"] == 200  # type: ignore[index]


@pytest.mark.asyncio
async def test_failed_response_is_audited(audit_log: AuditLog) -> None:
    executor = HttpExecutor(audit=audit_log, transport=httpx.MockTransport(RecordingHandler(status=404, text="gone")))

    with pytest.raises(RequestError):
        await executor.execute("https://api.example.com", "GET", {})

    entries = _audit_entries(audit_log)
    assert entries[-1] == ("response", {"error": "HTTP error! status: 404", "status": 404, "data": "gone"})


@pytest.mark.asyncio
async def test_broken_audit_log_does_not_break_request(tmp_path, http_handler: RecordingHandler) -> None:
    (tmp_path / "logs").write_text("not a directory")
    executor = HttpExecutor(audit=AuditLog(tmp_path / "logs" / "requests.log"), transport=httpx.MockTransport(http_handler))

    outcome = await executor.execute("https://api.example.com", "GET", {})
    assert outcome.status == 200


@pytest.mark.asyncio
async def test_invalid_url_raises_request_error(executor: HttpExecutor, audit_log: AuditLog) -> None:
    with pytest.raises(RequestError, match=r"Request to http://\[::1 failed") as exc_info:
        await executor.execute("http://[::1", "GET", {})

    assert exc_info.value.status is None
    assert _audit_entries(audit_log)[-1][0] == "response"


@pytest.mark.asyncio
async def test_non_ascii_header_raises_request_error(executor: HttpExecutor, http_handler: RecordingHandler) -> None:
    with pytest.raises(RequestError):
        await executor.execute("https://api.example.com", "GET", {"X-Name": "Jürgen"})

    assert http_handler.call_count == 0
